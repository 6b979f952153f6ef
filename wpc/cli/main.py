"""Main CLI entry point for the Weapon Paints Customizer."""

import logging

import typer
from rich.logging import RichHandler

from wpc.cli.commands.catalog import cache_info, fetch_family, list_skins, list_weapons
from wpc.cli.commands.customize import apply_customization, show_customization
from wpc.cli.utils.options import VERBOSE_OPTION

app = typer.Typer(
    name="wpc",
    help="Weapon Paints Customizer - Browse the skin catalog and save weapon customizations",
    add_completion=True,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


@app.callback()
def callback(verbose: VERBOSE_OPTION = False) -> None:
    """
    Weapon Paints Customizer CLI
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


app.command("fetch", help="Fetch one catalog family (skins, agents, stickers, keychains, gloves, music)")(fetch_family)
app.command("weapons", help="List distinct weapon and glove models")(list_weapons)
app.command("skins", help="List skins for one weapon or glove model")(list_skins)
app.command("cache-info", help="Show catalog cache status")(cache_info)
app.command("apply", help="Save a customization (wear, seed, name tag, StatTrak, stickers, keychain)")(
    apply_customization
)
app.command("show", help="Show a saved customization")(show_customization)


if __name__ == "__main__":
    app()
