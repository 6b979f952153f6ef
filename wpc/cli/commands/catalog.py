"""Catalog browsing commands."""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from wpc.cli.utils.data import build_fetcher
from wpc.cli.utils.options import FORCE_OPTION, OUTPUT_FORMAT_OPTION, OUTPUT_PATH_OPTION, OutputFormat
from wpc.cli.utils.output import handle_json_output
from wpc.config import load_config
from wpc.core.constants import CatalogFamily, WeaponCategory
from wpc.core.search import WeaponSearcher
from wpc.models.catalog import WeaponType
from wpc.services.classifier import build_weapon_types, is_glove, items_for_weapon

console = Console()
logger = logging.getLogger(__name__)


def fetch_family(
    family: Annotated[CatalogFamily, typer.Argument(help="Catalog family to fetch", case_sensitive=False)],
    force: FORCE_OPTION = False,
    output_format: OUTPUT_FORMAT_OPTION = OutputFormat.TABLE,
    output: OUTPUT_PATH_OPTION = None,
) -> None:
    """Fetch one catalog family and report what was loaded."""
    fetcher = build_fetcher(load_config())

    with console.status(f"[bold blue]Fetching {family}...[/bold blue]", spinner="dots"):
        items = fetcher.fetch(family, force_refresh=force)

    if output_format == OutputFormat.JSON:
        handle_json_output(items, output)
        return

    if items:
        console.print(f"[green]✓ Loaded {len(items)} {family} entries[/green]")
    else:
        console.print(f"[yellow]No {family} data available[/yellow]")


def _weapon_table(weapon_types: list[WeaponType]) -> Table:
    table = Table(title="Weapons", show_lines=False)
    table.add_column("Defindex", style="dim", justify="right")
    table.add_column("Name", style="cyan", min_width=20)
    table.add_column("Internal Name", style="dim")
    table.add_column("Category", style="yellow")

    for weapon_type in weapon_types:
        table.add_row(
            str(weapon_type.weapon_defindex),
            weapon_type.display_name,
            weapon_type.weapon_name,
            weapon_type.category.value,
        )
    return table


def list_weapons(
    category: Annotated[
        WeaponCategory | None,
        typer.Option("--category", "-c", help="Only show this category", case_sensitive=False),
    ] = None,
    search: Annotated[
        str | None,
        typer.Option("--search", "-s", help="Fuzzy search on weapon names"),
    ] = None,
    output_format: OUTPUT_FORMAT_OPTION = OutputFormat.TABLE,
    output: OUTPUT_PATH_OPTION = None,
) -> None:
    """List distinct weapon and glove models."""
    fetcher = build_fetcher(load_config())

    with console.status("[bold blue]Loading catalog...[/bold blue]", spinner="dots"):
        weapon_types = build_weapon_types(fetcher.fetch_skins(), fetcher.fetch_gloves())

    weapon_types = WeaponSearcher(weapon_types).filter_and_search(search_query=search, category=category)

    if output_format == OutputFormat.JSON:
        handle_json_output(weapon_types, output)
        return

    if not weapon_types:
        console.print("[yellow]No weapons found[/yellow]")
        return

    console.print(_weapon_table(weapon_types))
    console.print(f"\n[dim]{len(weapon_types)} weapons[/dim]")


def list_skins(
    defindex: Annotated[str, typer.Argument(help="Weapon defindex (numeric or e.g. gloves_default)")],
    output_format: OUTPUT_FORMAT_OPTION = OutputFormat.TABLE,
    output: OUTPUT_PATH_OPTION = None,
) -> None:
    """List the skins available for one weapon or glove model."""
    fetcher = build_fetcher(load_config())

    with console.status("[bold blue]Loading catalog...[/bold blue]", spinner="dots"):
        skins = fetcher.fetch_skins()
        gloves = fetcher.fetch_gloves()

    # Skin defindexes are numeric; compare as int when the argument is one
    weapon_defindex: int | str = int(defindex) if defindex.isdigit() else defindex
    items = [*items_for_weapon(skins, weapon_defindex), *items_for_weapon(gloves, weapon_defindex, gloves=True)]

    if output_format == OutputFormat.JSON:
        handle_json_output(items, output)
        return

    if not items:
        console.print(f"[yellow]No skins found for weapon {defindex}[/yellow]")
        return

    table = Table(title=f"Skins for {defindex}")
    table.add_column("Paint", style="dim", justify="right")
    table.add_column("Name", style="cyan", min_width=25)
    table.add_column("Type", style="yellow")
    for item in items:
        table.add_row(str(item.paint), item.paint_name, "gloves" if is_glove(item) else "weapon")
    console.print(table)


def cache_info(
    output_format: OUTPUT_FORMAT_OPTION = OutputFormat.TABLE,
    family: Annotated[
        list[CatalogFamily] | None,
        typer.Option("--load", "-l", help="Fetch these families before reporting", case_sensitive=False),
    ] = None,
) -> None:
    """Show catalog cache status for this session."""
    fetcher = build_fetcher(load_config())
    for name in family or []:
        fetcher.fetch(name)

    status = fetcher.cache_info()

    if output_format == OutputFormat.JSON:
        handle_json_output(status, None)
        return

    table = Table(title="Catalog Cache")
    table.add_column("Family", style="cyan")
    table.add_column("Entries", justify="right")
    for name, size in status.sizes.items():
        table.add_row(name, str(size))
    console.print(table)

    state = "[green]valid[/green]" if status.is_valid else "[yellow]stale[/yellow]"
    console.print(f"Cache is {state} | {status.total_items} entries")
