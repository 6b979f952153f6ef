"""Apply and show saved customizations."""

import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from wpc.cli.utils.data import build_fetcher, find_agent, find_skin, open_store, resolve_attachments
from wpc.cli.utils.options import AGENT_OPTION, OUTPUT_FORMAT_OPTION, TEAM_OPTION, OutputFormat
from wpc.cli.utils.output import handle_json_output
from wpc.config import load_config
from wpc.core.constants import DEFAULT_WEAR, MAX_WEAR, CodecConstants, ItemType, Team
from wpc.exceptions import WPCError
from wpc.models.catalog import Agent, Skin
from wpc.models.customization import CustomizationSettings
from wpc.services.codec import (
    find_saved,
    from_persistable,
    needs_attachment_catalog,
    to_persistable,
    wear_condition,
)
from wpc.services.fetcher import CatalogFetcher

console = Console()
logger = logging.getLogger(__name__)


def _select(
    fetcher: CatalogFetcher, defindex: str, paint: str | None, agent: bool
) -> tuple[Skin | None, Agent | None]:
    if agent:
        return None, find_agent(fetcher, defindex)
    if paint is None:
        raise typer.BadParameter("PAINT is required for weapons and gloves")
    return find_skin(fetcher, defindex, paint), None


def _print_settings(settings: CustomizationSettings, item_type: ItemType) -> None:
    condition = wear_condition(settings.wear)

    table = Table(show_header=False, box=None)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Wear", f"{settings.wear:.3f} ([{condition.color}]{condition.name}[/{condition.color}])")
    table.add_row("Seed", str(settings.seed))
    table.add_row("Name tag", settings.name_tag or "[dim]none[/dim]")
    table.add_row("StatTrak", "yes" if settings.stat_trak else "no")

    if item_type != ItemType.GLOVES:
        for i, sticker in enumerate(settings.stickers):
            table.add_row(f"Sticker {i + 1}", sticker.name if sticker else "[dim]empty[/dim]")
        table.add_row("Keychain", settings.keychain.name if settings.keychain else "[dim]empty[/dim]")

    console.print(table)


def apply_customization(
    defindex: Annotated[str, typer.Argument(help="Weapon defindex, or agent model with --agent")],
    paint: Annotated[str | None, typer.Argument(help="Paint id of the skin")] = None,
    team: TEAM_OPTION = Team.TERRORIST.value,
    agent: AGENT_OPTION = False,
    wear: Annotated[float, typer.Option("--wear", help="Wear float", min=0.0, max=MAX_WEAR)] = DEFAULT_WEAR,
    seed: Annotated[
        int,
        typer.Option("--seed", help="Pattern seed", min=CodecConstants.MIN_SEED, max=CodecConstants.MAX_SEED),
    ] = CodecConstants.DEFAULT_SEED,
    name_tag: Annotated[str, typer.Option("--name-tag", help="Name tag (max 20 characters)")] = "",
    stat_trak: Annotated[bool, typer.Option("--stattrak", help="Enable StatTrak")] = False,
    stickers: Annotated[
        list[str] | None,
        typer.Option("--sticker", help="Sticker id for the next slot (up to 5)"),
    ] = None,
    keychain: Annotated[str | None, typer.Option("--keychain", help="Keychain id")] = None,
) -> None:
    """Save a customization for a weapon, glove, knife or agent."""
    sticker_ids = stickers or []
    if len(sticker_ids) > CodecConstants.STICKER_SLOTS:
        raise typer.BadParameter(f"At most {CodecConstants.STICKER_SLOTS} stickers can be applied")

    config = load_config()
    fetcher = build_fetcher(config)

    try:
        skin, selected_agent = _select(fetcher, defindex, paint, agent)

        settings = CustomizationSettings(
            wear=wear,
            seed=seed,
            name_tag=name_tag[: CodecConstants.MAX_NAME_TAG_LENGTH],
            stat_trak=stat_trak,
        )

        if skin is not None and needs_attachment_catalog(skin):
            if sticker_ids:
                resolved = resolve_attachments(fetcher.fetch_stickers(), sticker_ids, "sticker")
                for i, sticker in enumerate(resolved):
                    settings = settings.with_sticker(i, sticker)
            if keychain:
                resolved_keychain = resolve_attachments(fetcher.fetch_keychains(), [keychain], "keychain")[0]
                settings = settings.model_copy(update={"keychain": resolved_keychain})
        elif sticker_ids or keychain:
            console.print("[yellow]Stickers and keychains are ignored for this item[/yellow]")

        record = to_persistable(settings, team, skin=skin, agent=selected_agent)
        open_store(config).save(record)
    except WPCError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(1) from e

    console.print(f"[green]✓ Saved {record.type} customization[/green] | team {team}")
    _print_settings(settings, record.type)


def show_customization(
    defindex: Annotated[str, typer.Argument(help="Weapon defindex, or agent model with --agent")],
    paint: Annotated[str | None, typer.Argument(help="Paint id of the skin")] = None,
    team: TEAM_OPTION = Team.TERRORIST.value,
    agent: AGENT_OPTION = False,
    output_format: OUTPUT_FORMAT_OPTION = OutputFormat.TABLE,
) -> None:
    """Show a saved customization decoded against the catalog."""
    config = load_config()
    fetcher = build_fetcher(config)

    try:
        skin, selected_agent = _select(fetcher, defindex, paint, agent)
    except WPCError as e:
        console.print(f"[red]✗ {e}[/red]")
        raise typer.Exit(1) from e

    record = find_saved(open_store(config).load_all(), team, skin=skin, agent=selected_agent)
    if record is None:
        console.print("[yellow]No saved customization for this item[/yellow]")
        raise typer.Exit(1)

    if skin is not None and needs_attachment_catalog(skin):
        settings = from_persistable(record, fetcher.fetch_stickers(), fetcher.fetch_keychains())
    else:
        settings = from_persistable(record)

    if output_format == OutputFormat.JSON:
        handle_json_output({"record": record.to_payload(), "settings": settings.model_dump(mode="json")}, None)
        return

    _print_settings(settings, record.type)
