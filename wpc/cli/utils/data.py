"""Shared data access utilities for CLI commands."""

import logging

from rich.console import Console

from wpc.api.client import CatalogSourceClient
from wpc.cache.catalog import CatalogCache
from wpc.cache.store import CustomizationStore
from wpc.config import Config
from wpc.exceptions import ValidationError
from wpc.models.catalog import Agent, Skin, Sticker, canonical_defindex
from wpc.services.fetcher import CatalogFetcher

console = Console()
logger = logging.getLogger(__name__)


def build_fetcher(config: Config) -> CatalogFetcher:
    """Create a fetcher with a fresh cache for this invocation."""
    client = CatalogSourceClient(
        catalog_base_url=config.catalog_base_url,
        fallback_base_url=config.fallback_base_url,
        request_timeout=config.request_timeout,
    )
    return CatalogFetcher(client, CatalogCache(ttl_seconds=config.cache_ttl_seconds))


def open_store(config: Config) -> CustomizationStore:
    """Open the customization store for the configured profile."""
    return CustomizationStore(config.data_dir, config.profile)


def find_skin(fetcher: CatalogFetcher, defindex: str, paint: str) -> Skin:
    """Find a weapon skin or glove by defindex and paint id.

    Raises:
        ValidationError: If no catalog entry matches
    """
    with console.status("[bold blue]Loading catalog...[/bold blue]", spinner="dots"):
        candidates = [*fetcher.fetch_skins(), *fetcher.fetch_gloves()]

    key = canonical_defindex(defindex)
    paint_key = canonical_defindex(paint)
    for skin in candidates:
        if skin.defindex_key == key and canonical_defindex(skin.paint) == paint_key:
            return skin
    raise ValidationError("paint", paint, f"No skin with paint {paint} for weapon {defindex}")


def find_agent(fetcher: CatalogFetcher, model: str) -> Agent:
    """Find an agent by model.

    Raises:
        ValidationError: If no agent matches
    """
    with console.status("[bold blue]Loading agents...[/bold blue]", spinner="dots"):
        agents = fetcher.fetch_agents()

    for agent in agents:
        if agent.model == model:
            return agent
    raise ValidationError("agent", model, f"No agent with model {model}")


def resolve_attachments(catalog: list[Sticker], ids: list[str], kind: str) -> list[Sticker]:
    """Look up attachment ids in a catalog, failing on unknown ids.

    Raises:
        ValidationError: If an id is not in the catalog
    """
    by_id = {entry.id: entry for entry in catalog}
    resolved = []
    for attachment_id in ids:
        if attachment_id not in by_id:
            raise ValidationError(kind, attachment_id, f"Unknown {kind} id {attachment_id}")
        resolved.append(by_id[attachment_id])
    return resolved
