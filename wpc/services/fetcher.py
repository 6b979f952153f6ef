"""Catalog fetching with cache, stale-cache and fallback-source recovery."""

import logging
from collections.abc import Callable
from typing import Any

import requests
from pydantic import ValidationError as PydanticValidationError

from wpc.api.client import CatalogSourceClient
from wpc.cache.catalog import CatalogCache
from wpc.core.constants import CatalogFamily
from wpc.exceptions import CatalogFetchError, WPCError
from wpc.models.cache import CacheStatusInfo
from wpc.models.catalog import FAMILY_MODELS, Agent, CatalogItem, Glove, Keychain, Music, Skin, Sticker

logger = logging.getLogger(__name__)


def _flatten_skins(data: dict[str, Any]) -> list[Any]:
    """Skins fallback is grouped by category: {"categories": {name: [...]}}."""
    categories = data.get("categories")
    if not isinstance(categories, dict):
        return []
    return [skin for group in categories.values() for skin in (group or [])]


def _flatten_agents(data: dict[str, Any]) -> list[Any]:
    """Agents fallback is split into terrorist and counter-terrorist lists."""
    return [*(data.get("terrorist") or []), *(data.get("counterTerrorist") or [])]


def _named_list(field: str) -> Callable[[dict[str, Any]], list[Any]]:
    def normalize(data: dict[str, Any]) -> list[Any]:
        return list(data.get(field) or [])

    return normalize


# Music has no fallback source
FALLBACK_NORMALIZERS: dict[CatalogFamily, Callable[[dict[str, Any]], list[Any]]] = {
    CatalogFamily.SKINS: _flatten_skins,
    CatalogFamily.AGENTS: _flatten_agents,
    CatalogFamily.STICKERS: _named_list("stickers"),
    CatalogFamily.KEYCHAINS: _named_list("keychains"),
    CatalogFamily.GLOVES: _named_list("gloves"),
}


class CatalogFetcher:
    """Serves catalog families from the cache, the primary source or the fallback source.

    ``fetch`` never raises: source failures degrade to stale cached data, then
    to the fallback source, then to an empty collection.
    """

    def __init__(self, client: CatalogSourceClient, cache: CatalogCache | None = None) -> None:
        """Initialize the fetcher.

        Args:
            client: Source client used for primary and fallback reads
            cache: Cache shared by every family; a new one is created if omitted
        """
        self.client = client
        self.cache = cache if cache is not None else CatalogCache()

    def _read(self, reader: Callable[[CatalogFamily], Any], family: CatalogFamily) -> Any:
        """Call a client reader, opening a session when none is active."""
        if self.client.session is not None:
            return reader(family)
        with self.client:
            return reader(family)

    @staticmethod
    def _parse(family: CatalogFamily, raw_items: Any) -> list[CatalogItem]:
        """Validate raw entries into the family's model, skipping malformed rows."""
        if not isinstance(raw_items, list):
            raise CatalogFetchError(family, f"Expected a list of {family} entries, got {type(raw_items).__name__}")

        model = FAMILY_MODELS[family]
        items = []
        for raw in raw_items:
            try:
                items.append(model.model_validate(raw))
            except PydanticValidationError as e:
                logger.debug(f"Skipping malformed {family} entry: {e}")
        return items

    def fetch(self, family: CatalogFamily, force_refresh: bool = False) -> list[Any]:
        """Fetch one catalog family.

        Args:
            family: Family to fetch
            force_refresh: Skip the fresh-cache shortcut

        Returns:
            The family's collection; empty when every source failed
        """
        family = CatalogFamily(family)

        if not force_refresh and self.cache.is_usable(family):
            return list(self.cache.get(family))

        try:
            items = self._parse(family, self._read(self.client.get_primary, family))
            self.cache.put(family, items)
            logger.info(f"Fetched {len(items)} {family} entries")
            return items
        except (WPCError, requests.RequestException) as e:
            logger.error(f"Error fetching {family} data from primary source: {e}")

        if family not in FALLBACK_NORMALIZERS:
            return list(self.cache.get(family))

        if self.cache.has(family):
            logger.info(f"Returning cached {family} data due to fetch error")
            return list(self.cache.get(family))

        return self._fetch_fallback(family)

    def _fetch_fallback(self, family: CatalogFamily) -> list[Any]:
        """Try the application-local source once and normalize its shape."""
        logger.info(f"Attempting fallback source for {family} data")
        try:
            data = self._read(self.client.get_fallback, family)
            if not isinstance(data, dict):
                raise CatalogFetchError(family, f"Unexpected fallback response for {family}")
            items = self._parse(family, FALLBACK_NORMALIZERS[family](data))
        except (WPCError, requests.RequestException) as e:
            logger.error(f"Fallback source also failed for {family}: {e}")
            return []

        if items:
            self.cache.put(family, items)
        return items

    def fetch_skins(self, force_refresh: bool = False) -> list[Skin]:
        return self.fetch(CatalogFamily.SKINS, force_refresh)

    def fetch_agents(self, force_refresh: bool = False) -> list[Agent]:
        return self.fetch(CatalogFamily.AGENTS, force_refresh)

    def fetch_stickers(self, force_refresh: bool = False) -> list[Sticker]:
        return self.fetch(CatalogFamily.STICKERS, force_refresh)

    def fetch_keychains(self, force_refresh: bool = False) -> list[Keychain]:
        return self.fetch(CatalogFamily.KEYCHAINS, force_refresh)

    def fetch_gloves(self, force_refresh: bool = False) -> list[Glove]:
        return self.fetch(CatalogFamily.GLOVES, force_refresh)

    def fetch_music(self, force_refresh: bool = False) -> list[Music]:
        return self.fetch(CatalogFamily.MUSIC, force_refresh)

    def clear_cache(self) -> None:
        """Drop every cached family."""
        self.cache.clear()

    def cache_info(self) -> CacheStatusInfo:
        """Get cache status for all families."""
        return self.cache.status()
