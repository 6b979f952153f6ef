"""In-process cache for catalog families with a shared freshness timestamp."""

import logging
import time
from collections.abc import Callable, Iterable
from typing import Any

from wpc.core.constants import CacheLimits, CatalogFamily
from wpc.models.cache import CacheStatusInfo

logger = logging.getLogger(__name__)


class CatalogCache:
    """Holds one collection per catalog family.

    All families share a single ``last_updated`` timestamp: writing any family
    refreshes the validity of every family. Collections are stored as tuples
    and replaced whole on every write, so readers never see a partial update.
    """

    def __init__(
        self,
        ttl_seconds: float = CacheLimits.CATALOG_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize an empty cache.

        Args:
            ttl_seconds: How long after the last write the cache stays valid
            clock: Time source returning seconds since the epoch
        """
        self.ttl_seconds = float(ttl_seconds)
        self._clock = clock
        self._collections: dict[CatalogFamily, tuple[Any, ...]] = {family: () for family in CatalogFamily}
        self.last_updated = 0.0

    def get(self, family: CatalogFamily) -> tuple[Any, ...]:
        """Return the cached collection for a family, possibly empty."""
        return self._collections[CatalogFamily(family)]

    def has(self, family: CatalogFamily) -> bool:
        """Check if a family has any cached entries."""
        return len(self.get(family)) > 0

    def put(self, family: CatalogFamily, items: Iterable[Any]) -> None:
        """Replace a family's collection and mark the whole cache fresh.

        Args:
            family: Family being written
            items: New collection for the family
        """
        family = CatalogFamily(family)
        self._collections[family] = tuple(items)
        self.last_updated = self._clock()
        logger.debug(f"Cached {len(self._collections[family])} {family} entries")

    def is_valid(self) -> bool:
        """True while the shared timestamp is set and younger than the TTL."""
        if not self.last_updated:
            return False
        return self._clock() - self.last_updated < self.ttl_seconds

    def is_stale(self) -> bool:
        """True when the shared timestamp is unset or older than the TTL."""
        return not self.is_valid()

    def is_usable(self, family: CatalogFamily) -> bool:
        """Check if a family can be served without contacting a source."""
        return self.is_valid() and self.has(family)

    def clear(self) -> None:
        """Empty every family and reset the timestamp to the epoch."""
        self._collections = {family: () for family in CatalogFamily}
        self.last_updated = 0.0
        logger.info("Cleared catalog cache")

    def status(self) -> CacheStatusInfo:
        """Get cache status information.

        Returns:
            CacheStatusInfo with timestamp, validity and per-family sizes
        """
        return CacheStatusInfo(
            last_updated=self.last_updated,
            is_valid=self.is_valid(),
            sizes={family.value: len(items) for family, items in self._collections.items()},
        )
