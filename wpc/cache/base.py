"""Base class for DiskCache-backed stores."""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Generic, TypeVar

from diskcache import Cache

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseCacheManager(ABC, Generic[T]):
    """Abstract base class for on-disk stores."""

    def __init__(self, root_dir: Path, namespace: str, cache_subdir: str | None = None) -> None:
        """Initialize cache manager.

        Args:
            root_dir: Base directory for all on-disk data
            namespace: Identifier used to isolate data (e.g. a profile)
            cache_subdir: Optional subdirectory within the namespace
        """
        self.namespace = namespace

        cache_path = Path(root_dir) / "cache" / namespace
        if cache_subdir:
            cache_path = cache_path / cache_subdir

        cache_path.mkdir(parents=True, exist_ok=True)

        self.cache = Cache(str(cache_path))
        self.cache_path = cache_path

        logger.debug(f"Initialized cache at {cache_path}")

    def clear_cache(self) -> None:
        """Clear all stored data."""
        try:
            self.cache.clear()
            logger.info(f"Cleared cache for {self.namespace}")
        except Exception as e:
            logger.error(f"Error clearing cache: {e}")

    def delete_item(self, key: str) -> bool:
        """Delete a specific cache item.

        Args:
            key: Cache key to delete

        Returns:
            True if item was deleted, False if not found
        """
        try:
            if key in self.cache:
                del self.cache[key]
                return True
            return False
        except Exception as e:
            logger.error(f"Error deleting cache item {key}: {e}")
            return False

    def close(self) -> None:
        """Release the underlying DiskCache handle."""
        self.cache.close()

    @abstractmethod
    def save(self, data: T) -> None:
        """Save data to cache."""

    @abstractmethod
    def load_all(self) -> list[T]:
        """Load every stored entry."""

    def __del__(self) -> None:
        """Close cache when object is destroyed."""
        if hasattr(self, "cache"):
            self.cache.close()

    def _iter_raw(self) -> list[tuple[str, Any]]:
        """Return (key, value) pairs currently stored."""
        items = []
        for key in list(self.cache.iterkeys()):
            try:
                items.append((key, self.cache.get(key)))
            except Exception as e:
                logger.debug(f"Error loading cache key {key}: {e}")
        return items
