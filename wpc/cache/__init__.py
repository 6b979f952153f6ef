"""Cache module for WPC."""

from wpc.cache.base import BaseCacheManager
from wpc.cache.catalog import CatalogCache
from wpc.cache.store import CustomizationStore

__all__ = [
    "BaseCacheManager",
    "CatalogCache",
    "CustomizationStore",
]
