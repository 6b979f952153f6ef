"""Core functionality module."""

from wpc.core.constants import CatalogFamily, FormattingConstants, ItemType, WeaponCategory
from wpc.core.search import WeaponSearcher

__all__ = [
    "CatalogFamily",
    "FormattingConstants",
    "ItemType",
    "WeaponCategory",
    "WeaponSearcher",
]
