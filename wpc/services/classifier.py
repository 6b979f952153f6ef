"""Weapon categorization, glove detection and weapon-type extraction."""

import locale
import logging
from collections.abc import Iterable
from typing import TypeVar

from wpc.core.constants import (
    DEFAULT_GLOVES_DEFINDEX,
    DEFAULT_PAINT_MARKER,
    KNIFE_MARKER,
    KNIFE_STAR_PREFIX,
    WEAPON_CATEGORIES,
    GloveDefindex,
    WeaponCategory,
)
from wpc.models.catalog import Glove, Skin, WeaponType, canonical_defindex

logger = logging.getLogger(__name__)

S = TypeVar("S", bound=Skin)


def category_of(weapon_name: str) -> WeaponCategory:
    """Map an internal weapon name (e.g. ``weapon_ak47``) to its category."""
    if KNIFE_MARKER in weapon_name:
        return WeaponCategory.KNIFES
    return WEAPON_CATEGORIES.get(weapon_name, WeaponCategory.OTHER)


def is_glove(item: Skin) -> bool:
    """Check if a skin-shaped entry is a glove.

    Upstream glove data is inconsistent, so any of three signals counts: the
    default-gloves sentinel defindex, a numeric defindex in the reserved glove
    range, or "gloves" in the paint name.
    """
    defindex = item.weapon_defindex
    if isinstance(defindex, str) and defindex == DEFAULT_GLOVES_DEFINDEX:
        return True
    if isinstance(defindex, int) and not isinstance(defindex, bool):
        if GloveDefindex.MIN <= defindex <= GloveDefindex.MAX:
            return True
    return "gloves" in item.paint_name.lower()


def display_name_of(paint_name: str) -> str:
    """Strip the "| variant" suffix and the leading knife star from a paint name."""
    display_name = paint_name.split("|")[0].strip()
    if display_name.startswith(KNIFE_STAR_PREFIX):
        display_name = display_name[len(KNIFE_STAR_PREFIX) :].strip()
    return display_name


def _display_sort_key(weapon_type: WeaponType) -> tuple[str, str]:
    # Locale collation first, raw name breaks ties
    return (locale.strxfrm(weapon_type.display_name.casefold()), weapon_type.display_name)


def build_weapon_types(skins: Iterable[Skin], gloves: Iterable[Glove] = ()) -> list[WeaponType]:
    """Derive one WeaponType per distinct defindex from skins and gloves.

    Args:
        skins: Skins collection; only "Default" paints define a weapon
        gloves: Gloves collection; one representative per glove model

    Returns:
        Weapon types sorted by display name
    """
    weapons: dict[str, WeaponType] = {}

    for skin in skins:
        if DEFAULT_PAINT_MARKER not in skin.paint_name:
            continue
        weapons[skin.defindex_key] = WeaponType(
            weapon_defindex=skin.weapon_defindex,
            weapon_name=skin.weapon_name,
            display_name=display_name_of(skin.paint_name),
            default_skin=skin,
            category=category_of(skin.weapon_name),
        )

    glove_types: dict[str, Glove] = {}
    for glove in gloves:
        key = glove.defindex_key
        if DEFAULT_PAINT_MARKER in glove.paint_name or key not in glove_types:
            glove_types[key] = glove

    for key, glove in glove_types.items():
        weapons[key] = WeaponType(
            weapon_defindex=glove.weapon_defindex,
            weapon_name=glove.weapon_name or "gloves",
            display_name=display_name_of(glove.paint_name),
            default_skin=glove,
            category=WeaponCategory.GLOVES,
        )

    logger.debug(f"Built {len(weapons)} weapon types")
    return sorted(weapons.values(), key=_display_sort_key)


def skins_for_weapon(skins: Iterable[S], weapon_defindex: int | str) -> list[S]:
    """Skins whose defindex strictly equals ``weapon_defindex``."""
    return [skin for skin in skins if skin.weapon_defindex == weapon_defindex]


def gloves_for_weapon(gloves: Iterable[S], weapon_defindex: int | str) -> list[S]:
    """Gloves whose defindex matches ``weapon_defindex`` after stringification."""
    key = canonical_defindex(weapon_defindex)
    return [glove for glove in gloves if glove.defindex_key == key]


def items_for_weapon(collection: Iterable[S], weapon_defindex: int | str, gloves: bool = False) -> list[S]:
    """Filter a skins or gloves collection down to one weapon.

    Args:
        collection: Skins or gloves collection
        weapon_defindex: Defindex of the weapon
        gloves: Compare by canonical string form (glove identifiers are mixed types)
    """
    if gloves:
        return gloves_for_weapon(collection, weapon_defindex)
    return skins_for_weapon(collection, weapon_defindex)


def categorize_weapons(skins: Iterable[Skin]) -> dict[WeaponCategory, list[Skin]]:
    """Group skins by weapon category.

    Skins whose weapon has no category are dropped; the gloves bucket is
    filled from the gloves collection elsewhere and stays empty here.
    """
    categorized: dict[WeaponCategory, list[Skin]] = {
        category: [] for category in WeaponCategory if category != WeaponCategory.OTHER
    }
    for skin in skins:
        category = category_of(skin.weapon_name)
        if category in categorized:
            categorized[category].append(skin)
    return categorized
