"""
Constants and configuration values for the Weapon Paints Customizer.
"""

from enum import IntEnum, StrEnum
from types import MappingProxyType

# Remote catalog base URL
CATALOG_BASE_URL = "https://raw.githubusercontent.com/LielXD/CS2-WeaponPaints-Website/refs/heads/main/src/data"

# Application-local fallback endpoints
FALLBACK_BASE_URL = "http://localhost:3000/api"


class CatalogFamily(StrEnum):
    """Item families served by the catalog."""

    SKINS = "skins"
    AGENTS = "agents"
    STICKERS = "stickers"
    KEYCHAINS = "keychains"
    GLOVES = "gloves"
    MUSIC = "music"

    @property
    def file_name(self) -> str:
        """File name of this family on the primary source."""
        return f"{self.value}.json"


class WeaponCategory(StrEnum):
    """Weapon categories shown in the customizer."""

    PISTOLS = "pistols"
    RIFLES = "rifles"
    SMG = "smg"
    SHOTGUNS = "shotguns"
    SNIPERS = "snipers"
    MACHINEGUNS = "machineguns"
    KNIFES = "knifes"
    GLOVES = "gloves"
    OTHER = "other"


class ItemType(StrEnum):
    """Item type tag attached to a saved customization."""

    WEAPONS = "weapons"
    GLOVES = "gloves"
    KNIFES = "knifes"
    AGENTS = "agents"


class Team(IntEnum):
    """In-game team identifiers."""

    TERRORIST = 2
    COUNTER_TERRORIST = 3


class APIConstants(IntEnum):
    """API-related limits and constants."""

    REQUEST_TIMEOUT = 30
    BACKOFF_MAX_TRIES = 3
    BACKOFF_FACTOR = 2
    BACKOFF_MAX_VALUE = 30


class CacheLimits(IntEnum):
    """Cache-related limits."""

    CATALOG_TTL_SECONDS = 60 * 60


class CodecConstants(IntEnum):
    """Wire format and settings limits."""

    STICKER_SLOTS = 5
    STICKER_FIELDS = 7
    KEYCHAIN_FIELDS = 5
    MAX_NAME_TAG_LENGTH = 20
    MIN_SEED = 1
    MAX_SEED = 1000
    DEFAULT_SEED = 1


class GloveDefindex(IntEnum):
    """Reserved numeric defindex range for glove models."""

    MIN = 5027
    MAX = 5035


class FormattingConstants(IntEnum):
    """Formatting constants."""

    JSON_INDENT = 2


DEFAULT_WEAR = 0.1
MAX_WEAR = 0.99
DEFAULT_GLOVES_DEFINDEX = "gloves_default"
KNIFE_MARKER = "knife"
DEFAULT_PAINT_MARKER = "Default"
KNIFE_STAR_PREFIX = "★ "

WEAPON_CATEGORIES: MappingProxyType[str, WeaponCategory] = MappingProxyType(
    {
        # Pistols
        "weapon_deagle": WeaponCategory.PISTOLS,
        "weapon_elite": WeaponCategory.PISTOLS,
        "weapon_fiveseven": WeaponCategory.PISTOLS,
        "weapon_glock": WeaponCategory.PISTOLS,
        "weapon_hkp2000": WeaponCategory.PISTOLS,
        "weapon_p250": WeaponCategory.PISTOLS,
        "weapon_usp_silencer": WeaponCategory.PISTOLS,
        "weapon_cz75a": WeaponCategory.PISTOLS,
        "weapon_revolver": WeaponCategory.PISTOLS,
        "weapon_tec9": WeaponCategory.PISTOLS,
        # Rifles
        "weapon_ak47": WeaponCategory.RIFLES,
        "weapon_m4a1": WeaponCategory.RIFLES,
        "weapon_m4a1_silencer": WeaponCategory.RIFLES,
        "weapon_aug": WeaponCategory.RIFLES,
        "weapon_sg556": WeaponCategory.RIFLES,
        "weapon_famas": WeaponCategory.RIFLES,
        "weapon_galilar": WeaponCategory.RIFLES,
        # SMGs
        "weapon_mp7": WeaponCategory.SMG,
        "weapon_mp9": WeaponCategory.SMG,
        "weapon_bizon": WeaponCategory.SMG,
        "weapon_mac10": WeaponCategory.SMG,
        "weapon_ump45": WeaponCategory.SMG,
        "weapon_p90": WeaponCategory.SMG,
        "weapon_mp5sd": WeaponCategory.SMG,
        # Shotguns
        "weapon_nova": WeaponCategory.SHOTGUNS,
        "weapon_xm1014": WeaponCategory.SHOTGUNS,
        "weapon_sawedoff": WeaponCategory.SHOTGUNS,
        "weapon_mag7": WeaponCategory.SHOTGUNS,
        # Snipers
        "weapon_awp": WeaponCategory.SNIPERS,
        "weapon_ssg08": WeaponCategory.SNIPERS,
        "weapon_scar20": WeaponCategory.SNIPERS,
        "weapon_g3sg1": WeaponCategory.SNIPERS,
        # Machine guns
        "weapon_m249": WeaponCategory.MACHINEGUNS,
        "weapon_negev": WeaponCategory.MACHINEGUNS,
    }
)
