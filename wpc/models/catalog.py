"""Catalog item models for the remote item data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from wpc.core.constants import CatalogFamily, WeaponCategory


def canonical_defindex(defindex: int | str) -> str:
    """Return the canonical string form of a weapon defindex."""
    return str(defindex).strip()


class CatalogItem(BaseModel):
    """Base model for a catalog entry. Unknown upstream fields are kept."""

    model_config = ConfigDict(extra="allow")

    image: str | None = None


class Skin(CatalogItem):
    """Weapon paint entry from skins.json."""

    weapon_defindex: int | str
    weapon_name: str = ""
    paint: int | str = 0
    paint_name: str = ""
    legacy_model: bool | None = None

    @property
    def defindex_key(self) -> str:
        """Canonical string form of the defindex."""
        return canonical_defindex(self.weapon_defindex)


class Glove(Skin):
    """Glove paint entry from gloves.json."""

    weapon_name: str = "gloves"

    @field_validator("weapon_name", mode="before")
    @classmethod
    def default_weapon_name(cls, v: str | None) -> str:
        """Missing glove weapon names fall back to 'gloves'."""
        return v or "gloves"


class Agent(CatalogItem):
    """Agent model entry from agents.json."""

    team: int | None = None
    model: str = ""
    agent_name: str = ""

    @field_validator("model", mode="before")
    @classmethod
    def coerce_model(cls, v: int | str | None) -> str:
        """Agent models are stored as strings."""
        return "" if v is None else str(v)


class Sticker(CatalogItem):
    """Sticker entry from stickers.json."""

    id: str
    name: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: int | str) -> str:
        """Sticker ids are compared as strings."""
        return str(v)


class Keychain(Sticker):
    """Keychain entry from keychains.json."""


class Music(Sticker):
    """Music kit entry from music.json."""


FAMILY_MODELS: dict[CatalogFamily, type[CatalogItem]] = {
    CatalogFamily.SKINS: Skin,
    CatalogFamily.AGENTS: Agent,
    CatalogFamily.STICKERS: Sticker,
    CatalogFamily.KEYCHAINS: Keychain,
    CatalogFamily.GLOVES: Glove,
    CatalogFamily.MUSIC: Music,
}


class WeaponType(BaseModel):
    """One distinct base weapon or glove model."""

    weapon_defindex: int | str
    weapon_name: str
    display_name: str
    default_skin: Skin | Glove = Field(description="Representative catalog entry used for preview")
    category: WeaponCategory
