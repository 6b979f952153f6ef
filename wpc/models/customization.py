"""Customization settings and the persisted record shape."""

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

from wpc.core.constants import DEFAULT_WEAR, MAX_WEAR, CodecConstants, ItemType
from wpc.models.catalog import Keychain, Sticker, canonical_defindex


def _empty_slots() -> list[Sticker | None]:
    return [None] * CodecConstants.STICKER_SLOTS


class CustomizationSettings(BaseModel):
    """Editable customization state for the selected item."""

    wear: float = Field(default=DEFAULT_WEAR, ge=0.0, le=MAX_WEAR)
    seed: int = Field(default=CodecConstants.DEFAULT_SEED, ge=CodecConstants.MIN_SEED, le=CodecConstants.MAX_SEED)
    name_tag: str = Field(default="", max_length=CodecConstants.MAX_NAME_TAG_LENGTH)
    stat_trak: bool = False
    stickers: list[Sticker | None] = Field(
        default_factory=_empty_slots,
        min_length=CodecConstants.STICKER_SLOTS,
        max_length=CodecConstants.STICKER_SLOTS,
    )
    keychain: Keychain | None = None

    def with_sticker(self, index: int, sticker: Sticker | None) -> "CustomizationSettings":
        """Return a copy with one sticker slot replaced."""
        if not 0 <= index < CodecConstants.STICKER_SLOTS:
            raise IndexError(f"Sticker slot {index} out of range")
        stickers = list(self.stickers)
        stickers[index] = sticker
        return self.model_copy(update={"stickers": stickers})


class PersistedCustomization(BaseModel):
    """One saved customization row as accepted by the save endpoint."""

    type: ItemType
    weapon_team: int
    weapon_defindex: int | str
    weapon_paint_id: int | str
    weapon_wear: float = DEFAULT_WEAR
    weapon_seed: int = CodecConstants.DEFAULT_SEED
    weapon_nametag: str = ""
    weapon_stattrak: Literal[0, 1] = 0
    weapon_sticker_0: str | None = None
    weapon_sticker_1: str | None = None
    weapon_sticker_2: str | None = None
    weapon_sticker_3: str | None = None
    weapon_sticker_4: str | None = None
    weapon_keychain: str | None = None

    @field_validator("weapon_nametag", mode="before")
    @classmethod
    def normalize_nametag(cls, v: Any) -> str:
        """Treat a missing name tag as empty."""
        return "" if v is None else str(v)

    @property
    def key(self) -> tuple[str, int, str]:
        """Identity of the saved row: (defindex, team, paint id)."""
        return (canonical_defindex(self.weapon_defindex), self.weapon_team, canonical_defindex(self.weapon_paint_id))

    @property
    def sticker_fields(self) -> list[str | None]:
        """Raw sticker slot strings in slot order."""
        return [getattr(self, f"weapon_sticker_{i}") for i in range(CodecConstants.STICKER_SLOTS)]

    def to_payload(self) -> dict[str, Any]:
        """Serialize for the save endpoint, omitting absent attachment fields."""
        return self.model_dump(mode="json", exclude_none=True)
