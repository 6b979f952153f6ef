"""Encoding of customization settings into the persisted record format.

Sticker and keychain attachments are stored as fixed-arity ``;``-delimited
strings. Only the first field (the catalog id) is ever populated; an empty
attachment is the all-zero sentinel::

    sticker   "<id>;0;0;0;0;0;0"   empty "0;0;0;0;0;0;0"
    keychain  "<id>;0;0;0;0"       empty "0;0;0;0;0"

Decoding never raises: malformed strings and ids missing from the catalog
decode to an empty attachment.
"""

import logging
import math
from collections.abc import Iterable, Sequence
from typing import ClassVar, NamedTuple, TypeVar

from wpc.core.constants import (
    DEFAULT_WEAR,
    KNIFE_MARKER,
    MAX_WEAR,
    CodecConstants,
    ItemType,
    Team,
)
from wpc.exceptions import ValidationError
from wpc.models.catalog import Agent, Keychain, Skin, Sticker, canonical_defindex
from wpc.models.customization import CustomizationSettings, PersistedCustomization
from wpc.services.classifier import is_glove

logger = logging.getLogger(__name__)

A = TypeVar("A", bound=Sticker)

EMPTY_ID = "0"


class _Attachment(NamedTuple):
    id: str = EMPTY_ID


class StickerAttachment(_Attachment):
    """One sticker slot in wire form."""

    FIELDS: ClassVar[int] = CodecConstants.STICKER_FIELDS

    @property
    def is_empty(self) -> bool:
        return self.id == EMPTY_ID

    def serialize(self) -> str:
        """Render as ``<id>`` followed by zero-filled fields."""
        return ";".join([self.id or EMPTY_ID] + [EMPTY_ID] * (self.FIELDS - 1))

    @classmethod
    def parse(cls, raw: str | None) -> "StickerAttachment":
        """Parse a wire string; anything unusable becomes the empty attachment."""
        if not raw:
            return cls()
        first = raw.split(";")[0].strip()
        return cls(first or EMPTY_ID)

    @classmethod
    def sentinel(cls) -> str:
        return cls().serialize()


class KeychainAttachment(StickerAttachment):
    """The keychain slot in wire form."""

    FIELDS: ClassVar[int] = CodecConstants.KEYCHAIN_FIELDS


def _resolve(attachment: StickerAttachment, catalog: Iterable[A]) -> A | None:
    if attachment.is_empty:
        return None
    for entry in catalog:
        if entry.id == attachment.id:
            return entry
    logger.debug(f"Attachment id {attachment.id} not in catalog, treating slot as empty")
    return None


def encode_sticker(sticker: Sticker | None) -> str:
    """Encode one sticker slot."""
    return StickerAttachment(sticker.id if sticker else EMPTY_ID).serialize()


def decode_sticker(raw: str | None, stickers: Iterable[Sticker]) -> Sticker | None:
    """Decode one sticker slot against the stickers catalog."""
    return _resolve(StickerAttachment.parse(raw), stickers)


def encode_keychain(keychain: Keychain | None) -> str:
    """Encode the keychain slot."""
    return KeychainAttachment(keychain.id if keychain else EMPTY_ID).serialize()


def decode_keychain(raw: str | None, keychains: Iterable[Keychain]) -> Keychain | None:
    """Decode the keychain slot against the keychains catalog."""
    return _resolve(KeychainAttachment.parse(raw), keychains)


class WearCondition(NamedTuple):
    """A named wear band, ``min <= wear < max``."""

    name: str
    min: float
    max: float
    color: str

    def contains(self, wear: float) -> bool:
        return self.min <= wear < self.max


WEAR_CONDITIONS: tuple[WearCondition, ...] = (
    WearCondition("Factory New", 0.0, 0.07, "green"),
    WearCondition("Minimal Wear", 0.07, 0.15, "blue"),
    WearCondition("Field-Tested", 0.15, 0.38, "yellow"),
    WearCondition("Well-Worn", 0.38, 0.45, "orange"),
    WearCondition("Battle-Scarred", 0.45, 1.0, "red"),
)


def wear_condition(wear: float) -> WearCondition:
    """Return the wear band for a float; out-of-range values get the first band."""
    for condition in WEAR_CONDITIONS:
        if condition.contains(wear):
            return condition
    return WEAR_CONDITIONS[0]


def needs_attachment_catalog(skin: Skin) -> bool:
    """Gloves take no stickers or keychains, so they need no attachment catalogs."""
    return not is_glove(skin)


def item_type_for(skin: Skin | None = None, agent: Agent | None = None) -> ItemType:
    """Compute the item-type tag for the selected skin or agent.

    Raises:
        ValidationError: If nothing is selected
    """
    if skin is not None:
        if KNIFE_MARKER in skin.weapon_name:
            return ItemType.KNIFES
        if is_glove(skin):
            return ItemType.GLOVES
        return ItemType.WEAPONS
    if agent is not None:
        return ItemType.AGENTS
    raise ValidationError("selection", None, "A skin or agent must be selected")


def to_persistable(
    settings: CustomizationSettings,
    team: Team | int,
    skin: Skin | None = None,
    agent: Agent | None = None,
) -> PersistedCustomization:
    """Build the record sent to the save endpoint.

    Args:
        settings: Current customization settings
        team: Team the customization applies to
        skin: Selected skin (weapons, knives and gloves)
        agent: Selected agent, used when no skin is selected

    Returns:
        Record with attachment fields present unless the item is a glove
    """
    item_type = item_type_for(skin, agent)

    if skin is not None:
        defindex, paint_id = skin.weapon_defindex, skin.paint
    else:
        defindex = paint_id = agent.model

    fields = {
        "type": item_type,
        "weapon_team": int(team),
        "weapon_defindex": defindex,
        "weapon_paint_id": paint_id,
        "weapon_wear": settings.wear,
        "weapon_seed": settings.seed,
        "weapon_nametag": settings.name_tag[: CodecConstants.MAX_NAME_TAG_LENGTH],
        "weapon_stattrak": 1 if settings.stat_trak else 0,
    }

    if item_type != ItemType.GLOVES:
        for i, sticker in enumerate(settings.stickers):
            fields[f"weapon_sticker_{i}"] = encode_sticker(sticker)
        fields["weapon_keychain"] = encode_keychain(settings.keychain)

    return PersistedCustomization(**fields)


def _clamp_wear(wear: float) -> float:
    # NaN and infinities are not orderable against the bounds
    if not math.isfinite(wear):
        return DEFAULT_WEAR
    return min(max(wear, 0.0), MAX_WEAR)


def from_persistable(
    record: PersistedCustomization,
    stickers: Sequence[Sticker] = (),
    keychains: Sequence[Keychain] = (),
) -> CustomizationSettings:
    """Rebuild settings from a saved record.

    Missing attachment fields (glove records) decode to empty slots. Stored
    values outside the editable ranges are clamped.
    """
    return CustomizationSettings(
        wear=_clamp_wear(record.weapon_wear),
        seed=min(max(record.weapon_seed, CodecConstants.MIN_SEED), CodecConstants.MAX_SEED),
        name_tag=record.weapon_nametag[: CodecConstants.MAX_NAME_TAG_LENGTH],
        stat_trak=record.weapon_stattrak == 1,
        stickers=[decode_sticker(raw, stickers) for raw in record.sticker_fields],
        keychain=decode_keychain(record.weapon_keychain, keychains),
    )


def find_saved(
    records: Iterable[PersistedCustomization],
    team: Team | int,
    skin: Skin | None = None,
    agent: Agent | None = None,
) -> PersistedCustomization | None:
    """Find the saved record for the selected skin or agent on a team.

    Skins match on defindex, team and paint id; agents on their numeric model
    and team.
    """
    for record in records:
        if record.weapon_team != int(team):
            continue
        if skin is not None:
            if (
                record.weapon_defindex == skin.weapon_defindex
                and canonical_defindex(record.weapon_paint_id) == canonical_defindex(skin.paint)
            ):
                return record
        elif agent is not None:
            if canonical_defindex(record.weapon_defindex) == canonical_defindex(agent.model):
                return record
    return None
