"""Tests for the customization codec."""

import pytest

from wpc.core.constants import DEFAULT_WEAR, ItemType, Team
from wpc.exceptions import ValidationError
from wpc.models.catalog import Agent, Glove, Skin
from wpc.models.customization import CustomizationSettings, PersistedCustomization
from wpc.services.codec import (
    WEAR_CONDITIONS,
    KeychainAttachment,
    StickerAttachment,
    decode_keychain,
    decode_sticker,
    encode_keychain,
    encode_sticker,
    find_saved,
    from_persistable,
    item_type_for,
    needs_attachment_catalog,
    to_persistable,
    wear_condition,
)
from wpc.services.classifier import is_glove

STICKER_SENTINEL = "0;0;0;0;0;0;0"
KEYCHAIN_SENTINEL = "0;0;0;0;0"


class TestAttachmentEncoding:
    """Sticker and keychain slot strings."""

    def test_empty_sticker_is_sentinel(self):
        assert encode_sticker(None) == STICKER_SENTINEL
        assert StickerAttachment.sentinel() == STICKER_SENTINEL

    def test_empty_keychain_is_sentinel(self):
        assert encode_keychain(None) == KEYCHAIN_SENTINEL
        assert KeychainAttachment.sentinel() == KEYCHAIN_SENTINEL

    def test_occupied_sticker_fills_first_field_only(self, stickers):
        encoded = encode_sticker(stickers[1])
        assert encoded == "76;0;0;0;0;0;0"
        assert len(encoded.split(";")) == 7

    def test_occupied_keychain_has_five_fields(self, keychains):
        encoded = encode_keychain(keychains[1])
        assert encoded == "12;0;0;0;0"
        assert len(encoded.split(";")) == 5

    def test_decode_sentinel_is_empty(self, stickers):
        assert decode_sticker(STICKER_SENTINEL, stickers) is None
        assert decode_sticker("", stickers) is None
        assert decode_sticker(None, stickers) is None

    def test_decode_zero_first_field_is_empty(self, stickers):
        assert decode_sticker("0;1;2;3;4;5;6", stickers) is None

    def test_decode_known_id(self, stickers, keychains):
        assert decode_sticker("4760;0;0;0;0;0;0", stickers) == stickers[2]
        assert decode_keychain("1;0;0;0;0", keychains) == keychains[0]

    def test_decode_unknown_id_is_empty(self, stickers, keychains):
        assert decode_sticker("999999;0;0;0;0;0;0", stickers) is None
        assert decode_keychain("999;0;0;0;0", keychains) is None

    def test_decode_malformed_string_is_empty(self, stickers):
        assert decode_sticker(";;;", stickers) is None
        assert decode_sticker("garbage", stickers) is None

    def test_round_trip_restores_id(self, stickers):
        assert decode_sticker(encode_sticker(stickers[0]), stickers).id == "1"

    def test_round_trip_against_catalog_without_id(self, stickers):
        assert decode_sticker(encode_sticker(stickers[0]), stickers[1:]) is None


class TestWearCondition:
    """Wear float to condition band."""

    @pytest.mark.parametrize(
        "wear, expected",
        [
            (0.0, "Factory New"),
            (0.069999, "Factory New"),
            (0.07, "Minimal Wear"),
            (0.1, "Minimal Wear"),
            (0.15, "Field-Tested"),
            (0.379, "Field-Tested"),
            (0.38, "Well-Worn"),
            (0.45, "Battle-Scarred"),
            (0.99, "Battle-Scarred"),
        ],
    )
    def test_band_lookup(self, wear, expected):
        assert wear_condition(wear).name == expected

    def test_out_of_range_falls_back_to_first_band(self):
        assert wear_condition(-0.5).name == "Factory New"
        assert wear_condition(1.0).name == "Factory New"

    def test_bands_are_contiguous_and_cover_unit_interval(self):
        assert WEAR_CONDITIONS[0].min == 0.0
        assert WEAR_CONDITIONS[-1].max == 1.0
        for previous, current in zip(WEAR_CONDITIONS, WEAR_CONDITIONS[1:], strict=False):
            assert previous.max == current.min

    def test_exactly_one_band_matches(self):
        for step in range(1000):
            wear = step / 1000
            assert sum(1 for condition in WEAR_CONDITIONS if condition.contains(wear)) == 1


class TestItemType:
    """Item-type tagging for the persisted record."""

    def test_knife(self, skins):
        assert item_type_for(skin=skins[6]) == ItemType.KNIFES

    def test_gloves(self, gloves):
        for glove in gloves:
            assert item_type_for(skin=glove) == ItemType.GLOVES

    def test_weapon(self, skins):
        assert item_type_for(skin=skins[3]) == ItemType.WEAPONS

    def test_agent(self):
        assert item_type_for(agent=Agent(model="4619", agent_name="Sir Bloody Miami Darryl")) == ItemType.AGENTS

    def test_nothing_selected(self):
        with pytest.raises(ValidationError):
            item_type_for()

    def test_knife_marker_wins_over_glove_checks(self):
        both = Skin(weapon_defindex=5030, weapon_name="weapon_knife_gloves", paint=1, paint_name="Knife Gloves")

        assert is_glove(both)
        assert item_type_for(skin=both) == ItemType.KNIFES

    def test_gloves_need_no_attachment_catalog(self, skins, gloves):
        assert needs_attachment_catalog(skins[0]) is True
        assert needs_attachment_catalog(gloves[0]) is False


class TestToPersistable:
    """Building the saved record from settings."""

    def test_weapon_record_has_all_attachment_fields(self, skins, stickers, keychains):
        settings = CustomizationSettings(
            wear=0.25,
            seed=661,
            name_tag="my awp",
            stat_trak=True,
            stickers=[stickers[0], None, stickers[2], None, None],
            keychain=keychains[1],
        )

        record = to_persistable(settings, Team.COUNTER_TERRORIST, skin=skins[3])

        assert record.type == ItemType.WEAPONS
        assert record.weapon_team == 3
        assert record.weapon_defindex == 9
        assert record.weapon_paint_id == 279
        assert record.weapon_wear == 0.25
        assert record.weapon_seed == 661
        assert record.weapon_stattrak == 1
        assert record.sticker_fields == [
            "1;0;0;0;0;0;0",
            STICKER_SENTINEL,
            "4760;0;0;0;0;0;0",
            STICKER_SENTINEL,
            STICKER_SENTINEL,
        ]
        assert record.weapon_keychain == "12;0;0;0;0"

    def test_glove_record_omits_attachments(self, gloves, stickers):
        settings = CustomizationSettings(stickers=[stickers[0], None, None, None, None])

        payload = to_persistable(settings, Team.TERRORIST, skin=gloves[0]).to_payload()

        assert payload["type"] == "gloves"
        assert "weapon_keychain" not in payload
        assert not any(key.startswith("weapon_sticker_") for key in payload)

    def test_agent_record_uses_model(self):
        agent = Agent(model="4619", agent_name="Sir Bloody Miami Darryl")

        record = to_persistable(CustomizationSettings(), Team.TERRORIST, agent=agent)

        assert record.type == ItemType.AGENTS
        assert record.weapon_defindex == "4619"
        assert record.weapon_paint_id == "4619"
        assert record.weapon_keychain == KEYCHAIN_SENTINEL

    def test_name_tag_is_capped(self, skins):
        settings = CustomizationSettings.model_construct(
            wear=0.1, seed=1, name_tag="x" * 30, stat_trak=False, stickers=[None] * 5, keychain=None
        )

        record = to_persistable(settings, Team.TERRORIST, skin=skins[0])

        assert len(record.weapon_nametag) == 20


class TestFromPersistable:
    """Rebuilding settings from a saved record."""

    def test_round_trip(self, skins, stickers, keychains):
        settings = CustomizationSettings(
            wear=0.01,
            seed=42,
            name_tag="Tag",
            stat_trak=True,
            stickers=[None, stickers[1], None, None, stickers[0]],
            keychain=keychains[0],
        )
        record = to_persistable(settings, Team.TERRORIST, skin=skins[0])

        restored = from_persistable(record, stickers, keychains)

        assert restored == settings

    def test_glove_record_decodes_to_empty_attachments(self, gloves, stickers, keychains):
        record = to_persistable(CustomizationSettings(wear=0.5), Team.TERRORIST, skin=gloves[2])

        restored = from_persistable(record, stickers, keychains)

        assert restored.stickers == [None] * 5
        assert restored.keychain is None
        assert restored.wear == 0.5

    def test_unknown_ids_degrade_to_empty(self, stickers, keychains):
        record = PersistedCustomization(
            type=ItemType.WEAPONS,
            weapon_team=2,
            weapon_defindex=7,
            weapon_paint_id=44,
            weapon_sticker_0="123456;0;0;0;0;0;0",
            weapon_sticker_1="76;0;0;0;0;0;0",
            weapon_keychain="oops",
        )

        restored = from_persistable(record, stickers, keychains)

        assert restored.stickers[0] is None
        assert restored.stickers[1] == stickers[1]
        assert restored.keychain is None

    def test_long_name_tag_not_reintroduced(self):
        record = PersistedCustomization(
            type=ItemType.WEAPONS, weapon_team=2, weapon_defindex=7, weapon_paint_id=44, weapon_nametag="y" * 40
        )

        assert from_persistable(record).name_tag == "y" * 20

    def test_out_of_range_values_are_clamped(self):
        record = PersistedCustomization(
            type=ItemType.WEAPONS, weapon_team=2, weapon_defindex=7, weapon_paint_id=44, weapon_wear=1.0, weapon_seed=0
        )

        restored = from_persistable(record)

        assert restored.wear == 0.99
        assert restored.seed == 1

    @pytest.mark.parametrize("wear", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_wear_falls_back_to_default(self, wear):
        record = PersistedCustomization(
            type=ItemType.WEAPONS, weapon_team=2, weapon_defindex=7, weapon_paint_id=44, weapon_wear=wear
        )

        assert from_persistable(record).wear == DEFAULT_WEAR


class TestFindSaved:
    """Matching saved records to the selected item."""

    def test_matches_skin_by_defindex_team_and_paint(self, skins):
        ct = to_persistable(CustomizationSettings(seed=5), Team.COUNTER_TERRORIST, skin=skins[1])
        t = to_persistable(CustomizationSettings(seed=9), Team.TERRORIST, skin=skins[1])
        other = to_persistable(CustomizationSettings(), Team.TERRORIST, skin=skins[0])

        assert find_saved([other, ct, t], Team.TERRORIST, skin=skins[1]) is t
        assert find_saved([other, ct, t], Team.COUNTER_TERRORIST, skin=skins[1]) is ct

    def test_paint_id_compares_loosely(self, skins):
        record = PersistedCustomization(type=ItemType.WEAPONS, weapon_team=2, weapon_defindex=7, weapon_paint_id="44")

        assert find_saved([record], Team.TERRORIST, skin=skins[1]) is record

    def test_matches_agent_by_model(self):
        record = PersistedCustomization(type=ItemType.AGENTS, weapon_team=3, weapon_defindex=4619, weapon_paint_id=4619)

        assert find_saved([record], Team.COUNTER_TERRORIST, agent=Agent(model="4619")) is record
        assert find_saved([record], Team.TERRORIST, agent=Agent(model="4619")) is None

    def test_glove_sentinel_defindex(self):
        glove = Glove(weapon_defindex="gloves_default", paint=0, paint_name="Default Gloves | Terrorist Default")
        record = to_persistable(CustomizationSettings(), Team.TERRORIST, skin=glove)

        assert find_saved([record], Team.TERRORIST, skin=glove) is record
        assert find_saved([record], Team.TERRORIST, skin=Skin(weapon_defindex=7, paint=0)) is None
