"""Shared fixtures for wpc tests."""

from typing import Any

import pytest

from wpc.cache.catalog import CatalogCache
from wpc.core.constants import CatalogFamily
from wpc.exceptions import APIError
from wpc.models.catalog import Glove, Keychain, Skin, Sticker
from wpc.services.fetcher import CatalogFetcher


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, now: float = 1_700_000_000.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeSourceClient:
    """Stands in for CatalogSourceClient; records every read."""

    def __init__(self) -> None:
        self.session = object()
        self.primary: dict[CatalogFamily, Any] = {}
        self.fallback: dict[CatalogFamily, Any] = {}
        self.calls: list[tuple[str, CatalogFamily]] = []

    def _respond(self, source: str, responses: dict[CatalogFamily, Any], family: CatalogFamily) -> Any:
        self.calls.append((source, family))
        response = responses.get(family)
        if response is None:
            raise APIError(503, f"{source} unavailable for {family}")
        if isinstance(response, Exception):
            raise response
        return response

    def get_primary(self, family: CatalogFamily) -> Any:
        return self._respond("primary", self.primary, family)

    def get_fallback(self, family: CatalogFamily) -> Any:
        return self._respond("fallback", self.fallback, family)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> CatalogCache:
    return CatalogCache(ttl_seconds=3600, clock=clock)


@pytest.fixture
def source() -> FakeSourceClient:
    return FakeSourceClient()


@pytest.fixture
def fetcher(source: FakeSourceClient, cache: CatalogCache) -> CatalogFetcher:
    return CatalogFetcher(source, cache)  # type: ignore[arg-type]


@pytest.fixture
def skins() -> list[Skin]:
    return [
        Skin(weapon_defindex=7, weapon_name="weapon_ak47", paint=0, paint_name="AK-47 | Default"),
        Skin(weapon_defindex=7, weapon_name="weapon_ak47", paint=44, paint_name="AK-47 | Case Hardened"),
        Skin(weapon_defindex=9, weapon_name="weapon_awp", paint=0, paint_name="AWP | Default"),
        Skin(weapon_defindex=9, weapon_name="weapon_awp", paint=279, paint_name="AWP | Asiimov"),
        Skin(weapon_defindex=1, weapon_name="weapon_deagle", paint=0, paint_name="Desert Eagle | Default"),
        Skin(weapon_defindex=507, weapon_name="weapon_knife_karambit", paint=0, paint_name="★ Karambit | Default"),
        Skin(weapon_defindex=507, weapon_name="weapon_knife_karambit", paint=38, paint_name="★ Karambit | Fade"),
        Skin(weapon_defindex=31, weapon_name="weapon_taser", paint=0, paint_name="Zeus x27 | Default"),
    ]


@pytest.fixture
def gloves() -> list[Glove]:
    return [
        Glove(
            weapon_defindex=5030, weapon_name="sports_gloves", paint=10018, paint_name="★ Sport Gloves | Superconductor"
        ),
        Glove(
            weapon_defindex=5030, weapon_name="sports_gloves", paint=10037, paint_name="★ Sport Gloves | Pandora's Box"
        ),
        Glove(weapon_defindex="gloves_default", paint=0, paint_name="Default Gloves | Terrorist Default"),
        Glove(
            weapon_defindex=5027,
            weapon_name="studded_bloodhound_gloves",
            paint=10006,
            paint_name="★ Bloodhound Gloves | Charred",
        ),
    ]


@pytest.fixture
def stickers() -> list[Sticker]:
    return [
        Sticker(id="1", name="Sticker | Shooter"),
        Sticker(id="76", name="Sticker | Crown (Foil)"),
        Sticker(id="4760", name="Sticker | Natus Vincere | Paris 2023"),
    ]


@pytest.fixture
def keychains() -> list[Keychain]:
    return [
        Keychain(id="1", name="Charm | Lil' Ava"),
        Keychain(id="12", name="Charm | Hot Howl"),
    ]
