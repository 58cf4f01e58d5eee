"""Global test fixtures for geoinfo."""

from __future__ import annotations

import pytest

from geoinfo.core.context import AppContext
from geoinfo.core.models.config import Config
from geoinfo.core.models.location import LocationRecord
from tests.helpers import MALMO_IP, FakeLocationStore, make_record


@pytest.fixture
def malmo_record() -> LocationRecord:
    return make_record()


@pytest.fixture
def fake_store(malmo_record: LocationRecord) -> FakeLocationStore:
    return FakeLocationStore(
        records={
            MALMO_IP: malmo_record,
            "127.0.0.1": LocationRecord(),
            "2001:db8::1": make_record(
                country_iso_code="DE",
                country_names={"de": "Deutschland", "en": "Germany"},
                city_names={"de": "Berlin", "en": "Berlin"},
                latitude=52.52,
                longitude=13.405,
                time_zone="Europe/Berlin",
            ),
        }
    )


@pytest.fixture
def config(tmp_path) -> Config:
    return Config(
        ip_header="X-Real-Ip",
        ignore_headers=["user-agent", "Accept-Encoding"],
        cache_size=16,
        db={"path": tmp_path / "GeoLite2-City.mmdb"},
    )


@pytest.fixture
def context(config: Config, fake_store: FakeLocationStore) -> AppContext:
    ctx = AppContext(config, fake_store)
    yield ctx
    ctx.close()
