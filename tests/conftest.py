"""Shared fixtures for sismo_alerta tests."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from sismo_alerta.config import SismoAlertaConfig
from sismo_alerta.models import Coordinate, SeismicEvent, UserLocation

SANTIAGO = Coordinate(-33.45, -70.67)
VALPARAISO_COAST = Coordinate(-33.0472, -71.6127)


@pytest.fixture
def santiago() -> UserLocation:
    return UserLocation(coordinate=SANTIAGO, region_code="13")


@pytest.fixture
def coastal_user() -> UserLocation:
    """A user standing on the Valparaíso coastal reference point."""
    return UserLocation(coordinate=VALPARAISO_COAST, region_code="05")


@pytest.fixture
def offshore_event() -> SeismicEvent:
    """Moderate event off Valparaíso, used for arrival-time scenarios."""
    return SeismicEvent(
        epicenter=Coordinate(-33.0, -71.6),
        depth_km=35.0,
        magnitude=6.1,
        occurred_at=datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc),
        event_id="csn-2025-0301",
        reference="20 km al O de Valparaíso",
    )


@pytest.fixture
def megathrust_event() -> SeismicEvent:
    """M9.0 shallow subduction event off the Biobío coast."""
    return SeismicEvent(
        epicenter=Coordinate(-36.0, -73.0),
        depth_km=20.0,
        magnitude=9.0,
        occurred_at=datetime(2025, 3, 2, 6, 34, tzinfo=timezone.utc),
        event_id="csn-2025-0302",
        reference="60 km al NO de Talcahuano",
    )


@pytest.fixture
def inland_event() -> SeismicEvent:
    """Deep M5.0 event under the Andes, no tsunami potential."""
    return SeismicEvent(
        epicenter=Coordinate(-24.0, -69.0),
        depth_km=80.0,
        magnitude=5.0,
        occurred_at=datetime(2025, 2, 28, 22, 15, tzinfo=timezone.utc),
        event_id="csn-2025-0228",
        reference="45 km al E de Antofagasta",
    )


@pytest.fixture
def sample_feed() -> dict:
    """Feed payload in the upstream {"data": [...]} shape, one bad record."""
    return {
        "status": "success",
        "data": [
            {
                "id": "a1",
                "utc_time": "2025-03-01 12:00:00",
                "latitude": -33.0,
                "longitude": -71.6,
                "depth": 35,
                "magnitude": 6.1,
                "reference": "20 km al O de Valparaíso",
            },
            {
                "id": "a2",
                "utc_time": "2025-03-02 06:34:00",
                "latitude": -36.0,
                "longitude": -73.0,
                "depth": 20,
                "magnitude": 9.0,
                "reference": "60 km al NO de Talcahuano",
            },
            {
                "id": "broken",
                "utc_time": "2025-03-02 07:00:00",
                "latitude": -30.0,
                "longitude": -71.0,
                "depth": 10,
                "magnitude": None,
            },
        ],
    }


@pytest.fixture
def default_config() -> SismoAlertaConfig:
    return SismoAlertaConfig()
