"""Tests for value types and their validation."""

import math
from datetime import datetime, timezone

import pytest

from sismo_alerta.models import Coordinate, SeismicEvent, TsunamiAssessment, TsunamiRisk
from sismo_alerta.validation import InvalidInputError

NOW = datetime(2025, 1, 1, tzinfo=timezone.utc)


class TestCoordinate:
    def test_rejects_nan(self):
        with pytest.raises(InvalidInputError, match="latitude"):
            Coordinate(math.nan, -70.0)

    def test_rejects_infinity(self):
        with pytest.raises(InvalidInputError, match="longitude"):
            Coordinate(-33.0, math.inf)

    def test_out_of_range_is_not_an_error(self):
        c = Coordinate(-95.0, 200.0)
        assert c.latitude == -95.0

    def test_is_immutable(self):
        c = Coordinate(-33.0, -70.0)
        with pytest.raises(AttributeError):
            c.latitude = 0.0  # type: ignore[misc]


class TestSeismicEvent:
    def test_negative_depth_rejected(self):
        with pytest.raises(InvalidInputError, match="depth_km"):
            SeismicEvent(Coordinate(-33.0, -71.0), depth_km=-1.0, magnitude=5.0, occurred_at=NOW)

    def test_non_finite_magnitude_rejected(self):
        with pytest.raises(InvalidInputError, match="magnitude"):
            SeismicEvent(Coordinate(-33.0, -71.0), depth_km=10.0, magnitude=math.nan, occurred_at=NOW)

    def test_magnitude_not_clamped(self):
        e = SeismicEvent(Coordinate(-33.0, -71.0), depth_km=10.0, magnitude=11.5, occurred_at=NOW)
        assert e.magnitude == 11.5

    def test_zero_depth_is_valid(self):
        e = SeismicEvent(Coordinate(-33.0, -71.0), depth_km=0, magnitude=5.0, occurred_at=NOW)
        assert e.depth_km == 0.0


class TestTsunamiRisk:
    def test_total_order(self):
        assert (
            TsunamiRisk.NONE
            < TsunamiRisk.LOW
            < TsunamiRisk.MODERATE
            < TsunamiRisk.HIGH
            < TsunamiRisk.EXTREME
        )

    def test_sorting_by_severity(self):
        levels = [TsunamiRisk.HIGH, TsunamiRisk.NONE, TsunamiRisk.EXTREME, TsunamiRisk.LOW]
        assert sorted(levels) == [
            TsunamiRisk.NONE,
            TsunamiRisk.LOW,
            TsunamiRisk.HIGH,
            TsunamiRisk.EXTREME,
        ]

    @pytest.mark.parametrize(
        "level, expected",
        [
            (TsunamiRisk.NONE, TsunamiRisk.NONE),
            (TsunamiRisk.LOW, TsunamiRisk.MODERATE),
            (TsunamiRisk.MODERATE, TsunamiRisk.HIGH),
            (TsunamiRisk.HIGH, TsunamiRisk.EXTREME),
            (TsunamiRisk.EXTREME, TsunamiRisk.EXTREME),
        ],
    )
    def test_escalated(self, level, expected):
        assert level.escalated() is expected

    def test_serializes_as_string(self):
        assert TsunamiRisk.HIGH.value == "high"
        assert TsunamiRisk("moderate") is TsunamiRisk.MODERATE

    def test_assessment_threat_flag(self):
        assert not TsunamiAssessment(risk=TsunamiRisk.NONE).is_threat
        assert TsunamiAssessment(risk=TsunamiRisk.LOW).is_threat
