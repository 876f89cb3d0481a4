"""Tests for geo distance, topographic and site geology helpers."""

import pytest

from sismo_alerta.geo import (
    ANDES_CROSSING_FACTOR,
    distance_km,
    haversine,
    site_risk_for_location,
    soil_type_for_location,
    topographic_factor,
)
from sismo_alerta.models import Coordinate, SiteRisk, SoilType


class TestHaversine:
    def test_zero_distance(self):
        assert haversine(-33.45, -70.67, -33.45, -70.67) == 0.0

    def test_known_distance_santiago_valparaiso(self):
        d = haversine(-33.45, -70.67, -33.0472, -71.6127)
        assert 95 < d < 105

    def test_known_distance_arica_punta_arenas(self):
        d = haversine(-18.4746, -70.3136, -53.1638, -70.9171)
        assert 3840 < d < 3880

    def test_antipodal_points(self):
        d = haversine(0, 0, 0, 180)
        assert 20010 < d < 20020

    def test_symmetry(self):
        d1 = haversine(-33.45, -70.67, -36.82, -73.05)
        d2 = haversine(-36.82, -73.05, -33.45, -70.67)
        assert d1 == pytest.approx(d2)

    def test_returns_float(self):
        assert isinstance(haversine(0.0, 0.0, 1.0, 1.0), float)

    def test_out_of_range_degrees_are_accepted(self):
        assert haversine(-120.0, 400.0, 95.0, -300.0) >= 0


class TestDistanceKm:
    @pytest.mark.parametrize(
        "a, b",
        [
            (Coordinate(-33.45, -70.67), Coordinate(-33.0, -71.6)),
            (Coordinate(-18.47, -70.31), Coordinate(-53.16, -70.92)),
            (Coordinate(10.0, 170.0), Coordinate(-10.0, -170.0)),
        ],
    )
    def test_symmetric(self, a, b):
        assert distance_km(a, b) == pytest.approx(distance_km(b, a))

    def test_same_point_is_zero(self):
        p = Coordinate(-41.4693, -72.9424)
        assert distance_km(p, p) == 0.0

    def test_matches_haversine(self):
        a = Coordinate(-33.45, -70.67)
        b = Coordinate(-33.0, -71.6)
        assert distance_km(a, b) == haversine(-33.45, -70.67, -33.0, -71.6)


class TestTopographicFactor:
    def test_same_longitude_no_crossing(self):
        assert topographic_factor(Coordinate(-30.0, -71.0), Coordinate(-35.0, -71.0)) == 1.0

    def test_large_longitude_gap_crosses_andes(self):
        factor = topographic_factor(Coordinate(-33.0, -71.6), Coordinate(-33.45, -70.67))
        assert factor == ANDES_CROSSING_FACTOR == 1.15

    def test_exactly_half_degree_is_not_a_crossing(self):
        assert topographic_factor(Coordinate(-33.0, -71.0), Coordinate(-33.0, -70.5)) == 1.0

    def test_never_below_one(self):
        assert topographic_factor(Coordinate(0, 0), Coordinate(0, 90)) >= 1.0


class TestSoilTypeForLocation:
    def test_coastal_strip_is_sandy(self):
        assert soil_type_for_location(Coordinate(-33.0, -71.6)) is SoilType.SANDY

    def test_cordillera_is_rock(self):
        assert soil_type_for_location(Coordinate(-33.0, -70.0)) is SoilType.ROCK

    def test_central_valley_is_clay(self):
        assert soil_type_for_location(Coordinate(-33.45, -70.67)) is SoilType.CLAY


class TestSiteRiskForLocation:
    @pytest.mark.parametrize(
        "longitude, expected",
        [
            (-71.6, SiteRisk.HIGH),
            (-71.5, SiteRisk.MEDIUM),
            (-70.67, SiteRisk.MEDIUM),
            (-70.2, SiteRisk.MEDIUM),
            (-70.0, SiteRisk.LOW),
        ],
    )
    def test_longitude_bands(self, longitude, expected):
        assert site_risk_for_location(Coordinate(-33.0, longitude)) is expected

    def test_follows_soil_guess(self):
        bands = {SoilType.SANDY: SiteRisk.HIGH, SoilType.CLAY: SiteRisk.MEDIUM, SoilType.ROCK: SiteRisk.LOW}
        for longitude in (-72.0, -71.0, -69.5):
            point = Coordinate(-33.0, longitude)
            assert site_risk_for_location(point) is bands[soil_type_for_location(point)]
