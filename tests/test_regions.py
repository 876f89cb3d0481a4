"""Tests for region classification and the static zone tables."""

from types import MappingProxyType

import pytest

from sismo_alerta.models import MacroZone, ZoneParameters
from sismo_alerta.regions import (
    REGION_MACRO_ZONES,
    REGION_NAMES,
    ZONE_PARAMETERS,
    macro_zone_of,
    region_name,
    validate_zone_tables,
    zone_parameters,
)


class TestMacroZoneOf:
    @pytest.mark.parametrize("code", ["15", "01", "02", "03"])
    def test_north(self, code):
        assert macro_zone_of(code) is MacroZone.NORTH

    @pytest.mark.parametrize("code", ["04", "05", "13", "06", "07"])
    def test_central(self, code):
        assert macro_zone_of(code) is MacroZone.CENTRAL

    @pytest.mark.parametrize("code", ["16", "08", "09", "14", "10"])
    def test_south(self, code):
        assert macro_zone_of(code) is MacroZone.SOUTH

    @pytest.mark.parametrize("code", ["11", "12"])
    def test_austral(self, code):
        assert macro_zone_of(code) is MacroZone.AUSTRAL

    @pytest.mark.parametrize("code", ["", "99", "1", "XIII", None])
    def test_unknown_codes_default_to_central(self, code):
        """Unknown regions are not an error: they fall back to the central zone."""
        assert macro_zone_of(code) is MacroZone.CENTRAL

    def test_surrounding_whitespace_ignored(self):
        assert macro_zone_of(" 02 ") is MacroZone.NORTH

    def test_all_sixteen_regions_mapped(self):
        assert len(REGION_MACRO_ZONES) == 16
        assert set(REGION_MACRO_ZONES.values()) == set(MacroZone)


class TestRegionName:
    def test_known(self):
        assert region_name("13") == "Metropolitana"
        assert region_name("16") == "Ñuble"

    def test_unknown(self):
        assert region_name("42") == "Región desconocida"
        assert region_name(None) == "Región desconocida"


class TestZoneTables:
    def test_every_zone_has_parameters(self):
        for zone in MacroZone:
            assert isinstance(zone_parameters(zone), ZoneParameters)

    def test_p_wave_faster_than_s_wave_everywhere(self):
        for params in ZONE_PARAMETERS.values():
            assert params.p_wave_velocity_km_s > params.s_wave_velocity_km_s > 0

    def test_central_values(self):
        p = zone_parameters(MacroZone.CENTRAL)
        assert (p.p_wave_velocity_km_s, p.s_wave_velocity_km_s) == (8.0, 4.0)
        assert (p.attenuation_a, p.attenuation_b, p.attenuation_c) == (1.52, 0.52, 0.007)

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            REGION_NAMES["17"] = "Nueva"  # type: ignore[index]

    def test_bundled_tables_validate(self):
        validate_zone_tables()

    def test_missing_zone_is_fatal(self):
        partial = MappingProxyType(
            {z: p for z, p in ZONE_PARAMETERS.items() if z is not MacroZone.AUSTRAL}
        )
        with pytest.raises(RuntimeError, match="austral"):
            validate_zone_tables(zone_parameters=partial)

    def test_inverted_velocities_are_fatal(self):
        broken = dict(ZONE_PARAMETERS)
        broken[MacroZone.SOUTH] = ZoneParameters(3.8, 7.8, 1.55, 0.55, 0.0075)
        with pytest.raises(RuntimeError, match="sur"):
            validate_zone_tables(zone_parameters=broken)

    def test_out_of_sync_region_tables_are_fatal(self):
        names = dict(REGION_NAMES)
        del names["12"]
        with pytest.raises(RuntimeError, match="out of sync"):
            validate_zone_tables(region_names=names)
