"""Chilean administrative regions and their seismic macro-zones.

Region codes are the two-digit strings used by the national statistics
office ("01" Tarapacá ... "16" Ñuble). Every code maps to one of four
macro-zones, each with its own wave velocities and attenuation
coefficients. Unknown or empty codes fall back to the central zone.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from sismo_alerta.models import MacroZone, ZoneParameters

logger = logging.getLogger(__name__)

DEFAULT_MACRO_ZONE = MacroZone.CENTRAL
UNKNOWN_REGION_NAME = "Región desconocida"

REGION_NAMES: Mapping[str, str] = MappingProxyType({
    "15": "Arica y Parinacota",
    "01": "Tarapacá",
    "02": "Antofagasta",
    "03": "Atacama",
    "04": "Coquimbo",
    "05": "Valparaíso",
    "13": "Metropolitana",
    "06": "O'Higgins",
    "07": "Maule",
    "16": "Ñuble",
    "08": "Biobío",
    "09": "Araucanía",
    "14": "Los Ríos",
    "10": "Los Lagos",
    "11": "Aysén",
    "12": "Magallanes",
})

REGION_MACRO_ZONES: Mapping[str, MacroZone] = MappingProxyType({
    # Arid, rocky north
    "15": MacroZone.NORTH,
    "01": MacroZone.NORTH,
    "02": MacroZone.NORTH,
    "03": MacroZone.NORTH,
    # Mixed terrain
    "04": MacroZone.CENTRAL,
    "05": MacroZone.CENTRAL,
    "13": MacroZone.CENTRAL,
    "06": MacroZone.CENTRAL,
    "07": MacroZone.CENTRAL,
    # Softer, volcanic south
    "16": MacroZone.SOUTH,
    "08": MacroZone.SOUTH,
    "09": MacroZone.SOUTH,
    "14": MacroZone.SOUTH,
    "10": MacroZone.SOUTH,
    # Compact austral terrain
    "11": MacroZone.AUSTRAL,
    "12": MacroZone.AUSTRAL,
})

ZONE_PARAMETERS: Mapping[MacroZone, ZoneParameters] = MappingProxyType({
    MacroZone.NORTH: ZoneParameters(
        p_wave_velocity_km_s=8.2,
        s_wave_velocity_km_s=4.2,
        attenuation_a=1.48,
        attenuation_b=0.48,
        attenuation_c=0.0065,
    ),
    MacroZone.CENTRAL: ZoneParameters(
        p_wave_velocity_km_s=8.0,
        s_wave_velocity_km_s=4.0,
        attenuation_a=1.52,
        attenuation_b=0.52,
        attenuation_c=0.007,
    ),
    MacroZone.SOUTH: ZoneParameters(
        p_wave_velocity_km_s=7.8,
        s_wave_velocity_km_s=3.8,
        attenuation_a=1.55,
        attenuation_b=0.55,
        attenuation_c=0.0075,
    ),
    MacroZone.AUSTRAL: ZoneParameters(
        p_wave_velocity_km_s=8.1,
        s_wave_velocity_km_s=4.1,
        attenuation_a=1.5,
        attenuation_b=0.5,
        attenuation_c=0.0068,
    ),
})


def validate_zone_tables(
    zone_parameters: Mapping[MacroZone, ZoneParameters] = ZONE_PARAMETERS,
    region_zones: Mapping[str, MacroZone] = REGION_MACRO_ZONES,
    region_names: Mapping[str, str] = REGION_NAMES,
) -> None:
    """Check the static tables are complete and physically consistent.

    Raises:
        RuntimeError: if a macro-zone lacks parameters, a velocity pair is
            not P > S > 0, or the region tables disagree on their codes.
    """
    missing = [zone.value for zone in MacroZone if zone not in zone_parameters]
    if missing:
        raise RuntimeError(f"Missing macro-zone parameters for: {', '.join(missing)}")

    for zone, params in zone_parameters.items():
        if not params.p_wave_velocity_km_s > params.s_wave_velocity_km_s > 0:
            raise RuntimeError(
                f"Macro-zone {zone.value}: P-wave velocity must exceed S-wave velocity"
            )

    if set(region_zones) != set(region_names):
        raise RuntimeError("Region code tables are out of sync")


validate_zone_tables()


def macro_zone_of(region_code: str | None) -> MacroZone:
    """Return the macro-zone for *region_code*.

    Total function: unknown, empty or ``None`` codes resolve to
    ``DEFAULT_MACRO_ZONE`` instead of raising.
    """
    code = (region_code or "").strip()
    zone = REGION_MACRO_ZONES.get(code)
    if zone is None:
        logger.debug("Unknown region code %r, using %s zone", region_code, DEFAULT_MACRO_ZONE.value)
        return DEFAULT_MACRO_ZONE
    return zone


def zone_parameters(zone: MacroZone) -> ZoneParameters:
    """Return the static velocity and attenuation parameters for *zone*."""
    return ZONE_PARAMETERS[zone]


def region_name(region_code: str | None) -> str:
    """Return the Spanish display name for *region_code*."""
    return REGION_NAMES.get((region_code or "").strip(), UNKNOWN_REGION_NAME)
