"""Local Modified Mercalli intensity estimation."""

from __future__ import annotations

import math
from collections.abc import Mapping
from types import MappingProxyType

from sismo_alerta.models import SoilType
from sismo_alerta.regions import macro_zone_of, zone_parameters
from sismo_alerta.validation import (
    InvalidInputError,
    require_finite,
    require_non_negative,
    round_half_up,
)

MIN_INTENSITY = 1
MAX_INTENSITY = 12

# Distances below this are evaluated at this value so log10 stays finite.
MIN_INTENSITY_DISTANCE_KM = 0.1

# Depth step function: exclusive upper bounds (km) and their multipliers.
SHALLOW_DEPTH_KM = 30.0
INTERMEDIATE_DEPTH_KM = 70.0
SHALLOW_DEPTH_FACTOR = 1.2
INTERMEDIATE_DEPTH_FACTOR = 1.0
DEEP_DEPTH_FACTOR = 0.8

SOIL_AMPLIFICATION: Mapping[SoilType, float] = MappingProxyType({
    SoilType.ROCK: 1.0,
    SoilType.FIRM: 1.2,
    SoilType.SOFT: 1.6,
    SoilType.FILL: 2.0,
    SoilType.SANDY: 1.8,
    SoilType.CLAY: 1.7,
    SoilType.ALLUVIAL: 1.9,
    SoilType.VOLCANIC: 1.5,
})

if set(SOIL_AMPLIFICATION) != set(SoilType):
    raise RuntimeError("Soil amplification table does not cover every soil type")

_DESCRIPTIONS: tuple[str, ...] = (
    "Apenas perceptible para algunas personas en reposo",  # I
    "Sentido por personas en reposo, especialmente en pisos altos",  # II
    "Perceptible en interiores, objetos colgantes oscilan",  # III
    "Sentido por muchos en interiores, vajilla y ventanas vibran",  # IV
    "Sentido por casi todos, algunos platos y ventanas se rompen",  # V
    "Sentido por todos, muebles se mueven, daños leves",  # VI
    "Difícil mantenerse de pie, daños moderados en estructuras",  # VII
    "Daños considerables en estructuras, caída de chimeneas",  # VIII
    "Daños graves, edificios desplazados de cimientos",  # IX
    "Destrucción de muchas estructuras, grandes grietas en el suelo",  # X
    "Pocas estructuras quedan en pie, puentes destruidos",  # XI
    "Destrucción total, objetos lanzados al aire",  # XII
)

_COLORS: tuple[str, ...] = (
    "#CCFAFF",  # I
    "#99EEFF",  # II
    "#99CCFF",  # III
    "#99FFCC",  # IV
    "#99FF99",  # V
    "#FFFF99",  # VI
    "#FFCC99",  # VII
    "#FF9999",  # VIII
    "#FF6666",  # IX
    "#FF3333",  # X
    "#CC0000",  # XI
    "#990000",  # XII
)

_ROMAN: tuple[str, ...] = ("I", "II", "III", "IV", "V", "VI", "VII", "VIII", "IX", "X", "XI", "XII")


def clamp_intensity(value: float) -> int:
    """Round *value* to the nearest integer and clamp it into [1, 12]."""
    value = require_finite(value, "intensity")
    return min(MAX_INTENSITY, max(MIN_INTENSITY, round_half_up(value)))


def depth_factor(depth_km: float) -> float:
    """Shaking multiplier for hypocentre depth; shallower events shake harder."""
    if depth_km < SHALLOW_DEPTH_KM:
        return SHALLOW_DEPTH_FACTOR
    if depth_km < INTERMEDIATE_DEPTH_KM:
        return INTERMEDIATE_DEPTH_FACTOR
    return DEEP_DEPTH_FACTOR


def estimate_intensity(
    magnitude: float,
    depth_km: float,
    distance_km: float,
    soil_type: SoilType,
    region_code: str | None,
    *,
    min_distance_km: float = MIN_INTENSITY_DISTANCE_KM,
) -> int:
    """Estimate Modified Mercalli intensity (1-12) at a site.

    Uses the regional attenuation relation

        I = (a*M - b*log10(R) - c*R) * depth_factor * soil_factor

    with (a, b, c) from the macro-zone of *region_code* and R the epicentral
    distance floored at *min_distance_km*. The result is rounded half up and
    clamped into [1, 12].

    Raises:
        InvalidInputError: for non-finite magnitude, or negative/non-finite
            depth or distance.
    """
    magnitude = require_finite(magnitude, "magnitude")
    depth_km = require_non_negative(depth_km, "depth_km")
    distance_km = require_non_negative(distance_km, "distance_km")
    if not min_distance_km > 0:
        raise InvalidInputError("min_distance_km must be positive")

    params = zone_parameters(macro_zone_of(region_code))
    r = max(distance_km, min_distance_km)

    base = (
        params.attenuation_a * magnitude
        - params.attenuation_b * math.log10(r)
        - params.attenuation_c * r
    )
    value = base * depth_factor(depth_km) * SOIL_AMPLIFICATION[SoilType(soil_type)]
    return clamp_intensity(value)


def intensity_description(value: float) -> str:
    """Describe the observed effects at intensity *value* (clamped to 1-12)."""
    return _DESCRIPTIONS[clamp_intensity(value) - 1]


def intensity_color(value: float) -> str:
    """Hex colour for intensity *value* (clamped to 1-12)."""
    return _COLORS[clamp_intensity(value) - 1]


def roman_numeral(value: float) -> str:
    return _ROMAN[clamp_intensity(value) - 1]
