"""P-wave and S-wave arrival time estimation."""

from __future__ import annotations

import math

from sismo_alerta.geo import distance_km, topographic_factor
from sismo_alerta.models import ArrivalTimeResult, Coordinate
from sismo_alerta.regions import macro_zone_of, zone_parameters
from sismo_alerta.validation import require_non_negative, round_half_up

# Assumed latency between detection and the warning reaching the user.
PROCESSING_DELAY_SECONDS = 10.0


def estimate_arrival(
    epicenter: Coordinate,
    depth_km: float,
    point: Coordinate,
    region_code: str | None,
    *,
    processing_delay_seconds: float = PROCESSING_DELAY_SECONDS,
) -> ArrivalTimeResult:
    """Estimate when seismic waves from *epicenter* reach *point*.

    Velocities come from the macro-zone of *region_code*. The travel path is
    the straight line through a flat half-space: the surface distance,
    lengthened by the topographic factor, combined with depth as a third
    Euclidean axis.

    Raises:
        InvalidInputError: if *depth_km* or *processing_delay_seconds* is
            negative or not finite.
    """
    depth_km = require_non_negative(depth_km, "depth_km")
    processing_delay_seconds = require_non_negative(
        processing_delay_seconds, "processing_delay_seconds"
    )
    params = zone_parameters(macro_zone_of(region_code))

    horizontal_km = distance_km(epicenter, point)
    path_km = horizontal_km * topographic_factor(epicenter, point)
    slant_km = math.sqrt(path_km**2 + depth_km**2)

    p_seconds = slant_km / params.p_wave_velocity_km_s
    s_seconds = slant_km / params.s_wave_velocity_km_s

    return ArrivalTimeResult(
        p_wave_seconds=p_seconds,
        s_wave_seconds=s_seconds,
        wave_difference_seconds=s_seconds - p_seconds,
        alert_lead_seconds=max(0.0, s_seconds - processing_delay_seconds),
        distance_km=horizontal_km,
    )


def format_duration(seconds: float) -> str:
    """Format a countdown as ``"42s"`` or ``"2m 5s"``; negatives read ``"0s"``."""
    if seconds < 0:
        return "0s"
    total = round_half_up(seconds)
    if total < 60:
        return f"{total}s"
    minutes, remainder = divmod(total, 60)
    return f"{minutes}m {remainder}s"
