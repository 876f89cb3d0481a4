"""Tsunami risk classification and coastal arrival estimation."""

from __future__ import annotations

from sismo_alerta.geo import distance_km
from sismo_alerta.models import (
    CoastalPoint,
    Coordinate,
    SeismicEvent,
    TsunamiAssessment,
    TsunamiRisk,
)
from sismo_alerta.validation import InvalidInputError, require_non_negative

# Epicentres west of this longitude are treated as lying on the subduction zone.
SUBDUCTION_ZONE_MAX_LONGITUDE = -70.0

# Open-ocean tsunami propagation speed.
TSUNAMI_SPEED_KMH = 800.0

# Users closer than this to the coast receive evacuation instructions.
COASTAL_EVACUATION_RADIUS_KM = 10.0

COASTAL_POINTS: tuple[CoastalPoint, ...] = (
    CoastalPoint("Arica", Coordinate(-18.4746, -70.3136)),
    CoastalPoint("Iquique", Coordinate(-20.2307, -70.1356)),
    CoastalPoint("Antofagasta", Coordinate(-23.6509, -70.4001)),
    CoastalPoint("Caldera", Coordinate(-27.0672, -70.8262)),
    CoastalPoint("Coquimbo", Coordinate(-29.9649, -71.3394)),
    CoastalPoint("Valparaíso", Coordinate(-33.0472, -71.6127)),
    CoastalPoint("San Antonio", Coordinate(-33.5928, -71.6068)),
    CoastalPoint("Constitución", Coordinate(-35.3335, -72.421)),
    CoastalPoint("Talcahuano", Coordinate(-36.7249, -73.1169)),
    CoastalPoint("Lebu", Coordinate(-37.6083, -73.6542)),
    CoastalPoint("Valdivia", Coordinate(-39.8142, -73.2459)),
    CoastalPoint("Puerto Montt", Coordinate(-41.4693, -72.9424)),
    CoastalPoint("Ancud", Coordinate(-41.8679, -73.8278)),
    CoastalPoint("Chaitén", Coordinate(-42.9192, -72.7086)),
    CoastalPoint("Puerto Aysén", Coordinate(-45.4033, -72.699)),
    CoastalPoint("Punta Arenas", Coordinate(-53.1638, -70.9171)),
)

EVACUATION_INSTRUCTIONS: tuple[str, ...] = (
    "Diríjase inmediatamente a zonas altas, sobre 30 metros sobre el nivel del mar",
    "Siga las rutas de evacuación señalizadas",
    "Aléjese de ríos y esteros que desembocan en el mar",
    "No utilice vehículos para evacuar, salvo que las autoridades lo indiquen",
)


def is_subduction_zone(epicenter: Coordinate) -> bool:
    """Coarse longitude test for the offshore plate boundary."""
    return epicenter.longitude < SUBDUCTION_ZONE_MAX_LONGITUDE


def base_tsunami_risk(magnitude: float, depth_km: float) -> TsunamiRisk:
    """Risk from magnitude and depth alone; lower bounds are inclusive."""
    if magnitude >= 8.0:
        return TsunamiRisk.EXTREME
    if magnitude >= 7.5:
        return TsunamiRisk.HIGH if depth_km < 60 else TsunamiRisk.MODERATE
    if magnitude >= 7.0:
        return TsunamiRisk.MODERATE if depth_km < 50 else TsunamiRisk.LOW
    if magnitude >= 6.5 and depth_km < 30:
        return TsunamiRisk.LOW
    return TsunamiRisk.NONE


def classify_tsunami_risk(event: SeismicEvent) -> TsunamiRisk:
    """Base risk, escalated one level for subduction-zone epicentres."""
    risk = base_tsunami_risk(event.magnitude, event.depth_km)
    if is_subduction_zone(event.epicenter):
        risk = risk.escalated()
    return risk


def nearest_coastal_point(
    point: Coordinate,
    coastal_points: tuple[CoastalPoint, ...] = COASTAL_POINTS,
) -> tuple[CoastalPoint, float]:
    """Return the closest coastal reference point and its distance in km.

    Ties keep the earlier table entry.
    """
    if not coastal_points:
        raise ValueError("Cannot find nearest point in empty coastal table")

    best = coastal_points[0]
    best_km = distance_km(point, best.coordinate)
    for candidate in coastal_points[1:]:
        d = distance_km(point, candidate.coordinate)
        if d < best_km:
            best, best_km = candidate, d
    return best, best_km


def estimate_tsunami_risk(
    event: SeismicEvent,
    *,
    tsunami_speed_kmh: float = TSUNAMI_SPEED_KMH,
) -> TsunamiAssessment:
    """Classify tsunami risk for *event* and, if any, when it reaches the coast.

    Arrival is the great-circle distance from the epicentre to the nearest
    coastal reference point at a constant open-ocean speed, in minutes.
    """
    if not tsunami_speed_kmh > 0:
        raise InvalidInputError("tsunami_speed_kmh must be positive")

    risk = classify_tsunami_risk(event)
    if risk is TsunamiRisk.NONE:
        return TsunamiAssessment(risk=risk)

    point, coast_km = nearest_coastal_point(event.epicenter)
    return TsunamiAssessment(
        risk=risk,
        nearest_coastal_point=point,
        distance_to_coast_km=coast_km,
        estimated_arrival_minutes=coast_km / tsunami_speed_kmh * 60,
    )


def evacuation_instructions(
    tsunami: TsunamiAssessment,
    user_distance_to_coast_km: float,
    *,
    radius_km: float = COASTAL_EVACUATION_RADIUS_KM,
) -> list[str]:
    """Evacuation steps for a user near the coast during a tsunami threat."""
    user_distance_to_coast_km = require_non_negative(
        user_distance_to_coast_km, "user_distance_to_coast_km"
    )
    if tsunami.is_threat and user_distance_to_coast_km < radius_km:
        return list(EVACUATION_INSTRUCTIONS)
    return []
