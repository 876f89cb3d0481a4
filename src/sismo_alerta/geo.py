"""Geographic utilities: Haversine distance, Andes crossing and site geology heuristics."""

from __future__ import annotations

import math

from sismo_alerta.models import Coordinate, SiteRisk, SoilType

EARTH_RADIUS_KM = 6371.0

# Longitude separation (degrees) beyond which a path is assumed to cross the Andes.
ANDES_CROSSING_LONGITUDE_DEG = 0.5
# Path-length multiplier applied when the Andes crossing heuristic fires.
ANDES_CROSSING_FACTOR = 1.15

# Static geology heuristic: coastal strip is sandy, the cordillera is rock,
# the central valley in between is clay.
COASTAL_SOIL_MAX_LONGITUDE = -71.5
CORDILLERA_SOIL_MIN_LONGITUDE = -70.2


def haversine(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate the great-circle distance in km between two points on Earth."""
    lat1, lon1, lat2, lon2 = map(math.radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1
    a = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def distance_km(a: Coordinate, b: Coordinate) -> float:
    """Great-circle distance in km between two coordinates."""
    return haversine(a.latitude, a.longitude, b.latitude, b.longitude)


def topographic_factor(epicenter: Coordinate, point: Coordinate) -> float:
    """Path-length multiplier for topographic obstruction between two points.

    The Andes run north-south, so a longitude separation above
    ``ANDES_CROSSING_LONGITUDE_DEG`` is taken as a range crossing. This is
    a coarse proxy rather than a terrain profile.
    """
    crosses_andes = abs(epicenter.longitude - point.longitude) > ANDES_CROSSING_LONGITUDE_DEG
    return ANDES_CROSSING_FACTOR if crosses_andes else 1.0


def soil_type_for_location(point: Coordinate) -> SoilType:
    """Guess the soil type at *point* from its longitude alone."""
    if point.longitude < COASTAL_SOIL_MAX_LONGITUDE:
        return SoilType.SANDY
    if point.longitude > CORDILLERA_SOIL_MIN_LONGITUDE:
        return SoilType.ROCK
    return SoilType.CLAY


def site_risk_for_location(point: Coordinate) -> SiteRisk:
    """Geological hazard level at *point*, from the same longitude bands as the soil guess."""
    if point.longitude < COASTAL_SOIL_MAX_LONGITUDE:
        return SiteRisk.HIGH
    if point.longitude > CORDILLERA_SOIL_MIN_LONGITUDE:
        return SiteRisk.LOW
    return SiteRisk.MEDIUM
