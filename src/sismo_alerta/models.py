"""Data models for the seismic estimation core."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from sismo_alerta.validation import require_finite, require_non_negative


class MacroZone(str, Enum):
    """Coarse grouping of Chilean regions sharing wave and attenuation parameters."""

    NORTH = "norte"
    CENTRAL = "centro"
    SOUTH = "sur"
    AUSTRAL = "austral"


class SoilType(str, Enum):
    """Local soil category; each carries a fixed amplification multiplier."""

    ROCK = "roca"
    FIRM = "suelo_firme"
    SOFT = "suelo_blando"
    FILL = "relleno"
    SANDY = "arenoso"
    CLAY = "arcilloso"
    ALLUVIAL = "aluvial"
    VOLCANIC = "volcanico"


class ConstructionType(str, Enum):
    """Building construction category used for tailored safety advice."""

    CONCRETE = "hormigon"
    MASONRY = "albanileria"
    WOOD = "madera"
    ADOBE = "adobe"


class TsunamiRisk(str, Enum):
    """Tsunami risk level, ordered by severity (declaration order)."""

    NONE = "none"
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    EXTREME = "extreme"

    @property
    def severity(self) -> int:
        return _RISK_ORDER.index(self)

    def escalated(self) -> TsunamiRisk:
        """Return the next severity level; NONE and EXTREME are fixed points."""
        if self is TsunamiRisk.NONE:
            return self
        return _RISK_ORDER[min(self.severity + 1, len(_RISK_ORDER) - 1)]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, TsunamiRisk):
            return NotImplemented
        return self.severity < other.severity

    def __le__(self, other: object) -> bool:
        if not isinstance(other, TsunamiRisk):
            return NotImplemented
        return self.severity <= other.severity

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, TsunamiRisk):
            return NotImplemented
        return self.severity > other.severity

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, TsunamiRisk):
            return NotImplemented
        return self.severity >= other.severity


_RISK_ORDER: tuple[TsunamiRisk, ...] = tuple(TsunamiRisk)


class SiteRisk(str, Enum):
    """Coarse geological hazard level of a site."""

    HIGH = "alto"
    MEDIUM = "medio"
    LOW = "bajo"


class AlertSeverity(str, Enum):
    """Headline severity of an event, derived from magnitude alone."""

    MINOR = "minor"
    MODERATE = "moderate"
    STRONG = "strong"
    MAJOR = "major"


@dataclass(frozen=True)
class Coordinate:
    """A (latitude, longitude) pair in decimal degrees.

    Only finiteness is checked; out-of-range degrees are accepted.
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "latitude", require_finite(self.latitude, "latitude"))
        object.__setattr__(self, "longitude", require_finite(self.longitude, "longitude"))


@dataclass(frozen=True)
class SeismicEvent:
    """An earthquake as delivered by the event feed."""

    epicenter: Coordinate
    depth_km: float
    magnitude: float
    occurred_at: datetime
    event_id: str = ""
    reference: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "depth_km", require_non_negative(self.depth_km, "depth_km"))
        object.__setattr__(self, "magnitude", require_finite(self.magnitude, "magnitude"))


@dataclass(frozen=True)
class UserLocation:
    """A subscriber's position and administrative region code."""

    coordinate: Coordinate
    region_code: str = ""


@dataclass(frozen=True)
class ZoneParameters:
    """Wave velocities (km/s) and attenuation coefficients for one macro-zone."""

    p_wave_velocity_km_s: float
    s_wave_velocity_km_s: float
    attenuation_a: float
    attenuation_b: float
    attenuation_c: float


@dataclass(frozen=True)
class ArrivalTimeResult:
    """Estimated seismic wave arrival at a point, in seconds after origin time."""

    p_wave_seconds: float
    s_wave_seconds: float
    wave_difference_seconds: float
    alert_lead_seconds: float
    distance_km: float


@dataclass(frozen=True)
class CoastalPoint:
    """A named coastal locality used as a tsunami reference."""

    name: str
    coordinate: Coordinate


@dataclass(frozen=True)
class TsunamiAssessment:
    """Tsunami risk plus, when risk is not NONE, where and when it reaches land."""

    risk: TsunamiRisk
    nearest_coastal_point: CoastalPoint | None = None
    distance_to_coast_km: float | None = None
    estimated_arrival_minutes: float | None = None

    @property
    def is_threat(self) -> bool:
        return self.risk is not TsunamiRisk.NONE


@dataclass(frozen=True)
class EventAssessment:
    """Every estimate for one event as seen from one user location."""

    event: SeismicEvent
    location: UserLocation
    region_name: str
    macro_zone: MacroZone
    soil_type: SoilType
    site_risk: SiteRisk
    construction_type: ConstructionType
    severity: AlertSeverity
    arrival: ArrivalTimeResult
    intensity: int
    intensity_description: str
    intensity_color: str
    tsunami: TsunamiAssessment
    user_distance_to_coast_km: float
    recommendations: list[str] = field(default_factory=list)
    evacuation_instructions: list[str] = field(default_factory=list)
