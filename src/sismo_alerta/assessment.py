"""Per-event assessment: event + user location -> every estimate at once."""

from __future__ import annotations

import logging

from sismo_alerta.arrival import estimate_arrival
from sismo_alerta.config import SismoAlertaConfig
from sismo_alerta.geo import site_risk_for_location, soil_type_for_location
from sismo_alerta.intensity import estimate_intensity, intensity_color, intensity_description
from sismo_alerta.models import (
    AlertSeverity,
    ConstructionType,
    EventAssessment,
    SeismicEvent,
    SoilType,
    UserLocation,
)
from sismo_alerta.recommendations import recommendations_for
from sismo_alerta.regions import macro_zone_of, region_name
from sismo_alerta.tsunami import (
    estimate_tsunami_risk,
    evacuation_instructions,
    nearest_coastal_point,
)

logger = logging.getLogger(__name__)


def alert_severity(magnitude: float) -> AlertSeverity:
    """Headline severity of an event from its magnitude."""
    if magnitude >= 6:
        return AlertSeverity.MAJOR
    if magnitude >= 5:
        return AlertSeverity.STRONG
    if magnitude >= 4:
        return AlertSeverity.MODERATE
    return AlertSeverity.MINOR


def assess_event(
    event: SeismicEvent,
    location: UserLocation,
    soil_type: SoilType | None = None,
    construction_type: ConstructionType | None = None,
    config: SismoAlertaConfig | None = None,
) -> EventAssessment:
    """Run every estimator for *event* as experienced at *location*.

    Steps:
    1. Resolve the user's macro-zone and region name
    2. Estimate P/S arrival and alert lead time
    3. Estimate local intensity from the epicentral distance
    4. Build recommendations for the intensity and construction type
    5. Classify tsunami risk and, near the coast, evacuation steps

    When *soil_type* is None it is guessed from the user's longitude.
    """
    if config is None:
        config = SismoAlertaConfig()
    if soil_type is None:
        soil_type = soil_type_for_location(location.coordinate)
    if construction_type is None:
        construction_type = config.default_construction

    zone = macro_zone_of(location.region_code)

    arrival = estimate_arrival(
        event.epicenter,
        event.depth_km,
        location.coordinate,
        location.region_code,
        processing_delay_seconds=config.processing_delay_seconds,
    )
    intensity = estimate_intensity(
        event.magnitude,
        event.depth_km,
        arrival.distance_km,
        soil_type,
        location.region_code,
        min_distance_km=config.min_intensity_distance_km,
    )
    tsunami = estimate_tsunami_risk(event, tsunami_speed_kmh=config.tsunami_speed_kmh)
    _, user_coast_km = nearest_coastal_point(location.coordinate)

    logger.debug(
        "Event %s M%.1f: %.0f km from user, S-wave %.1fs, intensity %d, tsunami %s",
        event.event_id or "-",
        event.magnitude,
        arrival.distance_km,
        arrival.s_wave_seconds,
        intensity,
        tsunami.risk.value,
    )

    return EventAssessment(
        event=event,
        location=location,
        region_name=region_name(location.region_code),
        macro_zone=zone,
        soil_type=SoilType(soil_type),
        site_risk=site_risk_for_location(location.coordinate),
        construction_type=ConstructionType(construction_type),
        severity=alert_severity(event.magnitude),
        arrival=arrival,
        intensity=intensity,
        intensity_description=intensity_description(intensity),
        intensity_color=intensity_color(intensity),
        tsunami=tsunami,
        user_distance_to_coast_km=user_coast_km,
        recommendations=recommendations_for(intensity, construction_type),
        evacuation_instructions=evacuation_instructions(
            tsunami, user_coast_km, radius_km=config.coastal_evacuation_radius_km
        ),
    )


def assess_feed(
    events: list[SeismicEvent],
    location: UserLocation,
    soil_type: SoilType | None = None,
    construction_type: ConstructionType | None = None,
    config: SismoAlertaConfig | None = None,
) -> list[EventAssessment]:
    """Assess every event in *events* for one location, strongest shaking first."""
    if config is None:
        config = SismoAlertaConfig()
    logger.info("Assessing %d events for region %s", len(events), region_name(location.region_code))
    results = [
        assess_event(e, location, soil_type, construction_type, config) for e in events
    ]
    results.sort(key=lambda a: (a.intensity, a.event.magnitude), reverse=True)
    return results
