"""Configuration model for the CLI and HTTP API."""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

from sismo_alerta.arrival import PROCESSING_DELAY_SECONDS
from sismo_alerta.intensity import MIN_INTENSITY_DISTANCE_KM
from sismo_alerta.models import ConstructionType
from sismo_alerta.tsunami import COASTAL_EVACUATION_RADIUS_KM, TSUNAMI_SPEED_KMH

OutputFormat = Literal["json", "markdown"]


class SismoAlertaConfig(BaseSettings):
    """Recalibratable constants for the estimators.

    Values can be set via constructor arguments, environment variables
    prefixed with SISMO_ALERTA_, or defaults. The defaults are the
    compiled-in module constants; the estimators themselves never read
    the environment.
    """

    model_config = {"env_prefix": "SISMO_ALERTA_"}

    processing_delay_seconds: float = Field(
        default=PROCESSING_DELAY_SECONDS,
        ge=0.0,
        description="Detection-to-broadcast latency subtracted from S-wave arrival.",
    )
    tsunami_speed_kmh: float = Field(
        default=TSUNAMI_SPEED_KMH, gt=0.0, description="Open-ocean tsunami speed."
    )
    min_intensity_distance_km: float = Field(
        default=MIN_INTENSITY_DISTANCE_KM,
        gt=0.0,
        description="Distance floor for the attenuation logarithm.",
    )
    coastal_evacuation_radius_km: float = Field(
        default=COASTAL_EVACUATION_RADIUS_KM,
        gt=0.0,
        description="Users closer than this to the coast get evacuation steps.",
    )
    default_construction: ConstructionType = Field(
        default=ConstructionType.CONCRETE,
        description="Construction type assumed when none is given.",
    )
    output_format: OutputFormat = Field(
        default="json", description="Export format: json or markdown."
    )
