"""Tests for the settings model."""

import pytest
from pydantic import ValidationError

from sismo_alerta.config import SismoAlertaConfig
from sismo_alerta.models import ConstructionType


class TestSismoAlertaConfig:
    def test_defaults_match_module_constants(self):
        config = SismoAlertaConfig()
        assert config.processing_delay_seconds == 10.0
        assert config.tsunami_speed_kmh == 800.0
        assert config.min_intensity_distance_km == 0.1
        assert config.coastal_evacuation_radius_km == 10.0
        assert config.default_construction is ConstructionType.CONCRETE
        assert config.output_format == "json"

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("SISMO_ALERTA_PROCESSING_DELAY_SECONDS", "4.5")
        monkeypatch.setenv("SISMO_ALERTA_DEFAULT_CONSTRUCTION", "adobe")
        config = SismoAlertaConfig()
        assert config.processing_delay_seconds == 4.5
        assert config.default_construction is ConstructionType.ADOBE

    def test_negative_delay_rejected(self):
        with pytest.raises(ValidationError):
            SismoAlertaConfig(processing_delay_seconds=-1.0)

    def test_zero_speed_rejected(self):
        with pytest.raises(ValidationError):
            SismoAlertaConfig(tsunami_speed_kmh=0.0)

    def test_unknown_format_rejected(self):
        with pytest.raises(ValidationError):
            SismoAlertaConfig(output_format="pdf")
