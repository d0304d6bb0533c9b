"""Tests for settings and property patches."""

import pytest
from pydantic import ValidationError

from seasurface.animation.patch import SurfacePatch
from seasurface.core.config import MaterialSettings, Settings, SurfaceSettings, get_settings


class TestSurfaceSettings:
    """Tests for surface configuration."""

    def test_defaults(self):
        """Defaults should describe the standard deep-blue surface."""
        cfg = SurfaceSettings()

        assert cfg.width == 1000
        assert cfg.height == 1000
        assert cfg.segments == 128
        assert cfg.surface_elevation == 70
        assert cfg.wave_amplitude == 0.8
        assert cfg.wave_speed == 1.2
        assert cfg.color == 0x006994
        assert cfg.opacity == 0.7
        assert cfg.wireframe is False
        assert cfg.vertex_count == 129**2

    def test_environment_override(self, monkeypatch):
        """SURFACE_ variables should override defaults."""
        monkeypatch.setenv("SURFACE_WAVE_AMPLITUDE", "2.0")
        monkeypatch.setenv("SURFACE_SEGMENTS", "32")

        cfg = SurfaceSettings()
        assert cfg.wave_amplitude == 2.0
        assert cfg.segments == 32

    def test_rejects_invalid_opacity(self):
        """Opacity outside [0, 1] should fail validation."""
        with pytest.raises(ValidationError):
            SurfaceSettings(opacity=1.5)

    def test_master_settings(self):
        """Master settings should aggregate subsystems."""
        settings = get_settings()

        assert isinstance(settings, Settings)
        assert settings.material.shininess == 100
        assert settings.material.specular == 0x222222

    def test_settings_fields(self):
        """Every settings field should be one the animator reads."""
        assert set(MaterialSettings.model_fields) == {"shininess", "specular", "double_sided"}
        assert set(Settings.model_fields) == {"surface", "material"}


class TestSurfacePatch:
    """Tests for partial property updates."""

    def test_empty_patch(self):
        """A patch without fields changes nothing."""
        patch = SurfacePatch()
        assert patch.is_empty()
        assert patch.changes() == {}

    def test_none_fields_are_absent(self):
        """Explicit None should be treated as absent."""
        patch = SurfacePatch(color=0x123456, opacity=None)
        assert patch.changes() == {"color": 0x123456}

    def test_negative_amplitude_allowed(self):
        """Negative amplitude is a valid phase inversion."""
        assert SurfacePatch(wave_amplitude=-0.8).changes() == {"wave_amplitude": -0.8}
        assert SurfaceSettings(wave_amplitude=-1.0).wave_amplitude == -1.0

    def test_zero_is_a_value(self):
        """Falsy values must still be applied."""
        patch = SurfacePatch(wave_amplitude=0.0, wireframe=False)
        assert patch.changes() == {"wave_amplitude": 0.0, "wireframe": False}

    @pytest.mark.parametrize(
        "fields",
        [
            {"opacity": -0.1},
            {"opacity": 1.1},
            {"color": 0x1000000},
            {"wave_speed": -1.0},
            {"shininess": 10},
        ],
    )
    def test_rejects_invalid_fields(self, fields):
        """Out-of-range or unknown fields should fail validation."""
        with pytest.raises(ValidationError):
            SurfacePatch(**fields)
