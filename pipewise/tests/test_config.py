"""Tests for pipeline settings."""

import pytest

from pipewise.models.exceptions import ConfigError
from pipewise.services.config import PipelineSettings


class TestPipelineSettings:
    """Tests for PipelineSettings."""

    def test_defaults(self):
        settings = PipelineSettings()
        assert settings.check_types is True
        assert settings.capture_exceptions is True
        assert settings.fallback_to_initial is True

    def test_to_dict(self):
        settings = PipelineSettings(check_types=False)
        assert settings.to_dict() == {
            "check_types": False,
            "capture_exceptions": True,
            "fallback_to_initial": True,
        }

    def test_from_dict_empty(self):
        """Empty dict produces default settings."""
        assert PipelineSettings.from_dict({}) == PipelineSettings()

    def test_from_dict_with_values(self):
        settings = PipelineSettings.from_dict({"fallback_to_initial": False})
        assert settings.fallback_to_initial is False
        assert settings.check_types is True

    def test_from_dict_rejects_unknown_keys(self):
        with pytest.raises(ConfigError) as exc_info:
            PipelineSettings.from_dict({"retries": True})
        assert "retries" in str(exc_info.value)
        assert "check_types" in str(exc_info.value)

    def test_from_dict_rejects_non_bool(self):
        with pytest.raises(ConfigError, match="must be a bool"):
            PipelineSettings.from_dict({"check_types": "yes"})

    def test_merge_with_override(self):
        """Override values take precedence."""
        base = PipelineSettings(check_types=False)
        merged = base.merge_with({"capture_exceptions": False})
        assert merged.check_types is False
        assert merged.capture_exceptions is False
        assert base.capture_exceptions is True

    def test_settings_are_immutable(self):
        settings = PipelineSettings()
        with pytest.raises(AttributeError):
            settings.check_types = False
