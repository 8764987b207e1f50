"""Shared test fixtures for pipewise."""

import pytest

from pipewise.services.config import PipelineSettings


@pytest.fixture
def unchecked_settings() -> PipelineSettings:
    """Settings with parameter type checks disabled."""
    return PipelineSettings(check_types=False)


@pytest.fixture
def raising_settings() -> PipelineSettings:
    """Settings that let stage exceptions propagate."""
    return PipelineSettings(capture_exceptions=False)
