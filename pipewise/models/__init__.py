"""Data models for pipewise."""

from .result import StepResult
from .slot import Slot
from .exceptions import (
    PipewiseError,
    ConstructionError,
    PipelineRuntimeError,
    ArityError,
    StageTypeError,
    CoercionError,
    ConfigError,
)

__all__ = [
    # Values
    "StepResult",
    "Slot",
    # Exceptions
    "PipewiseError",
    "ConstructionError",
    "PipelineRuntimeError",
    "ArityError",
    "StageTypeError",
    "CoercionError",
    "ConfigError",
]
