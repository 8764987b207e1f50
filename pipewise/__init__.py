"""pipewise: compose fallible, heterogeneously-typed callables into one pipeline."""

from pipewise.models import (
    ArityError,
    CoercionError,
    ConfigError,
    ConstructionError,
    PipelineRuntimeError,
    PipewiseError,
    Slot,
    StageTypeError,
    StepResult,
)
from pipewise.services import (
    Pipeline,
    PipelineSettings,
    build,
    coerce,
    coerce_into,
    filter_stage,
    is_convertible,
    map_stage,
    materialize,
)

__all__ = [
    # Composition
    "build",
    "Pipeline",
    "PipelineSettings",
    "StepResult",
    "materialize",
    # Collection stages
    "filter_stage",
    "map_stage",
    # Coercion
    "Slot",
    "coerce",
    "coerce_into",
    "is_convertible",
    # Exceptions
    "PipewiseError",
    "ConstructionError",
    "PipelineRuntimeError",
    "ArityError",
    "StageTypeError",
    "CoercionError",
    "ConfigError",
]
