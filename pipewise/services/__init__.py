"""Services for pipewise."""

from pipewise.services.pipeline import Pipeline, build, materialize
from pipewise.services.config import PipelineSettings
from pipewise.services.coercion import coerce, coerce_into, is_convertible
from pipewise.services.stages import filter_stage, map_stage

__all__ = [
    "Pipeline",
    "build",
    "materialize",
    "PipelineSettings",
    "coerce",
    "coerce_into",
    "is_convertible",
    "filter_stage",
    "map_stage",
]
