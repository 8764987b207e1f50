"""Settings for pipeline behavior.

Settings live on the Pipeline built from them; there is no global or
file-backed configuration.
"""

import dataclasses
from dataclasses import dataclass

from ..models.exceptions import ConfigError


@dataclass(frozen=True)
class PipelineSettings:
    """Switches for optional pipeline behavior."""

    # Check forwarded values against stage parameter annotations
    check_types: bool = True
    # Treat an exception raised by a stage as its failure output
    capture_exceptions: bool = True
    # Fill missing stage inputs from the pipeline's initial arguments
    fallback_to_initial: bool = True

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> "PipelineSettings":
        """Build settings from a plain dict, rejecting unknown or non-bool keys."""
        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(
                f"Unknown pipeline settings: {', '.join(unknown)}",
                suggestion=f"valid keys are {', '.join(sorted(known))}",
            )
        for key, value in data.items():
            if not isinstance(value, bool):
                raise ConfigError(f"Setting '{key}' must be a bool, got {type(value).__name__}")
        return cls(**data)

    def merge_with(self, override: dict) -> "PipelineSettings":
        """Return new settings with override values taking precedence."""
        return PipelineSettings.from_dict({**self.to_dict(), **override})
