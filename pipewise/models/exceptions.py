"""Exception hierarchy for pipewise.

Errors synthesized at call time are returned inside a StepResult rather than
raised, so callers see every failure through the same channel.
"""


class PipewiseError(Exception):
    """Base exception for all pipewise errors.

    All domain-specific exceptions inherit from this base class,
    enabling consistent error handling across the library.
    """

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.suggestion = suggestion

    def __str__(self) -> str:
        if self.suggestion:
            return f"{self.message} ({self.suggestion})"
        return self.message


class ConstructionError(PipewiseError):
    """A stage cannot be used to build a pipeline."""

    def __init__(
        self, message: str, position: int, suggestion: str | None = None
    ) -> None:
        super().__init__(message, suggestion)
        self.position = position


class PipelineRuntimeError(PipewiseError):
    """Base for errors the pipeline synthesizes while running a stage."""

    def __init__(
        self,
        message: str,
        position: int,
        stage: str,
        suggestion: str | None = None,
    ) -> None:
        super().__init__(message, suggestion)
        self.position = position
        self.stage = stage


class ArityError(PipelineRuntimeError):
    """Not enough resolvable inputs for a stage."""

    def __init__(self, position: int, stage: str, expected: int, available: int) -> None:
        super().__init__(
            f"Insufficient arguments for stage {position} ({stage}): "
            f"expected {expected}, got {available}",
            position,
            stage,
            suggestion="forward more outputs from the previous stage or pass more initial arguments",
        )
        self.expected = expected
        self.available = available


class StageTypeError(PipelineRuntimeError):
    """A forwarded value does not match the stage's declared parameter type."""

    def __init__(
        self,
        position: int,
        stage: str,
        parameter: str,
        expected: str,
        actual: str,
    ) -> None:
        super().__init__(
            f"Stage {position} ({stage}) expects {expected} for '{parameter}', got {actual}",
            position,
            stage,
        )
        self.parameter = parameter
        self.expected = expected
        self.actual = actual


class CoercionError(PipewiseError):
    """A value cannot be written into the requested target."""

    pass


class ConfigError(PipewiseError):
    """Settings are invalid."""

    pass
