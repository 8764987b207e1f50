"""Pipeline composition for heterogeneous, fallible stages.

Each stage receives the previous stage's outputs as positional arguments.
Missing inputs are filled by position from the pipeline's initial arguments.
The first failure output (an exception instance) stops the call::

    def validate(code: str) -> tuple[str, Exception | None]:
        if len(code) != 11:
            return "", ValueError("code must have 11 digits")
        return code, None

    pipe = build(validate, format_code)
    value, err = pipe("12345678901")
"""

import logging
from typing import Any, Callable, Iterator, Sequence

from ..models.exceptions import ArityError, PipelineRuntimeError
from ..models.result import StepResult
from .config import PipelineSettings
from .signature import StageSpec, inspect_stage

logger = logging.getLogger(__name__)


def unpack_outputs(returned: Any) -> tuple:
    """Split a stage's return value into its ordered outputs.

    A plain tuple is a multi-output return, None is no output, anything
    else (including tuple subclasses such as named tuples) is one output.
    """
    if returned is None:
        return ()
    if type(returned) is tuple:
        return returned
    return (returned,)


def materialize(final_args: Sequence[Any]) -> StepResult:
    """Collapse the last stage's outputs into the pipeline's value.

    One output is returned as is; zero outputs give ``()``; several give
    the full tuple.
    """
    if len(final_args) == 1:
        return StepResult.success(final_args[0])
    return StepResult.success(tuple(final_args))


class Pipeline:
    """An ordered, immutable chain of stages."""

    def __init__(
        self,
        stages: Sequence[Callable],
        settings: PipelineSettings | None = None,
    ) -> None:
        self._settings = settings or PipelineSettings()
        self._stages = tuple(
            inspect_stage(position, stage, check_types=self._settings.check_types)
            for position, stage in enumerate(stages)
        )
        logger.debug(f"Built pipeline with {len(self._stages)} stages")

    @property
    def stages(self) -> tuple[StageSpec, ...]:
        return self._stages

    @property
    def settings(self) -> PipelineSettings:
        return self._settings

    def __len__(self) -> int:
        return len(self._stages)

    def __iter__(self) -> Iterator[StageSpec]:
        return iter(self._stages)

    def __repr__(self) -> str:
        names = " -> ".join(spec.name for spec in self._stages)
        return f"Pipeline({names})"

    def __call__(self, *args: Any) -> StepResult:
        return self.invoke(*args)

    def invoke(self, *initial_args: Any) -> StepResult:
        """Run every stage in order.

        Returns:
            StepResult with the materialized value, or the first failure.
            Stage failures are returned as the stage produced them.
        """
        current: tuple = initial_args
        for spec in self._stages:
            try:
                inputs = self._resolve_inputs(spec, current, initial_args)
            except PipelineRuntimeError as e:
                logger.debug(f"Pipeline stopped before stage {spec.position}: {e}")
                return StepResult.fail(e)

            try:
                returned = spec.func(*inputs)
            except Exception as e:
                if not self._settings.capture_exceptions:
                    raise
                logger.debug(f"Stage {spec.position} ({spec.name}) raised {type(e).__name__}: {e}")
                return StepResult.fail(e)

            # A nested pipeline reports through its own StepResult
            if isinstance(returned, StepResult):
                if not returned.ok:
                    logger.debug(f"Stage {spec.position} ({spec.name}) failed: {returned.error}")
                    return StepResult.fail(returned.error)
                returned = returned.value

            forwarded = []
            for index, output in enumerate(unpack_outputs(returned)):
                if isinstance(output, BaseException):
                    logger.debug(f"Stage {spec.position} ({spec.name}) failed: {output}")
                    return StepResult.fail(output)
                if output is None and index in spec.failure_slots:
                    continue
                forwarded.append(output)
            current = tuple(forwarded)

        return materialize(current)

    def _resolve_inputs(self, spec: StageSpec, current: tuple, initial: tuple) -> list:
        """Fill the stage's positional parameters from the argument pool."""
        inputs = []
        for j, param in enumerate(spec.parameters):
            if j < len(current):
                value = current[j]
            elif self._settings.fallback_to_initial and j < len(initial):
                value = initial[j]
            elif param.has_default:
                break
            else:
                raise ArityError(
                    spec.position,
                    spec.name,
                    expected=spec.required,
                    available=max(len(current), len(initial) if self._settings.fallback_to_initial else 0),
                )
            param.check(value, spec.position, spec.name)
            inputs.append(value)

        if spec.variadic is not None and len(inputs) == spec.arity:
            for value in current[spec.arity:]:
                spec.variadic.check(value, spec.position, spec.name)
                inputs.append(value)

        return inputs


def build(*stages: Callable, settings: PipelineSettings | None = None) -> Pipeline:
    """Compose stages into a pipeline.

    A Pipeline is itself a valid stage; its failure stops the outer call.
    Classes whose signature cannot be read (``int``, ``float``) take one
    argument. Other callables without a readable signature are rejected.

    Raises:
        ConstructionError: a stage is not callable, has no readable
            signature, or cannot be fed positionally. Raised here, never at
            call time.
    """
    return Pipeline(stages, settings=settings)
