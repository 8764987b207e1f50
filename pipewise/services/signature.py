"""Stage introspection: arity, parameter types and failure slots.

Each stage is inspected once when the pipeline is built. The resulting
StageSpec answers everything the invoker needs at call time.
"""

import functools
import inspect
import logging
import sys
import types
from dataclasses import dataclass
from typing import Any, Callable, Union, get_args, get_origin

from pydantic import TypeAdapter, ValidationError
from pydantic.errors import PydanticUserError

from ..models.exceptions import ConstructionError, StageTypeError
from ..models.slot import type_name
from .coercion import adapter_for

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


@dataclass(frozen=True)
class StageParameter:
    """One positional parameter of a stage."""

    name: str
    annotation: Any
    has_default: bool
    adapter: TypeAdapter | None = None

    def check(self, value: Any, position: int, stage: str) -> None:
        """Raise StageTypeError if value does not match the annotation."""
        if self.adapter is None:
            return
        try:
            self.adapter.validate_python(value, strict=True)
        except ValidationError:
            raise StageTypeError(
                position,
                stage,
                self.name,
                expected=type_name(self.annotation),
                actual=type_name(type(value)),
            ) from None


@dataclass(frozen=True)
class StageSpec:
    """A stage and what its signature declares."""

    position: int
    name: str
    func: Callable
    parameters: tuple[StageParameter, ...]
    variadic: StageParameter | None
    failure_slots: frozenset[int]

    @property
    def arity(self) -> int:
        return len(self.parameters)

    @property
    def required(self) -> int:
        return sum(1 for p in self.parameters if not p.has_default)


def stage_name(func: Callable) -> str:
    """Readable name for a stage in error messages."""
    name = getattr(func, "__qualname__", None) or getattr(func, "__name__", None)
    if name:
        return name
    return type(func).__name__


def is_failure_type(annotation: Any) -> bool:
    """Return True for an exception class or an Optional/Union of them."""
    if isinstance(annotation, type) and get_origin(annotation) is None:
        return issubclass(annotation, BaseException)
    if get_origin(annotation) in (Union, types.UnionType):
        members = [a for a in get_args(annotation) if a is not type(None)]
        return bool(members) and all(is_failure_type(a) for a in members)
    return False


def failure_slots(return_annotation: Any) -> frozenset[int]:
    """Output positions declared as failure signals by the return annotation.

    ``-> Exception | None`` marks the single output; ``-> tuple[str, Exception | None]``
    marks the trailing element.
    """
    if return_annotation is inspect.Signature.empty:
        return frozenset()
    if get_origin(return_annotation) is tuple:
        args = get_args(return_annotation)
        if Ellipsis in args:
            return frozenset()
        return frozenset(i for i, a in enumerate(args) if is_failure_type(a))
    if is_failure_type(return_annotation):
        return frozenset({0})
    return frozenset()


def _checkable(annotation: Any) -> bool:
    if annotation is inspect.Parameter.empty or annotation is Any or annotation is object:
        return False
    # Forward references that could not be resolved stay as strings
    if isinstance(annotation, str):
        return False
    # Non-runtime protocols reject isinstance
    if getattr(annotation, "_is_protocol", False):
        return False
    return True


def _build_adapter(annotation: Any, name: str) -> TypeAdapter | None:
    if not _checkable(annotation):
        return None
    try:
        return adapter_for(annotation)
    except PydanticUserError as e:
        logger.debug(f"Not type checking parameter '{name}' ({type_name(annotation)}): {e}")
        return None


def _globals_of(func: Callable) -> dict:
    """Namespace string annotations of func are evaluated in."""
    while True:
        if isinstance(func, functools.partial):
            func = func.func
        elif inspect.ismethod(func):
            func = func.__func__
        else:
            break
    if not (inspect.isfunction(func) or isinstance(func, type)):
        func = getattr(type(func), "__call__", func)
    func = inspect.unwrap(func)
    if isinstance(func, type):
        return getattr(sys.modules.get(func.__module__), "__dict__", {})
    return getattr(func, "__globals__", {})


def _resolve(annotation: Any, namespace: dict) -> Any:
    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, namespace)
    except (NameError, AttributeError, SyntaxError, TypeError):
        # Left as a string, which disables checks for this annotation only
        return annotation


# Builtin classes such as int and float carry no signature
_SINGLE_ARGUMENT = inspect.Signature([inspect.Parameter("value", inspect.Parameter.POSITIONAL_ONLY)])


def _signature(func: Callable, position: int) -> inspect.Signature:
    try:
        sig = inspect.signature(func)
    except (TypeError, ValueError) as e:
        if isinstance(func, type):
            logger.debug(f"Stage {position} ({stage_name(func)}) has no signature, taking one argument")
            return _SINGLE_ARGUMENT
        raise ConstructionError(
            f"Cannot read the signature of stage {position} ({stage_name(func)}): {e}",
            position,
            suggestion="wrap it in a def or lambda",
        ) from e

    namespace = _globals_of(func)
    return sig.replace(
        parameters=[p.replace(annotation=_resolve(p.annotation, namespace)) for p in sig.parameters.values()],
        return_annotation=_resolve(sig.return_annotation, namespace),
    )


def inspect_stage(position: int, func: Any, check_types: bool = True) -> StageSpec:
    """Inspect a stage once, at build time.

    Raises:
        ConstructionError: func is not callable, has no readable signature
            (a class without one is taken to accept a single argument),
            or requires keyword-only arguments.
    """
    if not callable(func):
        raise ConstructionError(
            f"Stage {position} is not callable: {func!r}",
            position,
        )

    name = stage_name(func)
    sig = _signature(func, position)

    parameters = []
    variadic = None
    for param in sig.parameters.values():
        adapter = _build_adapter(param.annotation, param.name) if check_types else None
        if param.kind in _POSITIONAL:
            parameters.append(
                StageParameter(
                    name=param.name,
                    annotation=param.annotation,
                    has_default=param.default is not inspect.Parameter.empty,
                    adapter=adapter,
                )
            )
        elif param.kind is inspect.Parameter.VAR_POSITIONAL:
            variadic = StageParameter(
                name=param.name,
                annotation=param.annotation,
                has_default=True,
                adapter=adapter,
            )
        elif param.kind is inspect.Parameter.KEYWORD_ONLY and param.default is inspect.Parameter.empty:
            raise ConstructionError(
                f"Stage {position} ({name}) requires keyword-only argument '{param.name}'",
                position,
                suggestion="bind it with functools.partial",
            )

    spec = StageSpec(
        position=position,
        name=name,
        func=func,
        parameters=tuple(parameters),
        variadic=variadic,
        failure_slots=failure_slots(sig.return_annotation),
    )
    logger.debug(f"Stage {position} ({name}): arity {spec.arity}, failure slots {sorted(spec.failure_slots)}")
    return spec
