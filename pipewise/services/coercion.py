"""Strict conversion of produced values into typed targets.

Convertibility follows pydantic's strict mode: a ``str`` is never parsed into
an ``int``, a ``bool`` is not an ``int``, while an ``int`` is accepted where a
``float`` is declared.
"""

import logging
from typing import Any

from pydantic import ConfigDict, TypeAdapter, ValidationError
from pydantic.errors import PydanticSchemaGenerationError, PydanticUserError

from ..models.exceptions import CoercionError
from ..models.slot import Slot, type_name

logger = logging.getLogger(__name__)

_ARBITRARY = ConfigDict(arbitrary_types_allowed=True)


def adapter_for(target_type: Any) -> TypeAdapter:
    """Build a TypeAdapter, falling back to isinstance checks for plain classes."""
    try:
        return TypeAdapter(target_type)
    except PydanticSchemaGenerationError:
        return TypeAdapter(target_type, config=_ARBITRARY)


def coerce(value: Any, target_type: Any) -> Any:
    """Convert value to target_type or raise CoercionError."""
    try:
        adapter = adapter_for(target_type)
    except PydanticUserError as e:
        raise CoercionError(f"Unsupported target type {type_name(target_type)}: {e}") from e

    try:
        return adapter.validate_python(value, strict=True)
    except ValidationError as e:
        raise CoercionError(
            f"Cannot convert value of type {type_name(type(value))} "
            f"to type {type_name(target_type)}"
        ) from e


def is_convertible(value: Any, target_type: Any) -> bool:
    """Return True if value converts to target_type."""
    try:
        coerce(value, target_type)
    except CoercionError:
        return False
    return True


def coerce_into(value: Any, target: Slot) -> None:
    """Convert value to the slot's declared type and write it.

    Raises:
        CoercionError: target is not a writable Slot, or value is not
            convertible to its type. The slot is left untouched.
    """
    if not isinstance(target, Slot) or target.readonly:
        raise CoercionError(
            "target must be a writable reference",
            suggestion="pass a Slot created without readonly=True",
        )

    converted = coerce(value, target.type)
    target.set(converted)
    logger.debug(f"Coerced {type_name(type(value))} into {type_name(target.type)} slot")
