"""Writable target for coerced values."""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar('T')

_UNSET = object()


@dataclass
class Slot(Generic[T]):
    """A caller-owned reference with a declared type.

    ``coerce_into`` writes through it::

        target = Slot(str)
        coerce_into(result, target)
        target.value
    """

    type: Any
    readonly: bool = False
    _value: Any = field(default=_UNSET, repr=False)

    @property
    def is_set(self) -> bool:
        """Return True once a value has been written."""
        return self._value is not _UNSET

    @property
    def value(self) -> T:
        if not self.is_set:
            raise LookupError(f"Slot of type {type_name(self.type)} has no value")
        return self._value

    def set(self, value: T) -> None:
        """Write a value into the slot."""
        if self.readonly:
            raise AttributeError("Slot is read-only")
        self._value = value


def type_name(tp: Any) -> str:
    """Readable name for a class or typing construct."""
    if isinstance(tp, type) and not hasattr(tp, "__origin__"):
        return tp.__qualname__
    return repr(tp).replace("typing.", "")
