"""Result of a pipeline call."""

from dataclasses import dataclass
from typing import Any, Generic, Iterator, TypeVar

T = TypeVar('T')


@dataclass(frozen=True)
class StepResult(Generic[T]):
    """Value of a pipeline call, or the error that stopped it.

    Unpacks as ``(value, error)``::

        value, err = pipeline("input")
    """

    value: T | None
    ok: bool = True
    error: BaseException | None = None

    @classmethod
    def success(cls, value: T) -> "StepResult[T]":
        """Create a successful result."""
        return cls(value=value, ok=True)

    @classmethod
    def fail(cls, error: BaseException) -> "StepResult[T]":
        """Create a failed result."""
        return cls(value=None, ok=False, error=error)

    def unwrap(self) -> T | None:
        """Return the value, raising the error if the call failed."""
        if not self.ok:
            raise self.error
        return self.value

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.error

    def __bool__(self) -> bool:
        return self.ok
