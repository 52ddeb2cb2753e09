"""
Result container for operations that report failure as a value.

Stores that sit between the API layer and the database return a Result
instead of raising, so every caller checks failure the same way:

    result = await store.add_item(user_id, event_id, ChecklistPhase.PRE, "Confirm venue")
    if not result.ok:
        logger.warning("add failed: %s", result.error.code)
        return
    item = result.value

Callers that prefer exceptions can call unwrap(), which raises the error.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from .exceptions import BoothdeskError

T = TypeVar("T")
E = TypeVar("E", bound=BoothdeskError)


@dataclass(frozen=True)
class Result(Generic[T, E]):
    """Outcome of an operation: either a value or an error, never both."""

    value: Optional[T] = None
    error: Optional[E] = None

    @classmethod
    def success(cls, value: T) -> "Result[T, E]":
        return cls(value=value)

    @classmethod
    def fail(cls, error: E) -> "Result[T, E]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.ok

    def unwrap(self) -> T:
        """Return the value, or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` on failure."""
        if self.error is not None:
            return default
        return self.value  # type: ignore[return-value]
