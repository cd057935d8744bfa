"""Tagged results for callers that prefer values over exceptions.

`attempt` runs an operation and folds an `OperationError` into an `Outcome`
carrying the error kind and message. Any other exception is a bug in the
caller (or the library) and propagates unchanged.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, ParamSpec, TypeVar

from checkedops.errors import ErrorKind, OperationError

T = TypeVar("T")
P = ParamSpec("P")


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Either a successful value or the error that prevented it."""

    value: T | None = None
    error: OperationError | None = None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        """Wrap a successful result."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: OperationError) -> "Outcome[Any]":
        """Wrap a failed result."""
        return cls(error=error)

    @property
    def ok(self) -> bool:
        """True when the outcome holds a value."""
        return self.error is None

    @property
    def kind(self) -> ErrorKind | None:
        """The failure category, or ``None`` on success."""
        return self.error.kind if self.error is not None else None

    @property
    def message(self) -> str | None:
        """The failure message, or ``None`` on success."""
        return self.error.message if self.error is not None else None

    def unwrap(self) -> T:
        """Return the value, or raise the captured error.

        Raises:
            OperationError: The error this outcome was built from.
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]


def attempt(func: Callable[P, T], *args: P.args, **kwargs: P.kwargs) -> Outcome[T]:
    """Call *func* and capture an `OperationError` as a failed `Outcome`."""
    try:
        return Outcome.success(func(*args, **kwargs))
    except OperationError as e:
        return Outcome.failure(e)
