"""Result types for railway-oriented programming.

Error reports are ordinary values. Functions that can fail return a Result
and the caller decides whether to return, wrap, render or convert the
report further.

Usage:
    def read_config(path: str) -> Result[dict, AppError]:
        try:
            return Success(value=load(path))
        except OSError as e:
            return Failure(error=AppError.io(source=e))

    match read_config("app.toml"):
        case Success(value=config):
            ...
        case Failure(error=report):
            print(report.render())
"""

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error (usually an ErrorReport) describing the failure.
    """

    error: E

    def unwrap(self) -> NoReturn:
        """Raise the error.

        Bridges a Result back into exception-based code at the edge of an
        application (CLI entry points, framework callbacks). Reports are
        raised through ErrorReport.into_exception(); exceptions as-is.

        Raises:
            ReportError: When the error is an ErrorReport.
            BaseException: When the error already is an exception.
        """
        if isinstance(self.error, BaseException):
            raise self.error
        raise self.error.into_exception()  # type: ignore[attr-defined]


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
