"""Error report: an immutable pair of detail and trace.

ErrorReport is the application-visible error value. It is created at the
raise site, returned by value (usually inside Failure), and consumed by
rendering or by inspecting its detail. It is never mutated.

Architecture:
- Does NOT inherit from Exception (returned in Result, not raised)
- Frozen dataclass; equality is value-based over (detail, trace)
- Carries the tracer that produced its trace, so it can render itself
- Generated error types (define_error) are subclasses adding constructors

Usage:
    from flexerr import ErrorReport

    report = AppError.io(source=exc)
    report.detail            # AppErrorDetail.Io(...)
    report.render()          # message line + backend trace text
    raise report.into_exception()
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from flexerr.core.errors import ReportError
from flexerr.domain.protocols import DetailProtocol, SourceProtocol, TracerProtocol
from flexerr.domain.value_objects import SourceLocation, TraceContext, safe_str

D = TypeVar("D")
D2 = TypeVar("D2")
T = TypeVar("T")

R = TypeVar("R", bound="ErrorReport[Any, Any]")


def _message_of(detail: Any) -> str:
    if isinstance(detail, DetailProtocol):
        return detail.message()
    return safe_str(detail)


def _cause_of(detail: Any) -> Any:
    if isinstance(detail, DetailProtocol):
        return detail.cause()
    return None


@dataclass(frozen=True, slots=True)
class ErrorReport(Generic[D, T]):
    """Immutable pairing of an error detail and its trace.

    Attributes:
        detail: Structured, variant-tagged error payload.
        trace: Backend-opaque causal context.
        tracer: Backend that produced trace (not part of equality).
    """

    detail: D
    trace: T
    tracer: TracerProtocol = field(default=None, compare=False, repr=False)  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.tracer is None:
            from flexerr.core.container import get_tracer

            # Use object.__setattr__ because dataclass is frozen
            object.__setattr__(self, "tracer", get_tracer())
        if self.trace is None:
            object.__setattr__(self, "trace", self.tracer.empty())

    @classmethod
    def capture(
        cls: type[R],
        detail: Any,
        *,
        tracer: TracerProtocol,
        location: SourceLocation | None = None,
    ) -> R:
        """Build a report for a freshly raised detail.

        Args:
            detail: Detail of the new report.
            tracer: Backend capturing the trace.
            location: Where the report is being constructed.

        Returns:
            Report whose trace is one new_trace capture.
        """
        context = TraceContext(message=_message_of(detail), location=location)
        return cls(detail=detail, trace=tracer.new_trace(context), tracer=tracer)

    @classmethod
    def trace_from(
        cls: type[R],
        source: SourceProtocol,
        value: Any,
        build: Callable[[Any], Any],
        *,
        tracer: TracerProtocol,
        location: SourceLocation | None = None,
    ) -> R:
        """Build a report by absorbing an external error.

        The source splits value into (detail, trace). The absorbed detail is
        wrapped by build(); the trace is extended when the source supplied
        one and freshly captured otherwise. Exactly one capture happens.

        Args:
            source: Source adapter for the external error type.
            value: External error value.
            build: Turns the absorbed detail into this report's detail.
            tracer: Backend of this report's error type.
            location: Where the report is being constructed.

        Returns:
            Report wrapping the absorbed error.
        """
        source_detail, source_trace = source.convert(value, tracer)
        detail = build(source_detail)
        context = TraceContext(message=_message_of(detail), location=location)
        if source_trace is None:
            trace = tracer.new_trace(context)
        else:
            trace = tracer.extend_trace(source_trace, context)
        return cls(detail=detail, trace=trace, tracer=tracer)

    def message(self) -> str:
        """Return the detail's rendered message line."""
        return _message_of(self.detail)

    def render(self) -> str:
        """Render the message line followed by the backend's trace text.

        A trace the tracer cannot render (e.g. one from another backend)
        renders as the message line alone.
        """
        message = self.message()
        try:
            trace_text = self.tracer.render(self.trace)
        except Exception as e:
            from flexerr.core.container import get_logger

            get_logger().debug(
                "Trace rendered empty",
                report_type=type(self).__name__,
                tracer=self.tracer.name,
                error_type=type(e).__name__,
            )
            return message
        if not trace_text:
            return message
        return f"{message}\n{trace_text}"

    def map_detail(self, f: Callable[[D], D2]) -> "ErrorReport[D2, T]":
        """Rebuild the report with a transformed detail, keeping the trace.

        Args:
            f: Detail transformation.

        Returns:
            ErrorReport: New generic report; self is unchanged.
        """
        return ErrorReport(detail=f(self.detail), trace=self.trace, tracer=self.tracer)

    def causes(self) -> tuple[Any, ...]:
        """Return the detail cause chain, outermost first (self.detail included)."""
        chain: list[Any] = []
        detail: Any = self.detail
        while detail is not None:
            chain.append(detail)
            detail = _cause_of(detail)
        return tuple(chain)

    def into_exception(self) -> ReportError:
        """Convert into a raisable exception with a native __cause__ chain.

        Each wrapped detail becomes a ReportError linked through __cause__;
        an absorbed Python exception at the bottom of the chain becomes the
        innermost __cause__ itself.

        Returns:
            ReportError: Exception carrying this report.
        """
        error = ReportError(self)
        current = error
        chain = self.causes()
        for inner in chain[1:]:
            link = ReportError(
                ErrorReport(detail=inner, trace=self.tracer.empty(), tracer=self.tracer)
            )
            current.__cause__ = link
            current = link
        origin = getattr(chain[-1], "source_error", None)
        if callable(origin):
            source_error = origin()
            if source_error is not None:
                current.__cause__ = source_error
        return error

    def __str__(self) -> str:
        return self.message()
