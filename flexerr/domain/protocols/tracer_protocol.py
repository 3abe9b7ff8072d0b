"""TracerProtocol definition.

A tracer backend produces, extends and renders traces. Traces are opaque to
everything except the backend that produced them. Backends differ in
fidelity (full stack capture, message chain, nothing) but share this
interface; swapping the backend changes only what render() returns.

Contract:
    - new_trace/extend_trace never fail and never suspend.
    - Every backend has an empty trace that is a valid value, not None.
    - A trace is only ever handed back to the backend that produced it.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from flexerr.domain.value_objects import TraceContext


@runtime_checkable
class TracerProtocol(Protocol):
    """Protocol for tracer backends."""

    @property
    def name(self) -> str:
        """Backend identifier (e.g. "backtrace", "string")."""
        ...

    def empty(self) -> Any:
        """Return the empty trace for this backend."""
        ...

    def new_trace(self, context: TraceContext) -> Any:
        """Capture a fresh trace at an error's raise site.

        Args:
            context: Message and source location of the new report.

        Returns:
            Backend-specific trace.
        """
        ...

    def extend_trace(self, existing: Any, context: TraceContext) -> Any:
        """Wrap an existing trace with one more cause entry.

        Args:
            existing: Trace previously produced by this backend.
            context: Message and source location of the wrapping report.

        Returns:
            New trace; existing is left unchanged.
        """
        ...

    def trace_exception(self, error: BaseException) -> Any | None:
        """Build a trace from a Python exception's own trace information.

        Args:
            error: Exception being absorbed.

        Returns:
            Trace, or None when the exception carries nothing this backend
            can represent beyond its message.
        """
        ...

    def render(self, trace: Any) -> str:
        """Render a trace as text ("" when there is nothing to show)."""
        ...
