"""SourceProtocol definition.

A source absorbs an externally defined error value (a Python exception,
a report of another error type, a plain value) into a (detail, trace) pair
at a call boundary. Absorption never fails: a source that cannot extract a
trace returns None and the generated constructor captures a fresh one.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from flexerr.domain.protocols.detail_protocol import DetailProtocol
    from flexerr.domain.protocols.tracer_protocol import TracerProtocol


@runtime_checkable
class SourceProtocol(Protocol):
    """Protocol for error sources."""

    def convert(self, value: Any, tracer: TracerProtocol) -> tuple[Any, Any | None]:
        """Split an external error into detail and optional trace.

        Args:
            value: External error value.
            tracer: Backend of the absorbing error type.

        Returns:
            (detail, trace) where trace is None if the value offers nothing
            the backend can use.
        """
        ...

    def message(self, detail: Any) -> str:
        """Render the absorbed detail as a message fragment."""
        ...

    def cause(self, detail: Any) -> DetailProtocol | None:
        """Return the absorbed detail when it is itself an error detail."""
        ...
