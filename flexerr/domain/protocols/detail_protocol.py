"""DetailProtocol definition.

A detail is the structured, variant-tagged payload of an error report,
independent of any trace. Generated detail variants satisfy this protocol;
hand-written detail classes may too, as long as they render a message and
expose their cause.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class DetailProtocol(Protocol):
    """Protocol for error details."""

    def message(self) -> str:
        """Render the human-readable message line for this variant."""
        ...

    def cause(self) -> DetailProtocol | None:
        """Return the wrapped detail, or None if this variant wraps nothing."""
        ...
