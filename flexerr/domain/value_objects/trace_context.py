"""Trace context value object.

Everything a tracer backend receives when it captures or extends a trace.
"""

from dataclasses import dataclass

from flexerr.domain.value_objects.source_location import SourceLocation


@dataclass(frozen=True, slots=True)
class TraceContext:
    """Input to TracerProtocol.new_trace / extend_trace.

    Attributes:
        message: Rendered message of the detail being traced.
        location: Where the report is being constructed, if known.
    """

    message: str
    location: SourceLocation | None = None
