"""String tracer backend.

Records the chain of messages only: no location, no frames, no banner.
Rendering lists the prior causes of a report; the report's own message is
already its first line.
"""

from dataclasses import dataclass

from flexerr.domain.value_objects import TraceContext
from flexerr.infrastructure.tracers.chain import (
    exception_chain,
    exception_message,
    render_causes,
)


@dataclass(frozen=True, slots=True)
class StringTrace:
    """Message chain, innermost first.

    Attributes:
        messages: Captured messages; the last one belongs to the newest report.
    """

    messages: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.messages

    def __str__(self) -> str:
        """Outermost first, joined like "outer: inner"."""
        return ": ".join(reversed(self.messages))


class StringTracer:
    """Tracer keeping messages only."""

    name = "string"

    def empty(self) -> StringTrace:
        return StringTrace()

    def new_trace(self, context: TraceContext) -> StringTrace:
        return StringTrace(messages=(context.message,))

    def extend_trace(self, existing: StringTrace, context: TraceContext) -> StringTrace:
        return StringTrace(messages=existing.messages + (context.message,))

    def trace_exception(self, error: BaseException) -> StringTrace | None:
        chain = exception_chain(error)
        if len(chain) < 2:
            return None
        return StringTrace(messages=tuple(exception_message(e) for e in chain))

    def render(self, trace: StringTrace) -> str:
        if not isinstance(trace, StringTrace):
            return ""
        return render_causes(trace.messages[:-1])
