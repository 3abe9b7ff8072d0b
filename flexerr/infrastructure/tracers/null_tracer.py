"""Null tracer backend: captures nothing, renders nothing."""

from dataclasses import dataclass

from flexerr.domain.value_objects import TraceContext


@dataclass(frozen=True, slots=True)
class NullTrace:
    """The only trace the null backend produces."""

    @property
    def is_empty(self) -> bool:
        return True


_EMPTY = NullTrace()


class NullTracer:
    """Tracer for builds that opt out of trace capture."""

    name = "null"

    def empty(self) -> NullTrace:
        return _EMPTY

    def new_trace(self, context: TraceContext) -> NullTrace:
        return _EMPTY

    def extend_trace(self, existing: NullTrace, context: TraceContext) -> NullTrace:
        return _EMPTY

    def trace_exception(self, error: BaseException) -> NullTrace | None:
        return None

    def render(self, trace: NullTrace) -> str:
        return ""
