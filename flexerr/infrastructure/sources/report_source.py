"""Source adapter for reports of this library's own error types.

Absorbing a report keeps its detail as the new variant's source and hands
its trace to the absorbing type's tracer for extension. A trace is only
reused when the report is of the declared error type and both types share
a backend; otherwise the foreign trace is dropped and a fresh one captured.
"""

from dataclasses import dataclass
from typing import Any

from flexerr.domain.protocols import DetailProtocol, TracerProtocol
from flexerr.domain.report import ErrorReport
from flexerr.domain.value_objects import safe_str


def _dropped(event: str, value: ErrorReport[Any, Any], tracer: TracerProtocol) -> None:
    from flexerr.core.container import get_logger

    get_logger().warning(
        event,
        source_type=type(value).__name__,
        source_backend=value.tracer.name,
        target_backend=tracer.name,
    )


@dataclass(frozen=True, slots=True)
class ReportSource:
    """Absorb ErrorReport values.

    Attributes:
        error_type: Declared report type (None accepts any report).
    """

    error_type: type[ErrorReport[Any, Any]] | None = None

    def convert(self, value: Any, tracer: TracerProtocol) -> tuple[Any, Any | None]:
        if not isinstance(value, ErrorReport):
            return value, None
        if self.error_type is not None and not isinstance(value, self.error_type):
            _dropped("Dropped trace from an undeclared error type", value, tracer)
            return value.detail, None
        if value.tracer.name != tracer.name:
            _dropped("Dropped trace from a different tracer backend", value, tracer)
            return value.detail, None
        return value.detail, value.trace

    def message(self, detail: Any) -> str:
        if isinstance(detail, DetailProtocol):
            return detail.message()
        return safe_str(detail)

    def cause(self, detail: Any) -> DetailProtocol | None:
        if isinstance(detail, DetailProtocol):
            return detail
        return None
