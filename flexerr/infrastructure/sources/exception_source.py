"""Source adapter for Python exceptions.

The absorbed exception itself becomes the variant's source detail; its
traceback and cause chain become the trace when the backend can represent
them.
"""

from dataclasses import dataclass
from typing import Any

from flexerr.domain.protocols import DetailProtocol, TracerProtocol
from flexerr.domain.value_objects import safe_str
from flexerr.infrastructure.tracers.chain import exception_message


@dataclass(frozen=True, slots=True)
class ExceptionSource:
    """Absorb exceptions of error_type.

    Attributes:
        error_type: Declared external exception type. Only its instances
            contribute a trace; any other value is absorbed without one.
    """

    error_type: type[BaseException] = Exception

    def convert(self, value: Any, tracer: TracerProtocol) -> tuple[Any, Any | None]:
        if isinstance(value, self.error_type):
            return value, tracer.trace_exception(value)
        return value, None

    def message(self, detail: Any) -> str:
        if isinstance(detail, BaseException):
            return exception_message(detail)
        return safe_str(detail)

    def cause(self, detail: Any) -> DetailProtocol | None:
        return None
