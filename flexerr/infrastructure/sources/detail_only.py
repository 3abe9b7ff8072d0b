"""Source adapter for plain values absorbed as details without a trace."""

from dataclasses import dataclass
from typing import Any

from flexerr.domain.protocols import DetailProtocol, TracerProtocol
from flexerr.domain.value_objects import safe_str


@dataclass(frozen=True, slots=True)
class DetailOnly:
    """Absorb a value as-is; the constructor always captures a fresh trace.

    Attributes:
        detail_type: Declared type of the absorbed value.
    """

    detail_type: type = object

    def convert(self, value: Any, tracer: TracerProtocol) -> tuple[Any, Any | None]:
        return value, None

    def message(self, detail: Any) -> str:
        if isinstance(detail, DetailProtocol):
            return detail.message()
        return safe_str(detail)

    def cause(self, detail: Any) -> DetailProtocol | None:
        if isinstance(detail, DetailProtocol):
            return detail
        return None
