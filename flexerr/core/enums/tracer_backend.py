"""Tracer backend identifiers.

Exactly one backend is bound to each generated error type. The process-wide
default is read once from FLEXERR_TRACER.

Backends:
- BACKTRACE: message chain, caller location and call-stack frames
- STRING: message chain only
- NULL: captures nothing
"""

from enum import Enum


class TracerBackend(str, Enum):
    """Tracer backend identifiers."""

    BACKTRACE = "backtrace"
    STRING = "string"
    NULL = "null"
