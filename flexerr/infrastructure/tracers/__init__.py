"""Tracer backends implementing TracerProtocol.

Usage:
    from flexerr.infrastructure.tracers import BacktraceTracer, StringTracer
"""

from flexerr.infrastructure.tracers.backtrace_tracer import (
    BACKTRACE_BANNER,
    BacktraceTrace,
    BacktraceTracer,
    Frame,
    TraceEntry,
)
from flexerr.infrastructure.tracers.null_tracer import NullTrace, NullTracer
from flexerr.infrastructure.tracers.string_tracer import StringTrace, StringTracer

__all__ = [
    "BACKTRACE_BANNER",
    "BacktraceTrace",
    "BacktraceTracer",
    "Frame",
    "NullTrace",
    "NullTracer",
    "StringTrace",
    "StringTracer",
    "TraceEntry",
]
