"""Pytest configuration and shared fixtures.

Provides:
1. One instance of each tracer backend
2. A counting tracer for asserting exactly-once trace capture
3. Container cache reset so settings read from the environment never leak
   between tests
"""

import pytest

from flexerr.core.config import get_settings
from flexerr.core.container import get_logger, get_tracer
from flexerr.domain.value_objects import SourceLocation, TraceContext
from flexerr.infrastructure.tracers import (
    BacktraceTracer,
    NullTracer,
    StringTrace,
    StringTracer,
)


class CountingTracer(StringTracer):
    """String tracer that records how often each capture path runs."""

    def __init__(self) -> None:
        self.new_calls = 0
        self.extend_calls = 0

    @property
    def captures(self) -> int:
        return self.new_calls + self.extend_calls

    def new_trace(self, context: TraceContext) -> StringTrace:
        self.new_calls += 1
        return super().new_trace(context)

    def extend_trace(self, existing: StringTrace, context: TraceContext) -> StringTrace:
        self.extend_calls += 1
        return super().extend_trace(existing, context)


@pytest.fixture(autouse=True)
def reset_container():
    """Clear cached settings, tracer and logger after each test."""
    yield
    get_settings.cache_clear()
    get_tracer.cache_clear()
    get_logger.cache_clear()


@pytest.fixture
def string_tracer() -> StringTracer:
    return StringTracer()


@pytest.fixture
def backtrace_tracer() -> BacktraceTracer:
    return BacktraceTracer(capture_frames=True, limit=32)


@pytest.fixture
def null_tracer() -> NullTracer:
    return NullTracer()


@pytest.fixture
def counting_tracer() -> CountingTracer:
    return CountingTracer()


@pytest.fixture
def location() -> SourceLocation:
    return SourceLocation(filename="app/io.py", lineno=42, function="load")
