"""Dependency container (composition root).

Process-scoped singletons for the library's collaborators:
- Tracer backend (backtrace / string / null), chosen from FLEXERR_TRACER
- Logger (structlog console adapter)

Both are resolved once and cached. Error types bind their tracer when they
are defined, so changing the backend means redefining those types; nothing
here is swapped mid-run.

Usage:
    from flexerr.core.container import get_logger, get_tracer

    tracer = get_tracer()
    logger = get_logger()
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from flexerr.core.config import Settings, get_settings
from flexerr.core.enums import TracerBackend

if TYPE_CHECKING:
    from flexerr.domain.protocols import LoggerProtocol, TracerProtocol


def build_tracer(
    backend: TracerBackend | str, *, settings: Settings | None = None
) -> "TracerProtocol":
    """Create a tracer adapter for a backend.

    Args:
        backend: Backend identifier (enum or its string value).
        settings: Settings supplying capture options (defaults to cached).

    Returns:
        Tracer implementing TracerProtocol.

    Raises:
        ValueError: If backend is not a known TracerBackend value.
    """
    backend = TracerBackend(backend)
    settings = settings or get_settings()

    if backend == TracerBackend.BACKTRACE:
        from flexerr.infrastructure.tracers.backtrace_tracer import BacktraceTracer

        return BacktraceTracer(
            capture_frames=settings.capture_backtrace,
            limit=settings.backtrace_limit,
        )
    if backend == TracerBackend.STRING:
        from flexerr.infrastructure.tracers.string_tracer import StringTracer

        return StringTracer()

    from flexerr.infrastructure.tracers.null_tracer import NullTracer

    return NullTracer()


@lru_cache()
def get_tracer() -> "TracerProtocol":
    """Return the process-wide default tracer singleton.

    Bound to every error type defined without an explicit tracer.

    Returns:
        TracerProtocol: Tracer selected by settings.tracer.
    """
    return build_tracer(get_settings().tracer)


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the library logger singleton.

    Adapter selection:
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production or FLEXERR_LOG_JSON: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from flexerr.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(use_json=settings.use_json_logs, level=settings.log_level)
