"""Domain protocols (ports) package.

Capability interfaces that decouple detail, tracer and source concerns.
Infrastructure adapters implement these protocols without inheritance.

Usage:
    from flexerr.domain.protocols import SourceProtocol, TracerProtocol
"""

from flexerr.domain.protocols.detail_protocol import DetailProtocol
from flexerr.domain.protocols.logger_protocol import LoggerProtocol
from flexerr.domain.protocols.source_protocol import SourceProtocol
from flexerr.domain.protocols.tracer_protocol import TracerProtocol

__all__ = [
    "DetailProtocol",
    "LoggerProtocol",
    "SourceProtocol",
    "TracerProtocol",
]
