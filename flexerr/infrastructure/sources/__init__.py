"""Source adapters implementing SourceProtocol.

Usage:
    from flexerr.infrastructure.sources import DetailOnly, ExceptionSource, ReportSource
"""

from flexerr.infrastructure.sources.detail_only import DetailOnly
from flexerr.infrastructure.sources.exception_source import ExceptionSource
from flexerr.infrastructure.sources.report_source import ReportSource

__all__ = ["DetailOnly", "ExceptionSource", "ReportSource"]
