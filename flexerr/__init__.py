"""flexerr: composable error reports with pluggable trace backends.

Define structured error types declaratively, construct immutable reports
pairing a detail payload with a backend-captured trace, absorb foreign
errors at call boundaries, and render the result as text.

Usage:
    from flexerr import ExceptionSource, Failure, Success, define_error

    AppError = define_error(
        "AppError",
        {
            "Config": {"fields": {"key": str}, "template": "missing config key {key!r}"},
            "Io": {"source": ExceptionSource(OSError)},
        },
    )

    def load(path):
        try:
            return Success(value=open(path).read())
        except OSError as e:
            return Failure(error=AppError.io(e))
"""

from flexerr.application.generator import (
    SELF,
    ErrorSpec,
    FieldSpec,
    VariantSpec,
    define_error,
)
from flexerr.core.enums import DefinitionErrorCode, TracerBackend
from flexerr.core.errors import DefinitionError, ReportError
from flexerr.core.result import Failure, Result, Success
from flexerr.domain.detail import ErrorDetail
from flexerr.domain.protocols import DetailProtocol, SourceProtocol, TracerProtocol
from flexerr.domain.report import ErrorReport
from flexerr.infrastructure.sources import DetailOnly, ExceptionSource, ReportSource
from flexerr.infrastructure.tracers import BacktraceTracer, NullTracer, StringTracer

__all__ = [
    "SELF",
    "BacktraceTracer",
    "DefinitionError",
    "DefinitionErrorCode",
    "DetailOnly",
    "DetailProtocol",
    "ErrorDetail",
    "ErrorReport",
    "ErrorSpec",
    "ExceptionSource",
    "Failure",
    "FieldSpec",
    "NullTracer",
    "ReportError",
    "ReportSource",
    "Result",
    "SourceProtocol",
    "StringTracer",
    "Success",
    "TracerBackend",
    "TracerProtocol",
    "VariantSpec",
    "define_error",
]
