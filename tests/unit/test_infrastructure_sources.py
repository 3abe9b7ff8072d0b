"""Unit tests for source adapters.

Tests cover:
- ExceptionSource: detail/trace split, declared type, message fallback, no cause
- ReportSource: trace reuse, foreign-backend and undeclared-type trace drop
- DetailOnly: pass-through detail, never a trace
- SourceProtocol compliance
"""

from unittest.mock import patch

import pytest

from flexerr import StringTracer, define_error
from flexerr.domain.protocols import SourceProtocol
from flexerr.infrastructure.sources import DetailOnly, ExceptionSource, ReportSource
from flexerr.infrastructure.tracers import BacktraceTracer, StringTrace

LookupFailure = define_error(
    "LookupFailure",
    {"Missing": {"fields": {"key": str}, "template": "missing key {key!r}"}},
    tracer=StringTracer(),
)

ConfigFailure = define_error("ConfigFailure", {"Invalid": None}, tracer=StringTracer())


@pytest.mark.unit
class TestSourceProtocolCompliance:
    """Test every adapter satisfies SourceProtocol."""

    @pytest.mark.parametrize(
        "source", [ExceptionSource(OSError), ReportSource(), DetailOnly(int)]
    )
    def test_implements_protocol(self, source):
        """Test adapters are structural SourceProtocol implementations."""
        assert isinstance(source, SourceProtocol)


@pytest.mark.unit
class TestExceptionSource:
    """Test ExceptionSource."""

    def test_convert_bare_exception(self, string_tracer):
        """Test a lone exception becomes the detail with no trace."""
        error = OSError("not found")

        detail, trace = ExceptionSource(OSError).convert(error, string_tracer)

        assert detail is error
        assert trace is None

    def test_convert_chained_exception(self, string_tracer):
        """Test a chained exception supplies its chain as the trace."""
        error = OSError("disk full")
        error.__cause__ = ValueError("bad value")

        detail, trace = ExceptionSource(OSError).convert(error, string_tracer)

        assert detail is error
        assert trace == StringTrace(messages=("bad value", "disk full"))

    def test_convert_non_exception(self, string_tracer):
        """Test non-exception values are absorbed without a trace."""
        assert ExceptionSource().convert("oops", string_tracer) == ("oops", None)

    def test_convert_undeclared_exception_type(self, string_tracer):
        """Test exceptions outside error_type are absorbed without a trace."""
        error = ValueError("bad value")
        error.__cause__ = KeyError("id")

        detail, trace = ExceptionSource(OSError).convert(error, string_tracer)

        assert detail is error
        assert trace is None

    def test_message(self):
        """Test message() is the exception text."""
        assert ExceptionSource().message(OSError("not found")) == "not found"

    def test_message_falls_back_to_type_name(self):
        """Test an exception without text renders its type name."""
        assert ExceptionSource().message(TimeoutError()) == "TimeoutError"

    def test_cause_is_none(self):
        """Test exceptions are not details, so there is no detail cause."""
        assert ExceptionSource().cause(OSError("x")) is None


@pytest.mark.unit
class TestReportSource:
    """Test ReportSource."""

    def test_same_backend_keeps_trace(self):
        """Test a report from the same backend hands over its trace."""
        report = LookupFailure.missing("id")

        detail, trace = ReportSource(LookupFailure).convert(report, StringTracer())

        assert detail is report.detail
        assert trace is report.trace

    def test_foreign_backend_drops_trace(self):
        """Test a report from another backend loses its trace with a warning."""
        report = LookupFailure.missing("id")

        with patch("flexerr.core.container.get_logger") as mock_get_logger:
            detail, trace = ReportSource(LookupFailure).convert(report, BacktraceTracer())

        assert detail is report.detail
        assert trace is None
        mock_get_logger.return_value.warning.assert_called_once()

    def test_undeclared_error_type_drops_trace(self):
        """Test a report of another error type loses its trace with a warning."""
        report = ConfigFailure.invalid()

        with patch("flexerr.core.container.get_logger") as mock_get_logger:
            detail, trace = ReportSource(LookupFailure).convert(report, StringTracer())

        assert detail is report.detail
        assert trace is None
        mock_get_logger.return_value.warning.assert_called_once_with(
            "Dropped trace from an undeclared error type",
            source_type="ConfigFailure",
            source_backend="string",
            target_backend="string",
        )

    def test_any_report_without_error_type(self):
        """Test ReportSource() reuses the trace of any report."""
        report = ConfigFailure.invalid()

        _, trace = ReportSource().convert(report, StringTracer())

        assert trace is report.trace

    def test_convert_non_report(self, string_tracer):
        """Test non-report values pass through without a trace."""
        assert ReportSource().convert("oops", string_tracer) == ("oops", None)

    def test_message_and_cause(self):
        """Test the absorbed detail is both message source and cause."""
        detail = LookupFailure.missing("id").detail

        assert ReportSource().message(detail) == "missing key 'id'"
        assert ReportSource().cause(detail) is detail


@pytest.mark.unit
class TestDetailOnly:
    """Test DetailOnly."""

    def test_convert_never_traces(self, string_tracer):
        """Test the value is kept and no trace is supplied."""
        assert DetailOnly(int).convert(404, string_tracer) == (404, None)

    def test_message_of_plain_value(self):
        """Test plain values render with str()."""
        assert DetailOnly(int).message(404) == "404"

    def test_plain_value_has_no_cause(self):
        """Test plain values are not part of the cause chain."""
        assert DetailOnly(int).cause(404) is None

    def test_detail_value_is_cause(self):
        """Test detail values absorbed as-is become the cause."""
        detail = LookupFailure.missing("id").detail

        assert DetailOnly().message(detail) == "missing key 'id'"
        assert DetailOnly().cause(detail) is detail
