"""Exception wrapper for error reports.

Reports are values and are normally returned inside Failure. Callers that
need to cross an exception boundary (a framework callback, a test helper)
convert them with ErrorReport.into_exception(), which builds a ReportError
whose __cause__ chain mirrors the report's detail cause chain.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from flexerr.domain.report import ErrorReport


class ReportError(Exception):
    """Raisable carrier for an ErrorReport.

    Attributes:
        report: The wrapped report (detail and trace are unchanged).
    """

    def __init__(self, report: "ErrorReport[Any, Any]") -> None:
        super().__init__(report.message())
        self.report = report

    def __str__(self) -> str:
        """Full rendering of the wrapped report."""
        return self.report.render()
