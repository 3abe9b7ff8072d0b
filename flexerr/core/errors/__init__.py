"""Core errors package.

Usage:
    from flexerr.core.errors import DefinitionError, ReportError
"""

from flexerr.core.errors.definition_error import DefinitionError
from flexerr.core.errors.report_error import ReportError

__all__ = ["DefinitionError", "ReportError"]
