"""Domain value objects.

Usage:
    from flexerr.domain.value_objects import MessageTemplate, SourceLocation, TraceContext
"""

from flexerr.domain.value_objects.message_template import MessageTemplate, safe_str
from flexerr.domain.value_objects.source_location import SourceLocation
from flexerr.domain.value_objects.trace_context import TraceContext

__all__ = ["MessageTemplate", "SourceLocation", "TraceContext", "safe_str"]
