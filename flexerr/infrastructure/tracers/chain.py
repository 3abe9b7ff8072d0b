"""Helpers shared by tracer backends: exception chains and cause blocks."""

from collections.abc import Sequence

from flexerr.domain.value_objects import safe_str

CAUSES_HEADER = "Caused by:"


def exception_chain(error: BaseException) -> list[BaseException]:
    """Return an exception's cause chain, innermost first (error last).

    Follows __cause__, or __context__ unless suppressed, like the
    interpreter's own traceback printing.
    """
    chain: list[BaseException] = []
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        chain.append(current)
        if current.__cause__ is not None:
            current = current.__cause__
        elif not current.__suppress_context__:
            current = current.__context__
        else:
            current = None
    chain.reverse()
    return chain


def exception_message(error: BaseException) -> str:
    """Message of an exception, falling back to its type name."""
    return safe_str(error) or type(error).__name__


def render_causes(messages: Sequence[str]) -> str:
    """Render prior cause messages, innermost to outermost.

    Returns:
        str: Indented, numbered block under CAUSES_HEADER ("" if empty).
    """
    if not messages:
        return ""
    lines = [CAUSES_HEADER]
    lines.extend(f"    {index}: {message}" for index, message in enumerate(messages))
    return "\n".join(lines)
