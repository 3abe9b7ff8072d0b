"""Definition-time error raised by the error-type generator.

DefinitionError is the only exception this library raises on its own. It is
raised while expanding a malformed error-type definition, never from a
generated constructor or renderer.

Usage:
    from flexerr.core.errors import DefinitionError
    from flexerr.core.enums import DefinitionErrorCode

    try:
        define_error("AppError", {})
    except DefinitionError as e:
        assert e.code is DefinitionErrorCode.EMPTY_DEFINITION
"""

from typing import Any

from flexerr.core.enums import DefinitionErrorCode


class DefinitionError(ValueError):
    """Malformed error-type definition.

    Attributes:
        code: Machine-readable reason (enum).
        message: Human-readable description naming the offending element.
        details: Optional context (type, variant and field names).
    """

    def __init__(
        self,
        *,
        code: DefinitionErrorCode,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        """String representation of error."""
        return f"{self.code.value}: {self.message}"
