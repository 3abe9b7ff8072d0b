"""Error-type generator.

Usage:
    from flexerr.application.generator import SELF, define_error
"""

from flexerr.application.generator.define import define_error
from flexerr.application.generator.schema import (
    SELF,
    ErrorSpec,
    FieldSpec,
    VariantSpec,
    snake_case,
)

__all__ = ["SELF", "ErrorSpec", "FieldSpec", "VariantSpec", "define_error", "snake_case"]
