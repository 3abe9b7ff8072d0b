"""Definition error codes (machine-readable).

Raised by the generator when an error-type definition is malformed. These are
the only failures the library ever raises; constructors and renderers of a
generated type are total.
"""

from enum import Enum


class DefinitionErrorCode(Enum):
    """Machine-readable reasons for rejecting an error-type definition."""

    EMPTY_DEFINITION = "empty_definition"
    INVALID_IDENTIFIER = "invalid_identifier"
    DUPLICATE_VARIANT = "duplicate_variant"
    DUPLICATE_FIELD = "duplicate_field"
    RESERVED_FIELD = "reserved_field"
    RECURSIVE_FIELD = "recursive_field"
    UNDECLARED_TEMPLATE_FIELD = "undeclared_template_field"
    MALFORMED_TEMPLATE = "malformed_template"
    UNKNOWN_DERIVE = "unknown_derive"
    INVALID_SOURCE = "invalid_source"
    INVALID_SPEC = "invalid_spec"
