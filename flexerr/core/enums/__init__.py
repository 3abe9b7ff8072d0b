"""Core enums package.

Exports all core-level enums for convenient importing.

Usage:
    from flexerr.core.enums import DefinitionErrorCode, Environment, TracerBackend
"""

from flexerr.core.enums.definition_error_code import DefinitionErrorCode
from flexerr.core.enums.environment import Environment
from flexerr.core.enums.tracer_backend import TracerBackend

__all__ = ["DefinitionErrorCode", "Environment", "TracerBackend"]
