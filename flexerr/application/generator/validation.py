"""Definition-time validation of error-type definitions.

Every check returns a Result; define_error raises the DefinitionError of the
first Failure. Nothing here runs at call time: once a definition passes,
its constructors and renderers are total.

Usage:
    from flexerr.application.generator.validation import validate_spec
    from flexerr.core.result import Failure, Success

    match validate_spec(spec):
        case Success(value=spec):
            ...
        case Failure(error=error):
            raise error
"""

import keyword
from typing import Any

from flexerr.application.generator.schema import (
    SELF,
    SUPPORTED_DERIVE,
    ErrorSpec,
    VariantSpec,
)
from flexerr.core.enums import DefinitionErrorCode
from flexerr.core.errors import DefinitionError
from flexerr.core.result import Failure, Result, Success
from flexerr.domain.detail import SOURCE_FIELD, ErrorDetail
from flexerr.domain.protocols import SourceProtocol
from flexerr.domain.report import ErrorReport
from flexerr.domain.value_objects import MessageTemplate

# Names a generated constructor may not take: they would shadow report API.
RESERVED_CONSTRUCTOR_NAMES = frozenset(dir(ErrorReport)) | {"backend", "spec"}

# Field names that would shadow detail behavior.
RESERVED_FIELD_NAMES = frozenset(
    name for name in dir(ErrorDetail) if not name.startswith("__")
) | {"clone"}


def _failure(
    code: DefinitionErrorCode, message: str, **details: Any
) -> Failure[DefinitionError]:
    return Failure(error=DefinitionError(code=code, message=message, details=details))


def validate_identifier(name: str, what: str, **details: Any) -> Result[str, DefinitionError]:
    """Validate that a name is a usable, non-keyword Python identifier.

    Args:
        name: Name to check.
        what: Element kind for the message ("error type", "variant", "field").
        **details: Context for the error.

    Returns:
        Success with name if valid, Failure with DefinitionError otherwise.
    """
    if not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        return _failure(
            DefinitionErrorCode.INVALID_IDENTIFIER,
            f"{what} name {name!r} is not a valid identifier",
            **details,
        )
    return Success(value=name)


def _refers_to_self(tp: Any, type_name: str) -> bool:
    return tp is SELF or (isinstance(tp, str) and tp == type_name)


def validate_fields(spec: ErrorSpec, variant: VariantSpec) -> Result[VariantSpec, DefinitionError]:
    """Validate the declared fields of one variant."""
    variant_names = {v.name for v in spec.variants}
    seen: set[str] = set()
    for f in variant.fields:
        context = {"error_type": spec.name, "variant": variant.name, "field": f.name}
        result = validate_identifier(f.name, "field", **context)
        if isinstance(result, Failure):
            return result
        if f.name in seen:
            return _failure(
                DefinitionErrorCode.DUPLICATE_FIELD,
                f"field {f.name!r} is declared twice in {spec.name}.{variant.name}",
                **context,
            )
        seen.add(f.name)
        if f.name.startswith("_") or f.name in RESERVED_FIELD_NAMES:
            return _failure(
                DefinitionErrorCode.RESERVED_FIELD,
                f"field name {f.name!r} is reserved",
                **context,
            )
        # Variant classes are attributes of the detail base.
        if f.name == "variants" or f.name in variant_names:
            return _failure(
                DefinitionErrorCode.RESERVED_FIELD,
                f"field {f.name!r} of {spec.name}.{variant.name} collides with "
                f"a variant attribute of {spec.name}Detail",
                **context,
            )
        if variant.absorbs and f.name == SOURCE_FIELD:
            return _failure(
                DefinitionErrorCode.RESERVED_FIELD,
                f"field {SOURCE_FIELD!r} is implied by the variant's source in "
                f"{spec.name}.{variant.name}",
                **context,
            )
        if _refers_to_self(f.type, spec.name):
            return _failure(
                DefinitionErrorCode.RECURSIVE_FIELD,
                f"field {f.name!r} of {spec.name}.{variant.name} holds {spec.name} "
                f"directly; absorb it with source=SELF instead",
                **context,
            )
    return Success(value=variant)


def validate_source(spec: ErrorSpec, variant: VariantSpec) -> Result[VariantSpec, DefinitionError]:
    """Validate a variant's source adapter."""
    source = variant.source
    if source is None or source is SELF or isinstance(source, SourceProtocol):
        return Success(value=variant)
    return _failure(
        DefinitionErrorCode.INVALID_SOURCE,
        f"source of {spec.name}.{variant.name} does not implement "
        f"convert/message/cause: {source!r}",
        error_type=spec.name,
        variant=variant.name,
    )


def validate_template(
    spec: ErrorSpec, variant: VariantSpec
) -> Result[MessageTemplate, DefinitionError]:
    """Parse a variant's template and check every slot is declared."""
    context = {"error_type": spec.name, "variant": variant.name}
    text = variant.resolved_template
    try:
        template = MessageTemplate.parse(text)
    except ValueError as e:
        return _failure(
            DefinitionErrorCode.MALFORMED_TEMPLATE,
            f"template of {spec.name}.{variant.name} is malformed: {e}",
            template=text,
            **context,
        )

    declared = {f.name for f in variant.fields}
    if variant.absorbs:
        declared.add(SOURCE_FIELD)
    undeclared = sorted(template.slots - declared)
    if undeclared:
        return _failure(
            DefinitionErrorCode.UNDECLARED_TEMPLATE_FIELD,
            f"template of {spec.name}.{variant.name} references undeclared "
            f"field(s): {', '.join(undeclared)}",
            template=text,
            **context,
        )
    return Success(value=template)


def validate_spec(spec: ErrorSpec) -> Result[ErrorSpec, DefinitionError]:
    """Validate a complete error-type definition.

    Args:
        spec: Structurally valid definition.

    Returns:
        Success with spec if well-formed, Failure with the first
        DefinitionError found otherwise.
    """
    result: Result[Any, DefinitionError] = validate_identifier(
        spec.name, "error type", error_type=spec.name
    )
    if isinstance(result, Failure):
        return result

    if not spec.variants:
        return _failure(
            DefinitionErrorCode.EMPTY_DEFINITION,
            f"{spec.name} declares no variants",
            error_type=spec.name,
        )

    unknown = sorted(spec.derive - SUPPORTED_DERIVE)
    if unknown:
        return _failure(
            DefinitionErrorCode.UNKNOWN_DERIVE,
            f"{spec.name} derives unsupported capabilities: {', '.join(unknown)}",
            error_type=spec.name,
        )

    names: set[str] = set()
    constructors: dict[str, str] = {}
    for variant in spec.variants:
        context = {"error_type": spec.name, "variant": variant.name}
        result = validate_identifier(variant.name, "variant", **context)
        if isinstance(result, Failure):
            return result
        if variant.name in names:
            return _failure(
                DefinitionErrorCode.DUPLICATE_VARIANT,
                f"variant {variant.name!r} is declared twice in {spec.name}",
                **context,
            )
        names.add(variant.name)

        constructor = variant.constructor_name
        if constructor in constructors:
            return _failure(
                DefinitionErrorCode.DUPLICATE_VARIANT,
                f"variants {constructors[constructor]!r} and {variant.name!r} of "
                f"{spec.name} both generate constructor {constructor!r}",
                **context,
            )
        if variant.name in RESERVED_FIELD_NAMES or variant.name == "variants":
            return _failure(
                DefinitionErrorCode.INVALID_IDENTIFIER,
                f"variant name {variant.name!r} would shadow a detail attribute",
                **context,
            )
        if constructor in RESERVED_CONSTRUCTOR_NAMES or keyword.iskeyword(constructor):
            return _failure(
                DefinitionErrorCode.INVALID_IDENTIFIER,
                f"constructor {constructor!r} for {spec.name}.{variant.name} would "
                f"shadow a report attribute",
                **context,
            )
        constructors[constructor] = variant.name

        for check in (validate_fields, validate_source, validate_template):
            result = check(spec, variant)
            if isinstance(result, Failure):
                return result

    return Success(value=spec)
