"""Expansion of a validated ErrorSpec into concrete classes.

For an error type named AppError this produces:

- AppErrorDetail: per-type detail base (ErrorDetail subclass) listing its
  variants in AppErrorDetail.variants
- AppErrorDetail.<Variant>: one frozen dataclass per variant, carrying the
  declared fields (plus ``source`` for absorbing variants), its parsed
  template, label and source adapter
- AppError: ErrorReport subclass with one constructor per variant, bound to
  a single tracer backend

Input must already have passed validate_spec; nothing here re-checks it.
"""

import dataclasses
from inspect import Parameter, Signature
from types import MappingProxyType
from typing import Any, Callable

from flexerr.application.generator.schema import SELF, ErrorSpec, VariantSpec
from flexerr.domain.detail import SOURCE_FIELD, ErrorDetail
from flexerr.domain.protocols import TracerProtocol
from flexerr.domain.report import ErrorReport
from flexerr.domain.value_objects import MessageTemplate, SourceLocation
from flexerr.infrastructure.sources import ReportSource


def _clone(self: ErrorDetail, **changes: Any) -> ErrorDetail:
    """Return a copy of this detail with the given fields replaced."""
    return dataclasses.replace(self, **changes)  # type: ignore[type-var]


def _declared_type(source: Any) -> Any:
    """Return the external type a source adapter declares, or Any."""
    for attr in ("error_type", "detail_type"):
        declared = getattr(source, attr, None)
        if isinstance(declared, type):
            return declared
    return Any


def _source_field_type(variant: VariantSpec, base: type[ErrorDetail]) -> Any:
    # The source field holds what the adapter absorbs: a report source
    # keeps the report's detail, not the report itself.
    if variant.source is SELF:
        return base
    if isinstance(variant.source, ReportSource):
        return getattr(variant.source.error_type, "Detail", Any)
    return _declared_type(variant.source)


def build_detail_types(
    spec: ErrorSpec, *, module: str
) -> tuple[type[ErrorDetail], dict[str, type[ErrorDetail]]]:
    """Create the detail base class and one dataclass per variant.

    Args:
        spec: Validated definition.
        module: Module name reported by the generated classes.

    Returns:
        (detail base, variant classes by variant name). Variants declared
        with source=SELF get their source adapter in build_report_type.
    """
    base_name = f"{spec.name}Detail"
    base = type(
        base_name,
        (ErrorDetail,),
        {
            "__slots__": (),
            "__module__": module,
            "__doc__": f"Detail variants of {spec.name}.",
        },
    )

    order = "order" in spec.derive
    eq = order or "eq" in spec.derive

    variants: dict[str, type[ErrorDetail]] = {}
    for variant in spec.variants:
        field_defs: list[tuple[str, Any]] = [(f.name, f.type) for f in variant.fields]
        if variant.absorbs:
            field_defs.append((SOURCE_FIELD, _source_field_type(variant, base)))

        namespace: dict[str, Any] = {
            "variant": variant.name,
            "label": variant.resolved_label,
            "template": MessageTemplate.parse(variant.resolved_template),
            "absorbs": None if variant.source is SELF else variant.source,
        }
        if "clone" in spec.derive:
            namespace["clone"] = _clone

        cls = dataclasses.make_dataclass(
            variant.name,
            field_defs,
            bases=(base,),
            namespace=namespace,
            eq=eq,
            order=order,
            frozen=True,
            slots=True,
            module=module,
        )
        cls.__qualname__ = f"{base_name}.{variant.name}"
        setattr(base, variant.name, cls)
        variants[variant.name] = cls

    base.variants = MappingProxyType(dict(variants))  # type: ignore[attr-defined]
    return base, variants


def _make_constructor(
    error_cls: type[ErrorReport[Any, Any]],
    variant_cls: type[ErrorDetail],
    variant: VariantSpec,
    tracer: TracerProtocol,
) -> Callable[..., ErrorReport[Any, Any]]:
    parameters = [
        Parameter(f.name, Parameter.POSITIONAL_OR_KEYWORD, annotation=f.type)
        for f in variant.fields
    ]
    if variant.absorbs:
        parameters.append(
            Parameter(
                SOURCE_FIELD,
                Parameter.POSITIONAL_OR_KEYWORD,
                annotation=_declared_type(variant_cls.absorbs),
            )
        )
    signature = Signature(parameters, return_annotation=error_cls)

    def construct(*args: Any, **kwargs: Any) -> ErrorReport[Any, Any]:
        arguments = signature.bind(*args, **kwargs).arguments
        location = SourceLocation.capture()
        if not variant.absorbs:
            return error_cls.capture(
                variant_cls(**arguments), tracer=tracer, location=location
            )

        value = arguments.pop(SOURCE_FIELD)
        return error_cls.trace_from(
            variant_cls.absorbs,  # type: ignore[arg-type]
            value,
            lambda source_detail: variant_cls(**arguments, source=source_detail),
            tracer=tracer,
            location=location,
        )

    construct.__name__ = variant.constructor_name
    construct.__qualname__ = f"{error_cls.__qualname__}.{variant.constructor_name}"
    construct.__module__ = error_cls.__module__
    construct.__signature__ = signature  # type: ignore[attr-defined]
    construct.__doc__ = (
        f"Construct {error_cls.__name__} as variant {variant.name} "
        f"({variant.resolved_template!r})."
    )
    return construct


def build_report_type(
    spec: ErrorSpec,
    detail_base: type[ErrorDetail],
    variants: dict[str, type[ErrorDetail]],
    *,
    tracer: TracerProtocol,
    module: str,
) -> type[ErrorReport[Any, Any]]:
    """Create the ErrorReport subclass and wire its constructors.

    Args:
        spec: Validated definition.
        detail_base: Detail base from build_detail_types.
        variants: Variant classes from build_detail_types.
        tracer: The one backend bound to this error type.
        module: Module name reported by the generated class.

    Returns:
        The generated error type.
    """
    error_cls: type[ErrorReport[Any, Any]] = type(
        spec.name,
        (ErrorReport,),
        {
            "__slots__": (),
            "__module__": module,
            "__doc__": f"Error report type with variants: "
            f"{', '.join(v.name for v in spec.variants)}.",
            "Detail": detail_base,
            "spec": spec,
            "backend": tracer,
        },
    )

    for variant in spec.variants:
        variant_cls = variants[variant.name]
        if variant.source is SELF:
            variant_cls.absorbs = ReportSource(error_type=error_cls)
        constructor = _make_constructor(error_cls, variant_cls, variant, tracer)
        setattr(error_cls, variant.constructor_name, staticmethod(constructor))

    return error_cls
