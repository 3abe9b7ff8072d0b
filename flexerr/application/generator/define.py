"""define_error: the declarative entry point of the generator.

Expands a compact error-type definition into a generated ErrorReport
subclass. All checking happens here, at definition time; the returned
type's constructors and renderers cannot fail.

Usage:
    from flexerr import SELF, ExceptionSource, define_error

    AppError = define_error(
        "AppError",
        {
            "Foo": {"fields": {"msg": str}},
            "Io": {"source": ExceptionSource(OSError)},
            "Step": {"fields": {"step": str}, "source": SELF,
                     "template": "step {step} failed"},
        },
    )

    report = AppError.foo("bad")
    report.message()          # "Foo: bad"
    AppError.step("load", AppError.io(OSError("not found"))).message()
    # "step load failed: Io: not found"
"""

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from flexerr.application.generator.builder import build_detail_types, build_report_type
from flexerr.application.generator.schema import DEFAULT_DERIVE, ErrorSpec, VariantSpec
from flexerr.application.generator.validation import validate_spec
from flexerr.core.container import build_tracer, get_logger, get_tracer
from flexerr.core.enums import DefinitionErrorCode, TracerBackend
from flexerr.core.errors import DefinitionError
from flexerr.core.result import Failure
from flexerr.domain.protocols import TracerProtocol
from flexerr.domain.report import ErrorReport
from flexerr.domain.value_objects.source_location import external_frame


def _coerce_spec(
    name_or_spec: str | ErrorSpec,
    variants: Mapping[str, Any] | Iterable[VariantSpec | Mapping[str, Any]] | None,
    derive: Iterable[str] | str | None,
) -> ErrorSpec:
    if isinstance(name_or_spec, ErrorSpec):
        return name_or_spec
    try:
        return ErrorSpec(
            name=name_or_spec,
            variants=variants if variants is not None else (),
            derive=derive if derive is not None else DEFAULT_DERIVE,
        )
    except ValidationError as e:
        raise DefinitionError(
            code=DefinitionErrorCode.INVALID_SPEC,
            message=f"definition of {name_or_spec!r} is malformed: {e}",
            details={"error_type": name_or_spec, "errors": e.errors(include_url=False)},
        ) from e


def _resolve_tracer(tracer: TracerProtocol | TracerBackend | str | None) -> TracerProtocol:
    if tracer is None:
        return get_tracer()
    if isinstance(tracer, (TracerBackend, str)):
        try:
            return build_tracer(tracer)
        except ValueError as e:
            raise DefinitionError(
                code=DefinitionErrorCode.INVALID_SPEC,
                message=f"unknown tracer backend {tracer!r}",
                details={"tracer": str(tracer)},
            ) from e
    if isinstance(tracer, TracerProtocol):
        return tracer
    raise DefinitionError(
        code=DefinitionErrorCode.INVALID_SPEC,
        message=f"tracer {tracer!r} does not implement TracerProtocol",
    )


def _caller_module() -> str:
    frame = external_frame()
    if frame is None:
        return __name__
    return str(frame.f_globals.get("__name__", "__main__"))


def define_error(
    name_or_spec: str | ErrorSpec,
    variants: Mapping[str, Any] | Iterable[VariantSpec | Mapping[str, Any]] | None = None,
    *,
    derive: Iterable[str] | str | None = None,
    tracer: TracerProtocol | TracerBackend | str | None = None,
    module: str | None = None,
) -> type[ErrorReport[Any, Any]]:
    """Generate an error type from a declarative definition.

    Args:
        name_or_spec: Error type name, or a complete ErrorSpec (then
            variants and derive are ignored).
        variants: Variants as {name: options} or a sequence of VariantSpec
            / option dicts. Options: fields, source, template, label.
        derive: Extra detail capabilities: "order", "clone". Value
            equality ("eq") is always derived.
        tracer: Backend bound to the type: a TracerProtocol instance, a
            TracerBackend value, or None for the configured default.
        module: Module name for the generated classes (defaults to caller).

    Returns:
        The generated ErrorReport subclass.

    Raises:
        DefinitionError: If the definition is malformed.
    """
    spec = _coerce_spec(name_or_spec, variants, derive)
    logger = get_logger().bind(error_type=spec.name)

    match validate_spec(spec):
        case Failure(error=error):
            logger.warning(
                "Error type definition rejected",
                code=error.code.value,
                reason=error.message,
            )
            raise error

    backend = _resolve_tracer(tracer)
    module = module or _caller_module()

    detail_base, variant_types = build_detail_types(spec, module=module)
    error_cls = build_report_type(
        spec, detail_base, variant_types, tracer=backend, module=module
    )

    logger.debug(
        "Error type defined",
        module=module,
        variants=[v.name for v in spec.variants],
        tracer=backend.name,
    )
    return error_cls
