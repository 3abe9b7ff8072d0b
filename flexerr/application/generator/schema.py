"""Declarative error-type definition schema.

Pydantic models describing an error type before it is generated. The
compact dict form accepted by define_error is coerced into these models:

    {
        "Foo": {"fields": {"msg": str}},
        "Io": {"source": ExceptionSource(OSError), "label": "Io"},
        "Wrapped": {"fields": {"step": str}, "source": SELF},
    }

Structural problems (wrong shapes, wrong types) surface as pydantic
ValidationError and are reported as DefinitionError(INVALID_SPEC); semantic
checks live in validation.py.
"""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_DERIVE = frozenset({"eq"})
SUPPORTED_DERIVE = frozenset({"eq", "order", "clone"})


class _SelfReference:
    """Marker for a variant that absorbs reports of its own error type."""

    _instance: "_SelfReference | None" = None

    def __new__(cls) -> "_SelfReference":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SELF"


SELF = _SelfReference()


def snake_case(name: str) -> str:
    """Convert a variant name to its constructor name.

    Examples:
        >>> snake_case("Io")
        'io'
        >>> snake_case("HTTPTimeout")
        'http_timeout'
    """
    name = re.sub(r"([A-Z]+)([A-Z][a-z])", r"\1_\2", name)
    name = re.sub(r"([a-z\d])([A-Z])", r"\1_\2", name)
    return name.lower()


class FieldSpec(BaseModel):
    """One named field of a variant.

    Attributes:
        name: Field name (valid identifier).
        type: Semantic type, used as the dataclass annotation.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    type: Any = Field(default=Any)


class VariantSpec(BaseModel):
    """One variant of an error type.

    Attributes:
        name: Variant name (CamelCase by convention).
        fields: Ordered declared fields.
        source: Source adapter the variant absorbs from, SELF, or None.
        template: str.format message template with named slots.
        label: Static context label; defaults to the variant name.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    fields: tuple[FieldSpec, ...] = ()
    source: Any = None
    template: str | None = None
    label: str | None = None

    @field_validator("fields", mode="before")
    @classmethod
    def coerce_fields(cls, v: Any) -> Any:
        """
        Accept {name: type}, [name, ...] and [(name, type), ...] forms.

        Args:
            v: Raw fields value.

        Returns:
            Any: Value pydantic can validate as tuple[FieldSpec, ...].
        """
        if v is None:
            return ()
        if isinstance(v, dict):
            return tuple(FieldSpec(name=name, type=tp) for name, tp in v.items())
        if isinstance(v, (list, tuple)):
            coerced: list[Any] = []
            for item in v:
                if isinstance(item, str):
                    coerced.append(FieldSpec(name=item))
                elif isinstance(item, tuple) and len(item) == 2:
                    coerced.append(FieldSpec(name=item[0], type=item[1]))
                else:
                    coerced.append(item)
            return tuple(coerced)
        return v

    @property
    def absorbs(self) -> bool:
        """Check whether the variant absorbs an external error."""
        return self.source is not None

    @property
    def constructor_name(self) -> str:
        """Name of the generated constructor."""
        return snake_case(self.name)

    @property
    def resolved_label(self) -> str:
        return self.label if self.label is not None else self.name

    @property
    def resolved_template(self) -> str:
        """Template text with defaults applied.

        Without an explicit template: the label alone when there are no
        declared fields, else "<label>: {f1}, {f2}". Braces in the label are
        escaped so they render literally.
        """
        if self.template is not None:
            return self.template
        label = self.resolved_label.replace("{", "{{").replace("}", "}}")
        if not self.fields:
            return label
        slots = ", ".join(f"{{{f.name}}}" for f in self.fields)
        return f"{label}: {slots}"


class ErrorSpec(BaseModel):
    """Complete definition of an error type.

    Attributes:
        name: Error type name (the generated report class name).
        variants: Ordered variants.
        derive: Capabilities for generated details (eq, order, clone); eq is
            always included.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    variants: tuple[VariantSpec, ...] = ()
    derive: frozenset[str] = Field(default=DEFAULT_DERIVE)

    @field_validator("variants", mode="before")
    @classmethod
    def coerce_variants(cls, v: Any) -> Any:
        """
        Accept {variant_name: options} mappings besides sequences.

        Options may be a dict of VariantSpec fields, a template string, or
        None for a field-less variant.

        Args:
            v: Raw variants value.

        Returns:
            Any: Value pydantic can validate as tuple[VariantSpec, ...].
        """
        if isinstance(v, dict):
            coerced: list[Any] = []
            for name, options in v.items():
                if isinstance(options, VariantSpec):
                    coerced.append(options)
                elif options is None:
                    coerced.append({"name": name})
                elif isinstance(options, str):
                    coerced.append({"name": name, "template": options})
                else:
                    coerced.append({"name": name, **dict(options)})
            return tuple(coerced)
        return v

    @field_validator("derive", mode="before")
    @classmethod
    def coerce_derive(cls, v: Any) -> Any:
        if isinstance(v, str):
            return frozenset({v})
        return v

    @field_validator("derive")
    @classmethod
    def include_default_derive(cls, v: frozenset[str]) -> frozenset[str]:
        """Value equality is always derived; derive only adds capabilities."""
        return v | DEFAULT_DERIVE
