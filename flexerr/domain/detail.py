"""Base class for generated error detail variants.

Every variant produced by define_error is a frozen dataclass deriving from
a per-type subclass of ErrorDetail:

    ErrorDetail
    └── AppErrorDetail          (one per error type, lists its variants)
        ├── AppErrorDetail.Foo  (frozen dataclass, declared fields)
        └── AppErrorDetail.Io   (frozen dataclass, declared fields + source)

ErrorDetail carries the behavior shared by all variants (message rendering,
cause access); the per-variant class attributes carry the data the
generator derived from the definition.
"""

import dataclasses
from typing import Any, ClassVar

from flexerr.domain.protocols import DetailProtocol, SourceProtocol
from flexerr.domain.value_objects import MessageTemplate

SOURCE_FIELD = "source"


class _AbsorbedSlot:
    """Template value for {source}: formats as the absorbed message, while
    attribute and item lookups reach the absorbed value itself."""

    __slots__ = ("_value", "_text")

    def __init__(self, value: Any, text: str) -> None:
        self._value = value
        self._text = text

    def __getattr__(self, name: str) -> Any:
        return getattr(self._value, name)

    def __getitem__(self, key: Any) -> Any:
        return self._value[key]

    def __format__(self, format_spec: str) -> str:
        return format(self._text, format_spec)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return repr(self._text)


class ErrorDetail:
    """Behavior shared by all generated detail variants.

    Class attributes (set per variant by the generator):
        variant: Variant name as declared.
        label: Static context label (defaults to the variant name).
        template: Parsed message template.
        absorbs: Source the variant absorbs from, or None.
    """

    __slots__ = ()

    variant: ClassVar[str] = ""
    label: ClassVar[str] = ""
    template: ClassVar[MessageTemplate] = MessageTemplate.parse("")
    absorbs: ClassVar[SourceProtocol | None] = None

    def field_values(self) -> dict[str, Any]:
        """Return the variant's field values by name (shallow)."""
        return {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}  # type: ignore[arg-type]

    def message(self) -> str:
        """Render the message line for this variant.

        Absorbing variants render "<context>: <absorbed message>", where the
        context is the rendered template, unless the template places the
        absorbed message itself with a {source} slot. Attribute slots such as
        {source.errno} read the absorbed value.
        """
        values = self.field_values()
        absorbs = type(self).absorbs
        if absorbs is None:
            return self.template.render(values)

        absorbed = absorbs.message(values[SOURCE_FIELD])
        if self.template.uses(SOURCE_FIELD):
            values[SOURCE_FIELD] = _AbsorbedSlot(values[SOURCE_FIELD], absorbed)
            return self.template.render(values)
        return f"{self.template.render(values)}: {absorbed}"

    def cause(self) -> DetailProtocol | None:
        """Return the absorbed detail when this variant wraps another report."""
        absorbs = type(self).absorbs
        if absorbs is None:
            return None
        return absorbs.cause(getattr(self, SOURCE_FIELD))

    def source_error(self) -> BaseException | None:
        """Return the absorbed Python exception, if this variant holds one."""
        if type(self).absorbs is None:
            return None
        source = getattr(self, SOURCE_FIELD)
        return source if isinstance(source, BaseException) else None

    def __str__(self) -> str:
        return self.message()
