"""Message template value object.

Per-variant message templates use str.format syntax with named slots only:

    "cannot open {path!r}: {reason}"
    "retry {attempt} of {limit:>3}"

Parsing happens once, when the error type is defined, so malformed templates
are rejected at definition time. Rendering is total: a slot whose value is
missing or cannot be formatted renders as an empty string.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from string import Formatter
from typing import Any

_FORMATTER = Formatter()

Piece = tuple[str, str | None, str | None, str | None]


def safe_str(value: Any) -> str:
    """str() that never raises.

    Field values and absorbed errors are arbitrary objects; a broken __str__
    must not break rendering.
    """
    try:
        return str(value)
    except Exception:
        return f"<unprintable {type(value).__name__}>"


def _root_name(field_name: str) -> str:
    """Strip attribute and index access: "user.name[0]" -> "user"."""
    for index, char in enumerate(field_name):
        if char in ".[":
            return field_name[:index]
    return field_name


def _slot_names(text: str) -> list[str]:
    """Collect slot root names, including slots nested in format specs.

    Raises:
        ValueError: If the text is not a valid format string or uses
            positional slots.
    """
    names: list[str] = []
    for _, field_name, format_spec, _ in _FORMATTER.parse(text):
        if field_name is None:
            continue
        root = _root_name(field_name)
        if not root or root.isdigit():
            raise ValueError("positional slots are not supported, name every slot")
        names.append(root)
        if format_spec:
            names.extend(_slot_names(format_spec))
    return names


@dataclass(frozen=True, slots=True)
class MessageTemplate:
    """Parsed str.format template with named slots.

    Attributes:
        text: Template source text.
        slots: Root names of every slot referenced by the template.
    """

    text: str
    slots: frozenset[str] = field(default=frozenset(), compare=False)
    _pieces: tuple[Piece, ...] = field(default=(), compare=False, repr=False)

    @classmethod
    def parse(cls, text: str) -> "MessageTemplate":
        """Parse template text.

        Args:
            text: str.format template using named slots.

        Returns:
            MessageTemplate: Parsed template.

        Raises:
            ValueError: If braces are unbalanced, a conversion is unknown or
                a slot is positional.
        """
        pieces = tuple(_FORMATTER.parse(text))
        for _, _, _, conversion in pieces:
            if conversion is not None and conversion not in ("r", "s", "a"):
                raise ValueError(f"unknown conversion '!{conversion}'")
        return cls(text=text, slots=frozenset(_slot_names(text)), _pieces=pieces)

    def uses(self, name: str) -> bool:
        """Check whether the template references a slot."""
        return name in self.slots

    def render(self, values: Mapping[str, Any]) -> str:
        """Substitute values into the template.

        Args:
            values: Slot values by name.

        Returns:
            str: Rendered text; unusable slots render as "".
        """
        parts: list[str] = []
        for literal, field_name, format_spec, conversion in self._pieces:
            parts.append(literal)
            if field_name is not None:
                parts.append(self._render_slot(field_name, format_spec, conversion, values))
        return "".join(parts)

    def _render_slot(
        self,
        field_name: str,
        format_spec: str | None,
        conversion: str | None,
        values: Mapping[str, Any],
    ) -> str:
        try:
            obj, _ = _FORMATTER.get_field(field_name, (), values)
            obj = _FORMATTER.convert_field(obj, conversion)
            spec = _FORMATTER.vformat(format_spec, (), values) if format_spec else ""
            return _FORMATTER.format_field(obj, spec)
        except Exception as e:
            # Field values may define arbitrary __format__/__repr__.
            from flexerr.core.container import get_logger

            get_logger().debug(
                "Template slot rendered empty",
                template=self.text,
                slot=field_name,
                error_type=type(e).__name__,
            )
            return ""
