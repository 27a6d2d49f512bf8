"""Field handler dispatch for one logical line.

Responsibilities:
- Prefer a caller-supplied field handler for the resolved field.
- Otherwise convert values with the registry handler for the field's type.
- Fall back to a ``from_text`` classmethod on the field's type.
- Append to list fields and replace scalar fields.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .errors import HandlerError, UnknownTypeError
from .fields import FieldSlot
from .handlers.registry import lookup_type_handler


FieldHandler = Callable[[list[str]], Any]
FieldHandlers = Mapping[str, FieldHandler]

_TEXT_UNMARSHALER = "from_text"


def _text_unmarshaler(slot: FieldSlot) -> Callable[[str], Any] | None:
    """Return the field type's ``from_text`` constructor, if it has one."""

    element_type = slot.element_type()
    factory = getattr(element_type, _TEXT_UNMARSHALER, None)
    if callable(factory):
        return factory
    return None


def set_field(
    slot: FieldSlot,
    values: list[str],
    field_handlers: FieldHandlers | None = None,
) -> None:
    """Apply one line's `values` to `slot`.

    Raises:
        HandlerError: If the caller-supplied field handler raised.
        UnknownTypeError: If nothing knows how to convert the field's type.
        Exception: Whatever the registry handler or ``from_text`` raised.
    """

    if field_handlers and slot.name in field_handlers:
        try:
            field_handlers[slot.name](values)
        except Exception as exc:
            raise HandlerError(field_name=slot.name, detail=str(exc)) from exc
        return

    handler = lookup_type_handler(slot.descriptor)
    if handler is not None:
        value = handler(values)
    else:
        factory = _text_unmarshaler(slot)
        if factory is None:
            raise UnknownTypeError(descriptor=slot.descriptor)
        if slot.is_list:
            value = [factory(token) for token in values]
        else:
            value = factory(" ".join(values))

    if slot.is_list:
        slot.extend(value)  # type: ignore[arg-type]
    else:
        slot.set(value)
