"""Settable field access for configuration targets.

Responsibilities:
- Enumerate the annotated attributes of a target object.
- Derive a stable type descriptor string for each attribute's annotation.
- Provide get/set/extend access without the caller touching `setattr`.

Key types:
- `FieldSlot`: one named, typed, settable attribute of a target.
"""

from __future__ import annotations

from dataclasses import dataclass
import builtins
import types
import typing
from typing import Any, ClassVar, Union

from .errors import AnnotationError


_NONE_TYPE = type(None)


def _unwrap_optional(annotation: Any) -> Any:
    """Return `X` for `X | None` / `Optional[X]`, otherwise the annotation itself."""

    if typing.get_origin(annotation) in (Union, types.UnionType):
        members = [arg for arg in typing.get_args(annotation) if arg is not _NONE_TYPE]
        if len(members) == 1:
            return members[0]
    return annotation


def type_descriptor(annotation: Any) -> str:
    """Return the registry key describing `annotation`.

    Examples: ``int`` → ``"int"``, ``Int64`` → ``"int64"``,
    ``list[re.Pattern[str]]`` → ``"list[re.Pattern]"``,
    ``Decimal | None`` → ``"decimal.Decimal"``.
    """

    annotation = _unwrap_optional(annotation)

    if isinstance(annotation, typing.NewType):
        return annotation.__name__

    origin = typing.get_origin(annotation)
    if origin is list:
        args = typing.get_args(annotation)
        inner = type_descriptor(args[0]) if args else "str"
        return f"list[{inner}]"
    if origin in (Union, types.UnionType):
        return " | ".join(type_descriptor(arg) for arg in typing.get_args(annotation))
    if origin is not None:
        return type_descriptor(origin)

    if annotation is list:
        return "list[str]"
    if isinstance(annotation, type):
        if annotation.__module__ == builtins.__name__:
            return annotation.__qualname__
        return f"{annotation.__module__}.{annotation.__qualname__}"
    return str(annotation)


@dataclass(frozen=True, slots=True)
class FieldSlot:
    """One settable attribute of a configuration target.

    Attributes:
        target: Object owning the attribute.
        name: Attribute name.
        annotation: Resolved type annotation of the attribute.
    """

    target: object
    name: str
    annotation: Any

    @property
    def descriptor(self) -> str:
        """Return the type descriptor used for handler lookup."""

        return type_descriptor(self.annotation)

    @property
    def is_list(self) -> bool:
        """Return whether the attribute accumulates values across lines."""

        unwrapped = _unwrap_optional(self.annotation)
        return unwrapped is list or typing.get_origin(unwrapped) is list

    def element_type(self) -> Any:
        """Return the scalar type: the item type for lists, the field type otherwise."""

        unwrapped = _unwrap_optional(self.annotation)
        if typing.get_origin(unwrapped) is list:
            args = typing.get_args(unwrapped)
            unwrapped = _unwrap_optional(args[0]) if args else str
        elif unwrapped is list:
            return str
        return typing.get_origin(unwrapped) or unwrapped

    def get(self) -> Any:
        """Return the current attribute value, or `None` when unset."""

        return getattr(self.target, self.name, None)

    def set(self, value: Any) -> None:
        """Replace the attribute value."""

        setattr(self.target, self.name, value)

    def extend(self, values: typing.Iterable[Any]) -> None:
        """Append `values` to the attribute, treating `None` as an empty list."""

        current = self.get()
        self.set([*(current or ()), *values])


def fields(target: object) -> dict[str, FieldSlot]:
    """Return the settable, annotated, public attributes of `target` keyed by name.

    Raises:
        AnnotationError: If an annotation cannot be evaluated, for example a
            forward reference to a class that is not visible at module level.
    """

    target_type = type(target)
    try:
        hints = typing.get_type_hints(target_type)
    except (NameError, TypeError) as exc:
        raise AnnotationError(target_type=target_type.__qualname__, detail=str(exc)) from exc

    slots: dict[str, FieldSlot] = {}
    for name, annotation in hints.items():
        if name.startswith("_") or typing.get_origin(annotation) is ClassVar:
            continue
        if annotation is ClassVar:
            continue
        slots[name] = FieldSlot(target=target, name=name, annotation=annotation)
    return slots
