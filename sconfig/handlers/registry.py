"""Process-wide registry of type handlers keyed by type descriptor.

The registry is seeded with the built-in handlers at import time. Entries can
be added, overridden or removed at any time and the change applies to every
later parse in the process. Access is not synchronized; callers that register
or reset handlers from several threads must serialize those calls themselves.
"""

from __future__ import annotations

from collections.abc import Callable

from .builtin import TypeHandler, builtin_type_handlers


TYPE_HANDLERS: dict[str, TypeHandler] = {}


def chain_handlers(*funcs: Callable[[list[str]], object]) -> TypeHandler:
    """Compose validators and a final converter into one handler.

    Each function receives the previous one's output; the first receives the
    value tokens. Validators return their input, so the converter sees the
    original tokens once every validator has passed.
    """

    if not funcs:
        raise ValueError("at least one handler function is required")
    if len(funcs) == 1:
        return funcs[0]

    def _handle(values: list[str]) -> object:
        result: object = values
        for func in funcs:
            result = func(result)  # type: ignore[arg-type]
        return result

    return _handle


def register_type(descriptor: str, *funcs: Callable[[list[str]], object]) -> None:
    """Register (or replace) the handler for `descriptor`.

    Args:
        descriptor: Type descriptor, for example ``"int64"`` or ``"re.Pattern"``.
        funcs: Zero or more validators followed by the converter.
    """

    TYPE_HANDLERS[descriptor] = chain_handlers(*funcs)


def unregister_type(descriptor: str) -> None:
    """Remove the handler for `descriptor`, if any."""

    TYPE_HANDLERS.pop(descriptor, None)


def lookup_type_handler(descriptor: str) -> TypeHandler | None:
    """Return the handler registered for `descriptor`, or `None`."""

    return TYPE_HANDLERS.get(descriptor)


def registered_types() -> list[str]:
    """Return all registered descriptors in sorted order."""

    return sorted(TYPE_HANDLERS)


def reset_type_handlers() -> None:
    """Restore the built-in handlers, discarding every custom registration."""

    TYPE_HANDLERS.clear()
    for descriptor, funcs in builtin_type_handlers().items():
        register_type(descriptor, *funcs)


reset_type_handlers()
