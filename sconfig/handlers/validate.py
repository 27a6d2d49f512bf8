"""Arity validators composable into type handlers.

Each factory returns a validator: a callable that returns its input list
unchanged when the number of values is acceptable and raises
`ValidationError` otherwise. Pass validators to `register_type` before the
converter so they run first.
"""

from __future__ import annotations

from collections.abc import Callable

from ..errors import ValidationError


Validator = Callable[[list[str]], list[str]]

_NO_VALUE_DETAIL = "does not accept any values"
_SINGLE_VALUE_DETAIL = "must have exactly one value"


def validate_no_value() -> Validator:
    """Return a validator accepting only an empty value list."""

    def _validate(values: list[str]) -> list[str]:
        if values:
            raise ValidationError(_NO_VALUE_DETAIL)
        return values

    return _validate


def validate_single_value() -> Validator:
    """Return a validator accepting exactly one value."""

    def _validate(values: list[str]) -> list[str]:
        if len(values) != 1:
            raise ValidationError(_SINGLE_VALUE_DETAIL)
        return values

    return _validate


def validate_value_limit(minimum: int, maximum: int) -> Validator:
    """Return a validator accepting between `minimum` and `maximum` values, inclusive.

    A `maximum` of zero or below, or lower than `minimum`, leaves the count
    unbounded above.
    """

    def _validate(values: list[str]) -> list[str]:
        count = len(values)
        if count < minimum:
            raise ValidationError(f"must have more than {minimum} values (has: {count})")
        if maximum > 0 and maximum >= minimum and count > maximum:
            raise ValidationError(f"must have fewer than {maximum} values (has: {count})")
        return values

    return _validate
