"""Built-in type handlers for primitive and list-of-primitive fields.

Responsibilities:
- Convert value tokens to `str`, `bool`, integers of each width and floats.
- Provide list variants converting every token independently.
- Declare the default registry contents restored by `reset_type_handlers`.
"""

from __future__ import annotations

from collections.abc import Callable
import math
import re
import struct

from ..parsing import parse_required_boolean
from .validate import validate_single_value, validate_value_limit


TypeHandler = Callable[[list[str]], object]

_INTEGER_RANGES: dict[str, tuple[int, int] | None] = {
    "int": None,
    "int8": (-(2**7), 2**7 - 1),
    "int16": (-(2**15), 2**15 - 1),
    "int32": (-(2**31), 2**31 - 1),
    "int64": (-(2**63), 2**63 - 1),
    "uint": (0, 2**64 - 1),
    "uint8": (0, 2**8 - 1),
    "uint16": (0, 2**16 - 1),
    "uint32": (0, 2**32 - 1),
    "uint64": (0, 2**64 - 1),
}
_FLOAT32_MAX = struct.unpack(">f", b"\x7f\x7f\xff\xff")[0]
# ASCII digits only; no digit separators or surrounding whitespace.
_INTEGER_SYNTAX = re.compile(r"[+-]?[0-9]+")
_FLOAT_SYNTAX = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
    re.IGNORECASE,
)


def handle_string(values: list[str]) -> str:
    """Join all values with a single space."""

    return " ".join(values)


def handle_string_list(values: list[str]) -> list[str]:
    return list(values)


def handle_bool(values: list[str]) -> bool:
    """Parse the concatenated values as a boolean token."""

    return parse_required_boolean("".join(values))


def handle_bool_flag(values: list[str]) -> bool:
    """Treat a bare option as `True`; otherwise parse its single value."""

    if not values:
        return True
    return handle_bool(values)


def parse_integer(token: str, descriptor: str) -> int:
    """Parse a base-10 integer and check it against the width named by `descriptor`.

    Raises:
        ValueError: If `token` is not an integer or is out of range.
    """

    if _INTEGER_SYNTAX.fullmatch(token) is None:
        raise ValueError(f'invalid syntax: "{token}"')
    value = int(token, 10)
    bounds = _INTEGER_RANGES[descriptor]
    if bounds is not None and not bounds[0] <= value <= bounds[1]:
        raise ValueError(f'value out of range for {descriptor}: "{token}"')
    return value


def parse_float(token: str, descriptor: str) -> float:
    """Parse a float; `float32` values are range-checked and rounded to single precision."""

    if _FLOAT_SYNTAX.fullmatch(token) is None:
        raise ValueError(f'invalid syntax: "{token}"')
    value = float(token)
    if descriptor != "float32":
        return value
    if math.isfinite(value) and abs(value) > _FLOAT32_MAX:
        raise ValueError(f'value out of range for float32: "{token}"')
    return struct.unpack("f", struct.pack("f", value))[0]


def integer_handler(descriptor: str) -> TypeHandler:
    """Return a scalar handler for the integer type named by `descriptor`."""

    def _handle(values: list[str]) -> int:
        return parse_integer("".join(values), descriptor)

    return _handle


def integer_list_handler(descriptor: str) -> TypeHandler:
    """Return a list handler for the integer type named by `descriptor`."""

    def _handle(values: list[str]) -> list[int]:
        return [parse_integer(value, descriptor) for value in values]

    return _handle


def float_handler(descriptor: str) -> TypeHandler:
    """Return a scalar handler for `float`, `float32` or `float64`."""

    def _handle(values: list[str]) -> float:
        return parse_float("".join(values), descriptor)

    return _handle


def float_list_handler(descriptor: str) -> TypeHandler:
    """Return a list handler for `float`, `float32` or `float64`."""

    def _handle(values: list[str]) -> list[float]:
        return [parse_float(value, descriptor) for value in values]

    return _handle


def handle_bool_list(values: list[str]) -> list[bool]:
    return [parse_required_boolean(value) for value in values]


def builtin_type_handlers() -> dict[str, tuple[Callable[[list[str]], object], ...]]:
    """Return the default registry entries as validator/converter chains."""

    entries: dict[str, tuple[Callable[[list[str]], object], ...]] = {
        "str": (handle_string,),
        "list[str]": (validate_value_limit(1, 0), handle_string_list),
        "bool": (validate_value_limit(0, 1), handle_bool_flag),
        "list[bool]": (validate_value_limit(1, 0), handle_bool_list),
    }
    for descriptor in _INTEGER_RANGES:
        entries[descriptor] = (validate_single_value(), integer_handler(descriptor))
        entries[f"list[{descriptor}]"] = (
            validate_value_limit(1, 0),
            integer_list_handler(descriptor),
        )
    for descriptor in ("float", "float32", "float64"):
        entries[descriptor] = (validate_single_value(), float_handler(descriptor))
        entries[f"list[{descriptor}]"] = (
            validate_value_limit(1, 0),
            float_list_handler(descriptor),
        )
    return entries
