"""Handlers for arbitrary-precision decimal and rational fields.

Importing this module registers ``decimal.Decimal`` and ``fractions.Fraction``.
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from fractions import Fraction

from .registry import register_type
from .validate import validate_single_value


def handle_decimal(values: list[str]) -> Decimal:
    text = "".join(values)
    try:
        return Decimal(text)
    except InvalidOperation as exc:
        raise ValueError(f"unable to convert {text} to Decimal") from exc


def handle_fraction(values: list[str]) -> Fraction:
    text = "".join(values)
    try:
        return Fraction(text)
    except (ValueError, ZeroDivisionError) as exc:
        raise ValueError(f"unable to convert {text} to Fraction") from exc


def register() -> None:
    """Register the decimal and fraction handlers."""

    register_type("decimal.Decimal", validate_single_value(), handle_decimal)
    register_type("fractions.Fraction", validate_single_value(), handle_fraction)


register()
