"""Handlers for fields holding compiled regular expressions.

Importing this module registers ``re.Pattern`` and ``list[re.Pattern]``.
"""

from __future__ import annotations

import re

from .registry import register_type
from .validate import validate_value_limit


def handle_pattern(values: list[str]) -> re.Pattern[str]:
    """Compile the concatenated values as one pattern."""

    return re.compile("".join(values))


def handle_pattern_list(values: list[str]) -> list[re.Pattern[str]]:
    """Compile every value as its own pattern."""

    return [re.compile(value) for value in values]


def register() -> None:
    """Register the regular expression handlers."""

    register_type("re.Pattern", validate_value_limit(1, 0), handle_pattern)
    register_type("list[re.Pattern]", validate_value_limit(1, 0), handle_pattern_list)


register()
