"""Option key to field name resolution.

Responsibilities:
- Transform hyphenated option keys into the target's attribute naming convention.
- Normalize common acronyms in camel-case names (``BaseUrl`` → ``BaseURL``).
- Fall back to the plural field name so list fields accept either spelling.
"""

from __future__ import annotations

from collections.abc import Container
import re
from typing import Literal

import inflection

from .errors import UnknownOptionError


Naming = Literal["snake", "camel"]

# Taken from the golint initialism list.
ACRONYMS: tuple[str, ...] = (
    "API", "ASCII", "CPU", "CSS", "DNS", "EOF", "GUID", "HTML", "HTTPS", "HTTP",
    "ID", "IP", "JSON", "LHS", "QPS", "RAM", "RHS", "RPC", "SLA", "SMTP", "SQL",
    "SSH", "TCP", "TLS", "TTL", "UDP", "UI", "UID", "UUID", "URI", "URL", "UTF8",
    "VM", "XML", "XSRF", "XSS",
)
_ACRONYM_LOOKUP = {acronym.lower(): acronym for acronym in ACRONYMS}
_SEGMENT_DELIMITERS = re.compile(r"[-_]+")


def _camel_segment(segment: str) -> str:
    acronym = _ACRONYM_LOOKUP.get(segment.lower())
    if acronym is not None:
        return acronym
    return segment[:1].upper() + segment[1:]


def field_name_from_key(key: str, naming: Naming = "snake") -> str:
    """Return the attribute name an option key maps to under `naming`."""

    if naming == "camel":
        segments = [segment for segment in _SEGMENT_DELIMITERS.split(key) if segment]
        return "".join(_camel_segment(segment) for segment in segments)
    if naming == "snake":
        return inflection.underscore(key)
    raise ValueError(f"Unsupported naming convention `{naming}`.")


def resolve_field(key: str, names: Container[str], naming: Naming = "snake") -> str:
    """Resolve `key` to the singular or plural field name present in `names`.

    Raises:
        UnknownOptionError: If neither candidate name exists.
    """

    field_name = field_name_from_key(key, naming)
    if field_name in names:
        return field_name

    plural_name = inflection.pluralize(field_name)
    if plural_name in names:
        return plural_name

    raise UnknownOptionError(key=key, field_name=field_name, plural_name=plural_name)
