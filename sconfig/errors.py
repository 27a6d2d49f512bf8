"""Domain exceptions for config file normalization and field binding."""

from __future__ import annotations

from pathlib import Path


class SconfigError(Exception):
    """Base class for all errors raised by the parsing engine."""

    def __init__(self, detail: str) -> None:
        """Initialize the error with a human-readable detail message."""

        super().__init__(detail)
        self.detail = detail


class StructureError(SconfigError):
    """Raised when a config file is malformed at the line level."""


class UnknownOptionError(SconfigError):
    """Raised when an option key matches neither the singular nor the plural field."""

    def __init__(self, *, key: str, field_name: str, plural_name: str) -> None:
        """Initialize the error with both attempted field names."""

        super().__init__(
            f"unknown option (field {field_name} or {plural_name} is missing)"
        )
        self.key = key
        self.field_name = field_name
        self.plural_name = plural_name


class ValidationError(SconfigError, ValueError):
    """Raised by validators when the number of values is not accepted."""


class UnknownTypeError(SconfigError):
    """Raised when no handler exists for a field's type."""

    def __init__(self, *, descriptor: str) -> None:
        super().__init__(f"don't know how to set fields of the type {descriptor}")
        self.descriptor = descriptor


class HandlerError(SconfigError):
    """Raised when a caller-supplied field handler fails."""

    def __init__(self, *, field_name: str, detail: str) -> None:
        """Initialize the error, marking it as coming from a field handler."""

        super().__init__(f"{detail} (from handler)")
        self.field_name = field_name


class ParseError(SconfigError):
    """Raised (or returned) when one logical line could not be applied.

    The message has the form ``<source> line <N>: error parsing <key>: <cause>``;
    the original exception is available as ``__cause__``.
    """

    def __init__(
        self,
        *,
        source: Path | str,
        line: int,
        key: str,
        detail: str,
    ) -> None:
        """Initialize a line-scoped parse error."""

        super().__init__(f"{source} line {line}: error parsing {key}: {detail}")
        self.source = Path(source)
        self.line = line
        self.key = key
        self.cause_detail = detail


class AnnotationError(SconfigError):
    """Raised when a target's field annotations cannot be resolved."""

    def __init__(self, *, target_type: str, detail: str) -> None:
        """Initialize the error with the target's type name."""

        super().__init__(f"cannot resolve field annotations of {target_type}: {detail}")
        self.target_type = target_type
