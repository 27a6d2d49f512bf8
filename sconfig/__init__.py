"""Top-level package for sconfig.

This package parses simple line-oriented ``key value ...`` config files into
caller-provided objects with annotated attributes. The main entry points are
`parse` and `must_parse`; custom field types are supported through
`register_type`.
"""

from loguru import logger

from .errors import (
    AnnotationError,
    HandlerError,
    ParseError,
    SconfigError,
    StructureError,
    UnknownOptionError,
    UnknownTypeError,
    ValidationError,
)
from .fields import FieldSlot, fields, type_descriptor
from .handlers import (
    register_type,
    reset_type_handlers,
    unregister_type,
    validate_no_value,
    validate_single_value,
    validate_value_limit,
)
from .lines import LogicalLine, normalize
from .locate import find_config
from .parser import must_parse, parse
from .telemetry import ParseLogger

logger.disable(__name__)

__all__ = [
    "AnnotationError",
    "FieldSlot",
    "HandlerError",
    "LogicalLine",
    "ParseError",
    "ParseLogger",
    "SconfigError",
    "StructureError",
    "UnknownOptionError",
    "UnknownTypeError",
    "ValidationError",
    "__version__",
    "fields",
    "find_config",
    "must_parse",
    "normalize",
    "parse",
    "register_type",
    "reset_type_handlers",
    "type_descriptor",
    "unregister_type",
    "validate_no_value",
    "validate_single_value",
    "validate_value_limit",
]

__version__ = "0.1.0"
