"""Type handler registry, built-in handlers and arity validators.

Optional handler plugins live in submodules and register themselves on import:
`sconfig.handlers.regexp`, `sconfig.handlers.net`, `sconfig.handlers.bignum`.
"""

from .builtin import TypeHandler
from .registry import (
    TYPE_HANDLERS,
    lookup_type_handler,
    register_type,
    registered_types,
    reset_type_handlers,
    unregister_type,
)
from .validate import (
    Validator,
    validate_no_value,
    validate_single_value,
    validate_value_limit,
)

__all__ = [
    "TYPE_HANDLERS",
    "TypeHandler",
    "Validator",
    "lookup_type_handler",
    "register_type",
    "registered_types",
    "reset_type_handlers",
    "unregister_type",
    "validate_no_value",
    "validate_single_value",
    "validate_value_limit",
]
