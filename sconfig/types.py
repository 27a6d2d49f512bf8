"""Width-restricted numeric types for config targets.

Annotate a field with one of these to get range-checked conversion; the
`NewType` name is the field's type descriptor (``Int64`` → ``"int64"``).
"""

from __future__ import annotations

from typing import NewType


Int8 = NewType("int8", int)
Int16 = NewType("int16", int)
Int32 = NewType("int32", int)
Int64 = NewType("int64", int)
Uint = NewType("uint", int)
Uint8 = NewType("uint8", int)
Uint16 = NewType("uint16", int)
Uint32 = NewType("uint32", int)
Uint64 = NewType("uint64", int)
Float32 = NewType("float32", float)
Float64 = NewType("float64", float)

__all__ = [
    "Float32",
    "Float64",
    "Int16",
    "Int32",
    "Int64",
    "Int8",
    "Uint",
    "Uint16",
    "Uint32",
    "Uint64",
    "Uint8",
]
