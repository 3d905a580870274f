"""
properties-toolkit — primitive value kinds.

File: src/properties_toolkit/kinds.py
Last updated: 2026-10-19

Purpose
- Enumerate the primitive kinds a bound field can hold, with their boxed type,
  zero value, and built-in string parser.

What should be included in this file
- ``PrimitiveKind`` and the ``Annotated`` aliases used to pick a kind on a field.
- Range-checked integer parsers, a single-precision float parser, a strict
  boolean parser, and a single-character parser.

Functional requirements
- Integer kinds accept only an optional sign followed by ASCII digits, and
  reject values outside their two's-complement range.
- Parsers raise ``ValueError`` on bad input; they never return ``None``.
"""

from __future__ import annotations

import math
import re
import struct
from collections.abc import Callable
from enum import Enum
from typing import Annotated, Final

_BOOLEAN_TRUE: Final[frozenset[str]] = frozenset({"1", "true", "t", "yes", "y", "on"})
_BOOLEAN_FALSE: Final[frozenset[str]] = frozenset({"0", "false", "f", "no", "n", "off"})
_DECIMAL_INTEGER: Final = re.compile(r"[+-]?[0-9]+")


def _integer_parser(bits: int) -> Callable[[str], int]:
    lower = -(1 << (bits - 1))
    upper = (1 << (bits - 1)) - 1

    def parse(text: str) -> int:
        if _DECIMAL_INTEGER.fullmatch(text) is None:
            raise ValueError(f"{text!r} is not a decimal integer")
        value = int(text, 10)
        if value < lower or value > upper:
            raise ValueError(f"value {value} out of range for {bits}-bit integer")
        return value

    return parse


def parse_double(text: str) -> float:
    return float(text.strip())


def parse_float(text: str) -> float:
    value = float(text.strip())
    if math.isfinite(value):
        try:
            struct.pack("f", value)
        except OverflowError as exc:
            raise ValueError(f"value {text!r} out of range for single precision") from exc
    return value


def parse_boolean(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered in _BOOLEAN_TRUE:
        return True
    if lowered in _BOOLEAN_FALSE:
        return False
    raise ValueError(f"{text!r} must be a boolean (true/false/1/0/yes/no/on/off)")


def parse_char(text: str) -> str:
    if len(text) != 1:
        raise ValueError(f"{text!r} must be exactly one character")
    return text


def parse_string(text: str) -> str:
    return text


parse_byte = _integer_parser(8)
parse_short = _integer_parser(16)
parse_int = _integer_parser(32)
parse_long = _integer_parser(64)


class PrimitiveKind(Enum):
    """Primitive field kind: ``(boxed type, zero value, parser)``."""

    BYTE = (int, 0, parse_byte)
    SHORT = (int, 0, parse_short)
    INT = (int, 0, parse_int)
    LONG = (int, 0, parse_long)
    FLOAT = (float, 0.0, parse_float)
    DOUBLE = (float, 0.0, parse_double)
    BOOLEAN = (bool, False, parse_boolean)
    CHAR = (str, "\x00", parse_char)

    def __init__(self, boxed_type: type, zero_value: object, parser: Callable[[str], object]) -> None:
        self.boxed_type = boxed_type
        self.zero_value = zero_value
        self.parser = parser

    @classmethod
    def for_type(cls, value_type: object) -> PrimitiveKind | None:
        """Default kind for a bare ``int``/``float``/``bool`` annotation."""

        return _DEFAULT_KINDS.get(value_type)  # type: ignore[arg-type]


_DEFAULT_KINDS: Final[dict[type, PrimitiveKind]] = {
    bool: PrimitiveKind.BOOLEAN,
    int: PrimitiveKind.LONG,
    float: PrimitiveKind.DOUBLE,
}

Byte = Annotated[int, PrimitiveKind.BYTE]
Short = Annotated[int, PrimitiveKind.SHORT]
Int = Annotated[int, PrimitiveKind.INT]
Long = Annotated[int, PrimitiveKind.LONG]
Float = Annotated[float, PrimitiveKind.FLOAT]
Double = Annotated[float, PrimitiveKind.DOUBLE]
Boolean = Annotated[bool, PrimitiveKind.BOOLEAN]
Char = Annotated[str, PrimitiveKind.CHAR]


__all__ = [
    "Boolean",
    "Byte",
    "Char",
    "Double",
    "Float",
    "Int",
    "Long",
    "PrimitiveKind",
    "Short",
    "parse_boolean",
    "parse_byte",
    "parse_char",
    "parse_double",
    "parse_float",
    "parse_int",
    "parse_long",
    "parse_short",
    "parse_string",
]
