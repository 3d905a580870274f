"""Typed access to raw property values."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from properties_toolkit.binding import bind
from properties_toolkit.kinds import (
    parse_boolean,
    parse_byte,
    parse_char,
    parse_double,
    parse_float,
    parse_int,
    parse_long,
    parse_short,
    parse_string,
)
from properties_toolkit.property import Property
from properties_toolkit.sources import PropertySource

T = TypeVar("T")


class PropertyReader:
    """Builds fresh ``Property`` instances over a single source.

    Example::

        reader = PropertyReader({"intKey": "12352"})
        value = reader.get_int("intKey").with_constraints(lambda v: v < 20000).get()
    """

    __slots__ = ("source",)

    def __init__(self, source: PropertySource) -> None:
        self.source = source

    def get_byte(self, key: str) -> Property[int]:
        return self.get_custom(key, parse_byte)

    def get_short(self, key: str) -> Property[int]:
        return self.get_custom(key, parse_short)

    def get_int(self, key: str) -> Property[int]:
        return self.get_custom(key, parse_int)

    def get_long(self, key: str) -> Property[int]:
        return self.get_custom(key, parse_long)

    def get_float(self, key: str) -> Property[float]:
        return self.get_custom(key, parse_float)

    def get_double(self, key: str) -> Property[float]:
        return self.get_custom(key, parse_double)

    def get_boolean(self, key: str) -> Property[bool]:
        return self.get_custom(key, parse_boolean)

    def get_char(self, key: str) -> Property[str]:
        return self.get_custom(key, parse_char)

    def get_string(self, key: str) -> Property[str]:
        return self.get_custom(key, parse_string)

    def get_custom(self, key: str, parser: Callable[[str], T]) -> Property[T]:
        return Property(key, self.source.get(key), parser)

    def bind(self, target: object) -> None:
        bind(target, self.source)


__all__ = ["PropertyReader"]
