"""
properties-toolkit — error taxonomy.

File: src/properties_toolkit/errors.py
Last updated: 2026-10-19

Purpose
- Define the public exception hierarchy raised while reading and binding properties.

What should be included in this file
- Data-path errors (missing, unparsable, invalid values) that a
  ``DefaultSettings`` registry may intercept.
- Structural errors (registry misuse, binding misconfiguration) that are never
  intercepted.

Functional requirements
- Every data-path error carries the property key and the condition it maps to.
- Underlying causes are chained via ``__cause__``.
"""

from __future__ import annotations

from properties_toolkit.conditions import Condition


class PropertiesError(Exception):
    """Base class for every error raised by the toolkit."""

    condition: Condition | None = None


class MissingPropertyError(PropertiesError):
    """Raised when a property value is absent or empty."""

    def __init__(self, key: str) -> None:
        self.key = key
        self.condition = Condition.EMPTY
        super().__init__(f"Property, {key}, is missing")


class InvalidTypeError(PropertiesError):
    """Raised when a raw value cannot be converted to the expected type."""

    def __init__(self, key: str, raw_value: str | None) -> None:
        self.key = key
        self.raw_value = raw_value
        self.condition = Condition.PARSE_FAILED
        super().__init__(
            f"Key, {key}, contains a value, {raw_value}, that cannot be converted "
            "to the expected type"
        )


class ValidationError(PropertiesError):
    """Raised when a parsed value is rejected by one of its constraints."""

    def __init__(self, key: str, raw_value: str | None) -> None:
        self.key = key
        self.raw_value = raw_value
        self.condition = Condition.INVALID
        super().__init__(f"Key, {key}, contains an invalid value, {raw_value}")


class ConfigurationError(PropertiesError, ValueError):
    """Raised when the toolkit itself is misconfigured by the caller."""


class BindingError(ConfigurationError):
    """Raised when field binding metadata is structurally invalid.

    Binding errors are programming errors. A ``DefaultSettings`` registry never
    intercepts them.
    """

    def __init__(self, message: str, *, field_name: str | None = None) -> None:
        self.field_name = field_name
        super().__init__(message)


class ConstructionError(ValueError):
    """Raised when a generic string constructor rejects its argument.

    Surfaces as the ``__cause__`` of an ``InvalidTypeError``.
    """


__all__ = [
    "BindingError",
    "ConfigurationError",
    "ConstructionError",
    "InvalidTypeError",
    "MissingPropertyError",
    "PropertiesError",
    "ValidationError",
]
