"""
properties-toolkit — property evaluation pipeline.

File: src/properties_toolkit/property.py
Last updated: 2026-10-19

Purpose
- Turn one raw string value into a typed, validated value or a well-defined fallback.

What should be included in this file
- ``Outcome`` variants produced by the pure evaluation state machine:
  ``Ok | Empty | ParseFailed | Invalid``.
- ``Property``: holds key, raw value, extractor, ordered constraints and an
  optional ``DefaultSettings`` registry.

Functional requirements
- Empty check, then parse, then constraints in insertion order.
- The first failing stage short-circuits; at most one registry lookup per ``get``.
- A raising constraint is treated exactly like one returning ``False``.

Non-functional requirements
- ``evaluate`` is a pure read and may be repeated.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from properties_toolkit.conditions import Condition
from properties_toolkit.defaults import DefaultSettings
from properties_toolkit.errors import (
    InvalidTypeError,
    MissingPropertyError,
    PropertiesError,
    ValidationError,
)

T = TypeVar("T")

Extractor = Callable[[str], T]
Constraint = Callable[[T], bool]


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Empty:
    condition = Condition.EMPTY


@dataclass(frozen=True, slots=True)
class ParseFailed:
    cause: Exception
    condition = Condition.PARSE_FAILED


@dataclass(frozen=True, slots=True)
class Invalid:
    """Constraint rejection; ``cause`` is set only when the predicate raised."""

    index: int
    cause: Exception | None = None
    condition = Condition.INVALID


Failure = Empty | ParseFailed | Invalid
Outcome = Ok[T] | Failure


class Property(Generic[T]):
    """A single configuration value waiting to be evaluated."""

    __slots__ = ("_constraints", "_default_settings", "_extractor", "key", "raw_value")

    def __init__(self, key: str, raw_value: str | None, extractor: Extractor[T]) -> None:
        self.key = key
        self.raw_value = raw_value
        self._extractor = extractor
        self._default_settings: DefaultSettings[T] | None = None
        self._constraints: list[Constraint[T]] = []

    @property
    def default_settings(self) -> DefaultSettings[T] | None:
        return self._default_settings

    @property
    def constraints(self) -> tuple[Constraint[T], ...]:
        return tuple(self._constraints)

    def with_default_settings(self, default_settings: DefaultSettings[T] | None) -> Property[T]:
        self._default_settings = default_settings
        return self

    def add_constraint(self, constraint: Constraint[T] | None) -> Property[T]:
        if constraint is not None:
            self._constraints.append(constraint)
        return self

    def with_constraints(self, *constraints: Constraint[T] | None) -> Property[T]:
        return self.add_constraints(constraints)

    def add_constraints(self, constraints: Iterable[Constraint[T] | None]) -> Property[T]:
        for constraint in constraints:
            self.add_constraint(constraint)
        return self

    def evaluate(self) -> Outcome[T]:
        """Run the state machine without consulting the registry."""

        if self.raw_value is None or self.raw_value == "":
            return Empty()

        try:
            parsed = self._extractor(self.raw_value)
        except Exception as exc:
            return ParseFailed(cause=exc)

        for index, constraint in enumerate(self._constraints):
            try:
                accepted = constraint(parsed)
            except Exception as exc:
                return Invalid(index=index, cause=exc)
            if not accepted:
                return Invalid(index=index)

        return Ok(parsed)

    def get(self) -> T:
        """Return the validated value, or the registered behavior for the failure.

        Raises
        ------
        MissingPropertyError, InvalidTypeError, ValidationError
            When the outcome's condition has no registered behavior.
        """

        outcome = self.evaluate()
        if isinstance(outcome, Ok):
            return outcome.value
        return self._apply_default(outcome.condition, self._fallback_error(outcome))

    def _fallback_error(self, outcome: Failure) -> PropertiesError:
        error: PropertiesError
        if isinstance(outcome, Empty):
            return MissingPropertyError(self.key)
        if isinstance(outcome, ParseFailed):
            error = InvalidTypeError(self.key, self.raw_value)
            error.__cause__ = outcome.cause
            return error
        error = ValidationError(self.key, self.raw_value)
        if outcome.cause is not None:
            error.__cause__ = outcome.cause
        return error

    def _apply_default(self, condition: Condition, error: PropertiesError) -> T:
        if self._default_settings is None:
            raise error
        return self._default_settings.apply(condition, self.key, self.raw_value, error)

    def __str__(self) -> str:
        return f"{self.key}: {self.raw_value}"

    def __repr__(self) -> str:
        return f"Property(key={self.key!r}, constraints={len(self._constraints)})"


__all__ = [
    "Constraint",
    "Empty",
    "Extractor",
    "Failure",
    "Invalid",
    "Ok",
    "Outcome",
    "ParseFailed",
    "Property",
]
