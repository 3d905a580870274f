"""Typed constraints that can be declared on bound fields."""

from __future__ import annotations

import numbers
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any, ClassVar

from properties_toolkit.errors import BindingError
from properties_toolkit.kinds import PrimitiveKind


class PropertyConstraint(ABC):
    """Predicate plus the type tag it applies to.

    ``applicable_type`` must be a superclass of the bound field's boxed type.
    Subclasses must be constructible without arguments.
    """

    applicable_type: ClassVar[type] = object

    @abstractmethod
    def predicate(self) -> Callable[[Any], bool]:
        """Return the predicate appended to the property's constraints."""


class NumberConstraint(PropertyConstraint):
    applicable_type: ClassVar[type] = numbers.Number


class NumberMustBePositive(NumberConstraint):
    def predicate(self) -> Callable[[Any], bool]:
        return _must_be_positive


class NumberMustNotBePositive(NumberConstraint):
    def predicate(self) -> Callable[[Any], bool]:
        return _must_not_be_positive


class NumberMustBeNegative(NumberConstraint):
    def predicate(self) -> Callable[[Any], bool]:
        return _must_be_negative


class NumberMustNotBeNegative(NumberConstraint):
    def predicate(self) -> Callable[[Any], bool]:
        return _must_not_be_negative


def _must_be_positive(number: numbers.Real | None) -> bool:
    return number is not None and number > 0


def _must_not_be_positive(number: numbers.Real | None) -> bool:
    return number is not None and number <= 0


def _must_be_negative(number: numbers.Real | None) -> bool:
    return number is not None and number < 0


def _must_not_be_negative(number: numbers.Real | None) -> bool:
    return number is not None and number >= 0


def boxed_type(value_type: type, kind: PrimitiveKind | None = None) -> type:
    """Map a primitive kind to its boxed type; other types map to themselves."""

    if kind is not None:
        return kind.boxed_type
    return value_type


def is_assignable(applicable: type, field_type: type) -> bool:
    """Whether a constraint tagged ``applicable`` may be declared on ``field_type``.

    ``bool`` subclasses ``int``, but a boolean field is not numeric: numeric tags
    other than ``bool`` itself are rejected for it.
    """

    if not issubclass(field_type, applicable):
        return False
    if issubclass(field_type, bool) and not issubclass(applicable, bool):
        return not issubclass(applicable, numbers.Number)
    return True


def resolve_constraint(
    constraint_type: object,
    value_type: type,
    *,
    kind: PrimitiveKind | None = None,
    field_name: str | None = None,
) -> Callable[[Any], bool]:
    """Instantiate ``constraint_type`` and check it applies to the field type."""

    if not isinstance(constraint_type, type) or not issubclass(
        constraint_type, PropertyConstraint
    ):
        raise BindingError(
            f"{constraint_type!r} does not extend {PropertyConstraint.__qualname__}",
            field_name=field_name,
        )
    try:
        constraint = constraint_type()
    except Exception as exc:
        raise BindingError(
            f"The constraint class, {constraint_type.__qualname__}, cannot be instantiated. "
            "Ensure it is concrete and takes no constructor arguments.",
            field_name=field_name,
        ) from exc

    applicable = constraint.applicable_type
    if not isinstance(applicable, type):
        raise BindingError(
            f"{constraint_type.__qualname__}.applicable_type must be a type, "
            f"got {applicable!r}",
            field_name=field_name,
        )
    field_type = boxed_type(value_type, kind)
    if not is_assignable(applicable, field_type):
        raise BindingError(
            f"The type of constraint {constraint_type.__qualname__} on field {field_name} "
            f"({applicable.__qualname__}) is not assignable from the field type "
            f"({field_type.__qualname__})",
            field_name=field_name,
        )

    predicate = constraint.predicate()
    if not callable(predicate):
        raise BindingError(
            f"{constraint_type.__qualname__}.predicate() must return a callable",
            field_name=field_name,
        )
    return predicate


__all__ = [
    "NumberConstraint",
    "NumberMustBeNegative",
    "NumberMustBePositive",
    "NumberMustNotBeNegative",
    "NumberMustNotBePositive",
    "PropertyConstraint",
    "boxed_type",
    "is_assignable",
    "resolve_constraint",
]
