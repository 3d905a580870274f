"""
properties-toolkit — extraction strategies.

File: src/properties_toolkit/extractors.py
Last updated: 2026-10-19

Purpose
- Resolve the ``str -> T`` function used to parse a bound field.

What should be included in this file
- ``PropertyExtractor``: base class declared on a field's ``FromProperty``.
- ``GenericExtractor``: built-in parsers for primitive kinds and ``str``, else
  the target type's own single-string constructor.
- ``TolerantGenericExtractor``: generic extraction with every condition mapped
  to ``None``.

Functional requirements
- A type without a usable single-string constructor fails at resolution time
  with ``BindingError``, never during evaluation.
- Failures inside a generic constructor surface as ``ConstructionError``.
"""

from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

from properties_toolkit.conditions import Condition
from properties_toolkit.defaults import DefaultSettings
from properties_toolkit.errors import BindingError, ConstructionError
from properties_toolkit.kinds import PrimitiveKind, parse_string


class PropertyExtractor(ABC):
    """Extraction strategy declared on a bound field.

    Subclasses must be constructible without arguments.
    """

    @abstractmethod
    def extraction_method(self) -> Callable[[str], Any]:
        """Return the fixed ``str -> value`` function for this extractor."""

    def default_settings(self) -> DefaultSettings[Any] | None:
        """Registry attached to every property built from this extractor."""

        return None


class GenericExtractor(PropertyExtractor):
    """Picks an extraction function from the bound field's own type."""

    def extraction_method(self) -> Callable[[str], Any]:
        raise BindingError(
            "GenericExtractor has no fixed extraction method; "
            "use extraction_method_for(value_type)"
        )

    def extraction_method_for(
        self,
        value_type: type,
        kind: PrimitiveKind | None = None,
    ) -> Callable[[str], Any]:
        if kind is not None:
            return kind.parser
        if value_type is str:
            return parse_string
        default_kind = PrimitiveKind.for_type(value_type)
        if default_kind is not None:
            return default_kind.parser
        return _string_constructor(value_type)


class TolerantGenericExtractor(GenericExtractor):
    """Generic extraction that returns ``None`` instead of raising."""

    def default_settings(self) -> DefaultSettings[Any] | None:
        return DefaultSettings().when(*Condition).then_return(None)


def _string_constructor(value_type: type) -> Callable[[str], Any]:
    if not callable(value_type):
        raise BindingError(f"{value_type!r} is not a constructible type")
    if not _accepts_single_string(value_type):
        raise BindingError(
            f"No valid constructor exists for object type {_type_name(value_type)}. "
            "Consider using a custom PropertyExtractor"
        )

    def construct(text: str) -> Any:
        try:
            return value_type(text)
        except Exception as exc:
            raise ConstructionError(
                f"Could not construct argument of type {_type_name(value_type)} "
                f"from value {text}"
            ) from exc

    return construct


def _accepts_single_string(value_type: type) -> bool:
    try:
        signature = inspect.signature(value_type)
    except (TypeError, ValueError):
        # builtins without an introspectable signature are attempted as-is
        return True
    try:
        signature.bind("")
    except TypeError:
        return False
    return True


def _type_name(value_type: type) -> str:
    module = getattr(value_type, "__module__", None)
    qualname = getattr(value_type, "__qualname__", repr(value_type))
    if module in (None, "builtins"):
        return qualname
    return f"{module}.{qualname}"


__all__ = ["GenericExtractor", "PropertyExtractor", "TolerantGenericExtractor"]
