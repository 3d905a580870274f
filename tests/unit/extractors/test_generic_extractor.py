"""
properties-toolkit — unit tests for extraction strategies

File: tests/unit/extractors/test_generic_extractor.py
Last updated: 2026-10-19

Purpose
- Validate built-in parser selection and the single-string constructor fallback.

What this test file should cover
- Primitive kinds and ``str`` resolve to built-in parsers.
- Custom types with a one-argument constructor are constructed from text.
- Types without one fail at resolution time with ``BindingError``.
- Constructor failures surface as ``ConstructionError``.
"""

from __future__ import annotations

import enum
import uuid
from decimal import Decimal
from pathlib import PurePosixPath

import pytest

from properties_toolkit import (
    BindingError,
    Condition,
    ConstructionError,
    GenericExtractor,
    PrimitiveKind,
    TolerantGenericExtractor,
)
from properties_toolkit.kinds import parse_long, parse_string


class _Colour(enum.Enum):
    RED = "red"
    BLUE = "blue"


class _Coordinates:
    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


class _Version:
    def __init__(self, text: str) -> None:
        major, minor = text.split(".")
        self.major = int(major)
        self.minor = int(minor)


def test_explicit_kind_wins_over_value_type() -> None:
    extraction = GenericExtractor().extraction_method_for(int, PrimitiveKind.BYTE)

    assert extraction is PrimitiveKind.BYTE.parser
    assert extraction("-128") == -128
    with pytest.raises(ValueError, match="out of range"):
        extraction("128")


def test_bare_builtin_types_use_default_kinds() -> None:
    extractor = GenericExtractor()

    assert extractor.extraction_method_for(int) is parse_long
    assert extractor.extraction_method_for(str) is parse_string
    assert extractor.extraction_method_for(bool)("yes") is True
    assert extractor.extraction_method_for(float)("2.5") == 2.5


def test_custom_type_with_string_constructor_is_built() -> None:
    extraction = GenericExtractor().extraction_method_for(_Version)

    version = extraction("3.14")

    assert (version.major, version.minor) == (3, 14)


@pytest.mark.parametrize(
    ("value_type", "raw", "expected"),
    [
        (Decimal, "1.10", Decimal("1.10")),
        (PurePosixPath, "/etc/app", PurePosixPath("/etc/app")),
        (_Colour, "blue", _Colour.BLUE),
        (
            uuid.UUID,
            "12345678-1234-5678-1234-567812345678",
            uuid.UUID("12345678-1234-5678-1234-567812345678"),
        ),
    ],
)
def test_standard_library_types_are_constructed(
    value_type: type, raw: str, expected: object
) -> None:
    assert GenericExtractor().extraction_method_for(value_type)(raw) == expected


def test_type_without_single_string_constructor_fails_at_resolution() -> None:
    with pytest.raises(BindingError, match="No valid constructor exists"):
        GenericExtractor().extraction_method_for(_Coordinates)


def test_constructor_failure_is_wrapped_as_construction_error() -> None:
    extraction = GenericExtractor().extraction_method_for(_Version)

    with pytest.raises(ConstructionError, match="Could not construct argument") as excinfo:
        extraction("not-a-version")

    assert isinstance(excinfo.value, ValueError)
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_generic_extractor_has_no_fixed_method() -> None:
    with pytest.raises(BindingError):
        GenericExtractor().extraction_method()


def test_generic_extractor_declares_no_default_settings() -> None:
    assert GenericExtractor().default_settings() is None


def test_tolerant_extractor_maps_every_condition_to_none() -> None:
    settings = TolerantGenericExtractor().default_settings()

    assert settings is not None
    for condition in Condition:
        assert settings.apply(condition, "k", "raw", ValueError("unused")) is None
