"""
properties-toolkit — unit tests for the property evaluation pipeline

File: tests/unit/property/test_property.py
Last updated: 2026-10-19

Purpose
- Validate the empty/parse/validate state machine and its registry hand-off.

What this test file should cover
- Integer key scenarios: pass-through, missing, parse failure with a
  registered behavior, and constraint rejection.
- Short-circuiting: at most one behavior application per ``get``.
- Property-based checks for pass-through, determinism, ignored ``None``
  constraints, and raising constraints behaving like ``False``.
"""

from __future__ import annotations

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from properties_toolkit import (
    Condition,
    DefaultSettings,
    Empty,
    Invalid,
    InvalidTypeError,
    MissingPropertyError,
    Ok,
    ParseFailed,
    Property,
    PropertyReader,
    ValidationError,
)
from properties_toolkit.kinds import parse_int


def _int_property(raw: str | None) -> Property[int]:
    return Property("intKey", raw, parse_int)


def _shape(outcome: object) -> tuple[object, ...]:
    # exceptions compare by identity; compare their types instead
    if isinstance(outcome, Ok):
        return ("ok", outcome.value)
    cause = getattr(outcome, "cause", None)
    return (type(outcome).__name__, getattr(outcome, "index", None), type(cause))


def test_parsable_value_without_constraints_is_returned() -> None:
    reader = PropertyReader({"intKey": "12352"})

    assert reader.get_int("intKey").get() == 12352


def test_absent_key_without_registry_raises_missing() -> None:
    reader = PropertyReader({})

    with pytest.raises(MissingPropertyError, match="Property, intKey, is missing") as excinfo:
        reader.get_int("intKey").get()

    assert excinfo.value.key == "intKey"
    assert excinfo.value.condition is Condition.EMPTY


def test_parse_failure_returns_registered_value_and_records_task() -> None:
    observed: list[tuple[str, str | None]] = []
    registry = (
        DefaultSettings()
        .when(Condition.PARSE_FAILED)
        .then_do(lambda key, raw: observed.append((key, raw)))
        .then_return(0)
    )

    result = PropertyReader({"intKey": "notAnInt"}).get_int("intKey").with_default_settings(
        registry
    ).get()

    assert result == 0
    assert observed == [("intKey", "notAnInt")]


def test_constraint_rejection_without_registry_raises_invalid() -> None:
    prop = PropertyReader({"intKey": "43"}).get_int("intKey").with_constraints(lambda v: v < 40)

    with pytest.raises(ValidationError, match="Key, intKey, contains an invalid value, 43") as exc:
        prop.get()

    assert exc.value.condition is Condition.INVALID
    assert exc.value.__cause__ is None


def test_empty_string_counts_as_missing() -> None:
    with pytest.raises(MissingPropertyError):
        _int_property("").get()


def test_parse_failure_without_registry_chains_original_cause() -> None:
    with pytest.raises(InvalidTypeError) as excinfo:
        _int_property("notAnInt").get()

    assert excinfo.value.key == "intKey"
    assert excinfo.value.raw_value == "notAnInt"
    assert isinstance(excinfo.value.__cause__, ValueError)


def test_raising_constraint_is_chained_into_validation_error() -> None:
    def broken(value: int) -> bool:
        raise ZeroDivisionError("bad predicate")

    with pytest.raises(ValidationError) as excinfo:
        _int_property("5").with_constraints(broken).get()

    assert isinstance(excinfo.value.__cause__, ZeroDivisionError)


def test_first_failing_constraint_stops_evaluation() -> None:
    invoked: list[str] = []

    def first(value: int) -> bool:
        invoked.append("first")
        return False

    def second(value: int) -> bool:
        invoked.append("second")
        return False

    outcome = _int_property("5").with_constraints(first, second).evaluate()

    assert outcome == Invalid(index=0)
    assert invoked == ["first"]


def test_constraints_run_in_insertion_order() -> None:
    invoked: list[int] = []
    prop = _int_property("5")
    for index in range(4):
        prop.add_constraint(lambda value, index=index: invoked.append(index) is None)

    assert prop.get() == 5
    assert invoked == [0, 1, 2, 3]


def test_only_first_condition_behavior_is_applied() -> None:
    applied: list[str] = []
    registry = (
        DefaultSettings()
        .when(Condition.PARSE_FAILED)
        .then_do(lambda key, raw: applied.append("parse"))
        .then_return(-1)
        .when(Condition.INVALID)
        .then_do(lambda key, raw: applied.append("invalid"))
        .then_return(-2)
    )

    result = _int_property("x").with_default_settings(registry).with_constraints(
        lambda v: False
    ).get()

    assert result == -1
    assert applied == ["parse"]


def test_empty_short_circuits_extractor() -> None:
    calls: list[str] = []

    def extractor(text: str) -> str:
        calls.append(text)
        return text

    registry = DefaultSettings().when(Condition.EMPTY).then_return("fallback")

    assert Property("k", None, extractor).with_default_settings(registry).get() == "fallback"
    assert calls == []


def test_unregistered_condition_still_raises_with_registry_attached() -> None:
    registry = DefaultSettings().when(Condition.EMPTY).then_return(0)

    with pytest.raises(ValidationError):
        _int_property("43").with_default_settings(registry).with_constraints(
            lambda v: v < 40
        ).get()


def test_evaluate_reports_tagged_outcomes() -> None:
    assert _int_property(None).evaluate() == Empty()
    assert _int_property("7").evaluate() == Ok(7)

    failed = _int_property("seven").evaluate()
    assert isinstance(failed, ParseFailed)
    assert failed.condition is Condition.PARSE_FAILED


def test_str_renders_key_and_raw_value() -> None:
    assert str(_int_property("12")) == "intKey: 12"


def test_extractor_exception_of_any_kind_is_a_parse_failure() -> None:
    def extractor(text: str) -> object:
        raise KeyError(text)

    with pytest.raises(InvalidTypeError) as excinfo:
        Property("k", "v", extractor).get()

    assert isinstance(excinfo.value.__cause__, KeyError)


@given(value=st.integers(min_value=-(2**31), max_value=2**31 - 1))
@settings(max_examples=50, derandomize=True, deadline=None)
def test_property_valid_values_pass_through_unchanged(value: int) -> None:
    prop = _int_property(str(value)).with_constraints(lambda v: isinstance(v, int))

    assert prop.get() == value


@given(
    raw=st.one_of(st.none(), st.text(max_size=12)),
    bound=st.integers(min_value=-50, max_value=50),
)
@settings(max_examples=50, derandomize=True, deadline=None)
def test_property_evaluation_is_deterministic(raw: str | None, bound: int) -> None:
    prop = _int_property(raw).with_constraints(lambda v: v < bound)

    assert _shape(prop.evaluate()) == _shape(prop.evaluate())


@given(
    value=st.integers(min_value=-100, max_value=100),
    leading=st.integers(min_value=0, max_value=4),
    trailing=st.integers(min_value=0, max_value=4),
)
@settings(max_examples=50, derandomize=True, deadline=None)
def test_property_none_constraints_do_not_change_outcome(
    value: int, leading: int, trailing: int
) -> None:
    invocations: list[int] = []

    def non_negative(v: int) -> bool:
        invocations.append(v)
        return v >= 0

    plain = _int_property(str(value)).with_constraints(non_negative)
    plain_outcome = plain.evaluate()
    plain_calls = len(invocations)
    invocations.clear()

    padded = _int_property(str(value)).with_constraints(
        *([None] * leading), non_negative, *([None] * trailing)
    )

    assert padded.evaluate() == plain_outcome
    assert len(invocations) == plain_calls
    assert len(padded.constraints) == 1


@given(value=st.integers(min_value=-100, max_value=100))
@settings(max_examples=50, derandomize=True, deadline=None)
def test_property_raising_constraint_matches_false_constraint(value: int) -> None:
    def rejects(v: int) -> bool:
        return False

    def raises(v: int) -> bool:
        raise ValueError("rejected")

    registry = DefaultSettings().when(Condition.INVALID).then_return("invalid")

    returned = _int_property(str(value)).with_default_settings(registry).with_constraints(
        rejects
    )
    raised = _int_property(str(value)).with_default_settings(registry).with_constraints(raises)

    assert returned.get() == raised.get() == "invalid"
    assert returned.evaluate().condition is raised.evaluate().condition is Condition.INVALID
