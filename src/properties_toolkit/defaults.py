"""
properties-toolkit — condition registry.

File: src/properties_toolkit/defaults.py
Last updated: 2026-10-19

Purpose
- Map failure conditions to an overriding return value and an optional task.

What should be included in this file
- ``Behavior``: immutable return value plus task pair.
- ``DefaultSettings``: the registry, with a direct registration call and a
  fluent ``when(...).then_do(...).then_return(...)`` builder over one store.

Functional requirements
- Re-registering a condition replaces its behavior entirely (last write wins).
- A lookup miss re-raises the caller's fallback error unchanged.
- Tasks are not wrapped; a raising task propagates out of ``apply``.

Non-functional requirements
- Build once, then share read-only across evaluations.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Generic, TypeVar

from properties_toolkit.conditions import Condition
from properties_toolkit.errors import ConfigurationError
from properties_toolkit.observability.logging import redact_raw_value

T = TypeVar("T")

Task = Callable[[str, str | None], None]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Behavior(Generic[T]):
    """Value returned, and task run, when a registered condition triggers."""

    return_value: T
    task: Task | None = None


class DefaultSettings(Generic[T]):
    """Registry of condition behaviors consulted by ``Property.get``.

    Example::

        settings = (
            DefaultSettings[int]()
            .when(Condition.PARSE_FAILED, Condition.INVALID)
            .then_do(lambda key, raw: warnings.append(key))
            .then_return(0)
        )
    """

    __slots__ = ("_behaviors",)

    def __init__(self) -> None:
        self._behaviors: dict[Condition, Behavior[T]] = {}

    def when(self, *conditions: Condition | None) -> Setting[T]:
        """Start a registration for ``conditions``; committed by ``then_return``."""

        return Setting(self, conditions)

    def register_behavior(
        self,
        conditions: Iterable[Condition | None] | None,
        return_value: T,
        *,
        task: Task | None = None,
    ) -> DefaultSettings[T]:
        """Associate every condition in ``conditions`` with one behavior."""

        resolved = _resolve_conditions(conditions)
        behavior = Behavior(return_value=return_value, task=task)
        for condition in resolved:
            self._behaviors[condition] = behavior
        return self

    def apply(
        self,
        condition: Condition,
        key: str,
        raw_value: str | None,
        fallback_error: BaseException,
    ) -> T:
        """Return the behavior value for ``condition`` or raise ``fallback_error``."""

        behavior = self._behaviors.get(condition)
        if behavior is None:
            raise fallback_error
        logger.debug(
            "applying %s behavior for key %s (raw value %s)",
            condition.value,
            key,
            redact_raw_value(key, raw_value),
        )
        if behavior.task is not None:
            behavior.task(key, raw_value)
        return behavior.return_value

    def behavior_for(self, condition: Condition) -> Behavior[T] | None:
        return self._behaviors.get(condition)

    def __contains__(self, condition: object) -> bool:
        return condition in self._behaviors

    def __len__(self) -> int:
        return len(self._behaviors)

    def __repr__(self) -> str:
        registered = ", ".join(sorted(condition.value for condition in self._behaviors))
        return f"DefaultSettings({registered})"


class Setting(Generic[T]):
    """Pending registration produced by ``DefaultSettings.when``."""

    __slots__ = ("_conditions", "_owner", "_task")

    def __init__(self, owner: DefaultSettings[T], conditions: Iterable[Condition | None]) -> None:
        self._owner = owner
        self._conditions = _resolve_conditions(conditions)
        self._task: Task | None = None

    def then_do(self, task: Task | None) -> Setting[T]:
        self._task = task
        return self

    def then_return(self, return_value: T) -> DefaultSettings[T]:
        return self._owner.register_behavior(self._conditions, return_value, task=self._task)


def _resolve_conditions(conditions: Iterable[Condition | None] | None) -> tuple[Condition, ...]:
    if conditions is None:
        raise ConfigurationError("conditions cannot be None or empty")
    resolved: list[Condition] = []
    for condition in conditions:
        if condition is None:
            continue
        if not isinstance(condition, Condition):
            raise ConfigurationError(f"unknown condition {condition!r}")
        if condition not in resolved:
            resolved.append(condition)
    if not resolved:
        raise ConfigurationError("conditions cannot be None or empty")
    return tuple(resolved)


__all__ = ["Behavior", "DefaultSettings", "Setting", "Task"]
