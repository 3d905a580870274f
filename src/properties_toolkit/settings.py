"""
properties-toolkit — toolkit runtime settings.

File: src/properties_toolkit/settings.py
Last updated: 2026-10-19

Purpose
- Load the toolkit's own logging settings from ``PROPERTIES_TOOLKIT_`` env vars.

Functional requirements
- Missing variables fall back to defaults; present but invalid values raise.
- Read through the toolkit's own ``PropertyReader`` so the same error taxonomy applies.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Final, Literal

from properties_toolkit.conditions import Condition
from properties_toolkit.defaults import DefaultSettings
from properties_toolkit.reader import PropertyReader
from properties_toolkit.sources import EnvironSource

ENV_PREFIX: Final[str] = "PROPERTIES_TOOLKIT_"

LogFormat = Literal["json", "text"]

_LOG_LEVELS: Final[frozenset[str]] = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
_LOG_FORMATS: Final[frozenset[str]] = frozenset({"json", "text"})


@dataclass(frozen=True, slots=True)
class ToolkitSettings:
    """Logging behavior of the toolkit itself."""

    log_level: str = "WARNING"
    log_format: LogFormat = "text"
    redact_values: bool = True


def load_settings(environ: Mapping[str, str] | None = None) -> ToolkitSettings:
    """Read ``PROPERTIES_TOOLKIT_LOG_LEVEL``, ``_LOG_FORMAT`` and ``_REDACT_VALUES``."""

    defaults = ToolkitSettings()
    reader = PropertyReader(EnvironSource(ENV_PREFIX, environ))

    log_level = (
        reader.get_custom("log.level", _upper)
        .with_default_settings(_when_missing(defaults.log_level))
        .with_constraints(_LOG_LEVELS.__contains__)
        .get()
    )
    log_format = (
        reader.get_custom("log.format", _lower)
        .with_default_settings(_when_missing(defaults.log_format))
        .with_constraints(_LOG_FORMATS.__contains__)
        .get()
    )
    redact_values = (
        reader.get_boolean("redact.values")
        .with_default_settings(_when_missing(defaults.redact_values))
        .get()
    )
    return ToolkitSettings(
        log_level=log_level,
        log_format=log_format,  # type: ignore[arg-type]
        redact_values=redact_values,
    )


def _when_missing(value: object) -> DefaultSettings[object]:
    return DefaultSettings().when(Condition.EMPTY).then_return(value)


def _upper(text: str) -> str:
    return text.strip().upper()


def _lower(text: str) -> str:
    return text.strip().lower()


__all__ = ["ENV_PREFIX", "LogFormat", "ToolkitSettings", "load_settings"]
