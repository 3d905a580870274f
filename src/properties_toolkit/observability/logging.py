"""Structured logging setup with JSON-lines output and raw-value redaction."""

from __future__ import annotations

import json
import logging
import re
import sys
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import IO, TYPE_CHECKING, Final

if TYPE_CHECKING:
    from properties_toolkit.settings import ToolkitSettings

JSONScalar = str | int | float | bool | None
JSONValue = JSONScalar | list["JSONValue"] | dict[str, "JSONValue"]

REDACTED_VALUE: Final[str] = "***REDACTED***"
DEFAULT_LOGGER_NAME: Final[str] = "properties_toolkit"

_TEXT_FORMAT: Final[str] = "%(asctime)s %(levelname)s %(name)s: %(message)s"

_SENSITIVE_KEY_TERMS: Final[tuple[str, ...]] = (
    "secret",
    "token",
    "password",
    "passwd",
    "passphrase",
    "api_key",
    "apikey",
    "authorization",
    "credential",
    "private_key",
    "client_secret",
)
_KEY_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[^a-z0-9]+")

_STANDARD_LOG_RECORD_FIELDS: Final[frozenset[str]] = frozenset(
    {
        "args",
        "asctime",
        "created",
        "exc_info",
        "exc_text",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "message",
        "module",
        "msecs",
        "msg",
        "name",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "thread",
        "threadName",
        "taskName",
    }
)

_redaction_enabled = True


def is_sensitive_key(key: str) -> bool:
    """Return whether ``key`` names a value that must never reach a log sink."""

    normalized = _KEY_SEPARATORS.sub("_", key.lower()).strip("_")
    return any(term in normalized for term in _SENSITIVE_KEY_TERMS)


def redact_raw_value(key: str, raw_value: str | None) -> str | None:
    """Mask ``raw_value`` when ``key`` looks sensitive and redaction is enabled."""

    if raw_value is None or not _redaction_enabled:
        return raw_value
    if is_sensitive_key(key):
        return REDACTED_VALUE
    return raw_value


def set_redaction_enabled(enabled: bool) -> None:
    global _redaction_enabled
    _redaction_enabled = bool(enabled)


class JsonLineFormatter(logging.Formatter):
    """Formatter that emits one canonical JSON object per log line."""

    def format(self, record: logging.LogRecord) -> str:
        event: dict[str, JSONValue] = {
            "timestamp": _iso8601z_from_epoch(record.created),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extras = _extract_extra_fields(record)
        if extras:
            event["fields"] = extras

        if record.exc_info is not None:
            event["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            event["stack"] = str(record.stack_info)

        return json.dumps(event, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def setup_logging(
    settings: ToolkitSettings | None = None,
    *,
    stream: IO[str] | None = None,
    logger_name: str = DEFAULT_LOGGER_NAME,
) -> logging.Logger:
    """Attach a single stream handler to the toolkit logger and return it.

    Parameters
    ----------
    settings:
        Toolkit settings; ``None`` uses the built-in defaults.
    stream:
        Destination stream, ``sys.stderr`` when omitted.
    logger_name:
        Logger to configure. Library modules log below ``properties_toolkit``.
    """

    if settings is None:
        from properties_toolkit.settings import ToolkitSettings

        settings = ToolkitSettings()

    level = _parse_log_level(settings.log_level)
    formatter: logging.Formatter
    if settings.log_format == "json":
        formatter = JsonLineFormatter()
    else:
        formatter = logging.Formatter(_TEXT_FORMAT)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(formatter)

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.propagate = False
    for existing in list(logger.handlers):
        logger.removeHandler(existing)
        existing.close()
    logger.addHandler(handler)

    set_redaction_enabled(settings.redact_values)
    return logger


def _parse_log_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level: {level!r}")
    return resolved


def _iso8601z_from_epoch(created: float) -> str:
    stamp = datetime.fromtimestamp(created, tz=UTC)
    return stamp.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _extract_extra_fields(record: logging.LogRecord) -> dict[str, JSONValue]:
    extras: dict[str, JSONValue] = {}
    for key, value in sorted(record.__dict__.items()):
        if key in _STANDARD_LOG_RECORD_FIELDS or key.startswith("_"):
            continue
        extras[key] = _normalize_json_value(value)
    return extras


def _normalize_json_value(value: object) -> JSONValue:
    if value is None or isinstance(value, (str, bool, int, float)):
        return value
    if isinstance(value, Mapping):
        return {str(key): _normalize_json_value(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_normalize_json_value(item) for item in value]
    return str(value)


__all__ = [
    "DEFAULT_LOGGER_NAME",
    "JsonLineFormatter",
    "REDACTED_VALUE",
    "is_sensitive_key",
    "redact_raw_value",
    "set_redaction_enabled",
    "setup_logging",
]
