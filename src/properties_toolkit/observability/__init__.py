"""Public observability primitives: structured logging and raw-value redaction."""

from properties_toolkit.observability.logging import (
    DEFAULT_LOGGER_NAME,
    REDACTED_VALUE,
    JsonLineFormatter,
    is_sensitive_key,
    redact_raw_value,
    set_redaction_enabled,
    setup_logging,
)

__all__ = [
    "DEFAULT_LOGGER_NAME",
    "JsonLineFormatter",
    "REDACTED_VALUE",
    "is_sensitive_key",
    "redact_raw_value",
    "set_redaction_enabled",
    "setup_logging",
]
