"""Failure conditions a property evaluation can end in."""

from __future__ import annotations

from enum import StrEnum


class Condition(StrEnum):
    """Classified failure point in value evaluation.

    ``EMPTY`` applies when the raw value is absent or the empty string.
    ``PARSE_FAILED`` applies when the extraction function raised.
    ``INVALID`` applies when a constraint returned false or raised.
    """

    EMPTY = "empty"
    PARSE_FAILED = "parse_failed"
    INVALID = "invalid"


__all__ = ["Condition"]
