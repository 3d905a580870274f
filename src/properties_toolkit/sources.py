"""String-keyed lookups the toolkit reads raw property values from."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from typing import Final, Protocol, runtime_checkable

from properties_toolkit.errors import ConfigurationError

_ENV_NAME_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[^A-Za-z0-9]+")


@runtime_checkable
class PropertySource(Protocol):
    """Lookup returning the raw value for ``key``, or ``None`` when absent.

    Plain ``dict[str, str]`` instances satisfy this protocol.
    """

    def get(self, key: str, /) -> str | None: ...


class MappingSource:
    """Immutable snapshot of a string-to-string mapping."""

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        snapshot: dict[str, str] = {}
        for key, value in (values or {}).items():
            if not isinstance(key, str):
                raise ConfigurationError(f"property keys must be strings, got {key!r}")
            if not isinstance(value, str):
                raise ConfigurationError(
                    f"property {key} must map to a string, got {type(value).__name__}"
                )
            snapshot[key] = value
        self._values = snapshot

    def get(self, key: str, /) -> str | None:
        return self._values.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def keys(self) -> tuple[str, ...]:
        return tuple(sorted(self._values))


class EnvironSource:
    """Resolve dotted property keys against environment variables.

    ``db.pool-size`` with prefix ``APP_`` reads ``APP_DB_POOL_SIZE``.
    """

    __slots__ = ("_environ", "prefix")

    def __init__(self, prefix: str = "", environ: Mapping[str, str] | None = None) -> None:
        self.prefix = prefix
        self._environ = os.environ if environ is None else environ

    def env_name(self, key: str) -> str:
        return self.prefix + _ENV_NAME_SEPARATORS.sub("_", key).strip("_").upper()

    def get(self, key: str, /) -> str | None:
        return self._environ.get(self.env_name(key))


__all__ = ["EnvironSource", "MappingSource", "PropertySource"]
