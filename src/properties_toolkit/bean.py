"""Base class for objects that bind their own fields on construction."""

from __future__ import annotations

from properties_toolkit.binding import bind
from properties_toolkit.reader import PropertyReader
from properties_toolkit.sources import PropertySource


class PropertiesBean:
    """Binds every ``FromProperty`` field of the subclass in ``__init__``.

    Example::

        class DatabaseSettings(PropertiesBean):
            host: Annotated[str, FromProperty(key="db.host")]
            port: Annotated[Int, FromProperty(key="db.port",
                                              constraints=(NumberMustBePositive,))]

        settings = DatabaseSettings({"db.host": "localhost", "db.port": "5432"})
    """

    def __init__(self, source: PropertySource | PropertyReader) -> None:
        if isinstance(source, PropertyReader):
            source = source.source
        bind(self, source)


__all__ = ["PropertiesBean"]
