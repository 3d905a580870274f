"""
properties-toolkit — typed, validated access to string-keyed configuration.

File: src/properties_toolkit/__init__.py
Last updated: 2026-10-19

Purpose
- Package root. Re-exports the reader, property pipeline, condition registry,
  and field binder.

Functional requirements
- Must not have side effects at import time (no logging handlers, no env reads).
"""

from properties_toolkit.bean import PropertiesBean
from properties_toolkit.binding import FieldBinding, FromProperty, bind, binding_table, bindings_for
from properties_toolkit.conditions import Condition
from properties_toolkit.constraints import (
    NumberConstraint,
    NumberMustBeNegative,
    NumberMustBePositive,
    NumberMustNotBeNegative,
    NumberMustNotBePositive,
    PropertyConstraint,
)
from properties_toolkit.defaults import Behavior, DefaultSettings
from properties_toolkit.errors import (
    BindingError,
    ConfigurationError,
    ConstructionError,
    InvalidTypeError,
    MissingPropertyError,
    PropertiesError,
    ValidationError,
)
from properties_toolkit.extractors import (
    GenericExtractor,
    PropertyExtractor,
    TolerantGenericExtractor,
)
from properties_toolkit.kinds import (
    Boolean,
    Byte,
    Char,
    Double,
    Float,
    Int,
    Long,
    PrimitiveKind,
    Short,
)
from properties_toolkit.property import Empty, Invalid, Ok, Outcome, ParseFailed, Property
from properties_toolkit.reader import PropertyReader
from properties_toolkit.sources import EnvironSource, MappingSource, PropertySource

__version__ = "1.0.0"

__all__ = [
    "Behavior",
    "BindingError",
    "Boolean",
    "Byte",
    "Char",
    "Condition",
    "ConfigurationError",
    "ConstructionError",
    "DefaultSettings",
    "Double",
    "Empty",
    "EnvironSource",
    "FieldBinding",
    "Float",
    "FromProperty",
    "GenericExtractor",
    "Int",
    "Invalid",
    "InvalidTypeError",
    "Long",
    "MappingSource",
    "MissingPropertyError",
    "NumberConstraint",
    "NumberMustBeNegative",
    "NumberMustBePositive",
    "NumberMustNotBeNegative",
    "NumberMustNotBePositive",
    "Ok",
    "Outcome",
    "ParseFailed",
    "PrimitiveKind",
    "PropertiesBean",
    "PropertiesError",
    "Property",
    "PropertyConstraint",
    "PropertyExtractor",
    "PropertyReader",
    "PropertySource",
    "Short",
    "TolerantGenericExtractor",
    "ValidationError",
    "__version__",
    "bind",
    "binding_table",
    "bindings_for",
]
