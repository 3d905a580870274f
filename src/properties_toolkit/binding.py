"""
properties-toolkit — declarative field binder.

File: src/properties_toolkit/binding.py
Last updated: 2026-10-19

Purpose
- Populate an object's annotated fields from a string-keyed property source.

What should be included in this file
- ``FromProperty``: field metadata carried in ``typing.Annotated``.
- ``FieldBinding``: one row of the declarative binding table.
- ``binding_table``: build the table from a class's annotations.
- ``bind``: resolve extractors and constraints, evaluate, and write fields.

Functional requirements
- ``ClassVar`` and ``Final`` fields, and frozen dataclass targets, are rejected.
- Extractor and constraint types are instantiated without arguments; any
  failure is a ``BindingError``.
- Every field is resolved before the first one is evaluated, so a structural
  error never leaves a partially written target.
- Primitive (non-optional) fields receive their kind's zero value instead of ``None``.

Non-functional requirements
- Fail fast on the first structurally invalid field.
"""

from __future__ import annotations

import dataclasses
import inspect
import logging
import types
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import (
    Annotated,
    Any,
    ClassVar,
    Final,
    Union,
    get_args,
    get_origin,
    get_type_hints,
)

from properties_toolkit.constraints import resolve_constraint
from properties_toolkit.errors import BindingError
from properties_toolkit.extractors import GenericExtractor, PropertyExtractor
from properties_toolkit.kinds import PrimitiveKind
from properties_toolkit.observability.logging import redact_raw_value
from properties_toolkit.property import Property
from properties_toolkit.sources import PropertySource

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FromProperty:
    """Marks a field as bound to a property.

    ``key`` defaults to the field name. ``extractor`` and each entry of
    ``constraints`` are classes instantiated with no arguments at bind time.
    """

    key: str | None = None
    extractor: type = GenericExtractor
    constraints: tuple[type, ...] = ()

    def __post_init__(self) -> None:
        if self.key is not None and not isinstance(self.key, str):
            raise BindingError(f"FromProperty.key must be a string, got {self.key!r}")
        object.__setattr__(self, "constraints", tuple(self.constraints))


@dataclass(frozen=True, slots=True)
class FieldBinding:
    """Resolved binding row for one field of a target class."""

    name: str
    value_type: type
    settings: FromProperty = field(default_factory=FromProperty)
    kind: PrimitiveKind | None = None
    nullable: bool = False
    class_level: bool = False
    final: bool = False

    @property
    def key(self) -> str:
        return self.settings.key or self.name

    @property
    def is_primitive(self) -> bool:
        return self.kind is not None and not self.nullable


@dataclass(slots=True)
class _ResolvedField:
    binding: FieldBinding
    extraction: Callable[[str], Any]
    extractor: PropertyExtractor
    predicates: list[Callable[[Any], bool]]


def binding_table(
    cls: type, *, localns: Mapping[str, Any] | None = None
) -> tuple[FieldBinding, ...]:
    """Build the binding table for every ``FromProperty`` field of ``cls``.

    Fields are visited in definition order across the MRO, base classes first.
    Fields without ``FromProperty`` metadata are not included.

    Every annotation of ``cls`` is resolved, marked or not, so one unresolvable
    forward reference fails the whole table. Classes declared inside a function
    under ``from __future__ import annotations`` only see module globals; pass
    the function's names as ``localns`` and hand the table to ``bind``.
    """

    try:
        hints = get_type_hints(
            cls, localns=dict(localns) if localns is not None else None, include_extras=True
        )
    except Exception as exc:
        raise BindingError(f"cannot resolve annotations of {cls.__qualname__}: {exc}") from exc

    rows: list[FieldBinding] = []
    for name, annotation in hints.items():
        row = _binding_for(name, annotation)
        if row is not None:
            rows.append(row)
    return tuple(rows)


def bind(
    target: object,
    source: PropertySource,
    bindings: Sequence[FieldBinding] | None = None,
) -> None:
    """Evaluate and write every bound field of ``target``.

    Raises
    ------
    BindingError
        For structural misconfiguration; nothing has been written yet.
    MissingPropertyError, InvalidTypeError, ValidationError
        When a field's value fails and its extractor registers no behavior.
    """

    table = binding_table(type(target)) if bindings is None else tuple(bindings)
    if table and _is_frozen_dataclass(target):
        raise BindingError(
            f"{type(target).__qualname__} is a frozen dataclass; its fields cannot be set"
        )

    owner = type(target)
    resolved = [_resolve(row, owner) for row in table]

    for item in resolved:
        row = item.binding
        raw_value = source.get(row.key)
        prop = Property(row.key, raw_value, item.extraction)
        prop.with_default_settings(item.extractor.default_settings())
        prop.add_constraints(item.predicates)

        value = prop.get()
        if value is None and row.is_primitive:
            assert row.kind is not None
            value = row.kind.zero_value

        logger.debug(
            "bound %s.%s from key %s (raw value %s)",
            type(target).__qualname__,
            row.name,
            row.key,
            redact_raw_value(row.key, raw_value),
        )
        _write(target, row.name, value)


def _binding_for(name: str, annotation: object) -> FieldBinding | None:
    class_level = False
    final = False
    settings: FromProperty | None = None
    kind: PrimitiveKind | None = None

    current = annotation
    while True:
        origin = get_origin(current)
        if origin is Annotated:
            base, *extras = get_args(current)
            for extra in extras:
                if isinstance(extra, FromProperty):
                    settings = extra
                elif isinstance(extra, PrimitiveKind):
                    kind = extra
            current = base
        elif origin is ClassVar or current is ClassVar:
            class_level = True
            current = get_args(current)[0] if get_args(current) else Any
        elif origin is Final or current is Final:
            final = True
            current = get_args(current)[0] if get_args(current) else Any
        else:
            break

    if settings is None:
        return None

    current, nullable = _strip_optional(current)
    # a kind may sit inside Optional[Annotated[...]]
    while get_origin(current) is Annotated:
        base, *extras = get_args(current)
        for extra in extras:
            if isinstance(extra, PrimitiveKind):
                kind = extra
        current = base

    value_type = get_origin(current) or current
    if not isinstance(value_type, type):
        raise BindingError(
            f"Field, {name}, has an unsupported annotation {annotation!r}",
            field_name=name,
        )
    if kind is None:
        kind = PrimitiveKind.for_type(value_type)

    return FieldBinding(
        name=name,
        value_type=value_type,
        settings=settings,
        kind=kind,
        nullable=nullable,
        class_level=class_level,
        final=final,
    )


def _strip_optional(annotation: object) -> tuple[object, bool]:
    origin = get_origin(annotation)
    if origin is Union or origin is types.UnionType:
        members = [arg for arg in get_args(annotation) if arg is not type(None)]
        nullable = len(members) != len(get_args(annotation))
        if len(members) == 1:
            return members[0], nullable
    return annotation, False


def _resolve(row: FieldBinding, owner: type) -> _ResolvedField:
    _ensure_settable(row, owner)
    extractor = _instantiate_extractor(row)
    try:
        if isinstance(extractor, GenericExtractor):
            extraction = extractor.extraction_method_for(row.value_type, row.kind)
        else:
            extraction = extractor.extraction_method()
    except BindingError:
        raise
    except Exception as exc:
        raise BindingError(
            f"The extractor, {type(extractor).__qualname__}, on field {row.name} "
            "failed to provide an extraction method",
            field_name=row.name,
        ) from exc
    if not callable(extraction):
        raise BindingError(
            f"The extractor, {type(extractor).__qualname__}, on field {row.name} "
            "did not return a callable extraction method",
            field_name=row.name,
        )

    predicates = [
        resolve_constraint(constraint_type, row.value_type, kind=row.kind, field_name=row.name)
        for constraint_type in row.settings.constraints
    ]
    return _ResolvedField(
        binding=row, extraction=extraction, extractor=extractor, predicates=predicates
    )


def _ensure_settable(row: FieldBinding, owner: type) -> None:
    if row.final:
        raise BindingError(f"Field, {row.name}, is final", field_name=row.name)
    if row.class_level:
        raise BindingError(
            f"Field, {row.name}, is a ClassVar. Setting class-level fields is not supported",
            field_name=row.name,
        )
    static = inspect.getattr_static(owner, row.name, None)
    if isinstance(static, property) and static.fset is None:
        raise BindingError(f"Field, {row.name}, is a read-only property", field_name=row.name)


def _instantiate_extractor(row: FieldBinding) -> PropertyExtractor:
    extractor_type = row.settings.extractor
    if not isinstance(extractor_type, type) or not issubclass(extractor_type, PropertyExtractor):
        raise BindingError(
            f"The specified extractor, {extractor_type!r}, does not extend PropertyExtractor",
            field_name=row.name,
        )
    try:
        return extractor_type()
    except Exception as exc:
        raise BindingError(
            f"The extractor class, {extractor_type.__qualname__}, cannot be instantiated. "
            "Ensure it is concrete and takes no constructor arguments.",
            field_name=row.name,
        ) from exc


def _is_frozen_dataclass(target: object) -> bool:
    if not dataclasses.is_dataclass(target) or isinstance(target, type):
        return False
    params = getattr(type(target), "__dataclass_params__", None)
    return bool(getattr(params, "frozen", False))


def _write(target: object, name: str, value: object) -> None:
    try:
        setattr(target, name, value)
    except AttributeError as exc:
        raise BindingError(f"Cannot set value of field {name}", field_name=name) from exc


def bindings_for(fields: Iterable[FieldBinding]) -> tuple[FieldBinding, ...]:
    """Freeze a hand-built binding table, rejecting duplicate field names."""

    table = tuple(fields)
    seen: set[str] = set()
    for row in table:
        if row.name in seen:
            raise BindingError(f"Field, {row.name}, is bound more than once", field_name=row.name)
        seen.add(row.name)
    return table


__all__ = ["FieldBinding", "FromProperty", "bind", "binding_table", "bindings_for"]
