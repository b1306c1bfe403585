"""Introspection of entity classes into decodable field specs."""

from __future__ import annotations

import dataclasses
import types
import typing
from enum import Enum
from functools import lru_cache
from typing import Any, Union

from pydantic import TypeAdapter

from jsonapi_related.relationships.cardinality import Cardinality, cardinality_of
from jsonapi_related.relationships.field import To

from .entity import KEY_METADATA, Entity


_NO_DEFAULT: Any = object()


class FieldRole(str, Enum):
    HEAD = "head"
    ATTRIBUTE = "attribute"
    RELATIONSHIP = "relationship"


@dataclasses.dataclass(frozen=True)
class FieldSpec:
    """How one dataclass field is read from a resource object."""

    name: str
    key: str
    role: FieldRole
    annotation: Any
    optional: bool = False
    default: Any = _NO_DEFAULT
    default_factory: Any = _NO_DEFAULT
    cardinality: type[Cardinality[Any]] | None = None
    element_type: Any = None
    adapter: TypeAdapter[Any] | None = None

    def default_value(self) -> Any:
        if self.default is not _NO_DEFAULT:
            return self.default
        if self.default_factory is not _NO_DEFAULT:
            return self.default_factory()
        return None

    def attribute_adapter(self) -> TypeAdapter[Any]:
        if self.adapter is None:
            raise TypeError(f"'{self.name}' is not an attribute field.")
        return self.adapter

    def relationship_cardinality(self) -> type[Cardinality[Any]]:
        if self.cardinality is None:
            raise TypeError(f"'{self.name}' is not a relationship field.")
        return self.cardinality


def _or_no_default(value: Any) -> Any:
    return _NO_DEFAULT if value is dataclasses.MISSING else value


def _allows_none(annotation: Any) -> bool:
    if annotation is Any or annotation is None or annotation is type(None):
        return True
    origin = typing.get_origin(annotation)
    if origin is typing.Annotated:
        return _allows_none(typing.get_args(annotation)[0])
    if origin in (Union, types.UnionType):
        return any(_allows_none(arg) for arg in typing.get_args(annotation))
    return False


@lru_cache(maxsize=None)
def entity_fields(entity_cls: type[Entity]) -> tuple[FieldSpec, ...]:
    """Return the field specs of ``entity_cls`` in declaration order.

    Raises ``TypeError`` for classes that are not entity dataclasses or that
    declare a bare ``To``; unresolvable forward references raise ``NameError``.
    """
    if not (isinstance(entity_cls, type) and issubclass(entity_cls, Entity)):
        raise TypeError(f"{entity_cls!r} is not an Entity subclass.")
    if not dataclasses.is_dataclass(entity_cls):
        raise TypeError(f"{entity_cls.__name__} must be a dataclass.")
    hints = typing.get_type_hints(entity_cls, include_extras=True)
    specs = []
    for field in dataclasses.fields(entity_cls):
        if not field.init:
            continue
        annotation = hints[field.name]
        key = field.metadata.get(KEY_METADATA) or field.name
        if field.name == "head":
            specs.append(FieldSpec(field.name, key, FieldRole.HEAD, annotation))
        elif typing.get_origin(annotation) is To or annotation is To:
            args = typing.get_args(annotation)
            if not args:
                raise TypeError(
                    f"{entity_cls.__name__}.{field.name} must declare a cardinality, "
                    "e.g. To[Many[Book]]."
                )
            cardinality, element_type = cardinality_of(args[0])
            specs.append(
                FieldSpec(
                    field.name,
                    key,
                    FieldRole.RELATIONSHIP,
                    annotation,
                    cardinality=cardinality,
                    element_type=element_type,
                )
            )
        else:
            has_default = (
                field.default is not dataclasses.MISSING
                or field.default_factory is not dataclasses.MISSING
            )
            specs.append(
                FieldSpec(
                    field.name,
                    key,
                    FieldRole.ATTRIBUTE,
                    annotation,
                    optional=has_default or _allows_none(annotation),
                    default=_or_no_default(field.default),
                    default_factory=_or_no_default(field.default_factory),
                    adapter=TypeAdapter(annotation),
                )
            )
    return tuple(specs)


def relationship_field(entity_cls: type[Entity], name: str) -> FieldSpec:
    """Return the spec of relationship ``name`` or raise ``ValueError``."""
    for spec in entity_fields(entity_cls):
        if spec.role is FieldRole.RELATIONSHIP and spec.name == name:
            return spec
    raise ValueError(f"Unknown relationship '{name}' on {entity_cls.__name__}.")
