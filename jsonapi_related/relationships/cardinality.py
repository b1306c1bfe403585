"""Relationship cardinalities and their decode rules.

``One``, ``Many`` and ``Maybe`` are type-level selectors: they are only ever
used subscripted (``Many[Book]``) to parametrize :class:`~.related.Related`
and :class:`~.field.To`, and each fixes two shapes.

=========  ======================  =====================
Variant    Pointer shape           Element shape
=========  ======================  =====================
``One``    ``Pointer``             ``T``
``Many``   ``tuple[Pointer, ...]`` ``tuple[T, ...]``
``Maybe``  ``Pointer | None``      ``T | None``
=========  ======================  =====================

Decode rules never raise; they return :class:`~jsonapi_related.core.Success`
or :class:`~jsonapi_related.core.Failure`, with error paths relative to the
relationship's ``data`` member.
"""

from __future__ import annotations

import types
import typing
from typing import Any, Callable, Generic, TypeVar, Union

from jsonapi_related.core.errors import json_kind, malformed_relationship
from jsonapi_related.core.result import Result, Success, collect, fail
from jsonapi_related.core.validation import validate_model
from jsonapi_related.schemas.resource import Pointer

T = TypeVar("T")

ResourceDecoder = Callable[[Any], Result[Any]]


class _Absent:
    """Marker for a relationship member missing from the document."""

    _instance: _Absent | None = None

    def __new__(cls) -> _Absent:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


class Cardinality(Generic[T]):
    """Closed set of relationship shapes: ``One``, ``Many`` and ``Maybe``."""

    name: str = ""

    def __new__(cls, *args: Any, **kwargs: Any) -> Any:
        raise TypeError(f"{cls.__name__} is a type-level selector and cannot be instantiated")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        if cls.__module__ != __name__:
            raise TypeError("Cardinality is closed to One, Many and Maybe")
        super().__init_subclass__(**kwargs)

    @classmethod
    def decode_pointer(cls, data: Any) -> Result[Any]:
        """Read the reference-only shape; ``Success(ABSENT)`` when ``data`` is absent."""
        raise NotImplementedError

    @classmethod
    def decode_element(cls, data: Any, decode_resource: ResourceDecoder) -> Result[Any]:
        """Read the fully materialized shape using ``decode_resource`` per object."""
        raise NotImplementedError

    @classmethod
    def normalize_pointer(cls, value: Any) -> Any:
        """Return the canonical pointer shape or raise ``ValueError``."""
        raise NotImplementedError

    @classmethod
    def normalize_element(cls, value: Any, element_type: Any = None) -> Any:
        """Return the canonical element shape or raise ``ValueError``."""
        raise NotImplementedError

    @classmethod
    def _decode_one_pointer(cls, data: Any) -> Result[Pointer]:
        if not isinstance(data, dict):
            return fail(
                malformed_relationship(
                    detail=f"{cls.name} relationship expects a resource identifier object, "
                    f"got {json_kind(data)}",
                )
            )
        return validate_model(Pointer, data)

    @classmethod
    def _decode_one_element(cls, data: Any, decode_resource: ResourceDecoder) -> Result[Any]:
        if not isinstance(data, dict):
            return fail(
                malformed_relationship(
                    detail=f"{cls.name} relationship expects a resource object, "
                    f"got {json_kind(data)}",
                )
            )
        return decode_resource(data)

    @classmethod
    def _check_pointer(cls, value: Any) -> Pointer:
        if not isinstance(value, Pointer):
            raise ValueError(f"{cls.name} pointer shape expects Pointer, got {value!r}")
        return value

    @classmethod
    def _check_element(cls, value: Any, element_type: Any) -> Any:
        allowed = element_classes(element_type)
        if value is None or (allowed and not isinstance(value, allowed)):
            raise ValueError(
                f"{cls.name} element shape expects {_describe(element_type)}, got {value!r}"
            )
        return value


class One(Cardinality[T]):
    """Exactly one related resource."""

    name = "to-one"

    @classmethod
    def decode_pointer(cls, data: Any) -> Result[Any]:
        if data is ABSENT:
            return Success(ABSENT)
        return cls._decode_one_pointer(data)

    @classmethod
    def decode_element(cls, data: Any, decode_resource: ResourceDecoder) -> Result[Any]:
        return cls._decode_one_element(data, decode_resource)

    @classmethod
    def normalize_pointer(cls, value: Any) -> Pointer:
        return cls._check_pointer(value)

    @classmethod
    def normalize_element(cls, value: Any, element_type: Any = None) -> Any:
        return cls._check_element(value, element_type)


class Many(Cardinality[T]):
    """Zero or more related resources, in document order."""

    name = "to-many"

    @classmethod
    def decode_pointer(cls, data: Any) -> Result[Any]:
        if data is ABSENT:
            return Success(ABSENT)
        if data is None:
            return Success(())
        if not isinstance(data, list):
            return fail(
                malformed_relationship(
                    detail=f"to-many relationship expects an array, got {json_kind(data)}",
                )
            )
        return collect(cls._decode_one_pointer(item) for item in data)

    @classmethod
    def decode_element(cls, data: Any, decode_resource: ResourceDecoder) -> Result[Any]:
        if data is None:
            return Success(())
        if not isinstance(data, list):
            return fail(
                malformed_relationship(
                    detail=f"to-many relationship expects an array, got {json_kind(data)}",
                )
            )
        return collect(cls._decode_one_element(item, decode_resource) for item in data)

    @classmethod
    def normalize_pointer(cls, value: Any) -> tuple[Pointer, ...]:
        if not _is_sequence(value):
            raise ValueError(f"to-many pointer shape expects a sequence, got {value!r}")
        return tuple(cls._check_pointer(item) for item in value)

    @classmethod
    def normalize_element(cls, value: Any, element_type: Any = None) -> tuple[Any, ...]:
        if not _is_sequence(value):
            raise ValueError(f"to-many element shape expects a sequence, got {value!r}")
        return tuple(cls._check_element(item, element_type) for item in value)


class Maybe(Cardinality[T]):
    """Zero or one related resource."""

    name = "to-one"

    @classmethod
    def decode_pointer(cls, data: Any) -> Result[Any]:
        if data is ABSENT:
            return Success(ABSENT)
        if data is None:
            return Success(None)
        return cls._decode_one_pointer(data)

    @classmethod
    def decode_element(cls, data: Any, decode_resource: ResourceDecoder) -> Result[Any]:
        if data is None:
            return Success(None)
        return cls._decode_one_element(data, decode_resource)

    @classmethod
    def normalize_pointer(cls, value: Any) -> Pointer | None:
        return None if value is None else cls._check_pointer(value)

    @classmethod
    def normalize_element(cls, value: Any, element_type: Any = None) -> Any:
        return None if value is None else cls._check_element(value, element_type)


CARDINALITIES = (One, Many, Maybe)


def cardinality_of(spec: Any) -> tuple[type[Cardinality[Any]], Any]:
    """Split ``Many[Book]`` (or bare ``Many``) into ``(Many, Book)``.

    The element type is ``None`` when the cardinality is not subscripted.
    """
    origin = typing.get_origin(spec) or spec
    if origin not in CARDINALITIES:
        raise TypeError(f"Expected One, Many or Maybe, got {spec!r}")
    args = typing.get_args(spec)
    return origin, (args[0] if args else None)


def element_classes(element_type: Any) -> tuple[type, ...]:
    """Concrete classes an element must be an instance of.

    Unresolved forward references and type variables yield ``()``, meaning
    the element type is not checked.
    """
    if isinstance(element_type, type):
        return (element_type,)
    if typing.get_origin(element_type) in (Union, types.UnionType):
        members = typing.get_args(element_type)
        if all(isinstance(member, type) for member in members):
            return tuple(members)
    return ()


def _describe(element_type: Any) -> str:
    classes = element_classes(element_type)
    if not classes:
        return "a value"
    return " | ".join(cls.__name__ for cls in classes)
