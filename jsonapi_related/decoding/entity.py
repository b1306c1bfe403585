"""Base class and field helpers for decodable resources."""

from __future__ import annotations

import dataclasses
from typing import Any, TypeVar

from jsonapi_related.relationships.cardinality import element_classes
from jsonapi_related.relationships.field import To
from jsonapi_related.relationships.related import Related, RelatedState
from jsonapi_related.schemas.resource import Head

EntityT = TypeVar("EntityT", bound="Entity")

KEY_METADATA = "jsonapi_key"


def attribute(*, key: str | None = None, **kwargs: Any) -> Any:
    """Declare an attribute whose document member name differs from the field name."""
    return dataclasses.field(metadata={KEY_METADATA: key}, **kwargs)


def relationship(*, key: str | None = None) -> Any:
    """Declare a relationship whose document member name differs from the field name."""
    return dataclasses.field(metadata={KEY_METADATA: key})


@dataclasses.dataclass(frozen=True)
class Entity:
    """A decoded resource: a head, plain attributes and ``To`` relationships.

    Subclasses are frozen dataclasses::

        @dataclass(frozen=True)
        class Store(Entity):
            class Meta:
                type_ = "stores"

            name: str
            books: To[Many[Book]]
    """

    class Meta:
        """Entity metadata (resource type)."""

        type_: str = ""

    head: Head

    @property
    def id(self) -> str:
        return self.head.id

    def with_related(self: EntityT, name: str, value: To[Any] | Related[Any]) -> EntityT:
        """Return a copy with relationship ``name`` replaced."""
        current = getattr(self, name, None)
        if not isinstance(current, To):
            raise ValueError(f"Unknown relationship '{name}'.")
        field = value if isinstance(value, To) else To(value)
        expected, actual = current.data, field.data
        if actual.cardinality is not expected.cardinality:
            raise ValueError(
                f"Relationship '{name}' is {expected.cardinality.__name__}, "
                f"got {actual.cardinality.__name__}."
            )
        expected_classes = element_classes(expected.element_type)
        actual_classes = element_classes(actual.element_type)
        if expected_classes and actual_classes and set(expected_classes) != set(actual_classes):
            raise ValueError(
                f"Relationship '{name}' relates {_names(expected_classes)}, "
                f"got {_names(actual_classes)}."
            )
        if actual.state is RelatedState.FETCHED:
            expected.cardinality.normalize_element(actual.value, expected.element_type)
        return dataclasses.replace(self, **{name: field})


def _names(classes: tuple[type, ...]) -> str:
    return " | ".join(cls.__name__ for cls in classes)
