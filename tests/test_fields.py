from dataclasses import dataclass, field

import pytest

import jsonapi_related
from jsonapi_related.decoding.entity import Entity, attribute
from jsonapi_related.decoding.fields import FieldRole, entity_fields, relationship_field
from jsonapi_related.models import Book, Store
from jsonapi_related.relationships import Many


@dataclass(frozen=True)
class Shelf(Entity):
    class Meta:
        type_ = "shelves"

    label: str = attribute(key="shelf-label", default="unsorted")
    tags: tuple = field(default_factory=tuple)
    note: str | None = None
    width: int = 0


def test_package_exposes_decode() -> None:
    assert jsonapi_related.decode is not None


def test_store_field_specs() -> None:
    head, name, books = entity_fields(Store)

    assert (head.name, head.role) == ("head", FieldRole.HEAD)
    assert (name.key, name.role, name.optional) == ("name", FieldRole.ATTRIBUTE, False)
    assert books.role is FieldRole.RELATIONSHIP
    assert books.cardinality is Many
    assert books.element_type is Book


def test_attribute_defaults() -> None:
    specs = {spec.name: spec for spec in entity_fields(Shelf)}

    assert specs["label"].key == "shelf-label"
    assert specs["label"].default_value() == "unsorted"
    assert specs["tags"].default_value() == ()
    assert specs["note"].optional and specs["note"].default_value() is None
    assert specs["width"].default_value() == 0


def test_role_accessors_reject_other_roles() -> None:
    books = relationship_field(Store, "books")
    name = entity_fields(Store)[1]

    assert books.relationship_cardinality() is Many
    assert name.attribute_adapter() is name.adapter
    with pytest.raises(TypeError):
        books.attribute_adapter()
    with pytest.raises(TypeError):
        name.relationship_cardinality()


def test_unknown_relationship_name() -> None:
    with pytest.raises(ValueError):
        relationship_field(Store, "name")
