import pytest

from jsonapi_related import (
    DocumentDecodeError,
    ErrorKind,
    Failure,
    JSONAPIErrorBuilder,
    Success,
    decode_document,
    decode_document_or_raise,
)
from jsonapi_related.core.errors import missing_field, type_mismatch
from jsonapi_related.models import Store


def test_single_resource_document(json_fixture) -> None:
    result = decode_document(Store, json_fixture("FullStore"))

    assert isinstance(result, Success)
    assert result.value.name == "full store"
    assert len(result.value.books.as_unfetched) == 11


def test_collection_document(json_fixture) -> None:
    document = {
        "data": [json_fixture("EmptyStore")["data"], json_fixture("FullStore")["data"]]
    }

    stores = decode_document_or_raise(Store, document)

    assert [store.head.id for store in stores] == ["1", "2"]
    assert stores[0].books.is_unknown
    assert stores[1].books.is_unfetched


def test_collection_errors_are_located_per_resource(json_fixture) -> None:
    broken = {"id": "3", "type": "stores", "attributes": {}}
    document = {"data": [json_fixture("EmptyStore")["data"], broken, {"type": "stores"}]}

    result = decode_document(Store, document)

    assert isinstance(result, Failure)
    assert [error.location for error in result.errors] == [
        "data[1].attributes.name",
        "data[2].id",
        "data[2].attributes.name",
    ]


def test_null_primary_data() -> None:
    assert decode_document(Store, {"data": None}) == Success(None)


def test_missing_primary_data() -> None:
    result = decode_document(Store, {"meta": {"count": 0}})

    assert isinstance(result, Failure)
    assert [(error.kind, error.location) for error in result.errors] == [
        (ErrorKind.MISSING_FIELD, "data")
    ]


def test_non_object_document() -> None:
    result = decode_document(Store, [])

    assert isinstance(result, Failure)
    assert result.errors[0].kind is ErrorKind.TYPE_MISMATCH


def test_error_document_lists_every_error() -> None:
    document = {"data": {"type": "stores", "attributes": {"name": 3}}}

    with pytest.raises(DocumentDecodeError) as excinfo:
        decode_document_or_raise(Store, document)

    rendered = excinfo.value.to_document()
    assert [error["source"]["pointer"] for error in rendered["errors"]] == [
        "/data/id",
        "/data/attributes/name",
    ]
    assert [error["code"] for error in rendered["errors"]] == [
        "missing_field",
        "type_mismatch",
    ]
    assert all(error["status"] == "422" for error in rendered["errors"])


def test_document_decode_error_message() -> None:
    exc = DocumentDecodeError([missing_field("id"), type_mismatch("type", detail="bad")])

    assert "2 decode error(s)" in str(exc)
    assert "type: bad" in str(exc)
    assert isinstance(exc, ValueError)


def test_error_builder_requires_a_member() -> None:
    builder = JSONAPIErrorBuilder()

    with pytest.raises(ValueError):
        builder.error_object()
    assert builder.error_object(status="422", title="Invalid") == {
        "status": "422",
        "title": "Invalid",
    }
    assert builder.error_document([]) == {"errors": []}
