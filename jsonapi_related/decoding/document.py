"""Decode the primary data of top-level JSON:API documents."""

from __future__ import annotations

from typing import Any

from jsonapi_related.config import DecoderSettings
from jsonapi_related.core.errors import DocumentDecodeError, json_kind, type_mismatch
from jsonapi_related.core.result import Failure, Result, Success, collect, fail
from jsonapi_related.core.validation import validate_model
from jsonapi_related.schemas.resource import JSONAPIDocument

from .entity import EntityT
from .pipeline import decode


def decode_document(
    entity_cls: type[EntityT], document: Any, *, settings: DecoderSettings | None = None
) -> Result[EntityT | tuple[EntityT, ...] | None]:
    """Decode a document's ``data`` member.

    A single resource object gives an entity, an array gives a tuple of
    entities (errors located at ``data[i]``) and ``null`` gives ``None``.
    """
    if not isinstance(document, dict):
        return fail(type_mismatch(detail=f"Expected a JSON:API document, got {json_kind(document)}"))
    parsed = validate_model(JSONAPIDocument, document)
    if isinstance(parsed, Failure):
        return parsed
    data = parsed.value.data
    if data is None:
        return Success(None)
    if isinstance(data, list):
        return collect(decode(entity_cls, item, settings=settings) for item in data).at("data")
    return decode(entity_cls, data, settings=settings).at("data")


def decode_document_or_raise(
    entity_cls: type[EntityT], document: Any, *, settings: DecoderSettings | None = None
) -> EntityT | tuple[EntityT, ...] | None:
    """Decode a document's primary data or raise ``DocumentDecodeError``."""
    result = decode_document(entity_cls, document, settings=settings)
    if isinstance(result, Failure):
        raise DocumentDecodeError(result.errors)
    return result.value
