"""Decode JSON:API resource objects into entities.

Every field is decoded independently and the results are combined without
short-circuiting, so a failed decode reports every offending field at once.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from jsonapi_related.config import DecoderSettings, get_settings
from jsonapi_related.core.errors import (
    DecodeError,
    DocumentDecodeError,
    json_kind,
    malformed_relationship,
    missing_field,
    type_mismatch,
)
from jsonapi_related.core.result import Failure, Result, Success, combine, fail
from jsonapi_related.core.validation import validate_model, validate_value
from jsonapi_related.relationships.cardinality import ABSENT, element_classes
from jsonapi_related.relationships.field import To
from jsonapi_related.relationships.related import Related, RelatedState
from jsonapi_related.schemas.resource import Head

from .entity import EntityT
from .fields import FieldRole, FieldSpec, entity_fields, relationship_field

logger = logging.getLogger(__name__)


def resource_type(entity_cls: type[Any]) -> str:
    return getattr(entity_cls.Meta, "type_", "")


def _decode_head(
    entity_cls: type[Any], value: Mapping[str, Any], settings: DecoderSettings
) -> Result[Head]:
    members = {key: value[key] for key in ("id", "type") if key in value}
    result = validate_model(Head, members)
    errors: list[DecodeError] = list(result.errors) if isinstance(result, Failure) else []
    if settings.require_resource_type and "type" not in value:
        errors.append(missing_field("type"))
    expected = resource_type(entity_cls)
    actual = value.get("type")
    if settings.check_resource_type and expected and isinstance(actual, str) and actual != expected:
        errors.append(
            type_mismatch("type", detail=f"Expected resource type '{expected}', got '{actual}'")
        )
    if errors:
        return Failure(tuple(errors))
    return result


def _decode_attribute(
    spec: FieldSpec, attributes: Mapping[str, Any], settings: DecoderSettings
) -> Result[Any]:
    if spec.key not in attributes:
        if spec.optional:
            return Success(spec.default_value())
        return fail(missing_field("attributes", spec.key))
    return validate_value(
        spec.attribute_adapter(), attributes[spec.key], strict=settings.strict_attributes
    ).at("attributes", spec.key)


def _to_field(spec: FieldSpec, pointers: Any) -> To[Any]:
    cardinality = spec.relationship_cardinality()
    if pointers is ABSENT:
        return To(Related(cardinality, RelatedState.UNKNOWN, element_type=spec.element_type))
    return To(
        Related(cardinality, RelatedState.UNFETCHED, pointers, spec.element_type)
    )


def _decode_relationship(spec: FieldSpec, relationships: Mapping[str, Any]) -> Result[To[Any]]:
    cardinality = spec.relationship_cardinality()
    member = relationships.get(spec.key, ABSENT)
    if member is not ABSENT and not isinstance(member, dict):
        return fail(
            malformed_relationship(
                "relationships",
                spec.key,
                detail=f"Expected a relationship object, got {json_kind(member)}",
            )
        )
    data = ABSENT if member is ABSENT else member.get("data", ABSENT)
    result = cardinality.decode_pointer(data).at("relationships", spec.key, "data")
    return result.map(lambda pointers: _to_field(spec, pointers))


def _section(value: Mapping[str, Any], name: str) -> Result[Mapping[str, Any]]:
    section = value.get(name, ABSENT)
    if section is ABSENT:
        return Success({})
    if isinstance(section, dict):
        return Success(section)
    detail = f"Expected '{name}' to be an object, got {json_kind(section)}"
    if name == "relationships":
        return fail(malformed_relationship(name, detail=detail))
    return fail(type_mismatch(name, detail=detail))


def decode(
    entity_cls: type[EntityT], value: Any, *, settings: DecoderSettings | None = None
) -> Result[EntityT]:
    """Decode one resource object into ``entity_cls``.

    Returns ``Success(entity)`` or a ``Failure`` listing every field that
    could not be decoded. Never raises for malformed input.
    """
    settings = settings or get_settings()
    if not isinstance(value, dict):
        return fail(type_mismatch(detail=f"Expected a resource object, got {json_kind(value)}"))

    attributes = _section(value, "attributes")
    relationships = _section(value, "relationships")
    # Section-level failures are keyed outside the field namespace; they only
    # ever contribute errors.
    results: dict[str, Result[Any]] = {}
    if isinstance(attributes, Failure):
        results["<attributes>"] = attributes
    if isinstance(relationships, Failure):
        results["<relationships>"] = relationships

    for spec in entity_fields(entity_cls):
        if spec.role is FieldRole.HEAD:
            results[spec.name] = _decode_head(entity_cls, value, settings)
        elif spec.role is FieldRole.ATTRIBUTE and isinstance(attributes, Success):
            results[spec.name] = _decode_attribute(spec, attributes.value, settings)
        elif spec.role is FieldRole.RELATIONSHIP and isinstance(relationships, Success):
            results[spec.name] = _decode_relationship(spec, relationships.value)

    combined = combine(results)
    if isinstance(combined, Failure):
        logger.debug(
            "Failed to decode %s: %d error(s)", entity_cls.__name__, len(combined.errors)
        )
        return combined
    entity = entity_cls(**combined.value)
    logger.debug("Decoded %s id=%s", entity_cls.__name__, entity.head.id)
    return Success(entity)


def decode_or_raise(
    entity_cls: type[EntityT], value: Any, *, settings: DecoderSettings | None = None
) -> EntityT:
    """Decode one resource object or raise ``DocumentDecodeError``."""
    result = decode(entity_cls, value, settings=settings)
    if isinstance(result, Failure):
        raise DocumentDecodeError(result.errors)
    return result.value


def _resource_decoder(element_type: Any, settings: DecoderSettings) -> Any:
    candidates = element_classes(element_type)
    if not candidates:
        raise TypeError(f"Cannot decode related resources of unresolved type {element_type!r}.")
    by_type = {resource_type(candidate): candidate for candidate in candidates}

    def decode_resource(data: Mapping[str, Any]) -> Result[Any]:
        if len(candidates) == 1:
            return decode(candidates[0], data, settings=settings)
        type_name = data.get("type")
        target = by_type.get(type_name) if isinstance(type_name, str) else None
        if target is None:
            expected = ", ".join(f"'{name}'" for name in by_type)
            return fail(
                type_mismatch(
                    "type",
                    detail=f"Expected one of {expected}, got {type_name!r}",
                )
            )
        return decode(target, data, settings=settings)

    return decode_resource


def decode_related(
    entity_cls: type[Any],
    name: str,
    data: Any,
    *,
    settings: DecoderSettings | None = None,
) -> Result[To[Any]]:
    """Decode fully materialized data for relationship ``name`` of ``entity_cls``.

    ``data`` is shaped like a relationship's ``data`` member but holds full
    resource objects. Succeeds with a ``To`` in the fetched state, ready for
    :meth:`Entity.with_related`. Raises ``ValueError`` for an unknown
    relationship name.
    """
    settings = settings or get_settings()
    spec = relationship_field(entity_cls, name)
    cardinality = spec.relationship_cardinality()
    decode_resource = _resource_decoder(spec.element_type, settings)
    result = cardinality.decode_element(data, decode_resource)
    return result.map(
        lambda elements: To(
            Related(cardinality, RelatedState.FETCHED, elements, spec.element_type)
        )
    )
