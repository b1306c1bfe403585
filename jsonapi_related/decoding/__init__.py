"""Decode pipeline from parsed JSON to entities."""

from .document import decode_document, decode_document_or_raise
from .entity import Entity, attribute, relationship
from .fields import FieldRole, FieldSpec, entity_fields
from .pipeline import decode, decode_or_raise, decode_related

__all__ = [
    "Entity",
    "FieldRole",
    "FieldSpec",
    "attribute",
    "decode",
    "decode_document",
    "decode_document_or_raise",
    "decode_or_raise",
    "decode_related",
    "entity_fields",
    "relationship",
]
