"""JSON:API relationship modelling and error-accumulating decoding."""

from .core.errors import DecodeError, DocumentDecodeError, ErrorKind, JSONAPIErrorBuilder
from .core.result import Failure, Result, Success
from .decoding import (
    Entity,
    attribute,
    decode,
    decode_document,
    decode_document_or_raise,
    decode_or_raise,
    decode_related,
    relationship,
)
from .relationships import ABSENT, Many, Maybe, One, Related, RelatedState, To
from .schemas.resource import Head, Pointer

__all__ = [
    "ABSENT",
    "DecodeError",
    "DocumentDecodeError",
    "Entity",
    "ErrorKind",
    "Failure",
    "Head",
    "JSONAPIErrorBuilder",
    "Many",
    "Maybe",
    "One",
    "Pointer",
    "Related",
    "RelatedState",
    "Result",
    "Success",
    "To",
    "attribute",
    "decode",
    "decode_document",
    "decode_document_or_raise",
    "decode_or_raise",
    "decode_related",
    "relationship",
]
