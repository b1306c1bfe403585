"""Core decode results and error helpers."""

from .errors import (
    DecodeError,
    DocumentDecodeError,
    ErrorKind,
    JSONAPIErrorBuilder,
    malformed_relationship,
    missing_field,
    type_mismatch,
)
from .result import Failure, Result, Success, collect, combine, fail

__all__ = [
    "DecodeError",
    "DocumentDecodeError",
    "ErrorKind",
    "Failure",
    "JSONAPIErrorBuilder",
    "Result",
    "Success",
    "collect",
    "combine",
    "fail",
    "malformed_relationship",
    "missing_field",
    "type_mismatch",
]
