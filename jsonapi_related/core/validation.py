"""Bridge pydantic validation into non-raising decode results."""

from __future__ import annotations

import json
from typing import Any, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from .errors import DecodeError, ErrorKind
from .result import Failure, Result, Success

ModelT = TypeVar("ModelT", bound=BaseModel)

_MISSING_TYPES = {"missing"}


def errors_from_validation(exc: ValidationError) -> tuple[DecodeError, ...]:
    """Translate pydantic errors into located decode errors."""
    errors = []
    for item in exc.errors():
        kind = (
            ErrorKind.MISSING_FIELD
            if item["type"] in _MISSING_TYPES
            else ErrorKind.TYPE_MISMATCH
        )
        errors.append(DecodeError(kind, tuple(item["loc"]), item["msg"]))
    return tuple(errors)


def validate_model(model: type[ModelT], value: Any) -> Result[ModelT]:
    """Validate ``value`` into ``model`` without raising."""
    try:
        return Success(model.model_validate(value))
    except ValidationError as exc:
        return Failure(errors_from_validation(exc))


def validate_value(adapter: TypeAdapter[Any], value: Any, *, strict: bool = True) -> Result[Any]:
    """Validate a parsed JSON value against ``adapter``.

    Strict validation runs in JSON mode, which still accepts ISO date strings
    but rejects numeric strings and other lax coercions.
    """
    try:
        if strict:
            try:
                encoded = json.dumps(value)
            except (TypeError, ValueError) as exc:
                return Failure(
                    (DecodeError(ErrorKind.TYPE_MISMATCH, (), f"Value is not JSON: {exc}"),)
                )
            return Success(adapter.validate_json(encoded, strict=True))
        return Success(adapter.validate_python(value))
    except ValidationError as exc:
        return Failure(errors_from_validation(exc))
