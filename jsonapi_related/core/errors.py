"""Decode error values and JSON:API error object templates."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Iterable, Union

PathSegment = Union[str, int]


class ErrorKind(str, Enum):
    """Field-level decode failure categories."""

    MISSING_FIELD = "missing_field"
    TYPE_MISMATCH = "type_mismatch"
    MALFORMED_RELATIONSHIP = "malformed_relationship"


@dataclass(frozen=True)
class DecodeError:
    """A single field that could not be decoded.

    ``path`` is relative to the value being decoded; parents prepend their own
    location with :meth:`at` as results bubble up.
    """

    kind: ErrorKind
    path: tuple[PathSegment, ...]
    detail: str

    def at(self, *prefix: PathSegment) -> DecodeError:
        """Return the same error located under ``prefix``."""
        return replace(self, path=tuple(prefix) + self.path)

    @property
    def location(self) -> str:
        """Dotted path, e.g. ``relationships.books.data[2].id``."""
        location = ""
        for segment in self.path:
            if isinstance(segment, int):
                location += f"[{segment}]"
            elif location:
                location += f".{segment}"
            else:
                location = segment
        return location

    @property
    def pointer(self) -> str:
        """JSON pointer (RFC 6901) to the offending value."""
        escaped = (
            str(segment).replace("~", "~0").replace("/", "~1") for segment in self.path
        )
        return "".join(f"/{segment}" for segment in escaped)

    def __str__(self) -> str:
        return f"{self.location or '<root>'}: {self.detail}"


def json_kind(value: Any) -> str:
    """Describe the JSON kind of a parsed value for error details."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "a boolean"
    if isinstance(value, dict):
        return "an object"
    if isinstance(value, list):
        return "an array"
    if isinstance(value, str):
        return "a string"
    if isinstance(value, (int, float)):
        return "a number"
    return type(value).__name__


def missing_field(*path: PathSegment, detail: str = "Field required") -> DecodeError:
    return DecodeError(ErrorKind.MISSING_FIELD, path, detail)


def type_mismatch(*path: PathSegment, detail: str) -> DecodeError:
    return DecodeError(ErrorKind.TYPE_MISMATCH, path, detail)


def malformed_relationship(*path: PathSegment, detail: str) -> DecodeError:
    return DecodeError(ErrorKind.MALFORMED_RELATIONSHIP, path, detail)


class JSONAPIErrorBuilder:
    """Build JSON:API error objects and error documents."""

    def error_object(
        self,
        *,
        status: str | None = None,
        code: str | None = None,
        title: str | None = None,
        detail: str | None = None,
        source: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        """Return a JSON:API error object."""
        error: dict[str, Any] = {}
        if status is not None:
            error["status"] = status
        if code is not None:
            error["code"] = code
        if title is not None:
            error["title"] = title
        if detail is not None:
            error["detail"] = detail
        if source is not None:
            error["source"] = source
        if meta is not None:
            error["meta"] = meta
        if not error:
            raise ValueError("Error object must include at least one field.")
        return error

    def decode_error_object(
        self, error: DecodeError, *, pointer_prefix: str = ""
    ) -> dict[str, Any]:
        """Return a 422 error object pointing at the field that failed."""
        return self.error_object(
            status="422",
            code=error.kind.value,
            title=_TITLES[error.kind],
            detail=error.detail,
            source={"pointer": f"{pointer_prefix}{error.pointer}"},
        )

    def error_document(self, errors: list[dict[str, Any]]) -> dict[str, Any]:
        """Return a JSON:API document with an errors array."""
        return {"errors": errors}


_TITLES = {
    ErrorKind.MISSING_FIELD: "Missing required field",
    ErrorKind.TYPE_MISMATCH: "Type mismatch",
    ErrorKind.MALFORMED_RELATIONSHIP: "Malformed relationship",
}


class DocumentDecodeError(ValueError):
    """Raised by the ``*_or_raise`` entry points with every accumulated error."""

    def __init__(self, errors: Iterable[DecodeError]) -> None:
        self.errors = tuple(errors)
        lines = "\n".join(f"  {error}" for error in self.errors)
        super().__init__(f"{len(self.errors)} decode error(s):\n{lines}")

    def to_document(self, *, pointer_prefix: str = "") -> dict[str, Any]:
        """Render the errors as a JSON:API error document."""
        builder = JSONAPIErrorBuilder()
        return builder.error_document(
            [
                builder.decode_error_object(error, pointer_prefix=pointer_prefix)
                for error in self.errors
            ]
        )
