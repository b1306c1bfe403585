"""Pydantic schemas for JSON:API."""

from .resource import Head, JSONAPIDocument, Pointer

__all__ = ["Head", "JSONAPIDocument", "Pointer"]
