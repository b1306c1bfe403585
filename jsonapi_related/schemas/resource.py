"""Pydantic schemas for JSON:API identity and top-level documents."""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict


class Head(BaseModel):
    """Identity metadata of a decoded resource."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: Optional[str] = None


class Pointer(BaseModel):
    """Resource identifier object: type + id."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: str


class JSONAPIDocument(BaseModel):
    """Top-level JSON:API document as read by the decoder."""

    data: Optional[Any]
    included: Optional[List[Dict[str, Any]]] = None
    meta: Optional[Dict[str, Any]] = None
    links: Optional[Dict[str, Any]] = None
