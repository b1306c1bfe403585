"""Relationship fields declared on entities."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .related import Related, RelatedState

C = TypeVar("C")


@dataclass(frozen=True)
class To(Generic[C]):
    """Relationship field holding exactly one :class:`Related` value.

    Declared on entities as ``books: To[Many[Book]]``. Links and relationship
    meta would live next to ``data``.
    """

    data: Related[C]

    @classmethod
    def unknown(cls, cardinality: Any) -> To[Any]:
        return cls(Related.unknown(cardinality))

    @classmethod
    def unfetched(cls, cardinality: Any, pointers: Any) -> To[Any]:
        return cls(Related.unfetched(cardinality, pointers))

    @classmethod
    def fetched(cls, cardinality: Any, elements: Any) -> To[Any]:
        return cls(Related.fetched(cardinality, elements))

    @property
    def state(self) -> RelatedState:
        return self.data.state

    @property
    def is_unknown(self) -> bool:
        return self.data.state is RelatedState.UNKNOWN

    @property
    def is_unfetched(self) -> bool:
        return self.data.state is RelatedState.UNFETCHED

    @property
    def is_fetched(self) -> bool:
        return self.data.state is RelatedState.FETCHED

    @property
    def as_unfetched(self) -> Any:
        """Pointer shape when unfetched, otherwise ``None``."""
        return self.data.value if self.is_unfetched else None

    @property
    def as_fetched(self) -> Any:
        """Element shape when fetched, otherwise ``None``."""
        return self.data.value if self.is_fetched else None
