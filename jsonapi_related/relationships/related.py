"""Three-state knowledge of a relationship."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Generic, TypeVar

from .cardinality import Cardinality, cardinality_of

C = TypeVar("C")


class RelatedState(str, Enum):
    """How much is known about a relationship.

    - unknown: the relationship was not present in the source document
    - unfetched: only the resource identifier(s) are known
    - fetched: the related resource data itself is known
    """

    UNKNOWN = "unknown"
    UNFETCHED = "unfetched"
    FETCHED = "fetched"


@dataclass(frozen=True)
class Related(Generic[C]):
    """A relationship value whose payload shape is fixed by its cardinality.

    Build instances through :meth:`unknown`, :meth:`unfetched` and
    :meth:`fetched`; the payload is normalized and checked against the
    cardinality on construction.
    """

    cardinality: type[Cardinality[Any]]
    state: RelatedState
    value: Any = None
    element_type: Any = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "state", RelatedState(self.state))
        if self.state is RelatedState.UNKNOWN:
            if self.value is not None:
                raise ValueError("An unknown relationship carries no payload.")
            return
        if self.state is RelatedState.UNFETCHED:
            normalized = self.cardinality.normalize_pointer(self.value)
        else:
            normalized = self.cardinality.normalize_element(self.value, self.element_type)
        object.__setattr__(self, "value", normalized)

    @classmethod
    def unknown(cls, cardinality: Any) -> Related[Any]:
        kind, element_type = cardinality_of(cardinality)
        return cls(kind, RelatedState.UNKNOWN, element_type=element_type)

    @classmethod
    def unfetched(cls, cardinality: Any, pointers: Any) -> Related[Any]:
        kind, element_type = cardinality_of(cardinality)
        return cls(kind, RelatedState.UNFETCHED, pointers, element_type)

    @classmethod
    def fetched(cls, cardinality: Any, elements: Any) -> Related[Any]:
        kind, element_type = cardinality_of(cardinality)
        return cls(kind, RelatedState.FETCHED, elements, element_type)
