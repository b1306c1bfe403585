"""Relationship cardinalities, states and fields."""

from .cardinality import ABSENT, Cardinality, Many, Maybe, One, cardinality_of
from .field import To
from .related import Related, RelatedState

__all__ = [
    "ABSENT",
    "Cardinality",
    "Many",
    "Maybe",
    "One",
    "Related",
    "RelatedState",
    "To",
    "cardinality_of",
]
