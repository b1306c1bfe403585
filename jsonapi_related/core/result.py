"""Error-accumulating decode results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterable, Mapping, TypeVar, Union

from .errors import DecodeError, PathSegment

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A decoded value."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def map(self, fn: Callable[[T], U]) -> Success[U]:
        return Success(fn(self.value))

    def at(self, *prefix: PathSegment) -> Success[T]:
        return self


@dataclass(frozen=True)
class Failure:
    """Aggregate decode failure: every error found, in discovery order."""

    errors: tuple[DecodeError, ...]

    def __post_init__(self) -> None:
        if not self.errors:
            raise ValueError("Failure must carry at least one error.")

    @property
    def ok(self) -> bool:
        return False

    def map(self, fn: Callable[[Any], Any]) -> Failure:
        return self

    def at(self, *prefix: PathSegment) -> Failure:
        """Relocate every error under ``prefix``."""
        return Failure(tuple(error.at(*prefix) for error in self.errors))


Result = Union[Success[T], Failure]


def fail(*errors: DecodeError) -> Failure:
    return Failure(errors)


def combine(results: Mapping[str, Result[Any]]) -> Result[dict[str, Any]]:
    """Merge named results, concatenating failures instead of stopping early."""
    values: dict[str, Any] = {}
    errors: list[DecodeError] = []
    for name, result in results.items():
        if isinstance(result, Failure):
            errors.extend(result.errors)
        else:
            values[name] = result.value
    if errors:
        return Failure(tuple(errors))
    return Success(values)


def collect(results: Iterable[Result[T]]) -> Result[tuple[T, ...]]:
    """Merge positional results, locating each failure at its index."""
    values: list[T] = []
    errors: list[DecodeError] = []
    for index, result in enumerate(results):
        if isinstance(result, Failure):
            errors.extend(result.at(index).errors)
        else:
            values.append(result.value)
    if errors:
        return Failure(tuple(errors))
    return Success(tuple(values))
