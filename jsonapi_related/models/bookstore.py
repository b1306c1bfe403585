"""Bookstore resources: stores, books, their authors and assets.

Cross references (a book's author, an author's books) only ever go through
``To`` relationships, so decoded entities never own each other cyclically.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from pydantic import AnyHttpUrl

from jsonapi_related.decoding.entity import Entity
from jsonapi_related.relationships import Many, Maybe, One, To


@dataclass(frozen=True)
class Author(Entity):
    class Meta:
        type_ = "authors"

    name: str
    birth: date
    death: date | None

    books: To[Many[Book]]
    photos: To[Many[Photo]]


@dataclass(frozen=True)
class Book(Entity):
    class Meta:
        type_ = "books"

    title: str
    published: date

    author: To[One[Author]]
    series: To[Maybe[Series]]
    chapters: To[Many[Chapter]]
    photos: To[Many[Photo]]
    stores: To[Many[Store]]


@dataclass(frozen=True)
class Photo(Entity):
    """An image attached to either an author or a book."""

    class Meta:
        type_ = "photos"

    title: str
    uri: AnyHttpUrl

    imageable: To[One[Author | Book]]


@dataclass(frozen=True)
class Chapter(Entity):
    class Meta:
        type_ = "chapters"

    title: str
    ordering: int

    book: To[One[Book]]


@dataclass(frozen=True)
class Series(Entity):
    class Meta:
        type_ = "series"

    title: str

    books: To[Many[Book]]


@dataclass(frozen=True)
class Store(Entity):
    class Meta:
        type_ = "stores"

    name: str

    books: To[Many[Book]]
