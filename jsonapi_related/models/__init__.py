"""Illustrative bookstore entities."""

from .bookstore import Author, Book, Chapter, Photo, Series, Store

__all__ = ["Author", "Book", "Chapter", "Photo", "Series", "Store"]
