"""Bookshelf - in-memory shelf registry

This package contains:
- Book value records (book.py)
- Shelf registry with capacity-limited shelves (registry.py)
- Error types shown to the user (exceptions.py)
- Shelf id generation (ids.py)
- View state for the interactive UI (controller.py)
- CLI interface (cli.py)
"""

from bookshelf.book import Book
from bookshelf.exceptions import MissingField, MissingShelfId, ShelfError, ShelfFull, UnknownShelf
from bookshelf.registry import Shelf, ShelfRegistry

__all__ = [
    "Book",
    "MissingField",
    "MissingShelfId",
    "Shelf",
    "ShelfError",
    "ShelfFull",
    "ShelfRegistry",
    "UnknownShelf",
]
