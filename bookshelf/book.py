from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Book:
    """Represents a single book stored on a shelf.

    Instances are frozen: once a book is on a shelf its fields never change,
    so the registry can hand out the stored objects themselves.
    """

    title: str
    author: str
    isbn: str

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} (ISBN: {self.isbn})"

    def to_dict(self) -> dict:
        return {"title": self.title, "author": self.author, "isbn": self.isbn}

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(title=data["title"], author=data["author"], isbn=data["isbn"])
