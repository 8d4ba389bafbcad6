from typing import Dict, List, Optional

from pydantic import BaseModel

from bookshelf.book import Book
from bookshelf.exceptions import ShelfError
from bookshelf.registry import Shelf, ShelfRegistry


class BookForm(BaseModel):
    """Fields bound to the add-book form."""

    title: str = ""
    author: str = ""
    isbn: str = ""


class BookshelfController:
    """Transient view state for the interactive UI.

    Wraps a registry and turns its errors into ``error_message`` text that is
    shown to the user verbatim.
    """

    def __init__(self, registry: ShelfRegistry, max_books: int = 4) -> None:
        self.registry = registry
        self.max_books = max_books
        self.success_message = ""
        self.error_message = ""
        self.book = BookForm()
        self.all_shelves: List[str] = []
        self.all_books: Dict[str, List[Book]] = {}

    def _clear_messages(self) -> None:
        self.success_message = ""
        self.error_message = ""

    def create_shelf(self) -> str:
        shelf_id = self.registry.create_shelf(self.max_books)
        self.all_shelves.append(shelf_id)
        self.success_message = f"Successfully created a shelf with ID: {shelf_id}"
        return shelf_id

    def add_book(self, shelf_id: Optional[str]) -> bool:
        """Add the book currently in the form to ``shelf_id``."""
        self._clear_messages()
        try:
            self.registry.add_books(shelf_id, self.book.model_dump())
        except ShelfError as e:
            self.error_message = str(e)
            return False
        self.all_books[shelf_id] = self.registry.get_all_books(shelf_id)
        self.success_message = "Book was added successfully"
        return True

    def remove_book(self, shelf_id: Optional[str], isbn: str) -> bool:
        self._clear_messages()
        try:
            self.registry.remove_book(shelf_id, {"isbn": isbn})
        except ShelfError as e:
            self.error_message = str(e)
            return False
        if shelf_id in self.registry:
            self.all_books[shelf_id] = self.registry.get_all_books(shelf_id)
        self.success_message = "Book was successfully removed"
        return True

    def shelves(self) -> Dict[str, Shelf]:
        """Shelves created through this controller, in creation order."""
        everything = self.registry.get_all_books()
        return {sid: everything[sid] for sid in self.all_shelves if sid in everything}

    def search(self, text: str, shelf_id: Optional[str] = None) -> List[Book]:
        return self.registry.search(text, shelf_id)
