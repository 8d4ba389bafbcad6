import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Union

from bookshelf.book import Book
from bookshelf.exceptions import MissingField, MissingShelfId, ShelfFull, UnknownShelf
from bookshelf.ids import IdFactory, random_shelf_id

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 10
REQUIRED_FIELDS = ("title", "author", "isbn")


@dataclass
class Shelf:
    """A capacity-bounded, insertion-ordered list of books."""

    id: str
    capacity: int
    books: List[Book] = field(default_factory=list)

    def snapshot(self) -> "Shelf":
        return Shelf(id=self.id, capacity=self.capacity, books=list(self.books))

    def to_dict(self) -> dict:
        return {"id": self.id, "capacity": self.capacity, "books": [b.to_dict() for b in self.books]}


def _field(record: Any, name: str) -> Any:
    """Read a field from either a mapping (form data) or an object (Book)."""
    if isinstance(record, Mapping):
        return record.get(name)
    return getattr(record, name, None)


class ShelfRegistry:
    """Owns every shelf and the books on them.

    One instance is created per application and passed to whoever needs it.
    Callers only ever receive frozen books or copies of the internal lists.
    """

    def __init__(self, id_factory: Optional[IdFactory] = None, default_capacity: int = DEFAULT_CAPACITY) -> None:
        self._id_factory: IdFactory = id_factory or random_shelf_id
        self.default_capacity = default_capacity
        self._shelves: Dict[str, Shelf] = {}

    def __len__(self) -> int:
        return len(self._shelves)

    def __contains__(self, shelf_id: object) -> bool:
        return shelf_id in self._shelves

    # ------------------------- Shelves ------------------------- #
    def create_shelf(self, capacity: Optional[int] = None) -> str:
        """Create an empty shelf and return its id.

        A missing, zero or negative capacity falls back to the default.
        """
        shelf_id = self._id_factory()
        if not capacity or capacity < 0:
            capacity = self.default_capacity
        self._shelves[shelf_id] = Shelf(id=shelf_id, capacity=capacity)
        logger.info(f"Shelf created: id={shelf_id}, capacity={capacity}")
        return shelf_id

    def shelf_ids(self) -> List[str]:
        return list(self._shelves)

    def _get_shelf(self, shelf_id: Optional[str]) -> Optional[Shelf]:
        if not shelf_id:
            return None
        return self._shelves.get(shelf_id)

    def books_count(self, shelf_id: Optional[str]) -> int:
        """Number of books on the shelf, or -1 if the shelf id is missing or unknown."""
        shelf = self._get_shelf(shelf_id)
        if shelf is None:
            return -1
        return len(shelf.books)

    def books_remaining(self, shelf_id: Optional[str]) -> int:
        """Free slots on the shelf, or -1 if the shelf id is missing or unknown."""
        shelf = self._get_shelf(shelf_id)
        if shelf is None:
            return -1
        return shelf.capacity - len(shelf.books)

    # ------------------------- Books ------------------------- #
    def add_books(self, shelf_id: Optional[str], books: Union[Any, Sequence[Any]]) -> None:
        """Add one book or a sequence of books to a shelf.

        Each book may be a ``Book`` or a mapping with title, author and isbn.
        Books are processed in order; when one fails, the ones before it stay
        on the shelf. A book whose isbn is already on the shelf is skipped.

        Raises:
            MissingShelfId: ``shelf_id`` is empty.
            UnknownShelf: no shelf has that id.
            ShelfFull: the shelf was full when a book was reached.
            MissingField: a book has an empty title, author or isbn.
        """
        if not shelf_id:
            raise MissingShelfId("adding new books")
        shelf = self._shelves.get(shelf_id)
        if shelf is None:
            raise UnknownShelf(shelf_id)

        is_many = isinstance(books, Sequence) and not isinstance(books, (str, bytes))
        records = books if is_many else [books]
        for record in records:
            self._add_one(shelf, record)

    def _add_one(self, shelf: Shelf, record: Any) -> None:
        if shelf.capacity - len(shelf.books) <= 0:
            logger.warning(f"Shelf {shelf.id} is full, rejecting book")
            raise ShelfFull(shelf.id)

        values = {}
        for name in REQUIRED_FIELDS:
            value = _field(record, name)
            if not value:
                logger.warning(f"Rejecting book on shelf {shelf.id}: missing {name}")
                raise MissingField(name)
            values[name] = value

        if any(b.isbn == values["isbn"] for b in shelf.books):
            logger.info(f"Duplicate ISBN {values['isbn']} on shelf {shelf.id}, skipped")
            return

        book = record if isinstance(record, Book) else Book.from_dict(values)
        shelf.books.append(book)
        logger.info(f"Book added to shelf {shelf.id}: isbn={book.isbn}")

    def get_all_books(self, shelf_id: Optional[str] = None) -> Union[List[Book], Dict[str, Shelf]]:
        """Books on one shelf, or every shelf when no known shelf id is given.

        With a known ``shelf_id`` a new list of books is returned; otherwise a
        new dict mapping each shelf id to a copy of its shelf.
        """
        shelf = self._get_shelf(shelf_id)
        if shelf is not None:
            return list(shelf.books)
        return {sid: s.snapshot() for sid, s in self._shelves.items()}

    def remove_book(self, shelf_id: Optional[str], matcher: Any) -> None:
        """Remove every book matching ``matcher`` by isbn OR by title.

        An unknown shelf is ignored.
        """
        if not shelf_id:
            raise MissingShelfId("removing a book")
        shelf = self._shelves.get(shelf_id)
        if shelf is None:
            return

        isbn = _field(matcher, "isbn")
        title = _field(matcher, "title")

        def matches(book: Book) -> bool:
            return (isbn is not None and book.isbn == isbn) or (title is not None and book.title == title)

        kept = [b for b in shelf.books if not matches(b)]
        removed = len(shelf.books) - len(kept)
        shelf.books[:] = kept
        logger.info(f"Removed {removed} book(s) from shelf {shelf_id}")

    def search(self, search_text: str, shelf_id: Optional[str] = None) -> List[Book]:
        """Books whose title, author or isbn contains ``search_text`` (case-sensitive).

        Searches one shelf if ``shelf_id`` names an existing shelf, all shelves otherwise.
        """
        shelf = self._get_shelf(shelf_id)
        shelves = [shelf] if shelf is not None else list(self._shelves.values())

        found: List[Book] = []
        for s in shelves:
            for book in s.books:
                if search_text in book.title or search_text in book.author or search_text in book.isbn:
                    found.append(book)
        return found
