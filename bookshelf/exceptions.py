class ShelfError(Exception):
    """Base class for errors raised by the shelf registry.

    The message is meant to be shown to the user as-is.
    """


class MissingShelfId(ShelfError):
    """An operation that addresses one shelf was called without a shelf id."""

    def __init__(self, action: str = "adding new books") -> None:
        super().__init__(f"Shelf ID must be specified while {action}")


class UnknownShelf(ShelfError):
    """No shelf exists for the given id."""

    def __init__(self, shelf_id: str) -> None:
        self.shelf_id = shelf_id
        super().__init__(f"Book Shelf with Shelf ID {shelf_id} does not exist")


class MissingField(ShelfError):
    """A required book field (title, author or isbn) is empty."""

    _ARTICLES = {"title": "a", "author": "an", "isbn": "an"}

    def __init__(self, field: str) -> None:
        self.field = field
        article = self._ARTICLES.get(field, "a")
        super().__init__(f"Book must have {article} {field}")


class ShelfFull(ShelfError):
    """The shelf has no remaining capacity."""

    def __init__(self, shelf_id: str) -> None:
        self.shelf_id = shelf_id
        super().__init__(f"Shelf {shelf_id} is full. Can not add any more books")
