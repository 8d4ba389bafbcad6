import random
import string
from itertools import count
from typing import Callable

# Any zero-argument callable returning a fresh id can be plugged into the registry
IdFactory = Callable[[], str]

_BASE36 = string.digits + string.ascii_lowercase
SHELF_ID_LENGTH = 11


def random_shelf_id() -> str:
    """Return a short pseudo-random alphanumeric shelf id (lowercase base 36)."""
    return "".join(random.choices(_BASE36, k=SHELF_ID_LENGTH))


class CounterIdFactory:
    """Sequential ids: ``shelf-1``, ``shelf-2``, ..."""

    def __init__(self, prefix: str = "shelf-", start: int = 1) -> None:
        self.prefix = prefix
        self._counter = count(start)

    def __call__(self) -> str:
        return f"{self.prefix}{next(self._counter)}"
