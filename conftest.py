import pytest

from bookshelf.ids import CounterIdFactory
from bookshelf.registry import ShelfRegistry


@pytest.fixture
def registry():
    # Fresh registry per test with predictable ids: shelf-1, shelf-2, ...
    return ShelfRegistry(id_factory=CounterIdFactory())
