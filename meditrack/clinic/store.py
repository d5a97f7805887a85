from collections.abc import Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class EntityStore(Generic[T]):
    """Insertion-ordered, in-memory collection of one entity kind.

    No uniqueness and no indexing: callers scan ``get_all()`` with a
    predicate.  Not thread-safe; each store assumes a single writer.
    """

    def __init__(self) -> None:
        self._items: list[T] = []

    def add(self, entity: T | None) -> None:
        """Append ``entity``.  ``None`` is silently ignored."""
        if entity is not None:
            self._items.append(entity)

    def remove(self, entity: T) -> bool:
        """Remove the first item equal to ``entity``.  Returns whether one was removed."""
        try:
            self._items.remove(entity)
        except ValueError:
            return False
        return True

    def get_all(self) -> list[T]:
        """Return a snapshot of every item in insertion order."""
        return list(self._items)

    def get(self, index: int) -> T:
        if not 0 <= index < len(self._items):
            raise IndexError(f"Index {index} out of range for store of size {len(self._items)}")
        return self._items[index]

    def contains(self, entity: T) -> bool:
        return entity in self._items

    def size(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, entity: object) -> bool:
        return entity in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self.get_all())
