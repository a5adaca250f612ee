"""In-memory repository pattern.

Provides a generic keyed store with CRUD, filtering and pagination.
Domain stores subclass it, set ``key_attr`` and add their own queries.
Nothing is persisted; the dict lives as long as the repository.

Example: Inventory extending InMemoryRepository[Book].
"""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterator, TypeVar

# ---------------------------------------------------------------------------
# Type variable for stored records
# ---------------------------------------------------------------------------

ModelT = TypeVar("ModelT")


# ---------------------------------------------------------------------------
# Base repository
# ---------------------------------------------------------------------------

class InMemoryRepository(Generic[ModelT]):
    """Generic dict-backed repository keyed by one attribute of the record.

    Subclass and set ``key_attr``::

        class Inventory(InMemoryRepository[Book]):
            key_attr = "book_id"

            def low_stock(self, threshold: int) -> list[Book]:
                return [b for b in self if getattr(b, "stock", 0) <= threshold]
    """

    key_attr: str = "id"

    def __init__(self, items: list[ModelT] | None = None):
        self._items: dict[str, ModelT] = {}
        for item in items or []:
            self.add(item)

    def key_of(self, item: ModelT) -> str:
        return getattr(item, self.key_attr)

    # -- List with pagination --

    def list(
        self,
        page: int = 1,
        limit: int = 50,
        filters: dict[str, Any] | None = None,
    ) -> tuple[list[ModelT], int]:
        """List items with pagination and optional equality filters.

        Returns (items, total_count).
        """
        items = list(self._items.values())

        if filters:
            for attr, value in filters.items():
                if value is not None:
                    items = [i for i in items if getattr(i, attr, None) == value]

        total = len(items)
        offset = (page - 1) * limit
        return items[offset:offset + limit], total

    # -- Get by key --

    def find(self, key: str) -> ModelT | None:
        """Return the item stored under ``key`` or None."""
        return self._items.get(key)

    # -- Create / overwrite --

    def add(self, item: ModelT) -> ModelT:
        """Insert an item, replacing any previous record with the same key."""
        self._items[self.key_of(item)] = item
        return item

    # -- Delete --

    def delete(self, key: str) -> bool:
        """Delete an item. Returns True if deleted, False if not found."""
        return self._items.pop(key, None) is not None

    def remove_where(self, predicate: Callable[[ModelT], bool]) -> list[ModelT]:
        """Remove and return every item matching ``predicate`` in one pass."""
        removed = []
        for key, item in list(self._items.items()):
            if predicate(item):
                removed.append(item)
                del self._items[key]
        return removed

    # -- Container protocol --

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __iter__(self) -> Iterator[ModelT]:
        return iter(list(self._items.values()))
