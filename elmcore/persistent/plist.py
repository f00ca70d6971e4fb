"""
PersistentList: copy-on-write ordered sequence.

Every mutator returns a new PersistentList; no method ever updates an
instance in place, so a transition function can keep a reference to the
old list for comparison or rollback. Each operation copies the full
backing tuple (O(n)); there is no structural sharing.

Index rules:
- at/remove_at/update_at/mutate_at treat negative or too-large indices as
  out of range: at() returns None, the others return an unchanged copy.
- insert_at follows slice semantics: index >= length appends, negative
  indices count from the end and clamp at the start.
"""

from typing import Any, Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .shallow import is_object_shaped, shallow_merge

T = TypeVar("T")
U = TypeVar("U")


class PersistentList(Generic[T]):
    """
    Immutable list with helpers for adding, updating and removing items.

    Usage:
        items = PersistentList()
        items = items.append({"text": "milk", "done": False})
        items = items.update_at(0, {"done": True})
        items = items.remove_at(0)
    """

    __slots__ = ("_items",)

    def __init__(self, items: Optional[Iterable[T]] = None) -> None:
        self._items = tuple(items) if items is not None else ()

    @property
    def array(self) -> List[T]:
        """Defensive copy of the items, never the backing storage."""
        return list(self._items)

    @property
    def length(self) -> int:
        return len(self._items)

    def _in_range(self, index: int) -> bool:
        return 0 <= index < len(self._items)

    def append(self, item: T) -> "PersistentList[T]":
        return PersistentList(self._items + (item,))

    def prepend(self, item: T) -> "PersistentList[T]":
        return PersistentList((item,) + self._items)

    def insert_at(self, index: int, item: T) -> "PersistentList[T]":
        return PersistentList(self._items[:index] + (item,) + self._items[index:])

    def at(self, index: int) -> Optional[T]:
        if not self._in_range(index):
            return None
        return self._items[index]

    def remove_at(self, index: int) -> "PersistentList[T]":
        return PersistentList(item for i, item in enumerate(self._items) if i != index)

    def pop(self, from_start: bool = False) -> "PersistentList[T]":
        """
        Remove the last item, or the first when from_start is set.

        Returns:
            New list without the boundary item (unchanged copy when empty)
        """
        index = 0 if from_start else len(self._items) - 1
        return self.remove_at(index)

    def update_at(self, index: int, item: Any) -> "PersistentList[T]":
        """
        Replace or patch the item at index.

        If both the existing item and `item` are object-shaped, `item` is
        merged shallowly over the existing one. Otherwise `item` replaces
        the existing value wholesale.
        """
        if not self._in_range(index):
            return PersistentList(self._items)
        current = self._items[index]
        if is_object_shaped(current) and is_object_shaped(item):
            new_item = shallow_merge(current, item)
        else:
            new_item = item
        return PersistentList(new_item if i == index else old for i, old in enumerate(self._items))

    def mutate_at(
        self,
        index: int,
        should_remove: Callable[[T], Any],
        update_instead: Callable[[T], Any],
    ) -> "PersistentList[T]":
        """
        Remove or update a list item.

        Args:
            index: Item position
            should_remove: Truthy result removes the item
            update_instead: Returns the replacement or partial item, applied
                with update_at() semantics

        Returns:
            New PersistentList (unchanged copy when index is out of range;
            neither callback runs in that case)
        """
        if not self._in_range(index):
            return PersistentList(self._items)
        current = self._items[index]
        if should_remove(current):
            return self.remove_at(index)
        return self.update_at(index, update_instead(current))

    def filter(self, predicate: Callable[[T], Any]) -> "PersistentList[T]":
        return PersistentList(item for item in self._items if predicate(item))

    def map(self, transform: Callable[[T], U]) -> "PersistentList[U]":
        return PersistentList(transform(item) for item in self._items)

    def to_json(self) -> str:
        from ..core.canonical import canonical_json_str

        return canonical_json_str(self._items)

    def __iter__(self) -> Iterator[T]:
        for item in self._items:
            yield item

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PersistentList):
            return self._items == other._items
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PersistentList({list(self._items)!r})"
