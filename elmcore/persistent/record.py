"""
PersistentRecord: read-only, copy-on-write record wrapper.

No method ever mutates the wrapped value. update() returns a new record.
"""

from typing import Any, Dict, Generic, Iterator, Mapping, Optional, TypeVar

T = TypeVar("T")


class PersistentRecord(Generic[T]):
    """
    Immutable object-shaped value.

    Usage:
        rec = PersistentRecord({"text": "milk", "done": False})
        done = rec.update(done=True)
        rec["done"]   # False
        done["done"]  # True
    """

    __slots__ = ("_fields",)

    def __init__(self, fields: Optional[Mapping[str, Any]] = None) -> None:
        self._fields: Dict[str, Any] = dict(fields) if fields else {}

    @property
    def object(self) -> Dict[str, Any]:
        """Defensive copy of the wrapped value."""
        return dict(self._fields)

    def update(self, fields: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> "PersistentRecord[T]":
        """
        Create a new record with fields shallow-merged over the current value.

        Args:
            fields: Mapping of fields to override
            **kwargs: Additional fields (win over `fields`)

        Returns:
            New PersistentRecord; self is unchanged
        """
        merged = dict(self._fields)
        if fields:
            merged.update(fields)
        merged.update(kwargs)
        return PersistentRecord(merged)

    def get(self, key: str, default: Any = None) -> Any:
        return self._fields.get(key, default)

    def keys(self):
        return self._fields.keys()

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(dict(self._fields))

    def __len__(self) -> int:
        return len(self._fields)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PersistentRecord):
            return self._fields == other._fields
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"PersistentRecord({self._fields!r})"
