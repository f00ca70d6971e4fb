"""
Shallow merge rules shared by the transition engine and PersistentList.

A value is object-shaped when it is a Mapping, a PersistentRecord or a
dataclass instance. Merging is one level deep and override wins:
nested values are replaced wholesale, never deep-merged.
"""

import dataclasses
from typing import Any, Dict, Mapping

from .record import PersistentRecord


def is_object_shaped(value: Any) -> bool:
    """Check whether partial updates can be merged into value field by field."""
    if isinstance(value, (Mapping, PersistentRecord)):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def fields_of(value: Any) -> Dict[str, Any]:
    """
    Top-level fields of an object-shaped value as a new dict.

    Raises:
        TypeError: If value is not object-shaped
    """
    if isinstance(value, PersistentRecord):
        return value.object
    if isinstance(value, Mapping):
        return dict(value)
    if is_object_shaped(value):
        return {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    raise TypeError(f"Not an object-shaped value: {type(value).__name__}")


def shallow_merge(old: Any, partial: Any) -> Any:
    """
    Merge partial over old, one level deep.

    The result keeps the container kind of `old`:
    - Mapping -> new dict
    - PersistentRecord -> new PersistentRecord
    - dataclass -> dataclasses.replace() (unknown fields raise TypeError)

    A partial that is not object-shaped (including None) contributes no
    fields, so the result equals old.

    Args:
        old: Object-shaped value to merge into
        partial: Fields to override

    Returns:
        New merged value; old is never mutated
    """
    fields = fields_of(partial) if is_object_shaped(partial) else {}
    if isinstance(old, PersistentRecord):
        return old.update(fields)
    if isinstance(old, Mapping):
        merged = dict(old)
        merged.update(fields)
        return merged
    return dataclasses.replace(old, **fields)
