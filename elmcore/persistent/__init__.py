"""
Persistent (copy-on-write) collections for building state fragments.

- PersistentList: ordered sequence, every mutator returns a new list
- PersistentRecord: read-only record, update() returns a new record
- shallow_merge / is_object_shaped: one-level merge rules shared with the reducer
"""

from .record import PersistentRecord
from .shallow import fields_of, is_object_shaped, shallow_merge
from .plist import PersistentList

__all__ = [
    "PersistentList",
    "PersistentRecord",
    "fields_of",
    "is_object_shaped",
    "shallow_merge",
]
