"""
Canonical serialization for comparing and displaying state.

Models may hold persistent collections, dataclasses and enums; these are
unfolded into plain dicts/lists so two states that are equal by value
always serialize to identical output.
"""

import dataclasses
import json
from enum import Enum
from typing import Any

from ..persistent import PersistentList, PersistentRecord


def canonicalize(obj: Any) -> Any:
    """
    Convert arbitrary nested state to canonical form.

    Rules:
    - dict keys sorted alphabetically
    - tuples and PersistentList converted to lists
    - PersistentRecord and dataclass instances converted to dicts
    - Enum members replaced by their value
    - recursive normalization
    """
    if isinstance(obj, Enum):
        return canonicalize(obj.value)
    if isinstance(obj, PersistentRecord):
        obj = obj.object
    elif dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        obj = {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj)}
    if isinstance(obj, dict):
        return {k: canonicalize(obj[k]) for k in sorted(obj.keys())}
    if isinstance(obj, (list, tuple, PersistentList)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Deterministic JSON bytes.

    Guarantees:
    - sort_keys=True (secondary safety)
    - separators remove whitespace
    - ensure_ascii=False keeps UTF-8 stable
    - canonical preprocessing via canonicalize()

    Returns:
        UTF-8 encoded JSON bytes
    """
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    """Same guarantees as canonical_json_bytes but returns string."""
    return canonical_json_bytes(obj).decode("utf-8")
