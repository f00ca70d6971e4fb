"""
Bundled example components.

- counter: primitive (int) model
- todo: object model holding a PersistentList, with an after_update pass
"""

from . import counter, todo

EXAMPLES = {
    "counter": counter,
    "todo": todo,
}

__all__ = ["EXAMPLES", "counter", "todo"]
