"""
Host runtimes for components.

- Host: abstract state container + memoization contract
- LocalHost: in-process, hook-style reference implementation
"""

from .base import Host, same_deps
from .local import LocalHost

__all__ = [
    "Host",
    "LocalHost",
    "same_deps",
]
