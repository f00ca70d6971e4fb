"""
Replay of recorded dispatches.

Replay applies the component's reducer to a dispatch sequence without a host.
Same dispatches -> same model.
"""

from .runner import ReplayResult, replay

__all__ = [
    "ReplayResult",
    "replay",
]
