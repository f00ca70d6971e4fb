"""
Runtime settings read from the environment.

Environment Variables:
    ELMCORE_MAX_CHAINED_DISPATCHES: Dispatches one drain may process before
        LocalHost raises DispatchLoopError - default: 1000
"""

import os
from dataclasses import dataclass

DEFAULT_MAX_CHAINED_DISPATCHES = 1000


@dataclass(frozen=True)
class HostSettings:
    max_chained_dispatches: int = DEFAULT_MAX_CHAINED_DISPATCHES

    @staticmethod
    def from_env() -> "HostSettings":
        max_chained = int(
            os.getenv("ELMCORE_MAX_CHAINED_DISPATCHES", str(DEFAULT_MAX_CHAINED_DISPATCHES))
        )
        if max_chained < 1:
            raise ValueError("ELMCORE_MAX_CHAINED_DISPATCHES must be >= 1")
        return HostSettings(max_chained_dispatches=max_chained)
