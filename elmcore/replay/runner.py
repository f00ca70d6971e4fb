"""
Replay runner: reconstruct a component model from recorded dispatches.

Replay runs the same Reducer the host uses, without a host: each recorded
dispatch is applied, followed by any dispatches the transition issued
through cmd, before the next recorded one (same order as LocalHost).
"""

from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Any, Deque, Iterable, Optional, Sequence, Tuple, Union

from ..config import HostSettings
from ..core.cmd import Cmd, message_name
from ..core.errors import DispatchLoopError, NotMountedError
from ..core.messages import Dispatch, ElmConfig, Init
from ..core.reducer import Reducer

# A Dispatch, or a (msg, args) pair
Recorded = Union[Dispatch, Tuple[Union[str, Enum], Sequence[Any]]]


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        model: Final model after applying dispatches
        applied: Number of transitions applied (recorded + chained)
    """
    model: Any
    applied: int


def _as_dispatch(item: Recorded, props: Any) -> Dispatch:
    if isinstance(item, Dispatch):
        return item
    msg, args = item
    return Dispatch(args=tuple(args), msg=message_name(msg), props=props)


def replay(
    config: ElmConfig,
    dispatches: Iterable[Recorded],
    props: Any = None,
    settings: Optional[HostSettings] = None,
) -> ReplayResult:
    """
    Fold recorded dispatches into a model, starting from config.init.

    Args:
        config: Component configuration (view is not called)
        dispatches: Recorded Dispatch payloads or (msg, args) pairs
        props: Props for init and for (msg, args) pairs; defaults to config.props
        settings: Chain limit source (HostSettings.from_env() when None)

    Returns:
        ReplayResult with final model and count

    Raises:
        NotMountedError: If init dispatches through cmd
        DispatchLoopError: If one recorded dispatch chains more than
            settings.max_chained_dispatches transitions
    """
    config.validate()
    settings = settings or HostSettings.from_env()
    props = config.props if props is None else props

    queue: Deque[Dispatch] = deque()
    started = [False]

    def enqueue(payload: Dispatch) -> None:
        # Same rule as the live host: no state container while init runs.
        if not started[0]:
            raise NotMountedError(f"cmd.{payload.msg} dispatched before the state container was created")
        queue.append(payload)

    cmd = Cmd(enqueue, props)
    model = config.init(Init(cmd=cmd, props=props))
    started[0] = True
    transition = Reducer(config.update, config.after_update).for_model(model, cmd)
    count = 0

    for item in dispatches:
        queue.append(_as_dispatch(item, props))
        chained = 0
        while queue:
            chained += 1
            if chained > settings.max_chained_dispatches:
                raise DispatchLoopError(
                    f"More than {settings.max_chained_dispatches} chained dispatches during replay"
                )
            model = transition(model, queue.popleft())
            count += 1

    return ReplayResult(model=model, applied=count)
