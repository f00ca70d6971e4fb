"""
LocalHost: in-process reference host.

Hook-style runtime: a render function calls use_memo()/use_reducer() in a
fixed order and each call is bound to a slot by position. Dispatches are
queued FIFO and drained synchronously; one re-render follows each drain.
"""

from collections import deque
from typing import Any, Callable, Deque, List, Optional, Sequence, Tuple

from ..config import HostSettings
from ..core.errors import DispatchLoopError, NotMountedError
from ..logging_config import get_logger
from .base import DispatchFn, Host, ReducerFn, same_deps


class _MemoSlot:
    __slots__ = ("ready", "deps", "value")

    def __init__(self) -> None:
        self.ready = False
        self.deps: Tuple[Any, ...] = ()
        self.value: Any = None


class _StateSlot:
    __slots__ = ("value", "reducer", "dispatch")

    def __init__(self, host: "LocalHost", initial: Any) -> None:
        self.value = initial
        self.reducer: Optional[ReducerFn] = None
        self.dispatch: DispatchFn = lambda payload: host._dispatch(self, payload)


class LocalHost(Host):
    """
    Single-threaded host for running components without a UI toolkit.

    Usage:
        host = LocalHost(name="counter")
        host.mount(lambda: use_elm(config, host))
        host.output       # latest view() result
        host.renders      # number of completed renders

    Dispatching while a drain is in progress (e.g. from inside update)
    appends to the queue. A drain that processes more than
    settings.max_chained_dispatches payloads raises DispatchLoopError, and
    so does a view that dispatches on more than that many consecutive
    renders.

    If a transition raises mid-drain, the transitions already applied stay
    installed and are rendered before the error propagates.
    """

    def __init__(self, settings: Optional[HostSettings] = None, name: Optional[str] = None) -> None:
        self.settings = settings or HostSettings.from_env()
        self.name = name
        self.output: Any = None
        self.renders = 0
        self._log = get_logger(__name__, trace_id=name)
        self._render_fn: Optional[Callable[[], Any]] = None
        self._slots: List[Any] = []
        self._cursor = 0
        self._queue: Deque[Tuple[_StateSlot, Any]] = deque()
        self._draining = False
        self._rendering = False

    @property
    def mounted(self) -> bool:
        return self._render_fn is not None

    def mount(self, render_fn: Callable[[], Any]) -> Any:
        """
        Install render_fn with fresh slots and render it once.

        Returns:
            The first render output
        """
        self._render_fn = render_fn
        self._slots = []
        self._queue.clear()
        self.renders = 0
        return self.render()

    def unmount(self) -> None:
        self._render_fn = None
        self._slots = []
        self._queue.clear()
        self.output = None

    def render(self) -> Any:
        """
        Run the render function and process dispatches it issued.

        Raises:
            NotMountedError: If nothing is mounted
        """
        if self._render_fn is None:
            raise NotMountedError("render() called on an unmounted host")
        limit = self.settings.max_chained_dispatches
        passes = 0
        while True:
            passes += 1
            if passes > limit + 1:
                self._queue.clear()
                raise DispatchLoopError(f"View dispatched on more than {limit} consecutive renders")
            self._cursor = 0
            self._rendering = True
            try:
                output = self._render_fn()
            finally:
                self._rendering = False
            self.output = output
            self.renders += 1
            self._log.debug("Rendered (count=%d)", self.renders)
            if not self._queue or self._draining:
                return self.output
            if not self._apply_queue() or self._render_fn is None:
                return self.output

    def _next_slot(self, factory: Callable[[], Any]) -> Any:
        if self._cursor < len(self._slots):
            slot = self._slots[self._cursor]
        else:
            slot = factory()
            self._slots.append(slot)
        self._cursor += 1
        return slot

    def use_memo(self, factory: Callable[[], Any], deps: Sequence[Any]) -> Any:
        slot: _MemoSlot = self._next_slot(_MemoSlot)
        deps = tuple(deps)
        if not slot.ready or not same_deps(slot.deps, deps):
            slot.value = factory()
            slot.deps = deps
            slot.ready = True
        return slot.value

    def use_reducer(self, reducer: ReducerFn, initial: Any) -> Tuple[Any, DispatchFn]:
        slot: _StateSlot = self._next_slot(lambda: _StateSlot(self, initial))
        slot.reducer = reducer
        return slot.value, slot.dispatch

    def _dispatch(self, slot: _StateSlot, payload: Any) -> None:
        if self._render_fn is None:
            raise NotMountedError("dispatch on an unmounted host")
        self._queue.append((slot, payload))
        self._log.debug("Dispatch queued: %s (pending=%d)", getattr(payload, "msg", payload), len(self._queue))
        if self._draining or self._rendering:
            return
        self._drain()

    def _drain(self) -> None:
        if self._apply_queue() and self._render_fn is not None:
            self.render()

    def _apply_queue(self) -> int:
        """
        Apply queued dispatches in order.

        Returns:
            Number of transitions installed

        Raises:
            DispatchLoopError: If more than max_chained_dispatches are queued
                in a row; the queue is cleared
        """
        limit = self.settings.max_chained_dispatches
        installed = 0
        self._draining = True
        try:
            while self._queue:
                slot, payload = self._queue.popleft()
                if installed >= limit:
                    raise DispatchLoopError(
                        f"More than {limit} chained dispatches; "
                        f"an update keeps dispatching (last msg: {getattr(payload, 'msg', payload)!r})"
                    )
                slot.value = slot.reducer(slot.value, payload)
                installed += 1
        except Exception:
            self._queue.clear()
            self._draining = False
            # Installed transitions stay; keep the view in step with them.
            if installed and self._render_fn is not None:
                self.render()
            raise
        finally:
            self._draining = False
        self._log.debug("Applied %d dispatches", installed)
        return installed
