"""
Host runtime interface.

Defines the two primitives the component core needs from a rendering
runtime. Scheduling, diffing and painting stay on the host side.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Sequence, Tuple

# (current_value, payload) -> next_value
ReducerFn = Callable[[Any, Any], Any]
DispatchFn = Callable[[Any], None]


class Host(ABC):
    """
    Abstract host runtime.

    All implementations must guarantee:
    - Dispatches are applied in the order issued (FIFO), each one seeing
      the result of the previous one
    - Every accepted transition triggers a re-render
    - use_memo() results stay identical until a dependency changes identity
    """

    @abstractmethod
    def use_reducer(self, reducer: ReducerFn, initial: Any) -> Tuple[Any, DispatchFn]:
        """
        Register a state container.

        Args:
            reducer: Called as reducer(current, payload) on every dispatch;
                the reducer passed on the latest render is the one used
            initial: Value installed the first time this container is used

        Returns:
            (current value, dispatch function). The dispatch function keeps
            the same identity for the life of the container.
        """
        ...

    @abstractmethod
    def use_memo(self, factory: Callable[[], Any], deps: Sequence[Any]) -> Any:
        """
        Return a cached factory() result.

        The factory runs again only when a dependency is not the same object
        (`is`) as on the previous call, or the number of dependencies changes.
        """
        ...


def same_deps(previous: Sequence[Any], current: Sequence[Any]) -> bool:
    """Identity comparison of two dependency lists."""
    if len(previous) != len(current):
        return False
    return all(a is b for a, b in zip(previous, current))
