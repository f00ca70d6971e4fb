"""
Action surface ("cmd").

Commands are primarily called in the view to trigger an update. They can
also be called from update or after_update, with caution: a transition that
dispatches unconditionally on every run never settles (see LocalHost).
Dispatching from outside, e.g. when a background job finishes, is the way
to bridge asynchronous work back into the component.

Any attribute name resolves to a command, declared or not:

    cmd.Increment()                 # dispatch("Increment", ())
    cmd["ClickItem"](0)             # dispatch("ClickItem", (0,))
    on_click = cmd.SetField.curry("name")
    on_click("milk")                # dispatch("SetField", ("name", "milk"))
"""

from enum import Enum
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, Union

from .messages import Dispatch

DispatchFn = Callable[[Dispatch], None]


def message_name(msg: Union[str, Enum]) -> str:
    """Normalize a message tag: Enum members map to their value."""
    if isinstance(msg, Enum):
        return str(msg.value)
    return str(msg)


class CmdFunction:
    """
    Callable bound to one message name.

    Calling it dispatches Dispatch(args=bound + call args, msg, props) and
    returns None; the effect is a pending state transition, not a value.
    """

    __slots__ = ("_dispatch", "msg", "props", "bound")

    def __init__(self, dispatch: DispatchFn, msg: str, props: Any = None, bound: Tuple[Any, ...] = ()) -> None:
        self._dispatch = dispatch
        self.msg = msg
        self.props = props
        self.bound = bound

    def __call__(self, *args: Any) -> None:
        self._dispatch(Dispatch(args=self.bound + args, msg=self.msg, props=self.props))

    def curry(self, *bind_args: Any) -> "CmdFunction":
        """
        Pre-bind leading arguments.

        Returns:
            New CmdFunction dispatching bind_args followed by the call arguments
        """
        return CmdFunction(self._dispatch, self.msg, self.props, self.bound + bind_args)

    def __repr__(self) -> str:
        return f"CmdFunction(msg={self.msg!r}, bound={self.bound!r})"


class Cmd:
    """
    Synthesized action surface for a component instance.

    Args:
        dispatch: Host dispatch function receiving Dispatch payloads
        props: Props value captured by every command
        messages: Optional declared message names (strings or a str Enum
            class), used for dir() and iteration only

    `props` is an attribute; a message with that name is reached via cmd["props"].
    """

    def __init__(
        self,
        dispatch: DispatchFn,
        props: Any = None,
        messages: Optional[Iterable[Union[str, Enum]]] = None,
    ) -> None:
        self._dispatch = dispatch
        self._props = props
        self._messages: List[str] = [message_name(m) for m in messages] if messages is not None else []

    @property
    def props(self) -> Any:
        return self._props

    def __getattr__(self, name: str) -> CmdFunction:
        # Underscore names are never messages.
        if name.startswith("_"):
            raise AttributeError(name)
        return CmdFunction(self._dispatch, name, self._props)

    def __getitem__(self, msg: Union[str, Enum]) -> CmdFunction:
        return CmdFunction(self._dispatch, message_name(msg), self._props)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._messages))

    def __dir__(self) -> List[str]:
        return sorted(set(object.__dir__(self)) | set(self._messages))

    def __repr__(self) -> str:
        return f"Cmd(messages={self._messages!r})"
