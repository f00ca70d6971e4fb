"""
Helpers for writing update functions.

Use match_msg() instead of an if/elif chain on msg:

    def update(u):
        return match_msg(u.msg, u.args, {
            "Increment": lambda: u.model + 1,
            "Decrement": lambda: u.model - 1,
        })

Or resolve_args() inside a branch to unpack the arguments:

    if u.msg == "ClickItem":
        return resolve_args(u.args, lambda index: ...)
"""

from enum import Enum
from typing import Any, Callable, Mapping, Optional, Sequence, Union

from .cmd import message_name


def resolve_args(args: Sequence[Any], handler: Callable[..., Any]) -> Any:
    """Call handler with the message arguments spread positionally."""
    return handler(*args)


def match_msg(
    msg: Union[str, Enum],
    args: Sequence[Any],
    handlers: Mapping[Any, Callable[..., Any]],
) -> Optional[Any]:
    """
    Dispatch to the handler registered for msg.

    Handler keys may be message names or str Enum members.

    Returns:
        Handler result, or None (no change) when msg has no handler
    """
    name = message_name(msg)
    for key, handler in handlers.items():
        if message_name(key) == name:
            return handler(*args)
    return None
