"""Counter component: primitive model, replaced wholesale by every update."""

from enum import Enum
from typing import Any, Callable, List, Optional

from ..core.messages import ElmConfig, Init, Update, View


class Msg(str, Enum):
    INCREMENT = "Increment"
    DECREMENT = "Decrement"
    ADD = "Add"
    RESET = "Reset"


def init(params: Init) -> int:
    start = params.props.get("start", 0) if params.props else 0
    return start


def update(params: Update) -> int:
    if params.msg == Msg.INCREMENT:
        return params.model + 1
    if params.msg == Msg.DECREMENT:
        return params.model - 1
    if params.msg == Msg.ADD:
        return params.model + int(params.args[0])
    if params.msg == Msg.RESET:
        return init(Init(cmd=params.cmd, props=params.props))
    return params.model


def text_view(params: View) -> List[str]:
    return [f"Count: {params.model}", "[-] [+] [reset]"]


def config(view: Optional[Callable[[View], Any]] = None, props: Any = None) -> ElmConfig:
    return ElmConfig(init=init, update=update, view=view or text_view, props=props, name="counter")
