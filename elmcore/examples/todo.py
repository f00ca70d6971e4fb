"""
Todo (grocery list) component.

Model:
    items: PersistentList of {"text": str, "done": bool}
    input: text typed but not yet added
    remaining: count of items not done (derived in after_update)

Clicking an item marks it done; clicking a done item removes it.
"""

from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from ..core.match import match_msg
from ..core.messages import AfterUpdate, ElmConfig, Init, Update, View
from ..persistent import PersistentList


class Msg(str, Enum):
    SET_INPUT = "SetInput"
    ADD_ITEM = "AddItem"
    CLICK_ITEM = "ClickItem"
    CLEAR_DONE = "ClearDone"


def init(params: Init) -> Dict[str, Any]:
    texts = params.props.get("items", []) if params.props else []
    return {
        "items": PersistentList({"text": text, "done": False} for text in texts),
        "input": "",
        "remaining": len(texts),
    }


def update(params: Update) -> Optional[Dict[str, Any]]:
    model = params.model

    def add_item(text: Optional[str] = None):
        text = (model["input"] if text is None else text).strip()
        if not text:
            return None
        return {"input": "", "items": model["items"].append({"text": text, "done": False})}

    def click_item(index: int):
        items = model["items"].mutate_at(
            index,
            lambda item: item["done"],
            lambda item: {"done": True},
        )
        return {"items": items}

    return match_msg(params.msg, params.args, {
        Msg.SET_INPUT: lambda text: {"input": text},
        Msg.ADD_ITEM: add_item,
        Msg.CLICK_ITEM: click_item,
        Msg.CLEAR_DONE: lambda: {"items": model["items"].filter(lambda item: not item["done"])},
    })


def after_update(params: AfterUpdate) -> Dict[str, Any]:
    return {"remaining": sum(1 for item in params.model["items"] if not item["done"])}


def text_view(params: View) -> List[str]:
    lines = [f"> {params.model['input']}"]
    for item in params.model["items"]:
        mark = "x" if item["done"] else " "
        lines.append(f"[{mark}] {item['text']}")
    lines.append(f"{params.model['remaining']} remaining")
    return lines


def config(view: Optional[Callable[[View], Any]] = None, props: Any = None) -> ElmConfig:
    return ElmConfig(
        init=init,
        update=update,
        after_update=after_update,
        view=view or text_view,
        props=props,
        name="todo",
    )
