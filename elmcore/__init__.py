"""
Elm-style Component Core

Unidirectional state updates for stateful rendering components:
init -> update (-> after_update) -> view, driven by symbolic messages.
"""

__version__ = "0.1.0"

from .persistent import PersistentList, PersistentRecord
from .core import (
    AfterUpdate,
    Cmd,
    Dispatch,
    ElmConfig,
    Init,
    Maybe,
    Reducer,
    Update,
    View,
    match_msg,
    resolve_args,
)
from .host import Host, LocalHost
from .component import Component, use_elm

__all__ = [
    "AfterUpdate",
    "Cmd",
    "Component",
    "Dispatch",
    "ElmConfig",
    "Host",
    "Init",
    "LocalHost",
    "Maybe",
    "PersistentList",
    "PersistentRecord",
    "Reducer",
    "Update",
    "View",
    "match_msg",
    "resolve_args",
    "use_elm",
]
