"""
Core component primitives.

- Messages: Init/Update/AfterUpdate/View parameter bundles, Dispatch payload, ElmConfig
- Cmd: Action surface synthesized per props value
- Reducer: Transition engine (object and primitive paths)
- Match: match_msg/resolve_args helpers for update functions
- Canonical: Deterministic serialization of models
"""

from .errors import DispatchLoopError, ElmError, InvalidConfigError, NotMountedError
from .messages import AfterUpdate, Dispatch, ElmConfig, Init, Maybe, Update, View
from .cmd import Cmd, CmdFunction, message_name
from .reducer import Reducer
from .match import match_msg, resolve_args
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str

__all__ = [
    "AfterUpdate",
    "Cmd",
    "CmdFunction",
    "Dispatch",
    "DispatchLoopError",
    "ElmConfig",
    "ElmError",
    "Init",
    "InvalidConfigError",
    "Maybe",
    "NotMountedError",
    "Reducer",
    "Update",
    "View",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "match_msg",
    "message_name",
    "resolve_args",
]
