"""
Message argument parsing shared by CLI commands.

Format: MSG[:ARG[,ARG...]]
Each ARG is read as JSON when possible (0, true, "x"), otherwise kept as text.
"""

import json
from typing import Any, List, Tuple


def parse_arg(raw: str) -> Any:
    try:
        return json.loads(raw)
    except ValueError:
        return raw


def parse_message(spec: str) -> Tuple[str, List[Any]]:
    """
    Parse "ClickItem:0" into ("ClickItem", [0]).

    Raises:
        ValueError: If the message name is empty
    """
    msg, _, raw_args = spec.partition(":")
    msg = msg.strip()
    if not msg:
        raise ValueError(f"Missing message name in {spec!r}")
    args = [parse_arg(a) for a in raw_args.split(",")] if raw_args else []
    return msg, args
