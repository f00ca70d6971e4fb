"""
Component entry point.

use_elm() wires a configuration to a host: it builds the action surface
(once per props value), the initial model (once per props value), the
transition function, and finally renders the view.

    config = ElmConfig(init=init, update=update, view=view, props=props)
    component = Component(config)
    component.output      # view() result, refreshed after every transition
"""

from dataclasses import replace
from typing import Any, Callable, Optional

from .core.cmd import Cmd
from .core.errors import NotMountedError
from .core.messages import Dispatch, ElmConfig, Init, View
from .core.reducer import Reducer
from .host import Host, LocalHost


class _DeferredDispatch:
    """Stable dispatch handle, bound to the state container once it exists."""

    __slots__ = ("target",)

    def __init__(self) -> None:
        self.target: Optional[Callable[[Dispatch], None]] = None

    def __call__(self, payload: Dispatch) -> None:
        if self.target is None:
            raise NotMountedError(f"cmd.{payload.msg} dispatched before the state container was created")
        self.target(payload)


def use_elm(config: ElmConfig, host: Host) -> Any:
    """
    Render one pass of an Elm-style component on host.

    Args:
        config: Component configuration (validated on every pass)
        host: Host runtime providing use_memo/use_reducer

    Returns:
        Result of config.view(View(cmd, model, props))

    Raises:
        InvalidConfigError: If the configuration is missing a callable
    """
    config.validate()
    props = config.props

    dispatcher = host.use_memo(_DeferredDispatch, [])
    cmd = host.use_memo(lambda: Cmd(dispatcher, props), [props])
    initial = host.use_memo(lambda: config.init(Init(cmd=cmd, props=props)), [props])
    transition = Reducer(config.update, config.after_update).for_model(initial, cmd)
    model, dispatch = host.use_reducer(transition, initial)
    dispatcher.target = dispatch

    return config.view(View(cmd=cmd, model=model, props=props))


class Component:
    """
    A mounted component instance.

    Owns its host (a LocalHost unless one is given) and re-renders through
    it. set_props() swaps the props value, which rebuilds the action surface
    on the next render; the model built by the first init is kept, as the
    state container only reads its initial value once.
    """

    def __init__(self, config: ElmConfig, host: Optional[LocalHost] = None) -> None:
        config.validate()
        self.config = config
        self.host = host or LocalHost(name=config.name)
        self.host.mount(lambda: use_elm(self.config, self.host))

    @property
    def output(self) -> Any:
        return self.host.output

    def set_props(self, props: Any) -> Any:
        """Re-render with a new props value; returns the new view output."""
        self.config = replace(self.config, props=props)
        return self.host.render()

    def unmount(self) -> None:
        self.host.unmount()
