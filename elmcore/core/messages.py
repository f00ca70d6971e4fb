"""
Message-argument model.

Frozen parameter bundles passed between the component stages:
- Init: init(Init) -> model
- Update: update(Update) -> Maybe[model]
- AfterUpdate: after_update(AfterUpdate) -> Maybe[model]
- View: view(View) -> visual tree (opaque to the core)
- Dispatch: payload sent to the host state container by every action
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Optional, Tuple, TypeVar

from .errors import InvalidConfigError

if TYPE_CHECKING:
    from .cmd import Cmd

T = TypeVar("T")

# Either the full model, a partial model holding only changed fields, or
# None for "no change" (object-shaped models only, see reducer.py).
Maybe = Optional[T]


@dataclass(frozen=True)
class Dispatch:
    """
    Dispatched action payload.

    Fields:
        args: Positional arguments given to the action, leading curried ones first
        msg: Message name selecting the update branch
        props: Contextual properties captured when the action surface was built
    """
    args: Tuple[Any, ...]
    msg: str
    props: Any = None


@dataclass(frozen=True)
class Init:
    cmd: "Cmd"
    props: Any = None


@dataclass(frozen=True)
class Update:
    """
    Arguments of the primary transition function.

    Fields:
        args: Message arguments
        cmd: Action surface (dispatching from update is allowed but must not loop)
        model: Current model
        msg: Message name
        props: Contextual properties
    """
    args: Tuple[Any, ...]
    cmd: "Cmd"
    model: Any
    msg: str
    props: Any = None


@dataclass(frozen=True)
class AfterUpdate:
    cmd: "Cmd"
    model: Any
    props: Any = None


@dataclass(frozen=True)
class View:
    cmd: "Cmd"
    model: Any
    props: Any = None


@dataclass(frozen=True)
class ElmConfig:
    """
    Component configuration.

    Fields:
        init: Builds the initial model from Init
        update: Primary transition function (required)
        view: Renders View into an opaque visual tree
        after_update: Optional derived-state pass run after every update
        props: Contextual values threaded through every stage
        name: Component name used as trace_id in logs

    Dataclass models only accept their declared fields: a partial result
    naming any other field raises TypeError from the reducer.
    """
    init: Callable[[Init], Any]
    update: Callable[[Update], Any]
    view: Callable[[View], Any]
    after_update: Optional[Callable[[AfterUpdate], Any]] = None
    props: Any = None
    name: Optional[str] = None

    def validate(self) -> None:
        """
        Raises:
            InvalidConfigError: If init, update or view is not callable,
                or after_update is set but not callable
        """
        for field_name in ("init", "update", "view"):
            if not callable(getattr(self, field_name)):
                raise InvalidConfigError(f"ElmConfig.{field_name} must be callable")
        if self.after_update is not None and not callable(self.after_update):
            raise InvalidConfigError("ElmConfig.after_update must be callable or None")
