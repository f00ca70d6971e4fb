"""
Reducer: the transition engine.

Given the current model and a Dispatch payload, the reducer:
1. runs update() and merges its result into the model,
2. runs after_update() (if configured) on the merged model and merges again,
3. returns the final model to the host state container.

Two paths exist, chosen once from the shape of the initial model:
- object path (Mapping, PersistentRecord, dataclass): results are merged
  shallowly, new fields win, None means "no change"
- primitive path (anything else): results replace the model wholesale
"""

from functools import partial
from typing import Any, Callable, Optional

from ..persistent import is_object_shaped, shallow_merge
from .cmd import Cmd
from .messages import AfterUpdate, Dispatch, Update

UpdateFn = Callable[[Update], Any]
AfterUpdateFn = Callable[[AfterUpdate], Any]

# Host-facing signature: (current_model, dispatch) -> new_model
Transition = Callable[[Any, Dispatch], Any]


class Reducer:
    """
    Transition engine for one component configuration.

    Object-shaped models keep their kind when merged. Dataclass models only
    accept their declared fields; an unknown field in a partial result
    raises TypeError.

    Usage:
        reducer = Reducer(update, after_update)
        transition = reducer.for_model(initial_model, cmd)
        new_model = transition(model, Dispatch(args=(), msg="Increment"))
    """

    def __init__(self, update: UpdateFn, after_update: Optional[AfterUpdateFn] = None) -> None:
        self._update = update
        self._after_update = after_update

    def for_model(self, initial: Any, cmd: Cmd) -> Transition:
        """
        Select the transition path from the shape of the initial model.

        Args:
            initial: Model produced by init()
            cmd: Action surface handed to update/after_update

        Returns:
            Function (model, dispatch) -> new model
        """
        if is_object_shaped(initial):
            return partial(self.object_transition, cmd=cmd)
        return partial(self.primitive_transition, cmd=cmd)

    def object_transition(self, model: Any, dispatch: Dispatch, cmd: Cmd) -> Any:
        """
        Merge update results over an object-shaped model.

        A result that is not object-shaped (including None) leaves every
        field as it was.
        """
        partial_model = self._update(
            Update(args=dispatch.args, cmd=cmd, model=model, msg=dispatch.msg, props=dispatch.props)
        )
        updated = shallow_merge(model, partial_model)
        if self._after_update is None:
            return updated
        partial_model = self._after_update(AfterUpdate(cmd=cmd, model=updated, props=dispatch.props))
        return shallow_merge(updated, partial_model)

    def primitive_transition(self, model: Any, dispatch: Dispatch, cmd: Cmd) -> Any:
        """
        Replace a primitive model with the update result.

        There is no partial update for primitive models, and None is not
        special-cased: an update that returns None makes None the new model.
        Return the model unchanged to signal "no change".
        """
        updated = self._update(
            Update(args=dispatch.args, cmd=cmd, model=model, msg=dispatch.msg, props=dispatch.props)
        )
        if self._after_update is None:
            return updated
        return self._after_update(AfterUpdate(cmd=cmd, model=updated, props=dispatch.props))
