"""
Tests for the transition engine.

Critical: Merge semantics differ between object and primitive models.
"""

from dataclasses import dataclass
from functools import reduce

import pytest

from elmcore.core.cmd import Cmd
from elmcore.core.messages import Dispatch
from elmcore.core.reducer import Reducer
from elmcore.persistent import PersistentRecord


def _cmd():
    return Cmd(lambda d: None)


def _dispatch(msg, *args, props=None):
    return Dispatch(args=args, msg=msg, props=props)


def test_object_merge_monotonicity():
    """Fields absent from the partial keep their value; present ones override."""

    def update(u):
        return {"b": 20, "c": 30}

    state = {"a": 1, "b": 2}
    transition = Reducer(update).for_model(state, _cmd())
    new_state = transition(state, _dispatch("Any"))

    assert new_state == {"a": 1, "b": 20, "c": 30}
    assert state == {"a": 1, "b": 2}


def test_object_absent_result_is_noop():
    """None from update leaves an object model equal to before."""
    state = {"a": 1, "nested": {"x": 1}}
    transition = Reducer(lambda u: None).for_model(state, _cmd())

    assert transition(state, _dispatch("Unknown")) == state


def test_object_non_object_result_is_ignored():
    """A primitive result cannot replace an object model."""
    state = {"a": 1}
    transition = Reducer(lambda u: 42).for_model(state, _cmd())

    assert transition(state, _dispatch("Any")) == {"a": 1}


def test_object_merge_is_one_level_deep():
    """Nested values are replaced wholesale, not deep-merged."""
    state = {"filters": {"done": True, "text": "m"}}
    transition = Reducer(lambda u: {"filters": {"text": ""}}).for_model(state, _cmd())

    assert transition(state, _dispatch("ClearText")) == {"filters": {"text": ""}}


def test_primitive_result_replaces_model():
    """Primitive models are replaced by the update result."""

    def update(u):
        if u.msg == "Increment":
            return u.model + 1
        if u.msg == "Decrement":
            return u.model - 1
        return u.model

    transition = Reducer(update).for_model(0, _cmd())

    assert transition(0, _dispatch("Increment")) == 1
    assert transition(1, _dispatch("Decrement")) == 0


def test_primitive_absent_result_is_adopted():
    """None from update becomes the new primitive model (no special case)."""
    transition = Reducer(lambda u: None).for_model(5, _cmd())

    assert transition(5, _dispatch("Unhandled")) is None


def test_update_receives_dispatch_fields():
    """update sees args, msg, props, the current model and cmd."""
    seen = []
    cmd = _cmd()

    def update(u):
        seen.append(u)
        return None

    state = {"n": 1}
    Reducer(update).for_model(state, cmd)(state, _dispatch("Set", 1, 2, props="p"))

    u = seen[0]
    assert (u.args, u.msg, u.props, u.model, u.cmd) == ((1, 2), "Set", "p", state, cmd)


def test_after_update_runs_on_merged_model():
    """after_update sees the merged model and its result is merged again."""
    seen = []

    def update(u):
        return {"items": u.model["items"] + [u.args[0]]}

    def after_update(a):
        seen.append(a.model)
        return {"count": len(a.model["items"])}

    state = {"items": [], "count": 0, "title": "t"}
    transition = Reducer(update, after_update).for_model(state, _cmd())
    new_state = transition(state, _dispatch("Add", "milk"))

    assert seen == [{"items": ["milk"], "count": 0, "title": "t"}]
    assert new_state == {"items": ["milk"], "count": 1, "title": "t"}


def test_after_update_absent_result_keeps_merged_model():
    """after_update returning None keeps the primary result."""
    state = {"a": 1}
    transition = Reducer(lambda u: {"a": 2}, lambda a: None).for_model(state, _cmd())

    assert transition(state, _dispatch("Any")) == {"a": 2}


def test_primitive_after_update_result_is_used_directly():
    """On the primitive path after_update replaces the model, even with None."""
    transition = Reducer(lambda u: u.model + 1, lambda a: a.model * 10).for_model(1, _cmd())
    assert transition(1, _dispatch("Increment")) == 20

    transition = Reducer(lambda u: u.model + 1, lambda a: None).for_model(1, _cmd())
    assert transition(1, _dispatch("Increment")) is None


def test_record_and_dataclass_models_use_object_path():
    """PersistentRecord and dataclass models are merged, keeping their type."""

    @dataclass(frozen=True)
    class Model:
        count: int
        label: str

    rec = PersistentRecord({"count": 0, "label": "x"})
    rec_transition = Reducer(lambda u: {"count": 1}).for_model(rec, _cmd())
    assert rec_transition(rec, _dispatch("Inc")) == PersistentRecord({"count": 1, "label": "x"})

    model = Model(0, "x")
    dc_transition = Reducer(lambda u: {"count": 1}).for_model(model, _cmd())
    assert dc_transition(model, _dispatch("Inc")) == Model(1, "x")


def test_sequential_fold_matches_dispatch_order():
    """Applying m1, m2, m3 equals folding each transition in order."""

    def update(u):
        if u.msg == "Add":
            return {"n": u.model["n"] + u.args[0]}
        if u.msg == "Mul":
            return {"n": u.model["n"] * u.args[0]}
        return None

    transition = Reducer(update).for_model({"n": 0}, _cmd())
    dispatches = [_dispatch("Add", 5), _dispatch("Mul", 2), _dispatch("Add", 3)]

    assert reduce(transition, dispatches, {"n": 0}) == {"n": 13}


def test_dataclass_model_rejects_undeclared_fields():
    """A partial naming a field the dataclass lacks raises TypeError."""

    @dataclass(frozen=True)
    class Model:
        count: int

    model = Model(0)
    transition = Reducer(lambda u: {"missing": 1}).for_model(model, _cmd())

    with pytest.raises(TypeError):
        transition(model, _dispatch("Any"))
