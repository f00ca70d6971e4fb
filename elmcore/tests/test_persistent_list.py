"""
Tests for PersistentList.

Critical: No operation may change a list that was already observed.
"""

from dataclasses import dataclass

from elmcore.persistent import PersistentList


def test_constructor_takes_defensive_copy():
    """Mutating the source list must not leak into the PersistentList."""
    source = [1, 2, 3]
    items = PersistentList(source)
    source.append(4)

    assert items.array == [1, 2, 3]
    assert items.length == 3


def test_array_is_a_copy():
    """array returns a fresh list every time."""
    items = PersistentList([1, 2])
    arr = items.array
    arr.append(3)

    assert items.array == [1, 2]
    assert items.array is not items.array


def test_operations_do_not_mutate_original():
    """Every mutator leaves the original snapshot untouched."""
    original = PersistentList([{"text": "a", "done": False}, {"text": "b", "done": False}])
    snapshot = original.array

    results = [
        original.append({"text": "c", "done": False}),
        original.prepend({"text": "z", "done": False}),
        original.insert_at(1, {"text": "m", "done": False}),
        original.remove_at(0),
        original.pop(),
        original.pop(from_start=True),
        original.update_at(0, {"done": True}),
        original.mutate_at(1, lambda item: False, lambda item: {"text": "B"}),
        original.filter(lambda item: item["text"] == "a"),
        original.map(lambda item: item["text"]),
    ]

    assert original.array == snapshot
    assert snapshot[0] == {"text": "a", "done": False}
    assert all(r is not original for r in results)


def test_append_and_prepend():
    """append adds at the end, prepend at the start."""
    items = PersistentList([2])

    assert items.append(3).array == [2, 3]
    assert items.prepend(1).array == [1, 2]


def test_insert_at_clamps_like_slices():
    """insert_at follows slice semantics for out-of-range indices."""
    items = PersistentList(["a", "b", "c"])

    assert items.insert_at(1, "x").array == ["a", "x", "b", "c"]
    assert items.insert_at(10, "x").array == ["a", "b", "c", "x"]
    assert items.insert_at(-1, "x").array == ["a", "b", "x", "c"]
    assert items.insert_at(-10, "x").array == ["x", "a", "b", "c"]


def test_at_out_of_range_returns_none():
    """at() degrades to None instead of raising."""
    items = PersistentList(["a", "b"])

    assert items.at(0) == "a"
    assert items.at(1) == "b"
    assert items.at(2) is None
    assert items.at(-1) is None


def test_remove_at_out_of_range_is_noop_copy():
    """remove_at with an invalid index returns an equal, distinct list."""
    items = PersistentList([1, 2, 3])

    assert items.remove_at(1).array == [1, 3]
    removed = items.remove_at(5)
    assert removed.array == [1, 2, 3]
    assert removed is not items
    assert items.remove_at(-1).array == [1, 2, 3]


def test_pop_from_end_and_start():
    """pop removes the boundary item and returns the new list."""
    items = PersistentList([1, 2, 3])

    assert items.pop().array == [1, 2]
    assert items.pop(from_start=True).array == [2, 3]
    assert PersistentList().pop().length == 0


def test_update_at_merges_object_items():
    """Object item + object replacement merges shallowly, new fields win."""
    items = PersistentList([{"text": "milk", "done": False, "tags": {"a": 1}}])
    updated = items.update_at(0, {"done": True, "tags": {"b": 2}})

    assert updated.at(0) == {"text": "milk", "done": True, "tags": {"b": 2}}
    assert items.at(0) == {"text": "milk", "done": False, "tags": {"a": 1}}


def test_update_at_replaces_primitives_and_mismatched_shapes():
    """Non-object item or replacement is replaced wholesale."""
    assert PersistentList([1, 2]).update_at(1, 5).array == [1, 5]
    assert PersistentList([{"a": 1}]).update_at(0, "x").array == ["x"]
    assert PersistentList(["x"]).update_at(0, {"a": 1}).array == [{"a": 1}]


def test_update_at_merges_dataclass_items():
    """Dataclass items are patched with dataclasses.replace semantics."""

    @dataclass(frozen=True)
    class Item:
        text: str
        done: bool = False

    items = PersistentList([Item("milk")])
    updated = items.update_at(0, {"done": True})

    assert updated.at(0) == Item("milk", True)
    assert items.at(0) == Item("milk", False)


def test_update_at_out_of_range_is_noop_copy():
    """update_at with an invalid index changes nothing."""
    items = PersistentList([{"a": 1}])

    assert items.update_at(3, {"a": 2}).array == [{"a": 1}]


def test_mutate_at_removes_or_updates():
    """mutate_at removes when should_remove is truthy, else updates."""
    items = PersistentList([{"text": "milk", "done": False}])

    def is_done(item):
        return item["done"]

    def mark_done(item):
        return {"done": True}

    once = items.mutate_at(0, is_done, mark_done)
    assert once.array == [{"text": "milk", "done": True}]

    twice = once.mutate_at(0, is_done, mark_done)
    assert twice.length == 0
    assert once.length == 1


def test_mutate_at_out_of_range_skips_callbacks():
    """Invalid index returns a copy without calling either callback."""
    calls = []
    items = PersistentList([1])

    result = items.mutate_at(4, lambda i: calls.append("remove"), lambda i: calls.append("update"))

    assert result.array == [1]
    assert calls == []


def test_filter_and_map_return_persistent_lists():
    """filter/map project into new PersistentList instances."""
    items = PersistentList([1, 2, 3, 4])

    evens = items.filter(lambda n: n % 2 == 0)
    squares = items.map(lambda n: n * n)

    assert isinstance(evens, PersistentList)
    assert evens.array == [2, 4]
    assert squares.array == [1, 4, 9, 16]


def test_iteration_is_restartable():
    """Iterating twice walks the same items; the list is not consumed."""
    items = PersistentList(["a", "b"])

    assert list(items) == ["a", "b"]
    assert list(items) == ["a", "b"]
    assert len(items) == 2


def test_equality_and_json():
    """Lists compare by items and serialize canonically."""
    assert PersistentList([1, 2]) == PersistentList([1, 2])
    assert PersistentList([1, 2]) != PersistentList([2, 1])
    assert PersistentList([{"b": 1, "a": "x"}]).to_json() == '[{"a":"x","b":1}]'


def test_none_replacement_overwrites_object_item():
    """None is not object-shaped, so it replaces an object item wholesale."""
    items = PersistentList([{"text": "milk", "done": False}])

    assert items.update_at(0, None).array == [None]
    assert items.mutate_at(0, lambda item: False, lambda item: None).array == [None]
    assert items.at(0) == {"text": "milk", "done": False}
