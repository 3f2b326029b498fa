"""
Tests for the reference reducers.
"""

import pytest

from minidux.apps import TodoAction, TodosState, action_from_dict, todos
from minidux.config import StoreConfig
from minidux.core.actions import Action
from minidux.core.store import create_store


def _todo_store():
    return create_store(todos, config=StoreConfig(check_purity=True))


def test_todos_initial_state():
    assert _todo_store().get_state() == TodosState()


def test_todos_add_toggle_remove():
    store = _todo_store()

    store.dispatch(Action(type=TodoAction.ADD_TODO, payload={"text": " first "}))
    store.dispatch(Action(type=TodoAction.ADD_TODO, payload={"text": "second"}))
    store.dispatch(Action(type=TodoAction.TOGGLE_TODO, payload={"id": 1}))

    state = store.get_state()
    assert [(t.id, t.text, t.completed) for t in state.todos] == [
        (1, "first", True),
        (2, "second", False),
    ]
    assert state.remaining == 1

    store.dispatch(Action(type=TodoAction.REMOVE_TODO, payload={"id": 2}))
    assert [t.id for t in store.get_state().todos] == [1]


def test_todos_noops_return_same_state():
    store = _todo_store()
    before = store.get_state()

    store.dispatch(Action(type=TodoAction.ADD_TODO, payload={"text": "   "}))
    store.dispatch(Action(type=TodoAction.TOGGLE_TODO, payload={"id": 99}))
    store.dispatch(Action(type=TodoAction.CLEAR_COMPLETED))

    assert store.get_state() is before


def test_todos_missing_payload_raises_and_keeps_state():
    store = _todo_store()

    with pytest.raises(KeyError):
        store.dispatch(Action(type=TodoAction.ADD_TODO))

    assert store.get_state() == TodosState()


def test_action_from_dict():
    action = action_from_dict({"type": "ADD_TODO", "payload": {"text": "x"}})

    assert action == Action(type="ADD_TODO", payload={"text": "x"})
    with pytest.raises(ValueError):
        action_from_dict({"payload": {}})


@pytest.mark.parametrize(
    "record",
    [
        ["INCREMENT"],
        "INCREMENT",
        {"type": "INCREMENT", "payload": 5},
        {"type": "INCREMENT", "meta": ["x"]},
    ],
)
def test_action_from_dict_rejects_malformed_records(record):
    with pytest.raises(ValueError):
        action_from_dict(record)
