"""
Tests for replay determinism.

Critical: Replay must produce identical state across multiple runs.
"""

from minidux.apps import TodoAction, counter, todos
from minidux.config import StoreConfig
from minidux.core.actions import Action
from minidux.replay import replay

DEFAULTS = StoreConfig()


def test_replay_determinism_100_runs():
    """Replaying the same actions 100 times must give one fingerprint."""
    actions = [Action(type="INCREMENT") for _ in range(10)] + [Action(type="DECREMENT")]

    fingerprints = {replay(counter, actions, config=DEFAULTS).fingerprint for _ in range(100)}

    assert len(fingerprints) == 1
    final = replay(counter, actions, config=DEFAULTS)
    assert final.state == 9
    assert final.applied == 11
    assert final.notifications == 11


def test_replay_partial():
    """Replay to an index must stop after that action."""
    actions = [Action(type="INCREMENT") for _ in range(20)]

    result = replay(counter, actions, to_index=9, config=DEFAULTS)

    assert result.applied == 10
    assert result.state == 10


def test_replay_empty():
    """Replay of no actions must return the bootstrap state."""
    result = replay(counter, [], config=DEFAULTS)

    assert result.applied == 0
    assert result.notifications == 0
    assert result.state == 0


def test_replay_todos():
    actions = [
        Action(type=TodoAction.ADD_TODO, payload={"text": "buy milk"}),
        Action(type=TodoAction.ADD_TODO, payload={"text": "walk dog"}),
        Action(type=TodoAction.TOGGLE_TODO, payload={"id": 1}),
        Action(type=TodoAction.CLEAR_COMPLETED),
    ]

    r1 = replay(todos, actions, config=DEFAULTS)
    r2 = replay(todos, iter(actions), config=DEFAULTS)

    assert r1.fingerprint == r2.fingerprint
    assert [t.text for t in r1.state.todos] == ["walk dog"]
    assert r1.state.next_id == 3
