"""
Tests for canonical serialization and state fingerprints.
"""

from enum import Enum
from types import MappingProxyType

from minidux.apps import Todo, TodosState
from minidux.core.canonical import (
    canonical_json_bytes,
    canonical_json_str,
    canonicalize,
    state_fingerprint,
)


class Color(str, Enum):
    RED = "red"


def test_canonicalize_dict_key_order():
    """Dict key order must not affect canonical output."""
    d1 = {"z": 1, "a": 2, "m": 3}
    d2 = {"a": 2, "m": 3, "z": 1}

    assert canonical_json_str(d1) == canonical_json_str(d2)
    assert list(canonicalize(d1).keys()) == ["a", "m", "z"]


def test_canonicalize_dataclass_state():
    state = TodosState(todos=(Todo(id=1, text="a"),), next_id=2)

    assert canonicalize(state) == {
        "todos": [{"id": 1, "text": "a", "completed": False}],
        "next_id": 2,
    }


def test_canonicalize_enum_set_and_proxy():
    obj = MappingProxyType({"color": Color.RED, "tags": frozenset({"b", "a"})})

    assert canonical_json_str(obj) == '{"color":"red","tags":["a","b"]}'


def test_canonical_json_bytes_determinism():
    obj = {"b": 2, "a": 1, "c": {"x": 10, "y": 20}}

    assert canonical_json_bytes(obj) == canonical_json_bytes(dict(reversed(list(obj.items()))))
    assert isinstance(canonical_json_bytes(obj), bytes)


def test_canonical_handles_unicode():
    assert canonical_json_str({"key": "日本語"}) == '{"key":"日本語"}'


def test_state_fingerprint_equal_states():
    s1 = TodosState(todos=(Todo(id=1, text="a"),), next_id=2)
    s2 = TodosState(todos=(Todo(id=1, text="a"),), next_id=2)
    s3 = TodosState(todos=(Todo(id=1, text="a", completed=True),), next_id=2)

    assert state_fingerprint(s1) == state_fingerprint(s2)
    assert state_fingerprint(s1) != state_fingerprint(s3)
    assert len(state_fingerprint(s1)) == 64
