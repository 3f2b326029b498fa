"""
Purity checks for reducers.

A reducer must not mutate its previous state and must return equal results
for equal inputs. These checks compare deep snapshots taken around the call.
"""

import copy
import dataclasses
from collections.abc import Mapping
from typing import Any, Callable, Dict, TypeVar

from .errors import ImpureReducerError

S = TypeVar("S")


def snapshot(state: Any) -> Any:
    """Deep copy of a state, used as the reference for mutation checks."""
    return copy.deepcopy(state)


def _attributes(obj: Any) -> Dict[str, Any]:
    attrs = dict(getattr(obj, "__dict__", {}))
    for cls in type(obj).__mro__:
        for name in getattr(cls, "__slots__", ()):
            if name not in ("__dict__", "__weakref__") and hasattr(obj, name):
                attrs[name] = getattr(obj, name)
    return attrs


def structurally_equal(a: Any, b: Any) -> bool:
    """
    Compare two states by value.

    Containers and dataclasses are compared element by element. Objects
    whose class keeps the identity-based object.__eq__ are compared by
    their attributes, so a deep copy equals its original.
    """
    if a is b:
        return True
    if type(a) is not type(b):
        return a == b
    if dataclasses.is_dataclass(a) and not isinstance(a, type):
        return all(
            structurally_equal(getattr(a, f.name), getattr(b, f.name))
            for f in dataclasses.fields(a)
        )
    if isinstance(a, Mapping):
        return a.keys() == b.keys() and all(structurally_equal(a[k], b[k]) for k in a)
    if isinstance(a, (list, tuple)):
        return len(a) == len(b) and all(structurally_equal(x, y) for x, y in zip(a, b))
    if type(a).__eq__ is object.__eq__:
        attrs_a, attrs_b = _attributes(a), _attributes(b)
        return attrs_a.keys() == attrs_b.keys() and all(
            structurally_equal(attrs_a[k], attrs_b[k]) for k in attrs_a
        )
    return a == b


def assert_unmutated(before: Any, after: Any, action: Any) -> None:
    """
    Raise if a state changed while a reducer ran.

    Raises:
        ImpureReducerError: If before and after differ
    """
    if not structurally_equal(before, after):
        raise ImpureReducerError(
            f"Reducer mutated its previous state while handling {getattr(action, 'type', action)!r}"
        )


def check_reducer_purity(reducer: Callable[[Any, Any], S], state: Any, action: Any) -> S:
    """
    Run a reducer twice on the same input and verify it behaved purely.

    Args:
        reducer: Reducer under test
        state: Previous state (None for bootstrap)
        action: Action to apply

    Returns:
        The next state produced by the reducer

    Raises:
        ImpureReducerError: If the reducer mutated `state` or the two
            runs produced different results
    """
    before = snapshot(state)
    first = reducer(state, action)
    assert_unmutated(before, state, action)

    second = reducer(snapshot(before), action)
    if not structurally_equal(first, second):
        raise ImpureReducerError(
            f"Reducer returned different results for the same input: {getattr(action, 'type', action)!r}"
        )
    return first
