"""
Reference reducers used by the CLI and the test suite.
"""

from typing import Any, Callable, Dict, Mapping

from ..core.actions import Action
from .counter import CounterAction, counter
from .todos import Todo, TodoAction, TodosState, todos

APPS: Dict[str, Callable[[Any, Any], Any]] = {
    "counter": counter,
    "todos": todos,
}


def action_from_dict(data: Mapping[str, Any]) -> Action:
    """
    Build an Action from a decoded JSON record.

    Raises:
        ValueError: If the record is not an object, has no type, or its
            payload or meta is not an object
    """
    if not isinstance(data, Mapping):
        raise ValueError(f"Action record must be an object, got {type(data).__name__}")
    if data.get("type") is None:
        raise ValueError(f"Action record has no 'type': {dict(data)!r}")
    fields = {}
    for key in ("payload", "meta"):
        value = data.get(key) or {}
        if not isinstance(value, Mapping):
            raise ValueError(f"Action {key!r} must be an object, got {type(value).__name__}")
        fields[key] = dict(value)
    return Action(type=data["type"], **fields)


__all__ = [
    "APPS",
    "action_from_dict",
    "CounterAction",
    "counter",
    "Todo",
    "TodoAction",
    "TodosState",
    "todos",
]
