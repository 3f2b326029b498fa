"""
Counter: the smallest useful reducer.

State is an int; INCREMENT and DECREMENT move it by one.
"""

from enum import Enum
from typing import Any, Optional

from ..core.actions import action_type_of


class CounterAction(str, Enum):
    INCREMENT = "INCREMENT"
    DECREMENT = "DECREMENT"


def counter(state: Optional[int], action: Any) -> int:
    if state is None:
        state = 0
    kind = action_type_of(action)
    if kind == CounterAction.INCREMENT.value:
        return state + 1
    if kind == CounterAction.DECREMENT.value:
        return state - 1
    return state
