"""
Read-only views of state.

freeze() turns the mutable built-in containers inside a state into their
immutable counterparts so callers of get_state() cannot change it in place.
"""

from types import MappingProxyType
from typing import Any


def freeze(value: Any) -> Any:
    """
    Recursively convert a value to a read-only form.

    - dict -> MappingProxyType over a frozen copy
    - list/tuple -> tuple
    - set/frozenset -> frozenset

    Other values (numbers, strings, frozen dataclasses) are returned as is.
    """
    if isinstance(value, MappingProxyType):
        return value
    if isinstance(value, dict):
        return MappingProxyType({k: freeze(v) for k, v in value.items()})
    if isinstance(value, list) or type(value) is tuple:
        return tuple(freeze(v) for v in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(freeze(v) for v in value)
    return value
