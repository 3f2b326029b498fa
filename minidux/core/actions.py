"""
Action model.

Actions are immutable records describing a requested state change.
The `type` field is the discriminator reducers route on.
"""

import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Hashable, Optional


def _random_suffix() -> str:
    return uuid.uuid4().hex[:8]


class ActionTypes:
    """
    Action types reserved by the store.

    INIT carries a random suffix so no reducer can match it and every
    reducer falls through to its default state on bootstrap.
    """
    INIT = f"@@minidux/INIT.{_random_suffix()}"


@dataclass(frozen=True)
class Action:
    """
    Immutable action record.

    Fields:
        type: Discriminator (str or str-valued Enum, e.g. "INCREMENT")
        payload: Action-specific data
        meta: Metadata (source, reason, etc.)
    """
    type: Hashable
    payload: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    def require(self, key: str) -> Any:
        """
        Get a payload field or raise if it is missing.

        Raises:
            KeyError: If payload has no such key
        """
        if key not in self.payload:
            raise KeyError(f"Action {type_key(self.type)!r} payload has no {key!r}")
        return self.payload[key]


def type_key(action_type: Any) -> Any:
    """Normalize an action type so Enum members and their values compare equal."""
    if isinstance(action_type, Enum):
        return action_type.value
    return action_type


def action_type_of(action: Any) -> Optional[Any]:
    """
    Read the discriminator from an Action, a mapping, or any object with `type`.

    Returns:
        The normalized type, or None if the action carries none
    """
    if isinstance(action, dict):
        raw = action.get("type")
    else:
        raw = getattr(action, "type", None)
    return type_key(raw) if raw is not None else None
