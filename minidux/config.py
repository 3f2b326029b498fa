"""
Store configuration.

Environment Variables:
    MINIDUX_STRICT_ACTIONS: Reject actions without a type (default: off)
    MINIDUX_CHECK_PURITY: Check reducers for mutation on every dispatch (default: off)
    MINIDUX_FREEZE_STATE: Store read-only views of state (default: off)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}


def env_bool(key: str, default: bool = False, environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Parse a boolean environment variable.

    Unrecognized values fall back to the default.
    """
    env = os.environ if environ is None else environ
    val = env.get(key)
    if val is None:
        return default
    val = val.strip().lower()
    if val in _TRUE:
        return True
    if val in _FALSE:
        return False
    return default


@dataclass(frozen=True)
class StoreConfig:
    """
    Behavior switches for a store.

    Fields:
        strict_actions: Raise InvalidActionError for actions without a type
        check_purity: Verify the reducer did not mutate the previous state
        freeze_state: Freeze each new state before storing it
    """
    strict_actions: bool = False
    check_purity: bool = False
    freeze_state: bool = False

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "StoreConfig":
        return StoreConfig(
            strict_actions=env_bool("MINIDUX_STRICT_ACTIONS", environ=environ),
            check_purity=env_bool("MINIDUX_CHECK_PURITY", environ=environ),
            freeze_state=env_bool("MINIDUX_FREEZE_STATE", environ=environ),
        )
