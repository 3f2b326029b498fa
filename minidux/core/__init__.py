"""
Core state container primitives.

This module provides:
- Action: Immutable change requests with a `type` discriminator
- Reducer: Registry of pure per-type handlers forming a total reducer
- Store: Single state cell with synchronous subscriber notification
- Canonical: Deterministic serialization and state fingerprints
- Purity: Mutation and determinism checks for reducers
"""

from .actions import Action, ActionTypes, action_type_of, type_key
from .reducer import Reducer
from .store import Store, create_store
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str, state_fingerprint
from .frozen import freeze
from .purity import check_reducer_purity
from .errors import (
    MiniduxError,
    StateInvariantError,
    DispatchInProgressError,
    InvalidActionError,
    ImpureReducerError,
    InvalidTransitionError,
)

__all__ = [
    "Action",
    "ActionTypes",
    "action_type_of",
    "type_key",
    "Reducer",
    "Store",
    "create_store",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "state_fingerprint",
    "freeze",
    "check_reducer_purity",
    "MiniduxError",
    "StateInvariantError",
    "DispatchInProgressError",
    "InvalidActionError",
    "ImpureReducerError",
    "InvalidTransitionError",
]
