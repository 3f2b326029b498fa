"""
Canonical serialization for deterministic comparison of states.

All state fingerprints go through these functions so that equal states
produce identical bytes regardless of dict ordering or container type.
"""

import dataclasses
import hashlib
import json
from enum import Enum
from types import MappingProxyType
from typing import Any


def canonicalize(obj: Any) -> Any:
    """
    Convert arbitrary nested state to canonical form.

    Rules:
    - dict and mapping proxy keys sorted
    - tuples converted to lists
    - sets sorted by their canonical JSON
    - dataclasses converted to dicts of their fields
    - Enum members replaced by their value
    """
    if isinstance(obj, Enum):
        return canonicalize(obj.value)
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {f.name: canonicalize(getattr(obj, f.name)) for f in dataclasses.fields(obj)}
    if isinstance(obj, (dict, MappingProxyType)):
        return {str(k): canonicalize(obj[k]) for k in sorted(obj.keys(), key=str)}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    if isinstance(obj, (set, frozenset)):
        items = [canonicalize(x) for x in obj]
        return sorted(items, key=lambda x: json.dumps(x, sort_keys=True))
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Deterministic JSON bytes for hashing.

    Returns:
        UTF-8 encoded JSON bytes with sorted keys and no whitespace
    """
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    """Same as canonical_json_bytes but returns a string."""
    return canonical_json_bytes(obj).decode("utf-8")


def state_fingerprint(state: Any) -> str:
    """
    Compute SHA-256 hash of a state's canonical form.

    Returns:
        Hex string (64 characters)
    """
    return hashlib.sha256(canonical_json_bytes(state)).hexdigest()
