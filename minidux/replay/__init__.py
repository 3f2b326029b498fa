"""
Replay of action sequences.

Replay folds actions through a fresh store to reconstruct state.
Same reducer and actions -> same state.
"""

from .runner import ReplayResult, replay

__all__ = [
    "ReplayResult",
    "replay",
]
