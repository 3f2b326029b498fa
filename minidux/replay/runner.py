"""
Replay runner: reconstruct state from a sequence of actions.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from ..config import StoreConfig
from ..core.canonical import state_fingerprint
from ..core.store import create_store


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Final state after applying actions
        applied: Number of actions dispatched
        notifications: Number of subscriber calls observed
        fingerprint: SHA-256 of the canonical final state
    """
    state: Any
    applied: int
    notifications: int
    fingerprint: str


def replay(
    reducer: Callable[[Any, Any], Any],
    actions: Iterable[Any],
    to_index: Optional[int] = None,
    config: Optional[StoreConfig] = None,
) -> ReplayResult:
    """
    Dispatch actions in order to a new store.

    Args:
        reducer: Reducer to build the store from
        actions: Actions to dispatch
        to_index: Stop after this index (inclusive, None = all)
        config: Store configuration (None = from environment)

    Returns:
        ReplayResult with final state and counts
    """
    notifications = 0

    def count() -> None:
        nonlocal notifications
        notifications += 1

    with create_store(reducer, config=config, name="replay") as store:
        store.subscribe(count)
        applied = 0
        for i, action in enumerate(actions):
            if to_index is not None and i > to_index:
                break
            store.dispatch(action)
            applied += 1
        state = store.get_state()

    return ReplayResult(
        state=state,
        applied=applied,
        notifications=notifications,
        fingerprint=state_fingerprint(state),
    )
