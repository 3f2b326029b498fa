"""
Store: owns one state value, applies the reducer and notifies subscribers.

Guarantees:
- State is never None once the store exists (bootstrap on construction)
- The new state is stored before any subscriber is called
- A failed reducer call leaves the state untouched
- Subscribers run in registration order, from a snapshot of the list
  taken at the start of each notification pass
"""

import itertools
import threading
from typing import Any, Callable, Generic, List, Optional, TypeVar

from ..config import StoreConfig
from ..logging_config import get_logger
from .actions import Action, ActionTypes, action_type_of
from .errors import DispatchInProgressError, InvalidActionError, StateInvariantError
from .frozen import freeze
from .purity import assert_unmutated, snapshot

S = TypeVar("S")
A = TypeVar("A")

Listener = Callable[[], None]
Unsubscribe = Callable[[], None]

_store_ids = itertools.count(1)


class _Subscription:
    """One registration; identity distinguishes duplicates of the same callback."""

    __slots__ = ("callback", "active")

    def __init__(self, callback: Listener) -> None:
        self.callback = callback
        self.active = True


class Store(Generic[S, A]):
    """
    Observable state container.

    Usage:
        store = Store(counter_reducer)
        unsubscribe = store.subscribe(lambda: print(store.get_state()))
        store.dispatch(Action("INCREMENT"))
        unsubscribe()
    """

    def __init__(
        self,
        reducer: Callable[[Optional[S], A], S],
        config: Optional[StoreConfig] = None,
        name: Optional[str] = None,
    ) -> None:
        if not callable(reducer):
            raise TypeError(f"Expected the reducer to be callable, got {type(reducer).__name__}")
        self._reducer = reducer
        self._config = config if config is not None else StoreConfig.from_env()
        self._name = name or f"store-{next(_store_ids)}"
        self._log = get_logger(__name__, trace_id=self._name)
        self._lock = threading.RLock()
        self._subscriptions: List[_Subscription] = []
        self._reducing_thread: Optional[int] = None
        self._state: Optional[S] = None

        self._state = self._reduce(None, Action(type=ActionTypes.INIT))
        self._log.debug("Store created with initial state type %s", type(self._state).__name__)

    def __enter__(self) -> "Store[S, A]":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @property
    def name(self) -> str:
        return self._name

    @property
    def config(self) -> StoreConfig:
        return self._config

    @property
    def subscriber_count(self) -> int:
        with self._lock:
            return len(self._subscriptions)

    def get_state(self) -> S:
        """
        Return the current state.

        Callers must treat it as read-only; changes go through dispatch().

        Raises:
            DispatchInProgressError: If called from inside the reducer
        """
        if self._in_reducer():
            raise DispatchInProgressError(
                "get_state() may not be called while the reducer is running; "
                "the reducer already receives the state as an argument"
            )
        return self._state  # type: ignore[return-value]

    def dispatch(self, action: A) -> S:
        """
        Apply an action and notify subscribers.

        Args:
            action: Action to apply

        Returns:
            The new state (convenience only, get_state() is the read path)

        Raises:
            DispatchInProgressError: If called from inside the reducer
            InvalidActionError: In strict mode, if the action has no type
            StateInvariantError: If the reducer returned None
        """
        if self._config.strict_actions and action_type_of(action) is None:
            raise InvalidActionError(f"Actions must carry a non-None 'type' field, got {action!r}")

        with self._lock:
            if self._in_reducer():
                raise DispatchInProgressError("Reducers may not dispatch actions")
            next_state = self._reduce(self._state, action)
            self._state = next_state
            listeners = list(self._subscriptions)

        self._log.debug(
            "Dispatched %r, notifying %d subscriber(s)", action_type_of(action), len(listeners)
        )
        for sub in listeners:
            sub.callback()
        return next_state

    def subscribe(self, callback: Listener) -> Unsubscribe:
        """
        Register a zero-argument callback invoked after every dispatch.

        The callback is not invoked immediately. Registering the same
        callback twice yields two independent registrations.

        Returns:
            Handle that removes this registration; safe to call repeatedly

        Raises:
            TypeError: If callback is not callable
            DispatchInProgressError: If called from inside the reducer
        """
        if not callable(callback):
            raise TypeError(f"Expected the listener to be callable, got {type(callback).__name__}")
        if self._in_reducer():
            raise DispatchInProgressError("subscribe() may not be called while the reducer is running")

        sub = _Subscription(callback)
        with self._lock:
            self._subscriptions.append(sub)
            count = len(self._subscriptions)
        self._log.debug("Subscriber added (%d registered)", count)

        def unsubscribe() -> None:
            if not sub.active:
                return
            if self._in_reducer():
                raise DispatchInProgressError(
                    "Unsubscribing may not happen while the reducer is running"
                )
            sub.active = False
            with self._lock:
                # identity match: duplicates of the same callback stay registered
                for i, existing in enumerate(self._subscriptions):
                    if existing is sub:
                        del self._subscriptions[i]
                        break
            self._log.debug("Subscriber removed")

        return unsubscribe

    def close(self) -> None:
        """Drop every registration. The store stays usable without observers."""
        with self._lock:
            for sub in self._subscriptions:
                sub.active = False
            self._subscriptions = []
        self._log.debug("Store closed")

    def _in_reducer(self) -> bool:
        return self._reducing_thread == threading.get_ident()

    def _reduce(self, state: Optional[S], action: Any) -> S:
        # frozen states are read-only already and mapping proxies cannot be deep-copied
        check = self._config.check_purity and not self._config.freeze_state
        before = snapshot(state) if check else None
        self._reducing_thread = threading.get_ident()
        try:
            next_state = self._reducer(state, action)
        except Exception:
            self._log.warning("Reducer raised on %r; state left unchanged", action_type_of(action))
            raise
        finally:
            self._reducing_thread = None

        if next_state is None:
            raise StateInvariantError(
                f"Reducer returned None for action {action_type_of(action)!r}; "
                "return the previous state for unknown actions and a default "
                "when the previous state is None"
            )
        if check:
            assert_unmutated(before, state, action)
        if self._config.freeze_state:
            next_state = freeze(next_state)
        return next_state


def create_store(
    reducer: Callable[[Optional[S], A], S],
    config: Optional[StoreConfig] = None,
    name: Optional[str] = None,
) -> Store[S, A]:
    """
    Create a store and populate its initial state.

    Args:
        reducer: Pure, total function (state, action) -> state
        config: Behavior switches (defaults to StoreConfig.from_env())
        name: Store name used as the logging trace id

    Returns:
        Store holding reducer(None, bootstrap action)
    """
    return Store(reducer, config=config, name=name)
