"""
Reducer: Pure state transition functions.

The reducer is the heart of the store. It must be:
- Pure (no side effects, does not mutate the previous state)
- Deterministic (same input -> same output)
- Total (unknown actions return the previous state unchanged)
"""

from typing import Any, Callable, Dict, Generic, Hashable, Optional, TypeVar

from .actions import action_type_of, type_key
from .errors import InvalidTransitionError

S = TypeVar("S")

# Handler signature: (current_state, action) -> new_state
Handler = Callable[[Any, Any], Any]


class Reducer(Generic[S]):
    """
    Registry of action handlers forming one total reducer.

    Usage:
        counter = Reducer(0)
        counter.register("INCREMENT", lambda n, a: n + 1)
        store = create_store(counter)
    """

    def __init__(self, initial_state: S) -> None:
        self.initial_state = initial_state
        self._handlers: Dict[Hashable, Handler] = {}

    def register(self, action_type: Hashable, handler: Handler) -> None:
        """
        Register action handler.

        Args:
            action_type: Action type (str or Enum member)
            handler: Pure function (current_state, action) -> new_state

        Raises:
            InvalidTransitionError: If a handler is already registered
        """
        key = type_key(action_type)
        if key in self._handlers:
            raise InvalidTransitionError(f"Handler already registered for action type: {key}")
        self._handlers[key] = handler

    def on(self, action_type: Hashable) -> Callable[[Handler], Handler]:
        """Decorator form of register()."""

        def decorator(handler: Handler) -> Handler:
            self.register(action_type, handler)
            return handler

        return decorator

    def handles(self, action_type: Hashable) -> bool:
        return type_key(action_type) in self._handlers

    def __call__(self, state: Optional[S], action: Any) -> S:
        """
        Apply action to state using the registered handler.

        Args:
            state: Current state, or None during bootstrap
            action: Action to apply

        Returns:
            New state, or the same state if no handler matches
        """
        if state is None:
            state = self.initial_state
        handler = self._handlers.get(action_type_of(action))
        if handler is None:
            return state
        return handler(state, action)
