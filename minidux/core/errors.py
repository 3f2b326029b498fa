"""
Exception types for the state container.
"""


class MiniduxError(Exception):
    """Base class for all store errors."""
    pass


class StateInvariantError(MiniduxError):
    """Raised when a reducer returns None instead of a concrete state."""
    pass


class DispatchInProgressError(MiniduxError):
    """Raised when the store is used from inside a running reducer."""
    pass


class InvalidActionError(MiniduxError):
    """Raised in strict mode when an action carries no type."""
    pass


class ImpureReducerError(MiniduxError):
    """Raised when a reducer mutates its input or is non-deterministic."""
    pass


class InvalidTransitionError(MiniduxError):
    """Raised when a handler is registered twice for the same action type."""
    pass
