"""
minidux

Minimal observable state container: one cell of state, a pure reducer,
and synchronous subscriber notification.
"""

from .core import Action, ActionTypes, Reducer, Store, create_store
from .config import StoreConfig

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionTypes",
    "Reducer",
    "Store",
    "StoreConfig",
    "create_store",
]
