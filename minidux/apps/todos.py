"""
Todos: a reducer over a structured record state.

State is a frozen TodosState; every handler returns a new instance and
leaves the previous one untouched.
"""

from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

from ..core.actions import Action
from ..core.reducer import Reducer


class TodoAction(str, Enum):
    ADD_TODO = "ADD_TODO"
    TOGGLE_TODO = "TOGGLE_TODO"
    REMOVE_TODO = "REMOVE_TODO"
    CLEAR_COMPLETED = "CLEAR_COMPLETED"


@dataclass(frozen=True)
class Todo:
    id: int
    text: str
    completed: bool = False


@dataclass(frozen=True)
class TodosState:
    todos: Tuple[Todo, ...] = ()
    next_id: int = 1

    @property
    def remaining(self) -> int:
        return sum(1 for t in self.todos if not t.completed)


todos = Reducer(TodosState())


@todos.on(TodoAction.ADD_TODO)
def _add(state: TodosState, action: Action) -> TodosState:
    text = str(action.require("text")).strip()
    if not text:
        return state
    todo = Todo(id=state.next_id, text=text)
    return replace(state, todos=state.todos + (todo,), next_id=state.next_id + 1)


@todos.on(TodoAction.TOGGLE_TODO)
def _toggle(state: TodosState, action: Action) -> TodosState:
    todo_id = action.require("id")
    if not any(t.id == todo_id for t in state.todos):
        return state
    return replace(
        state,
        todos=tuple(replace(t, completed=not t.completed) if t.id == todo_id else t for t in state.todos),
    )


@todos.on(TodoAction.REMOVE_TODO)
def _remove(state: TodosState, action: Action) -> TodosState:
    todo_id = action.require("id")
    kept = tuple(t for t in state.todos if t.id != todo_id)
    if len(kept) == len(state.todos):
        return state
    return replace(state, todos=kept)


@todos.on(TodoAction.CLEAR_COMPLETED)
def _clear_completed(state: TodosState, action: Action) -> TodosState:
    kept = tuple(t for t in state.todos if not t.completed)
    if len(kept) == len(state.todos):
        return state
    return replace(state, todos=kept)
