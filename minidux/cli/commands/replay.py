"""
Replay command: dispatch actions to a reference app and show the outcome.
"""

import json
from pathlib import Path
from typing import Any, List, NoReturn, Optional

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from ...apps import APPS, action_from_dict
from ...core.actions import Action
from ...core.canonical import canonicalize
from ...core.errors import MiniduxError
from ...replay import replay as replay_actions

console = Console()


def load_actions(types: List[str], file: Optional[Path]) -> List[Action]:
    """
    Collect actions from positional types and/or a JSONL file.

    Each JSONL line: {"type": "...", "payload": {...}}. Blank lines are skipped.
    """
    actions = [Action(type=t) for t in types]
    if file is not None:
        with open(file, "r", encoding="utf-8") as f:
            for line_no, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    actions.append(action_from_dict(json.loads(line)))
                except (json.JSONDecodeError, ValueError) as e:
                    raise ValueError(f"{file}:{line_no}: {e}") from e
    return actions


def replay_command(
    app_name: str = typer.Argument(..., metavar="APP", help="Reference app (see `minidux apps`)"),
    types: Optional[List[str]] = typer.Argument(None, metavar="[TYPES]...", help="Action types to dispatch"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="JSONL file of actions"),
    show_state: bool = typer.Option(False, "--show-state", "-s", help="Show final state"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Dispatch actions to a fresh store and report the final state.

    Examples:
        minidux replay counter INCREMENT INCREMENT DECREMENT
        minidux replay todos --file actions.jsonl --show-state
        minidux replay counter INCREMENT --json
    """
    reducer = APPS.get(app_name)
    if reducer is None:
        _fail(f"Unknown app: {app_name}", json_output, known=sorted(APPS))

    try:
        actions = load_actions(types or [], file)
        result = replay_actions(reducer, actions)
    except FileNotFoundError:
        _fail(f"Action file not found: {file}", json_output)
    except (MiniduxError, ValueError, KeyError) as e:
        _fail(str(e), json_output)

    state: Any = canonicalize(result.state)
    counts = {}
    for action in actions:
        counts[str(action.type)] = counts.get(str(action.type), 0) + 1

    if json_output:
        output = {
            "success": True,
            "app": app_name,
            "actions_applied": result.applied,
            "notifications": result.notifications,
            "fingerprint": result.fingerprint,
            "action_counts": counts,
        }
        if show_state:
            output["state"] = state
        print(json.dumps(output, indent=2))
        return

    console.print(f"[green]✓ Dispatched {result.applied} actions to {app_name}[/green]")
    console.print(f"  Notifications: [cyan]{result.notifications}[/cyan]")
    console.print(f"  Fingerprint: [yellow]{result.fingerprint}[/yellow]")

    if counts:
        table = Table(title="Action Counts")
        table.add_column("Action Type", style="green")
        table.add_column("Count", style="cyan", justify="right")
        for action_type in sorted(counts):
            table.add_row(action_type, str(counts[action_type]))
        console.print(table)

    if show_state:
        console.print("\n[bold]Final State:[/bold]")
        console.print(Syntax(json.dumps(state, indent=2), "json", theme="monokai"))


def _fail(message: str, json_output: bool, **extra: Any) -> NoReturn:
    if json_output:
        print(json.dumps({"error": message, **extra}))
    else:
        console.print(f"[red]Error:[/red] {message}")
    raise typer.Exit(2)
