#!/usr/bin/env python3
"""
minidux CLI entrypoint.
"""

import typer
from rich.console import Console
from rich.table import Table

from ..apps import APPS
from ..logging_config import setup_logging
from .commands import replay

app = typer.Typer(
    name="minidux",
    help="Minimal observable state container",
    add_completion=False,
)

console = Console()

app.command(name="replay")(replay.replay_command)


@app.callback()
def _configure() -> None:
    setup_logging()


@app.command()
def apps():
    """List reference apps available to replay."""
    table = Table(title="Reference Apps")
    table.add_column("Name", style="green")
    table.add_column("Reducer", style="cyan")

    for name in sorted(APPS):
        reducer = APPS[name]
        table.add_row(name, getattr(reducer, "__qualname__", type(reducer).__name__))

    console.print(table)


@app.command()
def version():
    """Show version information."""
    from .. import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]minidux[/bold]", f"v{__version__}")
    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
