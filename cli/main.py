#!/usr/bin/env python3
"""
elmcore CLI - Elm-style component core developer tool

Main entrypoint for the elmcore command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import replay, run

app = typer.Typer(
    name="elmcore",
    help="Elm-style component core CLI",
    add_completion=False,
)

console = Console()

app.command(name="run")(run.run_command)
app.command(name="replay")(replay.replay_command)


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from elmcore import __version__ as core_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]elmcore CLI[/bold]", f"v{__version__}")
    table.add_row("Core", f"v{core_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
