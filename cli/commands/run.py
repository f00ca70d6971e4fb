"""
Run command: mount an example component and dispatch messages through cmd
"""

import json
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from elmcore.component import Component
from elmcore.core.canonical import canonicalize
from elmcore.core.errors import ElmError
from elmcore.examples import EXAMPLES
from elmcore.logging_config import setup_logging

from ._messages import parse_message

console = Console()


def print_model(title: str, model) -> None:
    canon = canonicalize(model)
    table = Table(title=title)
    table.add_column("Field", style="green")
    table.add_column("Value", style="cyan")
    if isinstance(canon, dict):
        for key in sorted(canon.keys()):
            table.add_row(key, escape(json.dumps(canon[key], ensure_ascii=False)))
    else:
        table.add_row("(model)", escape(json.dumps(canon, ensure_ascii=False)))
    console.print(table)


def run_command(
    example: str = typer.Argument(..., help="Example component: counter or todo"),
    messages: Optional[List[str]] = typer.Argument(None, help="Messages to dispatch, MSG[:ARG,...]"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Mount an example component and dispatch messages in order.

    Examples:
        elmcore run counter Increment Increment Decrement
        elmcore run todo SetInput:milk AddItem ClickItem:0
        elmcore run todo AddItem:eggs --json
    """
    if verbose:
        setup_logging()

    module = EXAMPLES.get(example)
    if module is None:
        console.print(f"[red]Error: Unknown example:[/red] {example} (choose from {', '.join(sorted(EXAMPLES))})")
        raise typer.Exit(2)

    try:
        parsed = [parse_message(m) for m in messages or []]
        captured = {}

        def capture_view(params):
            captured["cmd"] = params.cmd
            captured["model"] = params.model
            return module.text_view(params)

        component = Component(module.config(view=capture_view))
        for msg, args in parsed:
            captured["cmd"][msg](*args)

        if json_output:
            output = {
                "example": example,
                "dispatched": len(parsed),
                "renders": component.host.renders,
                "model": canonicalize(captured["model"]),
                "view": component.output,
            }
            print(json.dumps(output, indent=2, ensure_ascii=False))
        else:
            console.print(f"[green]✓ Dispatched {len(parsed)} messages to {example}[/green]")
            console.print(f"  Renders: [cyan]{component.host.renders}[/cyan]")
            print_model("Final Model", captured["model"])
            console.print("\n[bold]View:[/bold]")
            for line in component.output:
                console.print(f"  {line}", markup=False, highlight=False)

        raise typer.Exit(0)

    except (ElmError, ValueError) as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
