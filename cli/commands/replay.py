"""
Replay command: fold messages through an example's reducer without a host
"""

import json
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from elmcore.core.canonical import canonical_json_str, canonicalize
from elmcore.core.errors import ElmError
from elmcore.examples import EXAMPLES
from elmcore.replay import replay as replay_dispatches

from ._messages import parse_message
from .run import print_model

console = Console()


def replay_command(
    example: str = typer.Argument(..., help="Example component: counter or todo"),
    messages: Optional[List[str]] = typer.Argument(None, help="Messages to replay, MSG[:ARG,...]"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay messages and show the reconstructed model.

    Examples:
        elmcore replay counter Increment Add:5
        elmcore replay todo AddItem:milk ClickItem:0 --json
    """
    module = EXAMPLES.get(example)
    if module is None:
        console.print(f"[red]Error: Unknown example:[/red] {example} (choose from {', '.join(sorted(EXAMPLES))})")
        raise typer.Exit(2)

    try:
        parsed = [parse_message(m) for m in messages or []]
        result = replay_dispatches(module.config(), parsed)

        if json_output:
            output = {
                "success": True,
                "example": example,
                "applied": result.applied,
                "model": canonicalize(result.model),
            }
            print(json.dumps(output, indent=2, ensure_ascii=False))
        else:
            console.print(f"[green]✓ Replayed {result.applied} transitions[/green]")
            console.print(f"  Canonical: [yellow]{escape(canonical_json_str(result.model))}[/yellow]", highlight=False)
            print_model("Replayed Model", result.model)

        raise typer.Exit(0)

    except (ElmError, ValueError) as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
