"""``arc19 validate TEMPLATE``: check a template string against the grammar."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from arc19.core.errors import GrammarError
from arc19.core.template import validate_template

console = Console()


def validate_cmd(
    template: str = typer.Argument(..., help="The asset url / template string."),
) -> None:
    """Validate a template-ipfs string and show its parsed fields."""
    try:
        parsed = validate_template(template)
    except GrammarError as exc:
        console.print(f"[bold red]Invalid template[/bold red] ({exc.kind.value})")
        if exc.detail:
            console.print(f"[dim]{exc.detail}[/dim]")
        raise typer.Exit(code=1)

    table = Table(show_header=False, title="[bold green]Valid template[/bold green]")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("version", str(parsed.version))
    table.add_row("codec", parsed.codec)
    table.add_row("sub-path", parsed.sub_path or "[dim](none)[/dim]")
    console.print(table)
