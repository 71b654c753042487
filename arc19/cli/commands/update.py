"""``arc19 prepare-update CID``: compute the url/reserve to write on-chain."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from arc19.core.errors import Arc19Error
from arc19.core.update_orchestrator import prepare_update

console = Console()


def prepare_update_cmd(
    cid: str = typer.Argument(..., help="CID of the newly published metadata."),
    template: str = typer.Option(
        None,
        "--template",
        "-t",
        help="The asset's current url, to keep its sub-path and detect codec changes.",
    ),
) -> None:
    """Print the template string and reserve address for new content.

    Nothing is submitted; hand the values to your transaction writer.
    """
    try:
        plan = prepare_update(cid, current_template=template)
    except Arc19Error as exc:
        console.print(f"[bold red]Cannot prepare update:[/bold red] {exc}")
        raise typer.Exit(code=1)

    table = Table(show_header=False, expand=True)
    table.add_column("Field", style="cyan", min_width=16)
    table.add_column("Value", overflow="fold")
    table.add_row("url", plan.template_string)
    table.add_row("reserve", plan.reserve_address)
    table.add_row("digest", plan.address_field.hex())

    if plan.template_changed:
        subtitle = "[bold yellow]Template changed: rewrite the url field too.[/bold yellow]"
        border_style = "yellow"
    else:
        subtitle = "[green]Only the reserve needs to change.[/green]"
        border_style = "green"
    console.print(
        Panel(
            table,
            title=f"[bold]Update plan for {plan.cid.encode()}[/bold]",
            subtitle=subtitle,
            border_style=border_style,
        )
    )
