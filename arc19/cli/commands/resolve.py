"""``arc19 resolve TEMPLATE RESERVE``: print the gateway URL for a pair."""

from __future__ import annotations

import typer
from rich.console import Console

from arc19.core.cid_codec import resolve_template_url
from arc19.core.errors import Arc19Error

console = Console()


def resolve_cmd(
    template: str = typer.Argument(..., help="The asset url / template string."),
    reserve: str = typer.Argument(..., help="The asset reserve address."),
    gateway: str = typer.Option(
        None,
        "--gateway",
        "-g",
        help="Gateway prefix (defaults to ARC19_IPFS_GATEWAY).",
    ),
) -> None:
    """Resolve a template/reserve pair to a fetchable URL."""
    try:
        url = resolve_template_url(template, reserve, gateway=gateway)
    except Arc19Error as exc:
        console.print(f"[bold red]Cannot resolve:[/bold red] {exc}")
        raise typer.Exit(code=1)
    console.print(url, soft_wrap=True, highlight=False)
