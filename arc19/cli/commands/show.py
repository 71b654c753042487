"""``arc19 show ASSET_ID``: current template, reserve and metadata of an asset."""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from arc19.bridge.indexer import IndexerClient
from arc19.core.asset import image_url, load_asset
from arc19.core.errors import Arc19Error

console = Console()


def show_cmd(
    asset_id: int = typer.Argument(..., help="The asset ID."),
    indexer_url: str = typer.Option(
        None,
        "--indexer-url",
        "-i",
        help="Indexer root URL (defaults to the configured network).",
    ),
) -> None:
    """Show an asset's current metadata URL and document."""
    try:
        record = load_asset(asset_id, IndexerClient(indexer_url))
    except Arc19Error as exc:
        console.print(f"[bold red]Cannot load asset {asset_id}:[/bold red] {exc}")
        raise typer.Exit(code=1)

    table = Table(show_header=False, expand=True)
    table.add_column("Field", style="cyan", min_width=14)
    table.add_column("Value", overflow="fold")
    table.add_row("name", escape(record.name))
    table.add_row("unit name", escape(record.unit_name))
    table.add_row("url", escape(record.url))
    table.add_row("reserve", record.reserve)
    table.add_row("metadata url", escape(record.metadata_url))
    table.add_row("image", escape(image_url(record)) or "[dim](none)[/dim]")

    if record.metadata is None:
        body = "[yellow]Metadata unavailable.[/yellow]"
    else:
        body = escape(json.dumps(record.metadata, indent=2, sort_keys=True))
    table.add_row("metadata", body)

    console.print(Panel(table, title=f"[bold]Asset {asset_id}[/bold]"))
