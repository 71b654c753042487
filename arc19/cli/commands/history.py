"""``arc19 history ASSET_ID``: show every content version an asset pointed at."""

from __future__ import annotations

import json

import typer
from rich.console import Console
from rich.table import Table

from arc19.bridge.indexer import IndexerClient
from arc19.core.errors import IndexerError
from arc19.core.history_walker import HistoryWalker

console = Console()


def _describe(metadata: object) -> str:
    if isinstance(metadata, dict):
        return str(metadata.get("name") or metadata.get("description") or "")
    return ""


def history_cmd(
    asset_id: int = typer.Argument(..., help="The asset ID."),
    indexer_url: str = typer.Option(
        None,
        "--indexer-url",
        "-i",
        help="Indexer root URL (defaults to the configured network).",
    ),
    workers: int = typer.Option(
        None,
        "--workers",
        "-w",
        help="Fetch metadata for events of a page in parallel.",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Emit the history as JSON instead of a table.",
    ),
) -> None:
    """Walk the asset-config history and list resolved metadata per round."""
    walker = HistoryWalker(IndexerClient(indexer_url), max_workers=workers)
    try:
        snapshots = walker.walk(asset_id)
    except IndexerError as exc:
        console.print(f"[bold red]Indexer error:[/bold red] {exc}")
        raise typer.Exit(code=1)

    if as_json:
        payload = [s.model_dump(mode="json") for s in snapshots]
        typer.echo(json.dumps(payload, indent=2, sort_keys=True))
        return

    if not snapshots:
        console.print(f"[dim]No resolvable versions for asset {asset_id}.[/dim]")
        return

    table = Table(title=f"Asset {asset_id} ({len(snapshots)} version(s))")
    table.add_column("Round", justify="right", style="cyan")
    table.add_column("URL", overflow="fold")
    table.add_column("Name")
    for snapshot in snapshots:
        table.add_row(str(snapshot.round), snapshot.resolved_url, _describe(snapshot.metadata))
    console.print(table)
