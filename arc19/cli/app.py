"""Main Typer application: imports and registers all CLI commands.

Entry point: ``arc19`` (configured via pyproject.toml console_scripts).
"""

from __future__ import annotations

import logging

import typer

from arc19.cli.commands.history import history_cmd
from arc19.cli.commands.resolve import resolve_cmd
from arc19.cli.commands.show import show_cmd
from arc19.cli.commands.update import prepare_update_cmd
from arc19.cli.commands.validate import validate_cmd
from arc19.config import settings

app = typer.Typer(
    name="arc19",
    help="arc19: resolve, inspect and update template-ipfs (mutable) assets.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Configure logging before any command runs."""
    level = logging.DEBUG if verbose else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


# Register subcommands
app.command(name="validate", help="Validate a template string.")(validate_cmd)
app.command(name="resolve", help="Resolve a template + reserve to a URL.")(resolve_cmd)
app.command(name="history", help="Show every metadata version of an asset.")(history_cmd)
app.command(name="prepare-update", help="Compute url/reserve for a new CID.")(
    prepare_update_cmd
)
app.command(name="show", help="Show an asset's current metadata.")(show_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
