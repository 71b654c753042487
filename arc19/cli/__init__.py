"""arc19 CLI: Typer-based command-line interface.

Provides the ``arc19`` command with subcommands for validating templates,
resolving template/reserve pairs, walking version history, planning
updates and showing an asset's current metadata.

All output uses Rich for formatted terminal display.
"""
