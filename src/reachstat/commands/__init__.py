"""Subcommand modules for reachstat.

Provides register_commands() which uses deferred imports to keep
``reachstat --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups and standalone commands on the root group."""
    # --- Groups ---
    from reachstat.commands.graph import graph

    cli.add_command(graph)

    # --- Standalone commands ---
    from reachstat.commands.analyze import analyze

    cli.add_command(analyze)
