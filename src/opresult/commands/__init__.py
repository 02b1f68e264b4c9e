"""Subcommand modules for opresult.

Provides register_commands() which uses deferred imports to keep
``opresult --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from opresult.commands.inspect_cmd import inspect_cmd
    from opresult.commands.page import page

    cli.add_command(page)
    cli.add_command(inspect_cmd)
