"""Subcommand modules for dcstd.

register_commands() defers imports so ``dcstd --help`` stays fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all command groups on the root CLI group."""
    from domaincrafters_std.commands.uuid_cmd import uuid_group

    cli.add_command(uuid_group)
