"""Subcommand modules for gqlts.

Provides register_commands() which uses deferred imports so that
``gqlts --help`` never pulls in graphql-core.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from gqlts.commands.export import export
    from gqlts.commands.fields import fields
    from gqlts.commands.translate import translate

    cli.add_command(translate)
    cli.add_command(fields)
    cli.add_command(export)
