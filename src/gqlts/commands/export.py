"""Command: write TypeScript modules for schema types."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from gqlts.commands._base import GqltsCommand

if TYPE_CHECKING:
    from gqlts.commands._context import AppContext


@click.command(
    cls=GqltsCommand,
    examples="""\
  gqlts export --output src/__generated__
  gqlts export --output types --schema schema.graphql User Post
  gqlts --interface-prefix I --read-only export --output types""",
)
@click.argument("type_names", nargs=-1)
@click.option(
    "--output",
    required=True,
    type=click.Path(file_okay=False),
    help="Directory for generated .ts files.",
)
@click.option("--schema", "schema_path", type=click.Path(), default=None, help="SDL schema file.")
@click.pass_obj
def export(
    app: AppContext,
    type_names: tuple[str, ...],
    output: str,
    schema_path: str | None,
) -> None:
    """Export one TypeScript module per schema type, with its dependencies."""
    app.emit(
        app.service.export_interfaces(
            Path(output),
            schema_path=schema_path,
            type_names=type_names,
        )
    )
