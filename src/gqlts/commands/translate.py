"""Command: translate a single GraphQL type reference."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gqlts.commands._base import GqltsCommand

if TYPE_CHECKING:
    from gqlts.commands._context import AppContext


@click.command(
    cls=GqltsCommand,
    examples="""\
  gqlts translate '[String!]'
  gqlts translate 'User!' --schema schema.graphql
  gqlts --interface-prefix I translate '[User]!'
  gqlts --passthrough-scalars translate 'DateTime' --scalar DateTime
  gqlts -q translate 'Timestamp!' --scalar Timestamp --name Int""",
)
@click.argument("type_ref")
@click.option("--schema", "schema_path", type=click.Path(), default=None, help="SDL schema file.")
@click.option("--name", "override_name", default=None, help="Override the mapped type name.")
@click.option(
    "--scalar",
    "extra_scalars",
    multiple=True,
    help="Treat NAME as a custom scalar (no schema only). Repeatable.",
)
@click.pass_obj
def translate(
    app: AppContext,
    type_ref: str,
    schema_path: str | None,
    override_name: str | None,
    extra_scalars: tuple[str, ...],
) -> None:
    """Translate a GraphQL type reference to a TypeScript type."""
    app.emit(
        app.service.translate(
            type_ref,
            schema_path=schema_path,
            override_name=override_name,
            extra_scalars=extra_scalars,
        )
    )
