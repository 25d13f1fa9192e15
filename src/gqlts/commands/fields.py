"""Command: list the TypeScript types of a GraphQL type's fields."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gqlts.commands._base import GqltsCommand

if TYPE_CHECKING:
    from gqlts.commands._context import AppContext


@click.command(
    cls=GqltsCommand,
    examples="""\
  gqlts fields User --schema schema.graphql
  gqlts --read-only fields Query
  gqlts --json fields CreateUserInput""",
)
@click.argument("type_name")
@click.option("--schema", "schema_path", type=click.Path(), default=None, help="SDL schema file.")
@click.pass_obj
def fields(app: AppContext, type_name: str, schema_path: str | None) -> None:
    """Show each field of an object, interface, or input type."""
    app.emit(app.service.field_types(type_name, schema_path=schema_path))
