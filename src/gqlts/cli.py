"""Root CLI group for gqlts with global flags and command registration."""

from __future__ import annotations

from typing import Any

import click

from gqlts import __version__
from gqlts.commands import register_commands
from gqlts.commands._context import AppContext
from gqlts.config.settings import GqltsSettings


def _codegen_overrides(
    read_only: bool | None,
    passthrough_scalars: bool | None,
    scalars_prefix: str | None,
    interface_prefix: str | None,
) -> dict[str, Any]:
    """Collect only the ``[codegen]`` flags given on the command line."""
    candidates = {
        "use_read_only_types": read_only,
        "passthrough_custom_scalars": passthrough_scalars,
        "custom_scalars_prefix": scalars_prefix,
        "ts_interface_prefix": interface_prefix,
    }
    return {key: value for key, value in candidates.items() if value is not None}


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="gqlts")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Bare values only.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.option(
    "--read-only/--mutable",
    "read_only",
    default=None,
    help="Emit ReadonlyArray<T> instead of T[].",
)
@click.option(
    "--passthrough-scalars/--no-passthrough-scalars",
    "passthrough_scalars",
    default=None,
    help="Reference custom scalars by name instead of mapping them to any.",
)
@click.option("--scalars-prefix", default=None, help="Prefix for passed-through custom scalars.")
@click.option("--interface-prefix", default=None, help="Prefix for generated interface names.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    read_only: bool | None,
    passthrough_scalars: bool | None,
    scalars_prefix: str | None,
    interface_prefix: str | None,
) -> None:
    """gqlts — GraphQL to TypeScript type mapping."""
    settings = GqltsSettings.from_cli(
        config_path=config_path,
        codegen_overrides=_codegen_overrides(
            read_only, passthrough_scalars, scalars_prefix, interface_prefix
        ),
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
