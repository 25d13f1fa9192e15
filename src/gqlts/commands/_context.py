"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy service construction and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from gqlts.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from gqlts.config.settings import GqltsSettings
    from gqlts.services.codegen import CodegenService
    from gqlts.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The service is built on first use so ``--help`` and ``--version``
    never import graphql-core.
    """

    def __init__(self, settings: GqltsSettings) -> None:
        self.settings = settings
        self._service: CodegenService | None = None

        from gqlts.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def service(self) -> CodegenService:
        """The codegen service (created lazily on first access)."""
        if self._service is None:
            from gqlts.services.codegen import CodegenService

            self._service = CodegenService(self.settings)
        return self._service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # JSON carries warnings in the payload; Rich output renders them inline.
            if settings.quiet and not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
