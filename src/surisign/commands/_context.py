"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Owns logging setup and result emission (stdout/stderr
routing and exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from surisign.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from surisign.config.settings import SurisignSettings
    from surisign.services.result import ServiceResult
    from surisign.services.signing import SigningService


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: SurisignSettings) -> None:
        self.settings = settings

        from surisign.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        if settings.verbose:
            from surisign.services.telemetry import enable_telemetry

            enable_telemetry()

    def signing_service(self) -> SigningService:
        """A fresh SigningService bound to the ``[signing]`` config."""
        from surisign.services.signing import SigningService

        return SigningService(self.settings.signing)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, returns normally.
        * Failure: writes to stderr, exits with code 1. Nothing reaches stdout.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
