"""AppContext — shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``. Configures logging and telemetry, and centralizes
result emission (stdout/stderr routing and exit codes).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import click

from reachstat.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from reachstat.config.settings import ReachSettings
    from reachstat.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: ReachSettings) -> None:
        self.settings = settings

        from reachstat.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

        from reachstat.services.telemetry import disable_telemetry, enable_telemetry

        if settings.verbose:
            enable_telemetry()
        else:
            disable_telemetry()

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def _write(self, result: ServiceResult) -> None:
        """Write one result: success to stdout, failure to stderr."""
        settings = self.output_settings
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)

    def emit(self, result: ServiceResult) -> None:
        """Output a ServiceResult; exit with code 1 if it failed."""
        self._write(result)
        if not result.ok:
            raise SystemExit(1)

    def emit_all(self, results: Iterable[ServiceResult]) -> None:
        """Output every result in turn, then exit 1 if any of them failed.

        A failed result never stops the remaining ones from being shown.
        """
        failed = False
        for result in results:
            self._write(result)
            failed = failed or not result.ok
        if failed:
            raise SystemExit(1)
