"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Provides lazy Lab initialization and centralized
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ooplab.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from ooplab.config.settings import OoplabSettings
    from ooplab.infrastructure.lab import Lab
    from ooplab.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The Lab is created on first use so ``--help`` and ``--version`` never
    load plugins.
    """

    def __init__(self, settings: OoplabSettings) -> None:
        self.settings = settings
        self._lab: Lab | None = None

        from ooplab.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def lab(self) -> Lab:
        """The Lab instance (created lazily on first access)."""
        if self._lab is None:
            from ooplab.infrastructure.lab import Lab

            self._lab = Lab(self.settings)
        return self._lab

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
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
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
