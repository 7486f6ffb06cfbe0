"""Root ``ooplab`` command: global output/logging flags and subcommands."""

from __future__ import annotations

from typing import Any

import click

from ooplab import __version__
from ooplab.commands import register_commands
from ooplab.commands._context import AppContext
from ooplab.config.settings import OoplabSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="ooplab")
@click.option("--json", "json_output", is_flag=True, help="Emit the ServiceResult as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="One line per result item.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and extra result detail.")
@click.option("--log-json", is_flag=True, help="Write log events to stderr as JSON lines.")
@click.option(
    "--no-plugins",
    is_flag=True,
    help="Skip entry-point plugins (the built-in audit plugin still runs).",
)
@click.option("-c", "--config", "config_path", default=None, help="Path to an ooplab.toml.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    no_plugins: bool,
    config_path: str | None,
) -> None:
    """ooplab — shapes, notifiers, and polymorphic dispatch."""
    overrides: dict[str, Any] = {}
    if no_plugins:
        overrides["plugins"] = {"enabled": False}

    ctx.obj = AppContext(
        OoplabSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            quiet=quiet,
            verbose=verbose,
            log_json=log_json,
            **overrides,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
