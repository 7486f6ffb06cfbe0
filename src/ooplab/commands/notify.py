"""Command: broadcast a message to notifier channels."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ooplab.commands._base import OoplabCommand

if TYPE_CHECKING:
    from ooplab.commands._context import AppContext


@click.command(
    cls=OoplabCommand,
    examples="""\
  ooplab notify "System updated!"
  ooplab notify "Deploy done" --channel chat --channel email
  ooplab --json notify "Ping" --stop-on-error""",
)
@click.argument("message")
@click.option(
    "--channel",
    "channels",
    multiple=True,
    help="Channel to use (repeatable, in order). Defaults to [notify] channels.",
)
@click.option(
    "--stop-on-error/--continue-on-error",
    default=None,
    help="Abort at the first failed send. Defaults to [notify] stop_on_error.",
)
@click.pass_obj
def notify(
    app: AppContext,
    message: str,
    channels: tuple[str, ...],
    stop_on_error: bool | None,
) -> None:
    """Send MESSAGE through every configured notifier, in order."""
    from ooplab.services.notify import NotifyService

    app.emit(
        NotifyService(app.lab).broadcast(
            message,
            list(channels) or None,
            stop_on_error=stop_on_error,
        )
    )
