"""Command: greet as a user."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ooplab.commands._base import OoplabCommand

if TYPE_CHECKING:
    from ooplab.commands._context import AppContext


@click.command(cls=OoplabCommand, examples='  ooplab greet "Ada" ada@example.org')
@click.argument("name")
@click.argument("email")
@click.pass_obj
def greet(app: AppContext, name: str, email: str) -> None:
    """Print the greeting of a user NAME with EMAIL."""
    from ooplab.services.people import PeopleService

    app.emit(PeopleService(app.lab).greet(name, email))
