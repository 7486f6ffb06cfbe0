"""Command: format a product label."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ooplab.commands._base import OoplabCommand

if TYPE_CHECKING:
    from ooplab.commands._context import AppContext


@click.command(cls=OoplabCommand, examples='  ooplab product "Notebook" 12.5')
@click.argument("name")
@click.argument("price", type=float)
@click.pass_obj
def product(app: AppContext, name: str, price: float) -> None:
    """Show the label of product NAME priced at PRICE."""
    from ooplab.services.people import PeopleService

    app.emit(PeopleService(app.lab).product(name, price))
