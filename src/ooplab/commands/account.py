"""Command: run deposits and withdrawals against a fresh account."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ooplab.commands._base import OoplabCommand

if TYPE_CHECKING:
    from ooplab.commands._context import AppContext


@click.command(
    cls=OoplabCommand,
    examples="""\
  ooplab account alice --opening 100 --withdraw 30
  ooplab -v account bob --deposit 50 --deposit 25 --withdraw 10""",
)
@click.argument("owner")
@click.option("--opening", type=float, default=0.0, show_default=True, help="Opening balance.")
@click.option("--deposit", "deposits", type=float, multiple=True, help="Deposit (repeatable).")
@click.option(
    "--withdraw", "withdrawals", type=float, multiple=True, help="Withdrawal (repeatable)."
)
@click.pass_obj
def account(
    app: AppContext,
    owner: str,
    opening: float,
    deposits: tuple[float, ...],
    withdrawals: tuple[float, ...],
) -> None:
    """Open an account for OWNER, apply deposits, then withdrawals."""
    from ooplab.services.people import PeopleService

    app.emit(
        PeopleService(app.lab).account(
            owner,
            opening=opening,
            deposits=deposits,
            withdrawals=withdrawals,
        )
    )
