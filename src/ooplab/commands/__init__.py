"""Subcommand modules for ooplab.

Provides register_commands() which uses deferred imports to keep
``ooplab --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the shapes group and the standalone commands on the root group."""
    from ooplab.commands.shapes import shapes

    cli.add_command(shapes)

    from ooplab.commands.account import account
    from ooplab.commands.greet import greet
    from ooplab.commands.notify import notify
    from ooplab.commands.product import product

    cli.add_command(notify)
    cli.add_command(greet)
    cli.add_command(product)
    cli.add_command(account)
