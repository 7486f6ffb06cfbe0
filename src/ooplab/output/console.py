"""Rich Console factory and theme for ooplab output.

Creates Console instances that render to a StringIO buffer, preserving
the ``format_result() -> str`` contract.  In non-TTY environments
(tests, pipes) Rich automatically disables color codes.
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

OOL_THEME = Theme(
    {
        "ool.ok": "bold green",
        "ool.error": "bold red",
        "ool.warning": "bold yellow",
        "ool.op": "bold cyan",
        "ool.key": "dim",
        "ool.number": "magenta",
        "ool.kind.rectangle": "green",
        "ool.kind.circle": "blue",
        "ool.channel.email": "yellow",
        "ool.channel.chat": "cyan",
        "ool.channel.sms": "green",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer.

    Args:
        no_color: Disable ANSI escape codes (used in tests).
        width: Override terminal width (useful for consistent test output).
    """
    return Console(
        file=StringIO(),
        theme=OOL_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for(prefix: str, name: str) -> str:
    """Return the theme style for ``ool.<prefix>.<name>``, or "" if unthemed."""
    style = f"ool.{prefix}.{name}"
    return style if style in OOL_THEME.styles else ""
