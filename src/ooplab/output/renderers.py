"""Operation-specific Rich renderers for ServiceResult.

Each renderer writes to a Rich Console (backed by StringIO).  The caller
extracts the rendered text via ``get_output(console)``.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to a generic key-value renderer.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.table import Table
from rich.text import Text

from ooplab.output.console import create_console, get_output, style_for

if TYPE_CHECKING:
    from rich.console import Console

    from ooplab.services.result import ServiceResult

DEFAULT_PRECISION = 2


# ── Public API ────────────────────────────────────────────────────────


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()

    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose=verbose)
    else:
        _render_error(result, console, verbose=verbose)

    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str:
    """Render minimal output for ``--quiet`` mode."""
    if not result.ok:
        msg = result.error.message if result.error else "Unknown error"
        return f"ERROR: {result.op} — {msg}"

    d = result.data
    if result.op == "measure":
        precision = _precision(result)
        return "\n".join(
            f"{item['kind']} {item['area']:.{precision}f} {item['perimeter']:.{precision}f}"
            for item in d.get("items", [])
        )
    if result.op == "notify":
        return "\n".join(d.get("delivered", []))
    if result.op == "shape_kinds":
        return "\n".join(item["kind"] for item in d.get("items", []))
    if result.op == "greet":
        return str(d.get("greeting", ""))
    if result.op == "product":
        return str(d.get("label", ""))
    if result.op == "account":
        return f"{d.get('balance', 0):.2f}"
    return f"OK: {result.op}"


# ── Helpers ───────────────────────────────────────────────────────────


def _precision(result: ServiceResult) -> int:
    if result.meta and isinstance(result.meta.get("precision"), int):
        return int(result.meta["precision"])
    return DEFAULT_PRECISION


def _status_line(console: Console, result: ServiceResult) -> None:
    """Print the OK status line."""
    label = Text("OK", style="ool.ok")
    op = Text(f"  {result.op}", style="ool.op")
    console.print(label, op, sep="")


def _field(console: Console, key: str, value: Any) -> None:
    """Print a single indented key-value field."""
    k = Text(f"  {key}: ", style="ool.key")
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        v = Text(str(value), style="ool.number")
    else:
        v = Text(str(value))
    console.print(k, v, sep="")


def _render_meta(console: Console, result: ServiceResult) -> None:
    if not result.meta:
        return
    console.print(Text("  meta:", style="dim"))
    for key, value in result.meta.items():
        console.print(f"    {key}: {value}")


# ── Error renderer ────────────────────────────────────────────────────


def _render_error(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    label = Text("ERROR", style="ool.error")
    op = Text(f"  {result.op}", style="ool.op")
    sep = Text(" — ")
    console.print(label, op, sep, Text(msg))

    if result.op == "notify":
        _render_delivery_outcome(result, console)

    if verbose and err:
        console.print(Text(f"  code: {err.code}", style="dim"))
        if err.detail:
            console.print(Text("  detail:", style="dim"))
            for k, v in err.detail.items():
                console.print(f"    {k}: {v}")


# ── Shape renderers ───────────────────────────────────────────────────


def _render_measure(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render measurements as a table in input order."""
    items = result.data.get("items", [])
    precision = _precision(result)

    table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Kind")
    table.add_column("Dimensions")
    table.add_column("Area", style="ool.number", justify="right")
    table.add_column("Perimeter", style="ool.number", justify="right")

    for item in items:
        kind = str(item.get("kind", ""))
        dims = ", ".join(
            f"{name}={value:g}" for name, value in item.get("dimensions", {}).items()
        )
        table.add_row(
            str(item.get("index", "")),
            Text(kind, style=style_for("kind", kind)),
            dims,
            f"{item.get('area', 0):.{precision}f}",
            f"{item.get('perimeter', 0):.{precision}f}",
        )

    console.print(table)
    console.print(f"\n{result.data.get('count', len(items))} shapes")
    if verbose:
        console.print(f"total area: {result.data.get('total_area', 0):.{precision}f}")
        _render_meta(console, result)


def _render_kinds(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    for item in result.data.get("items", []):
        kind = str(item.get("kind", ""))
        dims = ", ".join(item.get("dimensions", []))
        console.print(Text(kind, style=style_for("kind", kind)), Text(f"  ({dims})", style="dim"))


# ── Notify renderers ──────────────────────────────────────────────────


def _render_notify(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Render one line per delivery, in dispatch order."""
    _status_line(console, result)
    _field(console, "message", result.data.get("message", ""))
    deliveries = result.data.get("deliveries", [])
    if not deliveries:
        console.print("  [dim]nothing delivered[/dim]")
    for delivery in deliveries:
        channel = str(delivery.get("channel", ""))
        line = Text("  → ")
        line.append(f"{channel:<6}", style=style_for("channel", channel))
        line.append(f" {delivery.get('recipient', '')}")
        if verbose:
            line.append(f"  {delivery.get('sent_at', '')}", style="dim")
        console.print(line)


def _render_delivery_outcome(result: ServiceResult, console: Console) -> None:
    """List delivered and failed channels of a failed broadcast."""
    failed = [
        (str(f.get("channel", "")), str(f.get("error", "")))
        for f in result.data.get("failed", [])
    ]
    if not failed and result.error and "channel" in result.error.detail:
        failed = [(str(result.error.detail["channel"]), result.error.message)]

    for channel in result.data.get("delivered", []):
        line = Text("  ✓ ")
        line.append(f"{channel:<6}", style=style_for("channel", channel))
        console.print(line)
    for channel, error in failed:
        line = Text("  ✗ ", style="ool.error")
        line.append(f"{channel:<6}", style=style_for("channel", channel))
        line.append(f" {error}", style="dim")
        console.print(line)


# ── People renderers ──────────────────────────────────────────────────


def _render_greet(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    console.print(Text(str(result.data.get("greeting", ""))))


def _render_account(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    _status_line(console, result)
    _field(console, "owner", result.data.get("owner", ""))
    _field(console, "balance", f"{result.data.get('balance', 0):.2f}")
    history = result.data.get("history", [])
    if history and verbose:
        table = Table(show_header=True, show_lines=False, pad_edge=False, expand=False)
        table.add_column("Movement")
        table.add_column("Amount", justify="right")
        table.add_column("Balance", justify="right", style="ool.number")
        for movement in history:
            table.add_row(
                str(movement.get("kind", "")),
                f"{movement.get('amount', 0):.2f}",
                f"{movement.get('balance', 0):.2f}",
            )
        console.print(table)


# ── Generic fallback ──────────────────────────────────────────────────


def _render_generic(result: ServiceResult, console: Console, *, verbose: bool = False) -> None:
    """Fallback renderer: status line + all data as key-value pairs."""
    _status_line(console, result)
    for key, value in result.data.items():
        if isinstance(value, (dict, list)):
            _field(console, key, _json.dumps(value, separators=(",", ":")))
        else:
            _field(console, key, value)
    if verbose:
        _render_meta(console, result)


# ── Dispatch table ────────────────────────────────────────────────────

_OP_RENDERERS: dict[str, Any] = {
    "measure": _render_measure,
    "shape_kinds": _render_kinds,
    "notify": _render_notify,
    "greet": _render_greet,
    "account": _render_account,
}
