"""Command group: shape measurement (measure, kinds)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import click

from ooplab.commands._base import OoplabGroup

if TYPE_CHECKING:
    from ooplab.commands._context import AppContext

_KIND_ALIASES = {"rect": "rectangle", "circ": "circle"}

_SHAPES_EXAMPLES = """\
  ooplab shapes measure rect:5x3 circle:2
  ooplab shapes measure rectangle:width=4,height=1.5
  ooplab --json shapes measure circle:10
  ooplab shapes kinds"""


def parse_shape_spec(text: str) -> dict[str, Any]:
    """Parse ``kind:AxB`` or ``kind:name=value,...`` into a spec dict.

    Positional values are assigned to the variant's dimension fields in
    declaration order.  Unknown kinds are passed through so the service
    reports them.
    """
    from ooplab.domain.shapes import SHAPE_REGISTRY

    kind, sep, rest = text.partition(":")
    kind = kind.strip().lower()
    kind = _KIND_ALIASES.get(kind, kind)
    if not kind or not sep or not rest.strip():
        msg = f"Expected KIND:DIMENSIONS, got {text!r}"
        raise click.BadParameter(msg, param_hint="SPEC")

    spec: dict[str, Any] = {"kind": kind}
    try:
        if "=" in rest:
            for pair in rest.split(","):
                name, _, value = pair.partition("=")
                spec[name.strip()] = float(value)
            return spec

        values = [float(v) for v in rest.lower().split("x")]
    except ValueError:
        msg = f"Dimensions must be numbers in {text!r}"
        raise click.BadParameter(msg, param_hint="SPEC") from None

    shape_cls = SHAPE_REGISTRY.get(kind)
    if shape_cls is None:
        return spec
    fields = list(shape_cls.model_fields)
    if len(values) != len(fields):
        msg = f"{kind} takes {len(fields)} dimension(s) ({', '.join(fields)}), got {len(values)}"
        raise click.BadParameter(msg, param_hint="SPEC")
    spec.update(zip(fields, values, strict=True))
    return spec


@click.group(cls=OoplabGroup, examples=_SHAPES_EXAMPLES)
def shapes() -> None:
    """Measure area and perimeter of shape variants."""


@shapes.command(
    examples="""\
  ooplab shapes measure rect:5x3 circle:2
  ooplab -q shapes measure rect:1x1 rect:2x2"""
)
@click.argument("specs", nargs=-1, required=True)
@click.pass_obj
def measure(app: AppContext, specs: tuple[str, ...]) -> None:
    """Measure each SPEC (e.g. rect:5x3, circle:2) in the order given."""
    from ooplab.services.geometry import GeometryService

    parsed = [parse_shape_spec(s) for s in specs]
    app.emit(GeometryService(app.lab).measure(parsed))


@shapes.command(examples="  ooplab shapes kinds")
@click.pass_obj
def kinds(app: AppContext) -> None:
    """List registered shape kinds and their dimensions."""
    from ooplab.services.geometry import GeometryService

    # Touch plugins so entry-point shapes are registered before listing.
    _ = app.lab.plugins
    app.emit(GeometryService(app.lab).kinds())
