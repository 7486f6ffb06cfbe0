"""Shape family — the ``area``/``perimeter`` capability contract.

Every shape is a frozen Pydantic model whose float fields ARE its
dimensions.  Concrete variants override :meth:`Shape.area` and
:meth:`Shape.perimeter`; the base raises
:class:`~ooplab.domain.errors.UnimplementedOperation`.

Dimension policy:

- negative, NaN, or infinite values raise ``InvalidDimension``;
- zero is a degenerate but valid shape unless validation runs with
  ``context={"allow_degenerate": False}``;
- an area or perimeter that overflows a float raises
  ``MeasurementOverflow`` when measured.

Variants are looked up by kind through :data:`SHAPE_REGISTRY`, which
plugins may extend via :func:`register_shape`.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, ClassVar

from pydantic import BaseModel, ValidationInfo, field_validator

from ooplab.domain.errors import (
    InvalidDimension,
    MeasurementOverflow,
    UnimplementedOperation,
    UnknownVariant,
)
from ooplab.domain.types import ShapeKind

DEFAULT_TOLERANCE = 1e-9

SHAPE_REGISTRY: dict[str, type[Shape]] = {}


# ---------------------------------------------------------------------------
# Base shape
# ---------------------------------------------------------------------------


class Shape(BaseModel):
    """Base shape — attributes ARE dimensions, immutable after construction."""

    model_config = {"frozen": True, "extra": "forbid"}

    kind: ClassVar[str] = ""

    @field_validator("*", mode="after")
    @classmethod
    def _check_dimension(cls, value: Any, info: ValidationInfo) -> Any:
        if not isinstance(value, float):
            return value
        name = info.field_name or "dimension"
        if math.isnan(value) or math.isinf(value):
            raise InvalidDimension(name, value, "must be a finite number")
        if value < 0:
            raise InvalidDimension(name, value, "must not be negative")
        allow_degenerate = True
        if info.context is not None:
            allow_degenerate = bool(info.context.get("allow_degenerate", True))
        if value == 0 and not allow_degenerate:
            raise InvalidDimension(name, value, "must be greater than zero")
        return value

    def area(self) -> float:
        raise UnimplementedOperation(type(self).__name__, "area")

    def perimeter(self) -> float:
        raise UnimplementedOperation(type(self).__name__, "perimeter")

    def dimensions(self) -> dict[str, float]:
        """Return the dimension fields in declaration order."""
        return self.model_dump()


# ---------------------------------------------------------------------------
# Concrete variants
# ---------------------------------------------------------------------------


class Rectangle(Shape):
    """Axis-aligned rectangle."""

    kind: ClassVar[str] = ShapeKind.RECTANGLE

    width: float
    height: float

    def area(self) -> float:
        return self.width * self.height

    def perimeter(self) -> float:
        return 2 * (self.width + self.height)


class Circle(Shape):
    kind: ClassVar[str] = ShapeKind.CIRCLE

    radius: float

    def area(self) -> float:
        return math.pi * self.radius * self.radius

    def perimeter(self) -> float:
        return 2 * math.pi * self.radius


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


def _builtin_shape_map() -> dict[str, type[Shape]]:
    return {
        ShapeKind.RECTANGLE.value: Rectangle,
        ShapeKind.CIRCLE.value: Circle,
    }


def register_shape(name: str, shape_cls: type[Shape]) -> None:
    """Register a custom shape variant under *name*.

    The class must extend :class:`Shape` and override both ``area`` and
    ``perimeter``.  Built-in kinds are reserved and cannot be replaced.
    """
    normalized = name.strip().lower()
    if not normalized:
        msg = "Shape kind must not be empty"
        raise ValueError(msg)

    if not (isinstance(shape_cls, type) and issubclass(shape_cls, Shape)):
        msg = f"Shape {normalized!r} must extend Shape"
        raise TypeError(msg)

    if normalized in _builtin_shape_map():
        msg = f"Shape {normalized!r} conflicts with a built-in registration"
        raise ValueError(msg)

    for operation in ("area", "perimeter"):
        if getattr(shape_cls, operation) is getattr(Shape, operation):
            msg = f"Shape {normalized!r} does not override {operation}()"
            raise TypeError(msg)

    existing = SHAPE_REGISTRY.get(normalized)
    if existing is not None and existing is not shape_cls:
        msg = f"Shape {normalized!r} is already registered"
        raise ValueError(msg)

    if not shape_cls.kind:
        shape_cls.kind = normalized
    SHAPE_REGISTRY[normalized] = shape_cls


def get_shape_class(kind: str) -> type[Shape]:
    """Look up a shape variant by kind. Raises ``UnknownVariant``."""
    normalized = kind.strip().lower()
    try:
        return SHAPE_REGISTRY[normalized]
    except KeyError:
        raise UnknownVariant("shape", kind, list(SHAPE_REGISTRY)) from None


def build_shape(kind: str, *, allow_degenerate: bool = True, **dimensions: Any) -> Shape:
    """Construct a registered shape variant from keyword dimensions."""
    shape_cls = get_shape_class(kind)
    return shape_cls.model_validate(dimensions, context={"allow_degenerate": allow_degenerate})


# ---------------------------------------------------------------------------
# Measurement
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ShapeMeasurement:
    """Area and perimeter of one shape at its position in the input."""

    index: int
    kind: str
    area: float
    perimeter: float
    dimensions: dict[str, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "index": self.index,
            "kind": self.kind,
            "dimensions": dict(self.dimensions),
            "area": self.area,
            "perimeter": self.perimeter,
        }


def measure(shape: Shape, index: int = 0) -> ShapeMeasurement:
    """Measure one shape; raise ``MeasurementOverflow`` on a non-finite result."""
    kind = shape.kind or type(shape).__name__.lower()
    try:
        area = shape.area()
    except OverflowError as exc:
        raise MeasurementOverflow(kind, index, "area") from exc
    try:
        perimeter = shape.perimeter()
    except OverflowError as exc:
        raise MeasurementOverflow(kind, index, "perimeter") from exc
    for name, value in (("area", area), ("perimeter", perimeter)):
        if not math.isfinite(value):
            raise MeasurementOverflow(kind, index, name)
    return ShapeMeasurement(
        index=index,
        kind=kind,
        area=area,
        perimeter=perimeter,
        dimensions=shape.dimensions(),
    )


def measure_all(shapes: Iterable[Shape]) -> list[ShapeMeasurement]:
    """Invoke ``area`` and ``perimeter`` on each shape, in iteration order."""
    return [measure(shape, index) for index, shape in enumerate(shapes)]


def approx_equal(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """Compare two measurements with a relative tolerance (absolute near zero)."""
    return math.isclose(a, b, rel_tol=tolerance, abs_tol=tolerance)


def _register_shapes() -> None:
    """Populate :data:`SHAPE_REGISTRY` with built-in variants."""
    SHAPE_REGISTRY.update(_builtin_shape_map())


_register_shapes()
