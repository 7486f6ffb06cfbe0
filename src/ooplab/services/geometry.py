"""GeometryService — measure heterogeneous shape sequences.

Input specs are plain dicts ``{"kind": "rectangle", "width": 5, "height": 3}``
so the CLI and any other adapter can feed the service without touching
domain classes.  Shapes are built through the registry, measured in input
order, and each measurement fires the ``post_measure`` hook.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from pydantic import ValidationError

from ooplab.domain.errors import MeasurementOverflow, OoplabError
from ooplab.domain.shapes import SHAPE_REGISTRY, Shape, approx_equal, build_shape, measure_all
from ooplab.services.base import BaseService
from ooplab.services.result import ServiceResult


class GeometryService(BaseService):
    """Shape construction and measurement."""

    def measure(self, specs: Sequence[dict[str, Any]]) -> ServiceResult:
        """Build every spec, then measure all shapes in order.

        Fails as a whole on the first invalid spec; nothing is measured.
        """
        op = "measure"
        config = self._lab.settings.shapes
        warnings: list[str] = []

        shapes: list[Shape] = []
        for index, spec in enumerate(specs):
            dims = dict(spec)
            kind = str(dims.pop("kind", ""))
            try:
                shapes.append(
                    build_shape(kind, allow_degenerate=config.allow_degenerate, **dims)
                )
            except (OoplabError, ValidationError) as exc:
                return self._failure(op, exc, data={"index": index})

        try:
            measurements = measure_all(shapes)
        except MeasurementOverflow as exc:
            return self._failure(op, exc, data={"index": exc.index})

        for m in measurements:
            if approx_equal(m.area, 0.0, config.tolerance):
                warnings.append(f"Shape {m.index} ({m.kind}) is degenerate")
            self._call_hook(
                "post_measure",
                {"kind": str(m.kind), "area": m.area, "perimeter": m.perimeter},
                warnings,
            )

        if not measurements:
            warnings.append("No shapes given")

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "items": [m.to_dict() for m in measurements],
                "count": len(measurements),
                "total_area": sum(m.area for m in measurements),
            },
            warnings=warnings,
            meta={"precision": config.precision},
        )

    def kinds(self) -> ServiceResult:
        """List registered shape kinds and their dimension fields."""
        items = [
            {"kind": kind, "dimensions": list(shape_cls.model_fields)}
            for kind, shape_cls in sorted(SHAPE_REGISTRY.items())
        ]
        return ServiceResult(ok=True, op="shape_kinds", data={"items": items, "count": len(items)})
