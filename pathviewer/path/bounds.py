"""Bounding box of serialized path data, computed by svgpathtools.

Curve extrema (not just control points) are included, so this is the box a
renderer would draw around the path.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from svgpathtools import parse_path as parse_svg_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Bounds:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def origin(self) -> tuple[float, float]:
        return (self.min_x, self.min_y)

    @property
    def extent(self) -> tuple[float, float]:
        return (self.max_x, self.max_y)


def path_bounds(data: str) -> Bounds | None:
    """Return the bounds of ``data``, or None when there is nothing to measure."""
    if not data or not data.strip():
        return None

    try:
        path = parse_svg_path(data)
    except Exception as e:
        logger.warning("Failed to measure path: %s", e)
        return None

    # A lone move draws no segments.
    if len(path) == 0:
        return None

    xmin, xmax, ymin, ymax = path.bbox()
    return Bounds(float(xmin), float(ymin), float(xmax), float(ymax))
