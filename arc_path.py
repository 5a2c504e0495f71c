from __future__ import annotations

import math
from dataclasses import dataclass

from app_errors import InvalidArcGeometry


@dataclass(frozen=True)
class ArcSpec:
    center_x: float
    center_y: float
    radius: float
    stroke_width: float

    @property
    def start(self) -> tuple[float, float]:
        return (self.center_x - self.radius, self.center_y)

    @property
    def end(self) -> tuple[float, float]:
        return (self.center_x + self.radius, self.center_y)

    @property
    def apex(self) -> tuple[float, float]:
        # y grows downwards, so the top of the arc sits above the baseline.
        return (self.center_x, self.center_y - self.radius)

    @property
    def d(self) -> str:
        return describe_arc(self.center_x, self.center_y, self.radius)


def _fmt(value: float) -> str:
    # Shortest round-tripping form; no rounding, so tiny radii never collapse to 0.
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def _check_geometry(center_x: float, center_y: float, radius: float) -> None:
    for name, value in (("center_x", center_x), ("center_y", center_y), ("radius", radius)):
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidArcGeometry(f"{name} must be a number, got {value!r}")
        if not math.isfinite(value):
            raise InvalidArcGeometry(f"{name} must be finite, got {value!r}")
    if radius <= 0:
        raise InvalidArcGeometry(f"radius must be positive, got {radius!r}")


def describe_arc(center_x: float, center_y: float, radius: float) -> str:
    """
    Build the path description of an upward semicircle.

    The path moves to the left end of the horizontal diameter and draws an
    elliptical-arc instruction to the right end. Radius equals half the chord,
    so both candidate arcs are exact half circles; large-arc is fixed to 0 and
    the sweep flag 1 picks the one passing through (cx, cy - r).
    """
    _check_geometry(center_x, center_y, radius)
    start_x = center_x - radius
    end_x = center_x + radius
    r = _fmt(radius)
    y = _fmt(center_y)
    return f"M {_fmt(start_x)} {y} A {r} {r} 0 0 1 {_fmt(end_x)} {y}"
