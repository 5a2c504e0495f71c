from __future__ import annotations

from dataclasses import dataclass

from arc_path import ArcSpec

OUTER_RADIUS = 150
RADIUS_STEP = 10
STROKE_WIDTH = 8


@dataclass(frozen=True)
class SpectrumEntry:
    color: str
    order: int
    name: str = ""


# Outermost first; order decides both draw order and radius.
SPECTRUM = (
    SpectrumEntry("#FF0000", 0, "red"),
    SpectrumEntry("#FF7F00", 1, "orange"),
    SpectrumEntry("#FFFF00", 2, "yellow"),
    SpectrumEntry("#00FF00", 3, "green"),
    SpectrumEntry("#0000FF", 4, "blue"),
    SpectrumEntry("#4B0082", 5, "indigo"),
    SpectrumEntry("#9400D3", 6, "violet"),
)


@dataclass(frozen=True)
class CanvasFrame:
    min_x: int
    min_y: int
    width: int
    height: int

    @property
    def view_box(self) -> str:
        return f"{self.min_x} {self.min_y} {self.width} {self.height}"


def radius_for(order: int) -> int:
    return OUTER_RADIUS - order * RADIUS_STEP


def _margin() -> int:
    return STROKE_WIDTH // 2


def canvas_frame() -> CanvasFrame:
    """Smallest frame holding the outer arc and its stroke."""
    extent = OUTER_RADIUS + _margin()
    return CanvasFrame(min_x=0, min_y=0, width=2 * extent, height=extent)


def center() -> tuple[int, int]:
    # Butt caps end flush with the baseline, so the arcs can sit on the bottom edge.
    extent = OUTER_RADIUS + _margin()
    return (extent, extent)


def arc_specs() -> list[ArcSpec]:
    cx, cy = center()
    return [ArcSpec(cx, cy, radius_for(entry.order), STROKE_WIDTH) for entry in SPECTRUM]


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    raw = color.lstrip("#")
    if len(raw) != 6:
        raise ValueError(f"Expected #RRGGBB color, got {color!r}")
    return (int(raw[0:2], 16), int(raw[2:4], 16), int(raw[4:6], 16))


def hex_to_rgb_float(color: str) -> tuple[float, float, float]:
    r, g, b = hex_to_rgb(color)
    return (r / 255.0, g / 255.0, b / 255.0)
