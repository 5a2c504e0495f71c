from __future__ import annotations

import logging
from dataclasses import dataclass
from html import escape
from typing import Callable, Optional

from fade_in import FadeInController, FrameScheduler, Visibility, TRANSITION
from spectrum import SPECTRUM, STROKE_WIDTH, CanvasFrame, arc_specs, canvas_frame

logger = logging.getLogger(__name__)

TEST_ID = "rainbow-arc"
ROLE = "img"
ARIA_LABEL = "Decorative rainbow"


@dataclass(frozen=True)
class ArcElement:
    d: str
    stroke: str
    stroke_width: int = STROKE_WIDTH
    fill: str = "none"

    def attributes(self) -> dict[str, str]:
        return {
            "d": self.d,
            "stroke": self.stroke,
            "stroke-width": str(self.stroke_width),
            "fill": self.fill,
        }


@dataclass(frozen=True)
class RainbowContainer:
    frame: CanvasFrame
    children: tuple[ArcElement, ...]
    opacity: int = 0
    transition: str = TRANSITION
    test_id: str = TEST_ID
    role: str = ROLE
    aria_label: str = ARIA_LABEL

    @property
    def view_box(self) -> str:
        return self.frame.view_box

    @property
    def width(self) -> int:
        return self.frame.width

    @property
    def height(self) -> int:
        return self.frame.height

    @property
    def style(self) -> dict[str, str]:
        return {
            "display": "block",
            "margin": "0 auto",
            "opacity": str(self.opacity),
            "transition": self.transition,
        }

    def style_text(self) -> str:
        return "; ".join(f"{k}: {v}" for k, v in self.style.items())

    def attributes(self) -> dict[str, str]:
        return {
            "data-testid": self.test_id,
            "role": self.role,
            "aria-label": self.aria_label,
            "viewBox": self.view_box,
            "width": str(self.width),
            "height": str(self.height),
            "style": self.style_text(),
        }

    def to_svg(self, standalone: bool = False) -> str:
        attrs = self.attributes()
        if standalone:
            attrs["xmlns"] = "http://www.w3.org/2000/svg"
        lines = [f"<svg {_format_attrs(attrs)}>"]
        for child in self.children:
            lines.append(f"  <path {_format_attrs(child.attributes())}/>")
        lines.append("</svg>")
        svg = "\n".join(lines)
        if standalone:
            svg = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>\n' + svg + "\n"
        return svg


def _format_attrs(attrs: dict[str, str]) -> str:
    return " ".join(f'{k}="{escape(v, quote=True)}"' for k, v in attrs.items())


def build_arcs() -> tuple[ArcElement, ...]:
    return tuple(
        ArcElement(d=spec.d, stroke=entry.color, stroke_width=STROKE_WIDTH)
        for entry, spec in zip(SPECTRUM, arc_specs())
    )


def render_container(visibility: Visibility = Visibility.HIDDEN) -> RainbowContainer:
    opacity = 1 if visibility is Visibility.VISIBLE else 0
    return RainbowContainer(frame=canvas_frame(), children=build_arcs(), opacity=opacity)


class RainbowArc:
    """
    Rainbow component instance.

    Each mount gets its own fade-in state machine: it starts hidden, turns
    visible on the scheduler's next frame and never goes back. Unmounting
    before that frame cancels the pending trigger.
    """

    def __init__(self, scheduler: FrameScheduler):
        self.scheduler = scheduler
        self._children = build_arcs()
        self._frame = canvas_frame()
        self._fade: Optional[FadeInController] = None
        self._listeners: list[Callable[[RainbowContainer], None]] = []

    @property
    def visibility(self) -> Visibility:
        if self._fade is None:
            return Visibility.HIDDEN
        return self._fade.state

    @property
    def mounted(self) -> bool:
        return self._fade is not None and self._fade.mounted

    @property
    def pending(self) -> bool:
        return self._fade is not None and self._fade.pending

    def connect_changed(self, listener: Callable[[RainbowContainer], None]) -> None:
        self._listeners.append(listener)

    def mount(self) -> RainbowContainer:
        if self.mounted:
            return self.render()
        self._fade = FadeInController(self.scheduler, on_change=self._on_visibility_changed)
        container = self.render()
        self._fade.mount()
        logger.debug("Rainbow mounted (%d arcs, frame %s)", len(self._children), self._frame.view_box)
        return container

    def unmount(self) -> None:
        if self._fade is None:
            return
        self._fade.unmount()
        logger.debug("Rainbow unmounted in state %s", self._fade.state.value)

    def render(self) -> RainbowContainer:
        opacity = self._fade.opacity if self._fade is not None else 0
        return RainbowContainer(frame=self._frame, children=self._children, opacity=opacity)

    def _on_visibility_changed(self, _state: Visibility) -> None:
        container = self.render()
        for listener in list(self._listeners):
            listener(container)
