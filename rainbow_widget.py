import gi

gi.require_version('Gtk', '4.0')
from gi.repository import Gtk
import cairo
import logging
import math

from frame_schedulers import make_scheduler, TRIGGER_FRAME
from rainbow import RainbowArc, ARIA_LABEL
from spectrum import SPECTRUM, arc_specs, canvas_frame, hex_to_rgb_float

logger = logging.getLogger(__name__)

CSS_CLASS = "rainbow-arc"
HIDDEN_CSS_CLASS = "rainbow-hidden"


class RainbowArcWidget(Gtk.DrawingArea):
    """
    Seven concentric arcs drawn with cairo, fading in once after being shown.

    Opacity is driven by CSS so the 1s transition in ui_config applies; the
    widget only toggles the hidden class.
    """

    def __init__(self, fade_trigger=TRIGGER_FRAME, fade_delay_ms=16):
        super().__init__(accessible_role=Gtk.AccessibleRole.IMG)
        self.frame = canvas_frame()
        self.set_content_width(self.frame.width)
        self.set_content_height(self.frame.height)
        self.set_halign(Gtk.Align.CENTER)
        self.set_valign(Gtk.Align.START)
        self.add_css_class(CSS_CLASS)
        self.add_css_class(HIDDEN_CSS_CLASS)
        self.update_property([Gtk.AccessibleProperty.LABEL], [ARIA_LABEL])
        self.set_draw_func(self._draw_callback, None)

        self.component = RainbowArc(make_scheduler(fade_trigger, self, fade_delay_ms))
        self.component.connect_changed(self._on_component_changed)
        self.connect("realize", self._on_realize)
        self.connect("unrealize", self._on_unrealize)

    def _on_realize(self, _widget):
        container = self.component.mount()
        self._apply_opacity(container.opacity)

    def _on_unrealize(self, _widget):
        self.component.unmount()
        self._apply_opacity(0)

    def _on_component_changed(self, container):
        self._apply_opacity(container.opacity)

    def _apply_opacity(self, opacity):
        if opacity:
            self.remove_css_class(HIDDEN_CSS_CLASS)
        else:
            self.add_css_class(HIDDEN_CSS_CLASS)
        logger.debug("Rainbow widget opacity -> %s", opacity)

    def _draw_callback(self, area, cr, width, height, data=None):
        if width <= 0 or height <= 0:
            return
        # Fit the canvas frame into the allocation, centred, without distortion.
        scale = min(width / self.frame.width, height / self.frame.height)
        cr.translate((width - self.frame.width * scale) / 2.0, (height - self.frame.height * scale) / 2.0)
        cr.scale(scale, scale)
        cr.set_line_cap(cairo.LINE_CAP_BUTT)

        for entry, spec in zip(SPECTRUM, arc_specs()):
            cr.new_path()
            cr.set_source_rgb(*hex_to_rgb_float(entry.color))
            cr.set_line_width(spec.stroke_width)
            # pi -> 2pi runs clockwise through the top in y-down space.
            cr.arc(spec.center_x, spec.center_y, spec.radius, math.pi, 2 * math.pi)
            cr.stroke()
