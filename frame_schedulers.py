import logging

import gi

gi.require_version('Gtk', '4.0')
from gi.repository import Gtk, GLib

from fade_in import PendingFrame

logger = logging.getLogger(__name__)

TRIGGER_FRAME = "frame"
TRIGGER_TIMEOUT = "timeout"


class TickCallbackScheduler:
    """Runs the callback on the widget's next frame-clock tick."""

    def __init__(self, widget: Gtk.Widget):
        self.widget = widget

    def request(self, callback):
        handle = PendingFrame(callback)

        def _tick(_widget, _frame_clock):
            handle.fire()
            return GLib.SOURCE_REMOVE

        tick_id = self.widget.add_tick_callback(_tick)
        handle.attach(lambda: self.widget.remove_tick_callback(tick_id))
        return handle


class TimeoutScheduler:
    def __init__(self, delay_ms=16):
        self.delay_ms = max(0, int(delay_ms))

    def request(self, callback):
        handle = PendingFrame(callback)

        def _timeout():
            handle.fire()
            return False

        source_id = GLib.timeout_add(self.delay_ms, _timeout)
        handle.attach(lambda: GLib.source_remove(source_id))
        return handle


def make_scheduler(kind, widget, delay_ms=16):
    if kind == TRIGGER_TIMEOUT:
        return TimeoutScheduler(delay_ms)
    if kind != TRIGGER_FRAME:
        logger.warning("Unknown fade trigger %r, using frame clock", kind)
    return TickCallbackScheduler(widget)
