import logging

import gi
gi.require_version('Gtk', '4.0')
gi.require_version('Adw', '1')
from gi.repository import Gtk, Adw, GLib, Gdk

import ui_config
from app_errors import classify_exception, user_message
from app_logging import setup_logging
from app_settings import default_settings_path, load_settings, save_settings as persist_settings
from rainbow_widget import RainbowArcWidget

logger = logging.getLogger(__name__)


class RainbowApp(Adw.Application):
    def __init__(self, settings_file=None):
        super().__init__(application_id="com.example.rainbowarc")
        GLib.set_application_name("Rainbow")
        self.settings_file = settings_file or default_settings_path()
        self.settings = load_settings(self.settings_file)
        self.win = None
        self.rainbow = None

    def do_activate(self):
        if self.win is not None:
            self.win.present()
            return

        provider = Gtk.CssProvider()
        provider.load_from_data(ui_config.CSS_DATA.encode())
        Gtk.StyleContext.add_provider_for_display(Gdk.Display.get_default(), provider, Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION)

        self.win = Adw.ApplicationWindow(
            application=self,
            title=self.settings["heading"],
            default_width=self.settings["window_width"],
            default_height=self.settings["window_height"],
        )

        page = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=ui_config.HEADING_SPACING)
        page.add_css_class("page")
        heading = Gtk.Label(label=self.settings["heading"])
        heading.add_css_class("page-heading")
        page.append(heading)

        self.rainbow = RainbowArcWidget(
            fade_trigger=self.settings["fade_trigger"],
            fade_delay_ms=self.settings["fade_delay_ms"],
        )
        page.append(self.rainbow)
        self.win.set_content(page)
        logger.info("Showing rainbow window (trigger=%s)", self.settings["fade_trigger"])
        self.win.present()

    def do_shutdown(self):
        try:
            persist_settings(self.settings_file, self.settings)
        except OSError as e:
            logger.warning("%s (%s)", user_message(classify_exception(e), "settings"), e)
        super().do_shutdown()


if __name__ == "__main__":
    setup_logging()
    RainbowApp().run(None)
