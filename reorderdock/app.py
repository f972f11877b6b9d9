"""Application entry point -- shows a demo dock and runs the GTK main loop."""

from __future__ import annotations

import faulthandler
import signal

# Print Python traceback on SIGSEGV/SIGABRT/SIGFPE to stderr.
faulthandler.enable()

import gi

gi.require_version("Gtk", "3.0")
from gi.repository import GLib, Gtk  # noqa: E402

from reorderdock.core.config import Config
from reorderdock.log import get_logger
from reorderdock.ui.dock import Dock
from reorderdock.ui.tiles import tile_for

log = get_logger(name="app")

WINDOW_PADDING = 24


def build_window(config: Config) -> Gtk.Window:
    """Window with the configured items in a dock, centered."""
    window = Gtk.Window(title="Dock")
    dock = Dock(config.items, tile_for, config=config)
    dock.set_halign(Gtk.Align.CENTER)
    dock.set_valign(Gtk.Align.CENTER)
    window.set_border_width(WINDOW_PADDING)
    window.add(dock)
    window.connect("destroy", Gtk.main_quit)
    return window


def main() -> None:
    """Entry point for the demo application."""
    config = Config.load()
    log.info("starting with %d items (%s layout)", len(config.items), config.layout)
    window = build_window(config)

    # Graceful shutdown on SIGINT/SIGTERM
    GLib.unix_signal_add(GLib.PRIORITY_HIGH, signal.SIGINT, _quit)
    GLib.unix_signal_add(GLib.PRIORITY_HIGH, signal.SIGTERM, _quit)

    window.show_all()
    Gtk.main()


def _quit() -> bool:
    Gtk.main_quit()
    return False
