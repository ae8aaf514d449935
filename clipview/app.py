"""
Clipboard history viewer - Qt6 application entry point
"""

import argparse
import logging
import signal
import sys

from PyQt6.QtCore import QTimer
from PyQt6.QtWidgets import QApplication

from .config import config_path, load_config, save_config
from .controller import ClipboardController
from .local_backend import LocalClipboardBackend
from .logger import configure_logging
from .ui import ClipboardUI

logger = logging.getLogger("clipview.app")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="clipview", description="Searchable clipboard history")
    parser.add_argument("--config", help="settings file (default: ~/.clipview_config.json)")
    parser.add_argument("--log-level", help="override the configured log level")
    parser.add_argument("--hidden", action="store_true", help="start without showing the window")
    return parser.parse_args(argv)


class ClipboardApp:
    def __init__(self, settings):
        self.settings = settings
        self.backend = LocalClipboardBackend(
            poll_interval_ms=settings.poll_interval_ms,
            auto_paste=settings.auto_paste,
        )
        self.window = ClipboardUI(settings.window_width, settings.window_height)
        self.controller = ClipboardController(
            self.backend, self.window, hide_on_restore=settings.hide_on_restore
        )
        self.hotkey_listener = None

        # Global hotkeys (set a flag from the pynput thread, handled on the Qt thread)
        self.needs_toggle = False
        self.hotkey_timer = QTimer()
        self.hotkey_timer.timeout.connect(self.check_hotkeys)

    def _request_toggle(self):
        self.needs_toggle = True

    def start_hotkeys(self):
        try:
            from pynput import keyboard as pynput_kb
            self.hotkey_listener = pynput_kb.GlobalHotKeys({
                self.settings.show_hotkey: self._request_toggle,
            })
            self.hotkey_listener.start()
        except Exception as e:
            logger.warning(f"⚠️ Hotkey error: {e}")
            return
        self.hotkey_timer.start(50)

    def check_hotkeys(self):
        if self.needs_toggle:
            self.needs_toggle = False
            self.window.toggle()

    def start(self, hidden=False):
        self.controller.start()
        self.start_hotkeys()
        print("🚀 Clipboard History Started (Qt6)")
        print(f"   {self.settings.show_hotkey} - Show history")
        if not hidden:
            self.window.show()
            self.window.activateWindow()
            self.window.raise_()

    def stop(self):
        self.hotkey_timer.stop()
        if self.hotkey_listener is not None:
            self.hotkey_listener.stop()
        self.controller.stop()
        self.backend.stop()


def install_sigint_handler(app):
    """Quit the event loop on Ctrl+C instead of raising inside a Qt slot"""
    def _quit(*_):
        print("\n👋 Stopped")
        QTimer.singleShot(0, app.quit)

    signal.signal(signal.SIGINT, _quit)


def main(argv=None):
    args = parse_args(argv)
    path = config_path(args.config)
    settings = load_config(path)
    configure_logging(args.log_level or settings.log_level, settings.log_file)

    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')
    app.setQuitOnLastWindowClosed(False)
    install_sigint_handler(app)

    clip_app = ClipboardApp(settings)
    clip_app.start(hidden=args.hidden)

    try:
        code = app.exec()
    finally:
        clip_app.stop()
        save_config(settings, path)
    return code


if __name__ == "__main__":
    sys.exit(main())
