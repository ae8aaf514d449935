"""
In-process backend: watches the system clipboard and restores entries onto it.

Text is read and written with pyperclip, images through the Qt clipboard.
Every change is kept in memory for the lifetime of the process and pushed
to subscribers as a wire dict.
"""

import logging
from datetime import datetime, timezone

import pyperclip as pc
from PyQt6.QtCore import QBuffer, QIODevice, QTimer
from PyQt6.QtGui import QImage
from PyQt6.QtWidgets import QApplication

from .backend import BackendGateway
from .errors import TransportFailure
from .models import ClipEntry, Image, Text, entry_to_wire

logger = logging.getLogger("clipview.backend")


def _image_to_png(image):
    buffer = QBuffer()
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    image.save(buffer, "PNG")
    return bytes(buffer.data())


class LocalClipboardBackend(BackendGateway):

    def __init__(self, poll_interval_ms=300, auto_paste=True, parent=None):
        super().__init__(parent)
        self.auto_paste = auto_paste
        self.captured = []
        self.last_seen = None
        self._read_failed = False
        self.keyboard_controller = None

        # Initial clipboard is not recorded
        self.last_seen = self.read_clipboard()

        # Clipboard monitor
        self.timer = QTimer(self)
        self.timer.timeout.connect(self.check_clipboard)
        self.timer.start(poll_interval_ms)

    def read_clipboard(self):
        try:
            current = pc.paste()
        except pc.PyperclipException as e:
            if not self._read_failed:
                logger.warning(f"⚠️ Clipboard read error: {e}")
                self._read_failed = True
            current = ""
        if current:
            return Text(current)

        clipboard = QApplication.clipboard()
        if clipboard is None:
            return None
        image = clipboard.image()
        if image.isNull():
            return None
        return Image(_image_to_png(image))

    def check_clipboard(self):
        current = self.read_clipboard()
        if current is None or current == self.last_seen:
            return

        self.last_seen = current
        wire = entry_to_wire(ClipEntry(current, datetime.now(timezone.utc)))
        self.captured.append(wire)
        logger.debug(f"Captured {type(current).__name__.lower()} clip #{len(self.captured)}")
        self.clip_received.emit(wire)

    def fetch_history(self):
        # Answer on the next event loop turn, like a remote call would
        snapshot = list(self.captured)
        QTimer.singleShot(0, lambda: self.history_loaded.emit(snapshot))

    def restore(self, entry):
        content = entry.content
        if isinstance(content, Text):
            try:
                pc.copy(content.text)
            except pc.PyperclipException as e:
                raise TransportFailure(f"Could not copy text to the clipboard: {e}") from e
        elif isinstance(content, Image):
            image = QImage.fromData(content.data, "PNG")
            clipboard = QApplication.clipboard()
            if image.isNull() or clipboard is None:
                raise TransportFailure("Could not place image on the clipboard")
            clipboard.setImage(image)
        else:
            raise TypeError(f"Unknown clipboard content: {content!r}")

        # Restored content is not a new capture. Images come back re-encoded
        # by Qt, so remember what the clipboard reports rather than our bytes.
        self.last_seen = content if isinstance(content, Text) else self.read_clipboard()

        if self.auto_paste:
            QTimer.singleShot(50, self._do_paste)

    def _do_paste(self):
        try:
            if self.keyboard_controller is None:
                from pynput.keyboard import Controller
                self.keyboard_controller = Controller()
            from pynput.keyboard import Key
            self.keyboard_controller.press(Key.ctrl_l)
            QTimer.singleShot(20, lambda: self.keyboard_controller.press('v'))
            QTimer.singleShot(40, lambda: self.keyboard_controller.release('v'))
            QTimer.singleShot(60, lambda: self.keyboard_controller.release(Key.ctrl_l))
        except Exception as e:
            logger.warning(f"⚠️ Auto-paste failed: {e}")

    def stop(self):
        self.timer.stop()
