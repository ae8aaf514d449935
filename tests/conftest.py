import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtCore import QBuffer, QIODevice
from PyQt6.QtGui import QColor, QImage
from PyQt6.QtWidgets import QApplication

from clipview.backend import BackendGateway
from clipview.errors import TransportFailure


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def png_bytes(qapp):
    """A tiny 4x3 red PNG"""
    image = QImage(4, 3, QImage.Format.Format_RGBA8888)
    image.fill(QColor("red"))
    buffer = QBuffer()
    buffer.open(QIODevice.OpenModeFlag.WriteOnly)
    image.save(buffer, "PNG")
    return bytes(buffer.data())


class FakeGateway(BackendGateway):
    """Gateway whose history fetch is resolved by the test"""

    def __init__(self):
        super().__init__()
        self.fetch_calls = 0
        self.restored = []
        self.fail_restore = False
        self.events = []

    def fetch_history(self):
        self.fetch_calls += 1
        self.events.append("fetch")

    def subscribe(self, event_name, handler):
        self.events.append(f"subscribe:{event_name}")
        return super().subscribe(event_name, handler)

    def resolve(self, payloads):
        self.history_loaded.emit(list(payloads))

    def fail(self, message="backend unreachable"):
        self.history_failed.emit(TransportFailure(message))

    def push(self, payload):
        self.clip_received.emit(payload)

    def restore(self, entry):
        if self.fail_restore:
            raise TransportFailure("backend unreachable")
        self.restored.append(entry)


@pytest.fixture
def gateway(qapp):
    return FakeGateway()
