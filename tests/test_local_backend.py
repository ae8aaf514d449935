"""Tests for the in-process clipboard backend with pyperclip stubbed out."""

import pyperclip
import pytest
from PyQt6.QtGui import QColor, QImage
from PyQt6.QtWidgets import QApplication

from clipview import local_backend
from clipview.errors import TransportFailure
from clipview.local_backend import LocalClipboardBackend
from clipview.models import ClipEntry, Text, entry_from_wire


class FakeClipboard:
    def __init__(self, text=""):
        self.text = text
        self.fail = False

    def paste(self):
        if self.fail:
            raise pyperclip.PyperclipException("no clipboard mechanism")
        return self.text

    def copy(self, text):
        if self.fail:
            raise pyperclip.PyperclipException("no clipboard mechanism")
        self.text = text


@pytest.fixture
def clipboard(monkeypatch):
    fake = FakeClipboard("present at startup")
    monkeypatch.setattr(local_backend.pc, "paste", fake.paste)
    monkeypatch.setattr(local_backend.pc, "copy", fake.copy)
    return fake


@pytest.fixture
def backend(qapp, clipboard):
    b = LocalClipboardBackend(poll_interval_ms=10_000, auto_paste=False)
    yield b
    b.stop()


class TestCapture:
    def test_startup_content_is_not_recorded(self, backend):
        backend.check_clipboard()
        assert backend.captured == []

    def test_change_is_pushed(self, backend, clipboard):
        received = []
        backend.subscribe("clip", received.append)

        clipboard.text = "new text"
        backend.check_clipboard()
        backend.check_clipboard()

        assert len(received) == 1
        entry = entry_from_wire(received[0])
        assert entry.content == Text("new text")
        assert entry.ts is not None

    def test_repeated_copies_are_not_deduplicated(self, backend, clipboard):
        for value in ("a", "b", "a"):
            clipboard.text = value
            backend.check_clipboard()
        assert [w["content"]["Text"] for w in backend.captured] == ["a", "b", "a"]

    def test_read_errors_are_tolerated(self, backend, clipboard):
        clipboard.fail = True
        backend.check_clipboard()
        assert backend.captured == []


class TestFetchHistory:
    def test_answers_asynchronously(self, qapp, backend, clipboard):
        clipboard.text = "first"
        backend.check_clipboard()

        loaded = []
        backend.history_loaded.connect(loaded.append)
        backend.fetch_history()
        assert loaded == []

        qapp.processEvents()
        assert loaded == [[{"content": {"Text": "first"}, "ts": backend.captured[0]["ts"]}]]


class TestRestore:
    def test_text_is_copied_and_not_recaptured(self, backend, clipboard):
        backend.restore(ClipEntry.text("restored"))
        assert clipboard.text == "restored"
        backend.check_clipboard()
        assert backend.captured == []

    def test_copy_failure_raises_transport_failure(self, backend, clipboard):
        clipboard.fail = True
        with pytest.raises(TransportFailure):
            backend.restore(ClipEntry.text("x"))

    def test_undecodable_image_raises_transport_failure(self, backend):
        with pytest.raises(TransportFailure):
            backend.restore(ClipEntry.image(b"not a png"))


@pytest.fixture
def red_image(qapp):
    image = QImage(4, 3, QImage.Format.Format_RGBA8888)
    image.fill(QColor("red"))
    yield image
    QApplication.clipboard().clear()


class TestImages:
    def test_image_is_captured_as_png(self, backend, clipboard, red_image):
        clipboard.text = ""
        QApplication.clipboard().setImage(red_image)
        backend.check_clipboard()

        assert len(backend.captured) == 1
        assert list(backend.captured[0]["content"]) == ["ImageBase64"]
        entry = entry_from_wire(backend.captured[0])
        decoded = QImage.fromData(entry.content.data, "PNG")
        assert (decoded.width(), decoded.height()) == (4, 3)

    def test_restored_image_is_not_recaptured(self, backend, clipboard, red_image):
        clipboard.text = ""
        QApplication.clipboard().setImage(red_image)
        backend.check_clipboard()
        entry = entry_from_wire(backend.captured[0])

        backend.restore(entry)
        restored = QApplication.clipboard().image()
        assert not restored.isNull()
        backend.check_clipboard()
        assert len(backend.captured) == 1

    def test_text_wins_over_image(self, backend, clipboard, red_image):
        QApplication.clipboard().setImage(red_image)
        clipboard.text = "copied text"
        backend.check_clipboard()
        assert [list(w["content"]) for w in backend.captured] == [["Text"]]
