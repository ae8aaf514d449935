"""
Row widgets for the clipboard list.

RenderPipeline rebuilds the whole list on every call; each row keeps a
reference to the entry it was built from and hands that entry to the
restore callback when clicked.
"""

import logging
import re

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QCursor, QFont, QPixmap
from PyQt6.QtWidgets import QFrame, QLabel, QVBoxLayout

from .models import Image, Text

logger = logging.getLogger("clipview.render")

PREVIEW_LENGTH = 80
TEXT_ROW_HEIGHT = 70
IMAGE_ROW_HEIGHT = 130
IMAGE_MAX_HEIGHT = 96

_WHITESPACE = re.compile(r"\s+")


def display_text(text):
    """Collapse whitespace runs to a single space and trim the ends"""
    return _WHITESPACE.sub(" ", text).strip()


def text_kind(text):
    if text.startswith(('http://', 'https://')):
        return "🔗 Link"
    elif text.replace('.', '').replace('-', '').isdigit():
        return "🔢 Number"
    elif '\n' in text:
        return f"📄 {len(text.split())} words"
    return "📝 Text"


def _timestamp_suffix(entry):
    if entry.ts is None:
        return ""
    return " • " + entry.ts.astimezone().strftime("%H:%M:%S")


class ClipboardItem(QFrame):
    """Individual clipboard row widget"""
    clicked = pyqtSignal(object)

    def __init__(self, entry, parent=None):
        super().__init__(parent)
        self.entry = entry
        self.is_selected = False

        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setStyleSheet("QFrame { background: white; border-radius: 4px; }")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 10, 12, 10)
        layout.setSpacing(4)

        content = entry.content
        if isinstance(content, Text):
            self._build_text(layout, content)
        elif isinstance(content, Image):
            self._build_image(layout, content)
        else:
            raise TypeError(f"Unknown clipboard content: {content!r}")

        self.type_label.setText(self.type_label.text() + _timestamp_suffix(entry))
        self.type_label.setFont(QFont("Ubuntu", 8))
        self.type_label.setStyleSheet("color: #707070;")
        layout.addWidget(self.type_label)

    def _build_text(self, layout, content):
        self.setFixedHeight(TEXT_ROW_HEIGHT)

        self.preview = display_text(content.text)
        shown = self.preview
        if len(shown) > PREVIEW_LENGTH:
            shown = shown[:PREVIEW_LENGTH] + '...'

        self.text_label = QLabel(shown)
        self.text_label.setFont(QFont("Ubuntu", 10))
        self.text_label.setStyleSheet("color: #1f1f1f;")
        self.text_label.setTextFormat(Qt.TextFormat.PlainText)
        layout.addWidget(self.text_label)

        self.type_label = QLabel(text_kind(content.text))

    def _build_image(self, layout, content):
        self.setFixedHeight(IMAGE_ROW_HEIGHT)
        self.preview = None

        pixmap = QPixmap()
        self.text_label = QLabel()
        if pixmap.loadFromData(content.data, "PNG"):
            if pixmap.height() > IMAGE_MAX_HEIGHT:
                pixmap = pixmap.scaledToHeight(
                    IMAGE_MAX_HEIGHT, Qt.TransformationMode.SmoothTransformation
                )
            self.text_label.setPixmap(pixmap)
            self.type_label = QLabel(f"🖼️ Image {pixmap.width()}×{pixmap.height()}")
        else:
            # Undecodable payloads only lose their own preview
            logger.warning(f"Could not decode image payload ({len(content.data)} bytes)")
            self.text_label.setText("⚠️ Image unavailable")
            self.text_label.setStyleSheet("color: #d32f2f;")
            self.type_label = QLabel("🖼️ Image")
        layout.addWidget(self.text_label)

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            self.clicked.emit(self.entry)

    def enterEvent(self, event):
        if not self.is_selected:
            self.setStyleSheet("QFrame { background: #f3f3f3; border-radius: 4px; }")

    def leaveEvent(self, event):
        if not self.is_selected:
            self.setStyleSheet("QFrame { background: white; border-radius: 4px; }")

    def set_selected(self, selected):
        self.is_selected = selected
        if selected:
            self.setStyleSheet("QFrame { background: #8fa876; border-radius: 4px; }")
            self.text_label.setStyleSheet("color: white;")
            self.type_label.setStyleSheet("color: white;")
        else:
            self.setStyleSheet("QFrame { background: white; border-radius: 4px; }")
            self.text_label.setStyleSheet("color: #1f1f1f;")
            self.type_label.setStyleSheet("color: #707070;")


class RenderPipeline:
    """Builds ClipboardItem rows into a vertical layout that ends in a stretch"""

    def __init__(self, layout):
        self.layout = layout
        self.widgets = []
        self.selected_index = 0

    @property
    def rows(self):
        return [w for w in self.widgets if isinstance(w, ClipboardItem)]

    def clear(self):
        for widget in self.widgets:
            self.layout.removeWidget(widget)
            widget.hide()
            widget.deleteLater()
        self.widgets.clear()

    def render(self, rows, on_restore, empty_message="No clipboard history yet"):
        self.clear()

        if not rows:
            empty = QLabel(empty_message)
            empty.setAlignment(Qt.AlignmentFlag.AlignCenter)
            empty.setFont(QFont("Ubuntu", 10))
            empty.setStyleSheet("color: #707070; padding: 50px;")
            self.layout.insertWidget(0, empty)
            self.widgets.append(empty)
            return

        for i, entry in enumerate(rows):
            item = ClipboardItem(entry)
            item.clicked.connect(on_restore)
            self.layout.insertWidget(i, item)
            self.widgets.append(item)

        self.select(0)

    def select(self, index):
        rows = self.rows
        if not rows or index < 0 or index >= len(rows):
            return None

        for item in rows:
            item.set_selected(False)

        rows[index].set_selected(True)
        self.selected_index = index
        return rows[index]

    def selected(self):
        rows = self.rows
        if 0 <= self.selected_index < len(rows):
            return rows[self.selected_index]
        return None
