"""
Clipboard history window - Qt6
Frameless, draggable, always on top, with the filter input above the list.
"""

from PyQt6.QtCore import QPoint, Qt, pyqtSignal
from PyQt6.QtGui import QCursor, QFont
from PyQt6.QtWidgets import (QApplication, QFrame, QHBoxLayout, QLabel,
                             QLineEdit, QMainWindow, QPushButton, QScrollArea,
                             QVBoxLayout, QWidget)

from .render import RenderPipeline

WINDOW_STYLE = """
    QWidget#container { background: white; border: 1px solid #e0e0e0; border-radius: 8px; }
    QFrame#header { border-bottom: 1px solid #e0e0e0; }
    QFrame#footer { border-top: 1px solid #e0e0e0; }
    QLabel#title { color: #1f1f1f; }
    QLabel#info { color: #707070; }
    QPushButton#close { background: transparent; border: none; color: #707070; }
    QPushButton#close:hover { color: #d32f2f; }
    QLineEdit#filter { background: #f5f5f5; border: none; border-radius: 6px; padding: 8px 12px; }
    QScrollArea, QWidget#list { background: white; border: none; }
"""


class ClipboardUI(QMainWindow):
    """Clipboard history window: filter input, row list and a counter footer"""
    activated = pyqtSignal(object)

    def __init__(self, width=450, height=550):
        super().__init__()
        self.drag_position = QPoint()

        self.setWindowFlags(Qt.WindowType.FramelessWindowHint |
                            Qt.WindowType.WindowStaysOnTopHint |
                            Qt.WindowType.Tool)
        self.setAttribute(Qt.WidgetAttribute.WA_TranslucentBackground)

        self.setup_ui()
        self.setFixedSize(width, height)

    def _bar(self, name, height):
        bar = QFrame()
        bar.setObjectName(name)
        bar.setFixedHeight(height)
        bar_layout = QHBoxLayout(bar)
        bar_layout.setContentsMargins(15, 0, 15, 0)
        return bar, bar_layout

    def setup_ui(self):
        container = QWidget()
        container.setObjectName("container")
        container.setStyleSheet(WINDOW_STYLE)
        self.setCentralWidget(container)

        layout = QVBoxLayout(container)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        # Header (draggable)
        self.header, header_layout = self._bar("header", 50)
        title = QLabel("📋 Clipboard")
        title.setObjectName("title")
        title.setFont(QFont("Ubuntu", 11, QFont.Weight.Bold))
        header_layout.addWidget(title)
        header_layout.addStretch()

        close_btn = QPushButton("✕")
        close_btn.setObjectName("close")
        close_btn.setFixedSize(32, 32)
        close_btn.clicked.connect(self.hide)
        header_layout.addWidget(close_btn)
        layout.addWidget(self.header)

        self.search_box = QLineEdit()
        self.search_box.setObjectName("filter")
        self.search_box.setPlaceholderText("🔍 Search clipboard...")
        self.search_box.setFont(QFont("Ubuntu", 10))
        search_row = QVBoxLayout()
        search_row.setContentsMargins(15, 10, 15, 10)
        search_row.addWidget(self.search_box)
        layout.addLayout(search_row)

        # Rows are inserted above the trailing stretch
        self.scroll_widget = QWidget()
        self.scroll_widget.setObjectName("list")
        self.scroll_layout = QVBoxLayout(self.scroll_widget)
        self.scroll_layout.setContentsMargins(15, 5, 15, 5)
        self.scroll_layout.setSpacing(4)
        self.scroll_layout.addStretch()

        self.scroll_area = QScrollArea()
        self.scroll_area.setWidgetResizable(True)
        self.scroll_area.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll_area.setWidget(self.scroll_widget)
        layout.addWidget(self.scroll_area)

        self.pipeline = RenderPipeline(self.scroll_layout)

        footer, footer_layout = self._bar("footer", 35)
        self.info = QLabel()
        self.info.setObjectName("info")
        self.info.setFont(QFont("Ubuntu", 8))
        footer_layout.addWidget(self.info)
        layout.addWidget(footer)
        self.set_counts(0, 0)

    def set_counts(self, shown, total):
        if shown == total:
            counts = f"{total} items"
        else:
            counts = f"{shown} of {total} items"
        self.info.setText(f"{counts} • ↑↓ Enter Esc")

    def select_item(self, index):
        item = self.pipeline.select(index)
        if item is not None:
            self.scroll_area.ensureWidgetVisible(item)

    def position_near_cursor(self):
        cursor_pos = QCursor.pos()
        screen = QApplication.primaryScreen()
        if screen is None:
            return
        geometry = screen.geometry()

        x = max(0, min(cursor_pos.x() - self.width() // 2, geometry.width() - self.width()))
        y = max(0, min(cursor_pos.y() + 20, geometry.height() - self.height()))

        self.move(x, y)

    def toggle(self):
        if self.isVisible():
            self.hide()
        else:
            self.position_near_cursor()
            self.show()
            self.activateWindow()
            self.raise_()
            self.search_box.setFocus()

    def mousePressEvent(self, event):
        if event.button() == Qt.MouseButton.LeftButton:
            if self.header.geometry().contains(event.pos()):
                self.drag_position = event.globalPosition().toPoint() - self.frameGeometry().topLeft()
                event.accept()

    def mouseMoveEvent(self, event):
        if event.buttons() == Qt.MouseButton.LeftButton and not self.drag_position.isNull():
            self.move(event.globalPosition().toPoint() - self.drag_position)
            event.accept()

    def keyPressEvent(self, event):
        rows = self.pipeline.rows
        selected = self.pipeline.selected_index

        if event.key() == Qt.Key.Key_Down and rows:
            self.select_item(min(selected + 1, len(rows) - 1))
        elif event.key() == Qt.Key.Key_Up and rows:
            self.select_item(max(selected - 1, 0))
        elif event.key() in (Qt.Key.Key_Return, Qt.Key.Key_Enter) and rows:
            item = self.pipeline.selected()
            if item is not None:
                self.activated.emit(item.entry)
        elif event.key() == Qt.Key.Key_Escape:
            self.hide()
        else:
            super().keyPressEvent(event)
