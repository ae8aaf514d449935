"""
Wires the backend gateway, the history store and the window together.

Startup order matters: the filter input is connected first, then the
window is placed, then the bulk history fetch is issued, and only then is
the live "clip" stream subscribed. The fetch answers asynchronously, so
live clips can arrive before it does; they are appended as usual and then
replaced when the bulk history seeds the store.
"""

import logging

from PyQt6.QtCore import QObject, pyqtSignal

from .backend import CLIP_EVENT
from .errors import MalformedPayload, TransportFailure
from .filtering import view
from .history import HistoryStore
from .models import entry_from_wire

logger = logging.getLogger("clipview.controller")


class ClipboardController(QObject):
    restore_failed = pyqtSignal(object)

    def __init__(self, gateway, window, hide_on_restore=True, parent=None):
        super().__init__(parent)
        self.gateway = gateway
        self.window = window
        self.hide_on_restore = hide_on_restore
        self.store = HistoryStore()
        self.search_term = ""
        self.seeded = False
        self._unsubscribe = None

    def start(self):
        self.window.search_box.textChanged.connect(self.on_search_changed)
        self.window.activated.connect(self.restore)

        self.window.position_near_cursor()

        self.gateway.history_loaded.connect(self.on_history_loaded)
        self.gateway.history_failed.connect(self.on_history_failed)
        self.gateway.fetch_history()

        self._unsubscribe = self.gateway.subscribe(CLIP_EVENT, self.on_clip)
        self.render()

    def stop(self):
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None

    def _decode(self, raw):
        try:
            return entry_from_wire(raw)
        except MalformedPayload as e:
            logger.warning(f"⚠️ Skipping malformed clipboard entry: {e}")
            return None

    def on_history_loaded(self, payloads):
        entries = [e for e in map(self._decode, payloads) if e is not None]

        if not self.seeded and len(self.store):
            logger.warning(
                f"⚠️ {len(self.store)} live clip(s) received before the history "
                f"finished loading were replaced by it"
            )

        self.store.seed(entries)
        self.seeded = True
        logger.info(f"Loaded {len(entries)} clipboard entries")
        self.render()

    def on_history_failed(self, error):
        logger.error(f"❌ Could not load clipboard history: {error}")

    def on_clip(self, raw):
        entry = self._decode(raw)
        if entry is None:
            return
        self.store.append(entry)
        self.render()

    def on_search_changed(self, text):
        self.search_term = text
        self.render()

    def render(self):
        total = len(self.store)
        rows = view(self.store.snapshot(), self.search_term)
        empty_message = "No matches" if self.search_term and total else "No clipboard history yet"
        self.window.pipeline.render(rows, self.restore, empty_message)
        self.window.set_counts(len(rows), total)

    def restore(self, entry):
        try:
            self.gateway.restore(entry)
        except TransportFailure as e:
            logger.error(f"❌ Restore failed: {e}")
            self.restore_failed.emit(e)
            return

        logger.debug(f"Restored {type(entry.content).__name__.lower()} entry")
        if self.hide_on_restore:
            self.window.hide()
