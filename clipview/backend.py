"""
Backend gateway interface.

The backend owns the clipboard log. The viewer talks to it through three
operations: a one-shot asynchronous history fetch, a "clip" push stream
and a fire-and-forget restore. Results and pushed entries travel as wire
dicts (see clipview.models) through Qt signals.
"""

from PyQt6.QtCore import QObject, pyqtSignal

CLIP_EVENT = "clip"


class BackendGateway(QObject):
    history_loaded = pyqtSignal(list)
    history_failed = pyqtSignal(object)
    clip_received = pyqtSignal(object)

    def fetch_history(self):
        """Start loading the full history; answers on history_loaded or history_failed"""
        raise NotImplementedError

    def restore(self, entry):
        """Put entry back on the system clipboard, raising TransportFailure on error"""
        raise NotImplementedError

    def subscribe(self, event_name, handler):
        """Connect handler to a push stream and return a callable that disconnects it"""
        if event_name != CLIP_EVENT:
            raise ValueError(f"Unknown backend event: {event_name!r}")

        self.clip_received.connect(handler)

        def unsubscribe():
            try:
                self.clip_received.disconnect(handler)
            except TypeError:
                # already disconnected
                pass

        return unsubscribe

    def stop(self):
        pass
