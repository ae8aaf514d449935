"""Exceptions raised by the clipboard history viewer"""


class ClipviewError(Exception):
    """Base class for all clipview errors"""


class TransportFailure(ClipviewError):
    """A call into the backend (history fetch or restore) failed"""


class MalformedPayload(ClipviewError, ValueError):
    """A wire entry matches neither or both content variants"""
