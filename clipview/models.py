"""
Clipboard entry model and its wire representation.

An entry crosses the backend boundary as

    {"content": {"Text": "..."}, "ts": "2024-01-01T12:00:00Z"}
    {"content": {"ImageBase64": "iVBORw0..."}, "ts": "..."}

with exactly one of the two content keys present.
"""

import base64
import binascii
import json
from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Union

from .errors import MalformedPayload

TEXT_KEY = "Text"
IMAGE_KEY = "ImageBase64"


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Image:
    """Raw PNG bytes"""
    data: bytes

    @property
    def base64(self):
        return base64.b64encode(self.data).decode("ascii")


Content = Union[Text, Image]


@dataclass(frozen=True)
class ClipEntry:
    content: Content
    ts: Optional[datetime] = None

    @classmethod
    def text(cls, text, ts=None):
        return cls(Text(text), ts)

    @classmethod
    def image(cls, data, ts=None):
        return cls(Image(data), ts)


def content_to_wire(content: Content) -> dict:
    if isinstance(content, Text):
        return {TEXT_KEY: content.text}
    if isinstance(content, Image):
        return {IMAGE_KEY: content.base64}
    raise TypeError(f"Unknown clipboard content: {content!r}")


def content_from_wire(raw) -> Content:
    if not isinstance(raw, dict):
        raise MalformedPayload(f"content must be an object, got {type(raw).__name__}")

    has_text = TEXT_KEY in raw
    has_image = IMAGE_KEY in raw
    if has_text == has_image:
        raise MalformedPayload(
            f"content must carry exactly one of {TEXT_KEY!r} or {IMAGE_KEY!r}, got {sorted(raw)}"
        )

    if has_text:
        value = raw[TEXT_KEY]
        if not isinstance(value, str):
            raise MalformedPayload(f"{TEXT_KEY} payload must be a string")
        return Text(value)

    value = raw[IMAGE_KEY]
    if not isinstance(value, str):
        raise MalformedPayload(f"{IMAGE_KEY} payload must be a string")
    try:
        return Image(base64.b64decode(value, validate=True))
    except (binascii.Error, ValueError) as e:
        raise MalformedPayload(f"{IMAGE_KEY} payload is not valid base64: {e}") from e


def _parse_ts(raw):
    if not isinstance(raw, str):
        return None
    # fromisoformat() on older interpreters rejects the trailing Z
    if raw.endswith("Z"):
        raw = raw[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(raw)
    except ValueError:
        return None


def entry_from_wire(raw) -> ClipEntry:
    """Decode one wire entry, raising MalformedPayload when it is not valid"""
    if not isinstance(raw, dict) or "content" not in raw:
        raise MalformedPayload(f"entry must be an object with a 'content' key, got {raw!r:.80}")
    return ClipEntry(content_from_wire(raw["content"]), _parse_ts(raw.get("ts")))


def entry_to_wire(entry: ClipEntry) -> dict:
    wire = {"content": content_to_wire(entry.content)}
    if entry.ts is not None:
        wire["ts"] = entry.ts.isoformat()
    return wire


def searchable_text(entry: ClipEntry) -> str:
    """
    Structural string form of the entry's content used for filtering.

    Both the variant tag and the payload are part of it, so a needle of
    "text" matches every text entry and image entries match on their
    base64 encoding.
    """
    return json.dumps(content_to_wire(entry.content), ensure_ascii=False, separators=(",", ":"))
