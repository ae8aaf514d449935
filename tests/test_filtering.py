"""Tests for search filtering of the history view."""

from clipview.filtering import view
from clipview.history import HistoryStore
from clipview.models import ClipEntry


class TestView:
    def test_empty_needle_reverses_append_order(self):
        store = HistoryStore()
        entries = [ClipEntry.text(f"clip {i}") for i in range(6)]
        for e in entries:
            store.append(e)
        assert view(store.snapshot(), "") == tuple(reversed(entries))

    def test_seed_then_append(self):
        e1, e2, e3 = (ClipEntry.text(s) for s in ("e1", "e2", "e3"))
        store = HistoryStore()
        store.seed([e1, e2])
        store.append(e3)
        assert view(store.snapshot(), "") == (e3, e2, e1)

    def test_case_insensitive(self):
        entry = ClipEntry.text("Hello World")
        assert view([entry], "hello") == (entry,)
        assert view([entry], "WORLD") == (entry,)

    def test_non_matching_is_dropped(self):
        assert view([ClipEntry.text("Hello")], "bye") == ()

    def test_image_matches_on_lowercased_base64(self):
        # base64 of b"ABC" is "QUJD"; both sides are lowercased before matching
        image = ClipEntry.image(b"ABC")
        assert view([image], "qujd") == (image,)
        assert view([image], "QuJd") == (image,)
        assert view([image], "qubc") == ()

    def test_tag_participates_in_search(self):
        text = ClipEntry.text("abc")
        image = ClipEntry.image(b"ABC")
        assert view([text, image], "text") == (text,)
        assert view([text, image], "imagebase64") == (image,)

    def test_idempotent(self):
        log = (ClipEntry.text("alpha"), ClipEntry.text("beta"), ClipEntry.image(b"ABC"))
        assert view(log, "a") == view(log, "a")

    def test_does_not_mutate_input(self):
        log = [ClipEntry.text("a"), ClipEntry.text("b")]
        view(log, "")
        assert [e.content.text for e in log] == ["a", "b"]

    def test_whitespace_is_not_normalized_for_search(self):
        entry = ClipEntry.text("a\n\nb")
        assert view([entry], "a b") == ()
