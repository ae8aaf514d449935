"""Search filtering for the clipboard history view"""

from .models import searchable_text


def view(log, needle):
    """
    Return the log newest first, keeping only entries whose searchable
    text contains needle (case-insensitive). An empty needle keeps all.
    """
    newest_first = tuple(reversed(tuple(log)))
    if not needle:
        return newest_first

    needle = needle.lower()
    return tuple(e for e in newest_first if needle in searchable_text(e).lower())
