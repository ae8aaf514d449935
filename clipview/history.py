"""In-memory clipboard history log"""


class HistoryStore:
    """
    Append-only log of clipboard entries, oldest first.

    Seeded once from the backend's bulk history and then grown one entry
    at a time from the live push stream. No size bound is applied.
    """

    def __init__(self):
        self._entries = []

    def seed(self, entries):
        # Replace, never merge: a second seed discards everything before it
        self._entries = list(entries)

    def append(self, entry):
        self._entries.append(entry)

    def snapshot(self):
        """Immutable copy of the current contents, unaffected by later appends"""
        return tuple(self._entries)

    def __len__(self):
        return len(self._entries)
