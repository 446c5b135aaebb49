"""Rotating log queue shown beneath the board.

Nothing is ever added or dropped; each tick moves the front entry to the
back so the strip appears to scroll.
"""
from collections import deque
from typing import Deque, Iterable, List, Optional
from models import LogEntry


class LogQueue:
    def __init__(self, entries: Optional[Iterable[LogEntry]] = None):
        self._entries: Deque[LogEntry] = deque(entries or ())

    @property
    def entries(self) -> List[LogEntry]:
        return list(self._entries)

    def front(self) -> Optional[LogEntry]:
        return self._entries[0] if self._entries else None

    def advance(self) -> None:
        """Move the first entry to the end. No-op when empty."""
        if self._entries:
            self._entries.rotate(-1)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)
