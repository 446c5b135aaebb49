"""Data models for the terminal Kanban board.

Items carry their status as a field; the three columns on screen are filters
over one backing list, not separate containers. Internal status keys are
"todo", "up-next" and "in-progress"; headers render as "TO DO", "UP NEXT",
"IN PROGRESS".
"""
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Status(str, Enum):
    TODO = "todo"
    UP_NEXT = "up-next"
    IN_PROGRESS = "in-progress"


# Column order on screen (left to right).
STATUSES: Tuple[Status, ...] = (Status.TODO, Status.UP_NEXT, Status.IN_PROGRESS)

HEADER_TITLES: Dict[Status, str] = {
    Status.TODO: "TO DO",
    Status.UP_NEXT: "UP NEXT",
    Status.IN_PROGRESS: "IN PROGRESS",
}

_NEXT: Dict[Status, Status] = {
    Status.TODO: Status.UP_NEXT,
    Status.UP_NEXT: Status.IN_PROGRESS,
    Status.IN_PROGRESS: Status.TODO,
}

_PREV: Dict[Status, Status] = {
    Status.TODO: Status.IN_PROGRESS,
    Status.IN_PROGRESS: Status.UP_NEXT,
    Status.UP_NEXT: Status.TODO,
}


def next_status(status: Status) -> Status:
    """ToDo -> UpNext -> InProgress -> ToDo."""
    return _NEXT[status]


def prev_status(status: Status) -> Status:
    """Inverse of next_status."""
    return _PREV[status]


class Severity(str, Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


@dataclass
class Item:
    """A single work item.

    Fields:
        label: Short title shown on the first line of the card.
        weight: Number of detail lines drawn beneath the label (>= 1).
        status: Which column the item shows up in.
    """
    label: str
    weight: int = 1
    status: Status = Status.TODO

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Item(label={self.label}, weight={self.weight}, status={self.status.value})"


@dataclass(frozen=True)
class LogEntry:
    label: str
    severity: Severity = Severity.INFO
