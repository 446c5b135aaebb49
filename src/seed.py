"""Seed data for a fresh board.

Nothing is persisted: every run starts from these lists. Each call returns
new objects so one board's deletions never leak into another.
"""
from typing import List, Tuple
from models import Item, LogEntry, Severity, Status

_ITEMS: Tuple[Tuple[str, int, Status], ...] = (
    ("Item0", 1, Status.TODO),
    ("Item1", 2, Status.TODO),
    ("Item2", 1, Status.TODO),
    ("Item3", 3, Status.TODO),
    ("Item4", 1, Status.TODO),
    ("Item5", 4, Status.TODO),
    ("Item6", 1, Status.TODO),
    ("Item7", 3, Status.TODO),
    ("Item8", 1, Status.TODO),
    ("Item9", 6, Status.TODO),
    ("Item10", 1, Status.IN_PROGRESS),
    ("Item11", 3, Status.IN_PROGRESS),
    ("Item12", 1, Status.IN_PROGRESS),
    ("Item13", 2, Status.IN_PROGRESS),
    ("Item14", 1, Status.IN_PROGRESS),
    ("Item15", 1, Status.IN_PROGRESS),
    ("Item16", 4, Status.IN_PROGRESS),
    ("Item17", 1, Status.IN_PROGRESS),
    ("Item18", 5, Status.IN_PROGRESS),
    ("Item19", 4, Status.IN_PROGRESS),
    ("Item20", 1, Status.IN_PROGRESS),
    ("Item21", 2, Status.UP_NEXT),
    ("Item22", 1, Status.UP_NEXT),
    ("Item23", 3, Status.UP_NEXT),
)

_EVENTS: Tuple[Tuple[str, Severity], ...] = (
    ("Event1", Severity.INFO),
    ("Event2", Severity.INFO),
    ("Event3", Severity.CRITICAL),
    ("Event4", Severity.ERROR),
    ("Event5", Severity.INFO),
    ("Event6", Severity.INFO),
    ("Event7", Severity.WARNING),
    ("Event8", Severity.INFO),
    ("Event9", Severity.INFO),
    ("Event10", Severity.INFO),
    ("Event11", Severity.CRITICAL),
    ("Event12", Severity.INFO),
    ("Event13", Severity.INFO),
    ("Event14", Severity.INFO),
    ("Event15", Severity.INFO),
    ("Event16", Severity.INFO),
    ("Event17", Severity.ERROR),
    ("Event18", Severity.ERROR),
    ("Event19", Severity.INFO),
    ("Event20", Severity.INFO),
    ("Event21", Severity.WARNING),
    ("Event22", Severity.INFO),
    ("Event23", Severity.INFO),
    ("Event24", Severity.WARNING),
    ("Event25", Severity.INFO),
    ("Event26", Severity.INFO),
)


def default_items() -> List[Item]:
    return [Item(label=label, weight=weight, status=status) for label, weight, status in _ITEMS]


def default_events() -> List[LogEntry]:
    return [LogEntry(label=label, severity=severity) for label, severity in _EVENTS]
