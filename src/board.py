"""Board logic: item list, selection cursor, and active column.

The selection index always addresses the full backing list, while each
column on screen is a filter of that list by status. The two index spaces
only line up when every item shares a status. Navigation and deletion keep
working on the unfiltered list; the renderer highlights whichever item sits
at the same position inside each filtered column.
"""
import logging
from typing import Dict, Iterable, List, Optional, Tuple
from models import Item, Status, STATUSES, next_status, prev_status

logger = logging.getLogger(__name__)


class Board:
    def __init__(self, items: Optional[Iterable[Item]] = None,
                 active_column: Status = Status.TODO):
        self.items: List[Item] = list(items) if items else []
        self.selected: Optional[int] = None
        self.active_column: Status = active_column

    # -------------------- queries --------------------
    def column(self, status: Status) -> List[Item]:
        """Items with the given status, in backing-list order."""
        return [item for item in self.items if item.status == status]

    def column_view(self, status: Status) -> Tuple[List[Item], Optional[int]]:
        """Filtered items plus the highlight index valid for that filter.

        The highlight is the raw selection index when it falls inside the
        filtered list, otherwise None.
        """
        items = self.column(status)
        highlight = self.selected
        if highlight is not None and highlight >= len(items):
            highlight = None
        return items, highlight

    def selected_item(self) -> Optional[Item]:
        if self.selected is None:
            return None
        return self.items[self.selected]

    def counts(self) -> Dict[Status, int]:
        return {status: len(self.column(status)) for status in STATUSES}

    # -------------------- selection --------------------
    def select_next(self) -> None:
        if not self.items:
            return
        if self.selected is None or self.selected >= len(self.items) - 1:
            self.selected = 0
        else:
            self.selected += 1

    def select_previous(self) -> None:
        if not self.items:
            return
        if self.selected is None:
            self.selected = 0
        elif self.selected == 0:
            self.selected = len(self.items) - 1
        else:
            self.selected -= 1

    def unselect(self) -> None:
        self.selected = None

    # -------------------- mutation --------------------
    def delete_selected(self) -> Optional[Item]:
        """Remove the selected item; reselect the one before it.

        Returns the removed item, or None when nothing was selected.
        """
        if self.selected is None:
            return None
        index = self.selected
        removed = self.items.pop(index)
        self.selected = max(0, index - 1) if self.items else None
        logger.debug("deleted %s at %d, selection now %s", removed.label, index, self.selected)
        return removed

    # -------------------- active column --------------------
    def cycle_active_column_forward(self) -> None:
        self.active_column = next_status(self.active_column)

    def cycle_active_column_backward(self) -> None:
        self.active_column = prev_status(self.active_column)

    def __str__(self) -> str:
        counts = self.counts()
        return (f'To Do: {counts[Status.TODO]} items, '
                f'Up Next: {counts[Status.UP_NEXT]} items, '
                f'In Progress: {counts[Status.IN_PROGRESS]} items')
