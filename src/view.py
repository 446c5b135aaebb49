"""Curses rendering for the board and the log strip.

Layout, top to bottom: three equal-width bordered columns (one per status),
the log strip, and a single footer line with key help. Each column filters
the board's item list on every draw; the board's selection index is
highlighted inside whichever columns are long enough to contain it.
"""
import curses
from typing import List, Optional, Sequence, Tuple
from board import Board
from events import LogQueue
from models import HEADER_TITLES, STATUSES, Item, Status
from theme import attr, colored

DETAIL_TEXT = "Something important to do"
HIGHLIGHT_SYMBOL = ">> "
LOG_STRIP_HEIGHT = 8
MIN_COL_WIDTH = 8
FOOTER = "q quit | j/k or arrows move | left clear | h/l column | x delete"

Line = Tuple[str, int]


# ---- layout ----
def column_widths(total: int, count: int = len(STATUSES)) -> List[int]:
    """Split total width into count columns; leftover cells go left to right."""
    base = total // count
    widths = [base] * count
    for i in range(total - base * count):
        widths[i % count] += 1
    return widths


def item_lines(item: Item) -> List[str]:
    """Label followed by one detail line per unit of weight."""
    return [item.label] + [DETAIL_TEXT] * item.weight


def scroll_offset(heights: Sequence[int], highlight: Optional[int], capacity: int) -> int:
    """Index of the first item to draw so the highlighted item is fully visible.

    Starts from the top and moves down only as far as needed; an item taller
    than the whole column is drawn from its first line.
    """
    if highlight is None or capacity <= 0:
        return 0
    start = 0
    while start < highlight and sum(heights[start:highlight + 1]) > capacity:
        start += 1
    return start


def column_lines(items: Sequence[Item], highlight: Optional[int], capacity: int) -> List[Line]:
    """Text and attribute for each visible line inside a column."""
    if not items:
        return [("(empty)", curses.A_DIM)]
    start = scroll_offset([len(item_lines(i)) for i in items], highlight, capacity)
    pad = ' ' * len(HIGHLIGHT_SYMBOL)
    selected_attr = attr('highlight', curses.A_BOLD) if colored() else curses.A_REVERSE | curses.A_BOLD
    lines: List[Line] = []
    for index in range(start, len(items)):
        is_selected = index == highlight
        for n, text in enumerate(item_lines(items[index])):
            prefix = HIGHLIGHT_SYMBOL if is_selected and n == 0 else pad
            if is_selected:
                style = selected_attr
            elif n == 0:
                style = curses.A_NORMAL
            else:
                style = curses.A_ITALIC
            lines.append((prefix + text, style))
            if len(lines) >= capacity:
                return lines
    return lines


# ---- drawing ----
def _put(win, y: int, x: int, text: str, style: int = curses.A_NORMAL) -> None:
    height, width = win.getmaxyx()
    if y < 0 or y >= height or x >= width:
        return
    try:
        win.addnstr(y, x, text, max(0, width - x), style)
    except curses.error:
        # the bottom-right cell raises after it has been written
        pass


def _draw_column(stdscr, board: Board, status: Status, y: int, x: int, height: int, width: int) -> None:
    if height < 3 or width < MIN_COL_WIDTH:
        return
    items, highlight = board.column_view(status)
    win = stdscr.derwin(height, width, y, x)
    if status == board.active_column:
        frame = attr('active', curses.A_BOLD) if colored() else curses.A_REVERSE | curses.A_BOLD
    else:
        frame = attr(status.value)
    win.attron(frame)
    win.box()
    win.attroff(frame)
    _put(win, 0, 2, f" {HEADER_TITLES[status]} ({len(items)}) ", frame)
    inner_width = width - 2
    for row, (text, style) in enumerate(column_lines(items, highlight, height - 2), start=1):
        _put(win, row, 1, text[:inner_width], style)


def _draw_logs(stdscr, logs: LogQueue, y: int, height: int, width: int) -> None:
    if height < 3 or width < MIN_COL_WIDTH:
        return
    win = stdscr.derwin(height, width, y, 0)
    win.attron(attr('header'))
    win.box()
    win.attroff(attr('header'))
    _put(win, 0, 2, " LOGS ", attr('header', curses.A_BOLD))
    for row, entry in enumerate(logs.entries[:height - 2], start=1):
        severity = entry.severity.value
        _put(win, row, 1, f"{severity:<9}", attr(severity, curses.A_BOLD))
        _put(win, row, 10, entry.label[:max(0, width - 11)])


def draw(stdscr, board: Board, logs: LogQueue) -> None:
    """Paint one frame."""
    stdscr.erase()
    height, width = stdscr.getmaxyx()
    log_height = min(LOG_STRIP_HEIGHT, height // 3)
    board_height = height - log_height - 1
    x = 0
    for status, col_width in zip(STATUSES, column_widths(width)):
        _draw_column(stdscr, board, status, 0, x, board_height, col_width)
        x += col_width
    _draw_logs(stdscr, logs, board_height, log_height, width)
    _put(stdscr, height - 1, 0, FOOTER, curses.A_DIM)
    stdscr.refresh()
