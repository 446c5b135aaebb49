"""Tests for the curses layout helpers and frame drawing."""

import curses

import pytest

import theme
from board import Board
from events import LogQueue
from models import Item, Status
from seed import default_events, default_items
from view import (DETAIL_TEXT, HIGHLIGHT_SYMBOL, column_lines, column_widths, draw,
                  item_lines, scroll_offset)


class FakeWindow:
    """Records text written with addnstr; enough of the curses window API for draw()."""

    def __init__(self, height, width):
        self.height = height
        self.width = width
        self.writes = []
        self.children = []

    def getmaxyx(self):
        return self.height, self.width

    def derwin(self, height, width, y, x):
        child = FakeWindow(height, width)
        self.children.append(child)
        return child

    def addnstr(self, y, x, text, n, style=0):
        self.writes.append((y, x, text[:n], style))

    def text(self):
        return [w[2] for w in self.writes]

    def erase(self):
        pass

    def refresh(self):
        pass

    def box(self):
        pass

    def attron(self, style):
        pass

    def attroff(self, style):
        pass


@pytest.fixture(autouse=True)
def no_colors():
    theme._PAIRS.clear()


class TestLayout:
    @pytest.mark.parametrize("total, expected", [
        (90, [30, 30, 30]),
        (100, [34, 33, 33]),
        (101, [34, 34, 33]),
    ])
    def test_column_widths(self, total, expected):
        assert column_widths(total) == expected

    def test_item_lines_follow_weight(self):
        assert item_lines(Item("Item3", 3)) == ["Item3", DETAIL_TEXT, DETAIL_TEXT, DETAIL_TEXT]

    def test_scroll_offset_without_highlight(self):
        assert scroll_offset([2, 2, 2], None, 3) == 0

    def test_scroll_offset_when_highlight_fits(self):
        assert scroll_offset([2, 2, 2], 1, 4) == 0

    def test_scroll_offset_moves_just_enough(self):
        assert scroll_offset([2, 2, 2, 2], 3, 4) == 2

    def test_scroll_offset_tall_item(self):
        assert scroll_offset([1, 10], 1, 4) == 1


class TestColumnLines:
    def test_empty_column(self):
        assert column_lines([], None, 10) == [("(empty)", curses.A_DIM)]

    def test_highlighted_item(self):
        items = [Item("A", 1), Item("B", 1)]
        pad = ' ' * len(HIGHLIGHT_SYMBOL)
        selected = curses.A_REVERSE | curses.A_BOLD
        assert column_lines(items, 1, 10) == [
            (pad + "A", curses.A_NORMAL),
            (pad + DETAIL_TEXT, curses.A_ITALIC),
            (">> B", selected),
            (pad + DETAIL_TEXT, selected),
        ]

    def test_capacity_limits_lines(self):
        items = [Item(f"Item{i}", 2) for i in range(10)]
        assert len(column_lines(items, None, 7)) == 7

    def test_scrolled_to_highlight(self):
        items = [Item(f"Item{i}", 2) for i in range(10)]
        lines = column_lines(items, 9, 6)
        assert lines[-3][0] == ">> Item9"


class TestDraw:
    def setup_method(self):
        self.board = Board(default_items())
        self.logs = LogQueue(default_events())
        self.screen = FakeWindow(40, 120)

    def test_three_columns_and_log_strip(self):
        draw(self.screen, self.board, self.logs)
        todo, up_next, in_progress, logs = self.screen.children
        assert (todo.width, up_next.width, in_progress.width) == (40, 40, 40)
        assert " TO DO (10) " in todo.text()
        assert " UP NEXT (3) " in up_next.text()
        assert " IN PROGRESS (11) " in in_progress.text()
        assert logs.width == 120
        assert "Event1" in logs.text()

    def test_columns_show_only_their_status(self):
        draw(self.screen, self.board, self.logs)
        up_next = self.screen.children[1]
        labels = [t.strip() for t in up_next.text() if t.strip().startswith("Item")]
        assert labels == ["Item21", "Item22", "Item23"]

    def test_selection_highlighted_in_every_long_enough_column(self):
        self.board.selected = 1
        draw(self.screen, self.board, self.logs)
        highlighted = [
            t for col in self.screen.children[:3] for t in col.text() if t.startswith(HIGHLIGHT_SYMBOL)
        ]
        assert highlighted == [">> Item1", ">> Item22", ">> Item11"]

    def test_log_strip_follows_rotation(self):
        self.logs.advance()
        draw(self.screen, self.board, self.logs)
        labels = [t for t in self.screen.children[3].text() if t.startswith("Event")]
        assert labels[0] == "Event2"
        assert "Event1" not in labels

    def test_tiny_screen_draws_footer_only(self):
        screen = FakeWindow(2, 5)
        draw(screen, self.board, self.logs)
        assert screen.children == []
        assert len(screen.writes) == 1

    def test_active_column_is_drawn(self):
        self.board.cycle_active_column_forward()
        draw(self.screen, self.board, self.logs)
        title = self.screen.children[1].writes[0]
        assert title[2] == " UP NEXT (3) "
        assert title[3] == curses.A_REVERSE | curses.A_BOLD
        assert self.board.active_column is Status.UP_NEXT
