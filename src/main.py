"""Main entry point for the terminal Kanban board.

Logging goes to KANBAN_LOG_FILE when set (level from KANBAN_LOG_LEVEL,
default INFO); curses owns the terminal, so nothing is logged to it.
"""
import curses
import logging
import os
import sys
from board import Board
from cli import CLI
from events import LogQueue
from seed import default_events, default_items

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging() -> None:
    root = logging.getLogger()
    path = os.getenv("KANBAN_LOG_FILE")
    if not path:
        root.addHandler(logging.NullHandler())
        return
    handler = logging.FileHandler(path)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    level = os.getenv("KANBAN_LOG_LEVEL", "INFO").upper()
    root.setLevel(getattr(logging, level, logging.INFO))


def _session(stdscr) -> None:
    board = Board(default_items())
    logs = LogQueue(default_events())
    CLI.for_screen(stdscr, board, logs).run()


def main() -> int:
    configure_logging()
    try:
        curses.wrapper(_session)
    except KeyboardInterrupt:
        print("Interrupted. Goodbye.")
        return 0
    except curses.error as exc:
        logger.error("terminal error: %s", exc)
        print(f"Terminal error: {exc}", file=sys.stderr)
        return 1
    print("Goodbye.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
