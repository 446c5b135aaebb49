"""Keyboard-driven control loop for the Kanban board.

Each iteration draws a frame, waits for a key no longer than the time left
until the next tick, applies at most one command, then rotates the log queue
if the tick interval has elapsed. Key presses never reset the tick clock, so
the log strip keeps moving while keys are held down.
"""
import curses
import logging
import time
from enum import Enum
from typing import Callable, Dict, Optional
from board import Board
from events import LogQueue
import theme
import view

logger = logging.getLogger(__name__)

TICK_INTERVAL = 0.25  # seconds

QUIT = 'quit'

# key name -> Board method (or QUIT)
KEY_BINDINGS: Dict[str, str] = {
    'q': QUIT,
    'left': 'unselect',
    'down': 'select_next',
    'j': 'select_next',
    'up': 'select_previous',
    'k': 'select_previous',
    'l': 'cycle_active_column_forward',
    'h': 'cycle_active_column_backward',
    'x': 'delete_selected',
}

_CURSES_KEYS: Dict[int, str] = {
    curses.KEY_LEFT: 'left',
    curses.KEY_RIGHT: 'right',
    curses.KEY_UP: 'up',
    curses.KEY_DOWN: 'down',
}

Render = Callable[[Board, LogQueue], None]
Poll = Callable[[float], Optional[str]]


def key_name(code: int) -> Optional[str]:
    """Normalise a curses getch() code; None for timeouts and unhandled codes."""
    if code in _CURSES_KEYS:
        return _CURSES_KEYS[code]
    if 32 <= code < 127:
        return chr(code)
    return None


class LoopState(Enum):
    RUNNING = 'running'
    TERMINATED = 'terminated'


class CLI:
    def __init__(self, board: Board, logs: LogQueue, render: Render, poll: Poll,
                 clock: Callable[[], float] = time.monotonic,
                 tick_interval: float = TICK_INTERVAL):
        self.board: Board = board
        self.logs: LogQueue = logs
        self.render = render
        self.poll = poll
        self.clock = clock
        self.tick_interval = tick_interval
        self.state: LoopState = LoopState.RUNNING
        self.ticks: int = 0

    @classmethod
    def for_screen(cls, stdscr, board: Board, logs: LogQueue) -> "CLI":
        """Wire the loop to a curses screen (as handed out by curses.wrapper)."""
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("terminal cannot hide the cursor")
        stdscr.keypad(True)
        theme.init_colors()

        def poll(timeout: float) -> Optional[str]:
            stdscr.timeout(int(timeout * 1000))
            return key_name(stdscr.getch())

        def render(b: Board, q: LogQueue) -> None:
            view.draw(stdscr, b, q)

        return cls(board, logs, render, poll)

    def run(self) -> LoopState:
        """Run until 'q'; returns the final state."""
        logger.info("control loop started (%s)", self.board)
        last_tick = self.clock()
        while self.state is LoopState.RUNNING:
            self.render(self.board, self.logs)
            timeout = max(0.0, self.tick_interval - (self.clock() - last_tick))
            key = self.poll(timeout)
            if key is not None:
                self.handle_key(key)
                if self.state is LoopState.TERMINATED:
                    break
            if self.clock() - last_tick >= self.tick_interval:
                self.on_tick()
                last_tick = self.clock()
        logger.info("control loop stopped after %d ticks (%s)", self.ticks, self.board)
        return self.state

    # -------------------- dispatch --------------------
    def handle_key(self, key: str) -> LoopState:
        command = KEY_BINDINGS.get(key)
        if command is None:
            return self.state
        logger.debug("key %r -> %s", key, command)
        if command == QUIT:
            self.state = LoopState.TERMINATED
        else:
            getattr(self.board, command)()
        return self.state

    def on_tick(self) -> None:
        self.logs.advance()
        self.ticks += 1
        logger.debug("tick %d, log front now %s", self.ticks, self.logs.front())
