"""Curses terminal: draw-op sink and the single blocking event source.

Keypresses, the redraw timer and terminal resizes all arrive through
``next_event``; the main loop never sees signals or curses error codes.
"""

from __future__ import annotations

import curses
import logging
from dataclasses import dataclass
from typing import Union

from orrery.rendering.draw_ops import (
    BTEE,
    BULLET,
    DEGREE,
    HLINE,
    PLUS,
    TTEE,
    VLINE,
    Box,
    DrawOp,
    Glyph,
    HLine,
    Text,
    VLine,
)

logger = logging.getLogger(__name__)

# Escape must arrive promptly; curses otherwise waits a second for a key sequence.
ESCAPE_DELAY_MS = 25


@dataclass(frozen=True)
class KeyPress:
    """A key: a character, or a curses KEY_* code for special keys."""

    key: str | int


@dataclass(frozen=True)
class Tick:
    """The wait timed out (the minute boundary was reached)."""


@dataclass(frozen=True)
class Resize:
    """The terminal changed size; the viewport must be queried again."""


Event = Union[KeyPress, Tick, Resize]


def _acs(name: str) -> int:
    """curses ACS character for a symbolic glyph (only valid after initscr)."""
    return {
        PLUS: curses.ACS_PLUS,
        DEGREE: curses.ACS_DEGREE,
        BULLET: curses.ACS_BULLET,
        HLINE: curses.ACS_HLINE,
        VLINE: curses.ACS_VLINE,
        TTEE: curses.ACS_TTEE,
        BTEE: curses.ACS_BTEE,
    }[name]


class CursesTerminal:
    """Full-screen curses session used as a context manager.

    Entering sets up the screen (no echo, cbreak, keypad, hidden cursor) and
    leaving restores the terminal even when the body raised.
    """

    def __init__(self) -> None:
        self._screen: curses.window | None = None

    def __enter__(self) -> CursesTerminal:
        self._screen = curses.initscr()
        curses.noecho()
        curses.cbreak()
        self._screen.keypad(True)
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug('Terminal cannot hide the cursor')
        curses.set_escdelay(ESCAPE_DELAY_MS)
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._screen is not None:
            self._screen.keypad(False)
        curses.nocbreak()
        curses.echo()
        curses.endwin()
        self._screen = None

    @property
    def screen(self) -> curses.window:
        if self._screen is None:
            raise RuntimeError('CursesTerminal used outside its with-block')
        return self._screen

    def size(self) -> tuple[int, int]:
        """Current viewport as (rows, cols)."""
        rows, cols = self.screen.getmaxyx()
        return (rows, cols)

    def wide_aware(self) -> bool:
        """True if curses counts a multi-byte character as one cell.

        Writes a zero-width no-break space at the origin and checks that the
        cursor advanced by exactly one cell.
        """
        screen = self.screen
        try:
            screen.addstr(0, 0, '\ufeff')
        except curses.error:
            return False
        y, x = screen.getyx()
        screen.erase()
        return y * self.size()[1] + x == 1

    def render(self, ops: list[DrawOp], clear: bool = True) -> None:
        """Execute draw ops, dropping anything outside the viewport, then refresh."""
        screen = self.screen
        if clear:
            screen.erase()
        rows, cols = self.size()
        for op in ops:
            self._draw(op, rows, cols)
        screen.refresh()

    def _draw(self, op: DrawOp, rows: int, cols: int) -> None:
        screen = self.screen
        if isinstance(op, Box):
            self._draw_box(op, rows, cols)
            return
        if not (0 <= op.row < rows and 0 <= op.col < cols):
            return
        # Writing the bottom-right cell moves the cursor off screen and raises
        # even though the character is drawn.
        try:
            if isinstance(op, Text):
                attr = curses.A_REVERSE if op.reverse else curses.A_NORMAL
                screen.addstr(op.row, op.col, op.text[: cols - op.col], attr)
            elif isinstance(op, Glyph):
                screen.addch(op.row, op.col, _acs(op.glyph))
            elif isinstance(op, HLine):
                screen.hline(op.row, op.col, curses.ACS_HLINE, min(op.length, cols - op.col))
            elif isinstance(op, VLine):
                screen.vline(op.row, op.col, curses.ACS_VLINE, min(op.length, rows - op.row))
        except curses.error:
            pass

    def _draw_box(self, op: Box, rows: int, cols: int) -> None:
        if op.row < 0 or op.col < 0 or op.row + op.height > rows or op.col + op.width > cols:
            return
        screen = self.screen
        top, left = op.row, op.col
        bottom, right = op.row + op.height - 1, op.col + op.width - 1
        try:
            for row in range(top, bottom + 1):
                screen.addstr(row, left, ' ' * op.width)
        except curses.error:
            pass
        screen.hline(top, left + 1, curses.ACS_HLINE, op.width - 2)
        screen.hline(bottom, left + 1, curses.ACS_HLINE, op.width - 2)
        screen.vline(top + 1, left, curses.ACS_VLINE, op.height - 2)
        screen.vline(top + 1, right, curses.ACS_VLINE, op.height - 2)
        screen.addch(top, left, curses.ACS_ULCORNER)
        screen.addch(top, right, curses.ACS_URCORNER)
        screen.addch(bottom, left, curses.ACS_LLCORNER)
        try:
            screen.addch(bottom, right, curses.ACS_LRCORNER)
        except curses.error:
            pass

    def next_event(self, timeout: float | None) -> Event:
        """Block until a key, a resize, or ``timeout`` seconds pass (None waits forever)."""
        screen = self.screen
        screen.timeout(-1 if timeout is None else max(0, int(timeout * 1000)))
        try:
            key = screen.get_wch()
        except curses.error:
            return Tick()
        if key == curses.KEY_RESIZE:
            curses.update_lines_cols()
            logger.debug('Terminal resized to %dx%d', curses.LINES, curses.COLS)
            return Resize()
        return KeyPress(key)
