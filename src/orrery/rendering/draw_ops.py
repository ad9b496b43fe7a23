"""Draw operations produced by the render pipeline and executed by a terminal sink.

Coordinates are (row, col) cells and may fall outside the viewport; the
sink drops whatever does not fit. Line-drawing characters are named
symbolically (``Glyph``) and mapped to the terminal's own at draw time.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

# Symbolic line-drawing glyphs
PLUS = 'plus'
DEGREE = 'degree'
BULLET = 'bullet'
HLINE = 'hline'
VLINE = 'vline'
TTEE = 'ttee'
BTEE = 'btee'


@dataclass(frozen=True)
class Text:
    """Write text starting at (row, col), optionally in reverse video."""

    row: int
    col: int
    text: str
    reverse: bool = False


@dataclass(frozen=True)
class Glyph:
    """Write one line-drawing glyph (one of the names above) at (row, col)."""

    row: int
    col: int
    glyph: str


@dataclass(frozen=True)
class HLine:
    """Horizontal line of length cells starting at (row, col)."""

    row: int
    col: int
    length: int


@dataclass(frozen=True)
class VLine:
    """Vertical line of length cells starting at (row, col)."""

    row: int
    col: int
    length: int


@dataclass(frozen=True)
class Box:
    """Blank the height x width area at (row, col) and draw a border around it."""

    row: int
    col: int
    height: int
    width: int


DrawOp = Union[Text, Glyph, HLine, VLine, Box]
