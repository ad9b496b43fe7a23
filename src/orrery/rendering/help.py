"""Help overlay: body symbol key and key bindings in a centred box."""

from __future__ import annotations

from orrery.bodies import BODIES
from orrery.constants import HELP_COLS, HELP_LINES
from orrery.params import DisplayConfig
from orrery.rendering.draw_ops import BTEE, TTEE, Box, DrawOp, Glyph, Text, VLine

KEY_HELP = (
    'h/l  go back/forward in time',
    'n    go to the present time',
    'j/k  highlight next/previous planet',
    'c    clear highlight',
    '?    help',
    'q    quit',
)
CONTINUE_PROMPT = 'press any key to continue'


def build_help(display: DisplayConfig, rows: int, cols: int) -> list[DrawOp] | None:
    """Draw ops for the help box, or None when the terminal is smaller than it."""
    if rows < HELP_LINES or cols < HELP_COLS:
        return None
    # halve before truncating: 24 rows puts the box at row 5
    top = int(rows / 2 - HELP_LINES / 2)
    left = int(cols / 2 - HELP_COLS / 2)
    divider = left + HELP_COLS // 3
    ops: list[DrawOp] = [
        Box(top, left, HELP_LINES, HELP_COLS),
        Glyph(top, divider, TTEE),
        Glyph(top + HELP_LINES - 1, divider, BTEE),
        VLine(top + 1, divider, HELP_LINES - 2),
    ]

    # left third: key to the body symbols
    x = left + 2
    y = top + 1
    ops.append(Text(y, x, 'planets:'))
    for body in BODIES:
        y += 1
        ops.append(Text(y, x + 1, body.glyph(display.unicode)))
        ops.append(Text(y, x + 3, body.name))

    # right side: key bindings
    x = divider + 2
    y = top + 1
    ops.append(Text(y, x, 'key bindings:'))
    for line in KEY_HELP:
        y += 1
        ops.append(Text(y, x + 1, line))

    ops.append(
        Text(top + HELP_LINES - 2, left + HELP_COLS - len(CONTINUE_PROMPT) - 2, CONTINUE_PROMPT)
    )
    return ops
