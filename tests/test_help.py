"""Tests for the help overlay."""

from __future__ import annotations

import pytest

from orrery.params import DisplayConfig
from orrery.rendering.draw_ops import BTEE, TTEE, Box, Glyph, Text, VLine
from orrery.rendering.help import CONTINUE_PROMPT, KEY_HELP, build_help


@pytest.mark.parametrize(('rows', 'cols'), [(12, 80), (24, 59), (5, 20)])
def test_help_skipped_when_terminal_too_small(rows: int, cols: int) -> None:
    assert build_help(DisplayConfig(), rows, cols) is None


def test_help_fits_minimum_terminal() -> None:
    ops = build_help(DisplayConfig(), 13, 60)

    assert ops is not None
    assert ops[0] == Box(0, 0, 13, 60)


@pytest.mark.parametrize(
    ('rows', 'cols', 'top', 'left'),
    [(24, 80, 5, 10), (25, 80, 6, 10), (14, 61, 0, 0), (50, 132, 18, 36)],
)
def test_help_box_origin(rows: int, cols: int, top: int, left: int) -> None:
    """Half the box size is taken from half the screen before truncating."""
    ops = build_help(DisplayConfig(), rows, cols)

    assert ops is not None
    assert ops[0] == Box(top, left, 13, 60)


def test_help_layout_80x24() -> None:
    ops = build_help(DisplayConfig(), 24, 80)

    assert ops is not None
    assert ops[:4] == [
        Box(5, 10, 13, 60),
        Glyph(5, 30, TTEE),
        Glyph(17, 30, BTEE),
        VLine(6, 30, 11),
    ]
    assert Text(6, 12, 'planets:') in ops
    assert Text(7, 13, '☉') in ops
    assert Text(7, 15, 'sun') in ops
    assert Text(15, 13, '♆') in ops
    assert Text(6, 32, 'key bindings:') in ops
    assert Text(7, 33, KEY_HELP[0]) in ops
    assert ops[-1] == Text(16, 43, CONTINUE_PROMPT)


def test_help_ascii_glyphs() -> None:
    ops = build_help(DisplayConfig(unicode=False), 24, 80)

    assert ops is not None
    assert Text(7, 13, 'S') in ops
    assert Text(15, 13, 'n') in ops
