"""Tests for the fixed body table."""

from __future__ import annotations

from orrery.bodies import BODIES, DRAW_ORDER, MOON, SUN


def test_selection_order() -> None:
    assert [b.name for b in BODIES] == [
        'sun',
        'mercury',
        'venus',
        'moon',
        'mars',
        'jupiter',
        'saturn',
        'uranus',
        'neptune',
    ]


def test_draw_order_is_farthest_first() -> None:
    assert [b.name for b in DRAW_ORDER] == [
        'neptune',
        'uranus',
        'saturn',
        'jupiter',
        'mars',
        'sun',
        'venus',
        'mercury',
        'moon',
    ]


def test_glyphs() -> None:
    assert SUN.glyph(True) == '☉'
    assert SUN.glyph(False) == 'S'
    assert MOON.glyph(False) == 'L'
    assert len({b.abbrev for b in BODIES}) == len(BODIES)
