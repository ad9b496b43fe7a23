"""Tests for rise/transit/set bracketing and Moon phase names."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from orrery.sky import BodyEvents, RiseTransitSet, moon_phase_name, select_rise_transit_set

WHEN = datetime(2020, 2, 7, 0, 0, tzinfo=timezone.utc)


def _at(hours: float) -> datetime:
    return WHEN + timedelta(hours=hours)


def test_bracketing_picks_arc_of_nearest_transit() -> None:
    """The set shown follows the rise shown, never the previous arc's set."""

    events = BodyEvents(
        rises=[_at(-26.0), _at(-2.0), _at(22.0)],
        transits=[_at(-20.0), _at(4.0), _at(28.0)],
        sets=[_at(-14.0), _at(-1.0), _at(10.0), _at(34.0)],
    )

    rts = select_rise_transit_set(events, WHEN)

    assert rts == RiseTransitSet(rise=_at(-2.0), transit=_at(4.0), set=_at(10.0))


def test_bracketing_prefers_closer_transit_in_the_past() -> None:
    events = BodyEvents(
        rises=[_at(-8.0), _at(16.0)],
        transits=[_at(-3.0), _at(21.0)],
        sets=[_at(2.0), _at(26.0)],
    )

    rts = select_rise_transit_set(events, WHEN)

    assert rts.transit == _at(-3.0)
    assert rts.rise == _at(-8.0)
    assert rts.set == _at(2.0)


def test_circumpolar_body_never_rises_or_sets() -> None:
    events = BodyEvents(transits=[_at(-13.0), _at(11.0)])

    rts = select_rise_transit_set(events, WHEN)

    assert rts == RiseTransitSet(rise=None, transit=_at(11.0), set=None)


def test_events_more_than_half_an_arc_away_are_ignored() -> None:
    events = BodyEvents(rises=[_at(-14.0)], transits=[_at(0.5)], sets=[_at(14.0)])

    assert select_rise_transit_set(events, WHEN) == RiseTransitSet(transit=_at(0.5))


def test_no_transit_means_nothing_to_show() -> None:
    events = BodyEvents(rises=[_at(1.0)], sets=[_at(5.0)])

    assert select_rise_transit_set(events, WHEN) == RiseTransitSet()


@pytest.mark.parametrize(
    ('phase', 'name'),
    [
        (0.0, 'new'),
        (0.0199, 'new'),
        (0.02, 'waxing crescent'),
        (0.2399, 'waxing crescent'),
        (0.24, 'first quarter'),
        (0.25, 'first quarter'),
        (0.26, 'waxing gibbous'),
        (0.43, 'waxing gibbous'),
        (0.49, 'full'),
        (0.5, 'full'),
        (0.51, 'waning gibbous'),
        (0.74, 'last quarter'),
        (0.76, 'waning crescent'),
        (0.985, 'waning crescent'),
        (0.99, 'new'),
        (0.999, 'new'),
    ],
)
def test_moon_phase_name_buckets(phase: float, name: str) -> None:
    """Lower bounds are inclusive; the last bucket wraps back to new."""

    assert moon_phase_name(phase) == name
