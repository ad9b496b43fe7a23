"""Celestial position provider interface and the values it returns.

The chart never computes ephemerides itself; it asks a provider for a body's
azimuth and elevation, for the rise/transit/set events around a moment, and
for the Moon's phase. ``orrery.spice.provider.SpiceSky`` is the SPICE-backed
implementation; tests substitute their own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Protocol

from orrery.bodies import CelestialBody
from orrery.constants import HALF_ARC_LIMIT, MOON_PHASE_BUCKETS
from orrery.params import Observer

_HALF_ARC = timedelta(seconds=HALF_ARC_LIMIT)


@dataclass(frozen=True)
class BodyPosition:
    """Topocentric azimuth (radians, 0 = north, clockwise, [0, 2pi)) and elevation."""

    body: CelestialBody
    azimuth: float
    elevation: float


@dataclass(frozen=True)
class BodyEvents:
    """Rise, transit and set times (aware UTC, ascending) found near a moment."""

    rises: list[datetime] = field(default_factory=list)
    transits: list[datetime] = field(default_factory=list)
    sets: list[datetime] = field(default_factory=list)


@dataclass(frozen=True)
class RiseTransitSet:
    """Events of one diurnal arc; None means the event does not occur."""

    rise: datetime | None = None
    transit: datetime | None = None
    set: datetime | None = None


@dataclass(frozen=True)
class MoonPhase:
    """Lunation fraction (0 new, 0.5 full) and illuminated fraction of the disk."""

    phase: float
    illumination: float


class CelestialPositionProvider(Protocol):
    """Source of body positions, events and the Moon's phase."""

    def position(self, body: CelestialBody, observer: Observer, when: datetime) -> BodyPosition:
        ...

    def events(self, body: CelestialBody, observer: Observer, when: datetime) -> BodyEvents:
        ...

    def moon_phase(self, when: datetime) -> MoonPhase:
        ...


def select_rise_transit_set(events: BodyEvents, when: datetime) -> RiseTransitSet:
    """Pick the rise, transit and set of the diurnal arc nearest ``when``.

    The transit is the one closest to ``when``. The rise is the latest rise
    at or before that transit and the set the earliest set at or after it,
    each no more than half an arc away; so a set is never shown that belongs
    to the arc before the rise.

    Parameters:
        events: Events found around ``when``.
        when: Observation moment (aware).

    Returns:
        RiseTransitSet; fields are None for events that do not occur.
    """
    if not events.transits:
        return RiseTransitSet()
    transit = min(events.transits, key=lambda t: abs(t - when))
    rises = [t for t in events.rises if transit - _HALF_ARC <= t <= transit]
    sets = [t for t in events.sets if transit <= t <= transit + _HALF_ARC]
    return RiseTransitSet(
        rise=max(rises) if rises else None,
        transit=transit,
        set=min(sets) if sets else None,
    )


def moon_phase_name(phase: float) -> str:
    """Name of the lunation fraction's bucket (upper bounds exclusive)."""
    for upper, name in MOON_PHASE_BUCKETS:
        if phase < upper:
            return name
    return 'new'
