"""Rise, transit and set search with skyfield's discrete-event finder.

SPICE supplies the geometry; skyfield's ``find_discrete`` does the sampling
and refinement. Times cross the boundary as TDB Julian dates, which map one
to one onto SPICE ephemeris time (TDB seconds past J2000).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

import numpy as np
from skyfield.api import load
from skyfield.searchlib import find_discrete

from orrery.constants import (
    EVENT_SEARCH_STEP,
    EVENT_SEARCH_TOLERANCE,
    J2000_JD,
    SECONDS_PER_DAY,
)

logger = logging.getLogger(__name__)

_timescale: Any = None


def get_timescale() -> Any:
    """Skyfield timescale built from the tables bundled with skyfield (no download)."""
    global _timescale
    if _timescale is None:
        _timescale = load.timescale(builtin=True)
    return _timescale


def time_from_et(et: float | np.ndarray) -> Any:
    """Skyfield Time for ET seconds past J2000."""
    return get_timescale().tdb_jd(J2000_JD + np.asarray(et, dtype=np.float64) / SECONDS_PER_DAY)


def et_from_time(t: Any) -> np.ndarray:
    """ET seconds past J2000 for a skyfield Time (scalar or array)."""
    return (np.asarray(t.tdb, dtype=np.float64) - J2000_JD) * SECONDS_PER_DAY


def find_state_changes(
    is_on: Callable[[float], bool],
    start: float,
    stop: float,
    *,
    step: float = EVENT_SEARCH_STEP,
    tol: float = EVENT_SEARCH_TOLERANCE,
) -> tuple[list[float], list[float]]:
    """Find the times a yes/no condition of time changes between start and stop.

    The condition is evaluated by skyfield's ``find_discrete`` every ``step``
    seconds and each change is refined to within ``tol`` seconds.

    Parameters:
        is_on: Condition as a function of ET seconds.
        start: Window start (ET).
        stop: Window end (ET).
        step: Sample spacing in seconds; must be shorter than the shortest
            on or off spell to be found.
        tol: Refinement tolerance in seconds.

    Returns:
        (turned_on, turned_off) ascending lists of ET times.

    Raises:
        ValueError: If stop is not after start.
    """
    if stop <= start:
        raise ValueError(f'stop must be after start, got {start} to {stop}')

    def state(t: Any) -> np.ndarray:
        ets = et_from_time(t)
        flags = [bool(is_on(float(et))) for et in np.ravel(ets)]
        return np.reshape(np.array(flags, dtype=np.int8), np.shape(ets))

    state.step_days = step / SECONDS_PER_DAY  # type: ignore[attr-defined]

    times, values = find_discrete(
        time_from_et(start), time_from_et(stop), state, epsilon=tol / SECONDS_PER_DAY
    )
    turned_on: list[float] = []
    turned_off: list[float] = []
    for et, value in zip(np.ravel(et_from_time(times)), np.ravel(values)):
        (turned_on if value else turned_off).append(float(et))
    logger.debug(
        'Found %d on and %d off changes between ET %.0f and %.0f',
        len(turned_on),
        len(turned_off),
        start,
        stop,
    )
    return (turned_on, turned_off)
