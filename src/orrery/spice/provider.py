"""SPICE implementation of the celestial position provider."""

from __future__ import annotations

import logging
from datetime import datetime

from orrery.bodies import CelestialBody
from orrery.constants import EVENT_SEARCH_HALF_WINDOW
from orrery.params import Observer
from orrery.sky import BodyEvents, BodyPosition, MoonPhase
from orrery.spice.events import find_state_changes
from orrery.spice.geometry import body_azel, body_elevation, body_hour_angle, moon_phase_fractions
from orrery.spice.load import load_kernels
from orrery.time_utils import datetime_from_et, et_from_datetime

logger = logging.getLogger(__name__)


class SpiceSky:
    """Positions, events and Moon phase from SPICE kernels through cspyce.

    Kernels are furnished on construction; a missing or unreadable kernel
    raises RuntimeError naming the files and the SPICE_PATH setting.
    """

    def __init__(
        self,
        kernel_names: list[str] | None = None,
        spice_path: str | None = None,
    ) -> None:
        ok, reason = load_kernels(kernel_names, spice_path)
        if not ok:
            raise RuntimeError(f'SPICE kernels not loaded: {reason}')

    def position(self, body: CelestialBody, observer: Observer, when: datetime) -> BodyPosition:
        """Topocentric azimuth and elevation of body at when."""
        azimuth, elevation = body_azel(body, observer, et_from_datetime(when))
        return BodyPosition(body=body, azimuth=azimuth, elevation=elevation)

    def events(self, body: CelestialBody, observer: Observer, when: datetime) -> BodyEvents:
        """Rises, transits and sets within the search window around when.

        Rises and sets are where the body goes above and below the geometric
        horizon. Transits are where the hour angle turns non-negative; where
        it turns negative again is the wrap at pi (lower transit), not used.
        """
        et = et_from_datetime(when)
        start = et - EVENT_SEARCH_HALF_WINDOW
        stop = et + EVENT_SEARCH_HALF_WINDOW
        rises, sets = find_state_changes(
            lambda t: body_elevation(body, observer, t) >= 0.0, start, stop
        )
        transits, _ = find_state_changes(
            lambda t: body_hour_angle(body, observer, t) >= 0.0, start, stop
        )
        logger.debug(
            '%s: %d rises, %d transits, %d sets around %s',
            body.name,
            len(rises),
            len(transits),
            len(sets),
            when.isoformat(),
        )
        return BodyEvents(
            rises=[datetime_from_et(t) for t in rises],
            transits=[datetime_from_et(t) for t in transits],
            sets=[datetime_from_et(t) for t in sets],
        )

    def moon_phase(self, when: datetime) -> MoonPhase:
        """Lunation and illuminated fractions of the Moon at when."""
        phase, illumination = moon_phase_fractions(et_from_datetime(when))
        return MoonPhase(phase=phase, illumination=illumination)
