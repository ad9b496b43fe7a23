"""Body geometry: topocentric azimuth/elevation, hour angle and the Moon's phase."""

from __future__ import annotations

import math

import cspyce
import numpy as np

from orrery.bodies import CelestialBody
from orrery.constants import TWOPI
from orrery.params import Observer
from orrery.spice.observer import enu_matrix, observer_position

EARTH_FRAME = 'IAU_EARTH'
ECLIPTIC_FRAME = 'ECLIPJ2000'


def topocentric_vector(body: CelestialBody, observer: Observer, et: float) -> np.ndarray:
    """Apparent observer-to-body vector in the Earth body-fixed frame (km).

    The Earth-centred position is corrected for light time and stellar
    aberration, then shifted by the observer's geodetic position.
    """
    pos, _ = cspyce.spkpos(body.naif_name, et, EARTH_FRAME, 'LT+S', 'EARTH')
    return np.asarray(pos, dtype=np.float64) - observer_position(observer)


def body_azel(body: CelestialBody, observer: Observer, et: float) -> tuple[float, float]:
    """Azimuth (0 = north, clockwise, [0, 2pi)) and geometric elevation (radians)."""
    east, north, up = enu_matrix(observer) @ topocentric_vector(body, observer, et)
    azimuth = math.atan2(east, north) % TWOPI
    elevation = math.atan2(up, math.hypot(east, north))
    return (azimuth, elevation)


def body_elevation(body: CelestialBody, observer: Observer, et: float) -> float:
    """Geometric elevation of body (radians)."""
    return body_azel(body, observer, et)[1]


def body_hour_angle(body: CelestialBody, observer: Observer, et: float) -> float:
    """Local hour angle of body in (-pi, pi]; zero at upper transit, increasing with time."""
    vec = topocentric_vector(body, observer, et)
    angle = math.radians(observer.longitude_deg) - math.atan2(vec[1], vec[0])
    angle = (angle + math.pi) % TWOPI - math.pi
    return math.pi if angle == -math.pi else angle


def moon_phase_fractions(et: float) -> tuple[float, float]:
    """Lunation fraction and illuminated fraction of the Moon at ET.

    The lunation fraction is the Moon's ecliptic longitude minus the Sun's,
    as a fraction of a full circle (0 new, 0.25 first quarter, 0.5 full).
    The illuminated fraction is (1 + cos i) / 2 with i the Sun-Moon-Earth
    phase angle.

    Returns:
        (phase, illumination), both in [0, 1].
    """
    moon, _ = cspyce.spkpos('MOON', et, ECLIPTIC_FRAME, 'LT+S', 'EARTH')
    sun, _ = cspyce.spkpos('SUN', et, ECLIPTIC_FRAME, 'LT+S', 'EARTH')
    moon = np.asarray(moon, dtype=np.float64)
    sun = np.asarray(sun, dtype=np.float64)
    elongation = (math.atan2(moon[1], moon[0]) - math.atan2(sun[1], sun[0])) % TWOPI
    phase_angle = cspyce.vsep(sun - moon, -moon)
    return (elongation / TWOPI, 0.5 * (1.0 + math.cos(phase_angle)))
