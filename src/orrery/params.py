"""Observer and display parameters, and parsing of the command-line location."""

from __future__ import annotations

import locale
import logging
from dataclasses import dataclass
from datetime import tzinfo
from zoneinfo import ZoneInfo

from orrery.angle_utils import parse_altitude, parse_angle, split_hemisphere

logger = logging.getLogger(__name__)

_LATITUDE_HEMISPHERES = ('N', 'S')
_LONGITUDE_HEMISPHERES = ('E', 'W')


@dataclass(frozen=True)
class Observer:
    """Geodetic observer location (degrees, degrees east, metres)."""

    latitude_deg: float
    longitude_deg: float
    altitude_m: float = 0.0

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude_deg <= 90.0:
            raise ValueError(f'latitude must be in [-90, 90], got {self.latitude_deg}')
        lon = self.longitude_deg % 360.0
        if lon > 180.0:
            lon -= 360.0
        if lon == -180.0:
            lon = 180.0
        object.__setattr__(self, 'longitude_deg', lon)


@dataclass(frozen=True)
class DisplayConfig:
    """Display options fixed at startup and passed to the render pipeline.

    Attributes:
        unicode: Draw planetary symbols instead of ASCII letters.
        time_zone: Zone for the status clock and event times; None = system local.
    """

    unicode: bool = True
    time_zone: tzinfo | None = None


def _signed_angle(text: str, what: str) -> tuple[float, str | None]:
    """Parse one location argument into signed degrees and its hemisphere letter."""
    angle_text, hemisphere = split_hemisphere(text)
    value = parse_angle(angle_text)
    if value is None:
        raise ValueError(f'Invalid {what} {text!r}')
    if hemisphere is not None:
        if angle_text.lstrip().startswith(('-', '+')):
            raise ValueError(f'{what} {text!r} has both a sign and a hemisphere letter')
        if hemisphere in ('S', 'W'):
            value = -value
    return (value, hemisphere)


def parse_location(latitude: str, longitude: str, altitude: str | None = None) -> Observer:
    """Parse the LATITUDE LONGITUDE [ALTITUDE] arguments into an Observer.

    Hemisphere letters replace signs and decide which argument is which: if
    the first argument is marked E/W and the second N/S, they are swapped.

    Parameters:
        latitude: First location argument (normally the latitude).
        longitude: Second location argument (normally the longitude).
        altitude: Optional altitude with unit (metres when no unit).

    Returns:
        Parsed Observer.

    Raises:
        ValueError: If an argument is malformed or both name the same axis.
    """
    first, first_hemi = _signed_angle(latitude, 'latitude')
    second, second_hemi = _signed_angle(longitude, 'longitude')
    if first_hemi in _LONGITUDE_HEMISPHERES or second_hemi in _LATITUDE_HEMISPHERES:
        logger.debug('Location given as longitude, latitude; swapping')
        first, second = second, first
        first_hemi, second_hemi = second_hemi, first_hemi
    if first_hemi in _LONGITUDE_HEMISPHERES or second_hemi in _LATITUDE_HEMISPHERES:
        raise ValueError(f'Both {latitude!r} and {longitude!r} name the same axis')
    alt = parse_altitude(altitude) if altitude is not None else 0.0
    return Observer(latitude_deg=first, longitude_deg=second, altitude_m=alt)


def codeset_is_unicode(codeset: str | None = None) -> bool:
    """True if the locale codeset (e.g. ``UTF-8``) is a Unicode encoding."""
    if codeset is None:
        codeset = locale.nl_langinfo(locale.CODESET)
    return codeset.lower().startswith(('utf', 'ucs'))


def resolve_time_zone(name: str | None) -> tzinfo | None:
    """Return the ZoneInfo for an IANA zone name, or None for system local time.

    Raises:
        ValueError: If the zone name is unknown.
    """
    if name is None:
        return None
    try:
        return ZoneInfo(name)
    except (KeyError, ValueError) as e:
        raise ValueError(f'Unknown time zone {name!r}') from e
