"""Angle and altitude parsing and degree/minute/second formatting for observer locations."""

from __future__ import annotations

import re

from orrery.constants import ARCMIN_PER_DEGREE, ARCSEC_PER_DEGREE, METERS_PER_UNIT

_NUMBER = r'\d+(?:\.\d*)?|\.\d+'

_HEMISPHERE_SUFFIX = re.compile(r'^(?P<angle>.*?)\s*(?P<hemi>[NSEW])$', re.IGNORECASE)
_HEMISPHERE_PREFIX = re.compile(r'^(?P<hemi>[NSEW])\s*(?P<angle>.*)$', re.IGNORECASE)

# 12°34'56.7" with minutes and seconds optional; '' stands in for " on some keyboards.
_SYMBOL_ANGLE = re.compile(
    rf"""^(?P<sign>[+-]?)\s*(?P<deg>{_NUMBER})\s*[°º]
        \s*(?:(?P<min>{_NUMBER})\s*['′’]\s*)?
        (?:(?P<sec>{_NUMBER})\s*(?:"|″|”|'')\s*)?$""",
    re.VERBOSE,
)

_FEET_INCHES = re.compile(
    rf"""^(?:(?P<feet>[+-]?(?:{_NUMBER}))\s*['′’])?
        \s*(?:(?P<inches>{_NUMBER})\s*(?:"|″|”|''))?$""",
    re.VERBOSE,
)
_NUMBER_WITH_UNIT = re.compile(
    rf'^(?P<value>[+-]?(?:{_NUMBER}))\s*(?P<unit>[a-z]*)$',
    re.IGNORECASE,
)


def parse_angle(string: str) -> float | None:
    """Parse an angle as degrees, minutes, and seconds.

    Accepts a signed decimal number, or up to three numbers separated by
    colons or whitespace (``"-15:45:00"``, ``"69 25"``), or the symbol form
    ``15°45'00"``. Minutes and seconds must be non-negative and a leading
    minus makes the whole angle negative.

    Parameters:
        string: Angle text without hemisphere letter.

    Returns:
        Angle in degrees, or None on parse failure.
    """
    s = string.strip()
    if len(s) == 0:
        return None
    if '°' in s or 'º' in s:
        return _parse_symbol_angle(s)
    parts = [p for p in re.split(r'[\s:]+', s) if p]
    if not 1 <= len(parts) <= 3:
        return None
    try:
        values = [float(p) for p in parts]
    except ValueError:
        return None
    if any(v < 0 for v in values[1:]):
        return None
    angle = abs(values[0])
    if len(values) >= 2:
        angle += values[1] / ARCMIN_PER_DEGREE
    if len(values) == 3:
        angle += values[2] / ARCSEC_PER_DEGREE
    # Leading minus
    if s.startswith('-'):
        angle = -angle
    return angle


def _parse_symbol_angle(s: str) -> float | None:
    match = _SYMBOL_ANGLE.match(s)
    if match is None:
        return None
    angle = float(match.group('deg'))
    if match.group('min'):
        angle += float(match.group('min')) / ARCMIN_PER_DEGREE
    if match.group('sec'):
        angle += float(match.group('sec')) / ARCSEC_PER_DEGREE
    if match.group('sign') == '-':
        angle = -angle
    return angle


def split_hemisphere(string: str) -> tuple[str, str | None]:
    """Split a hemisphere letter (N/S/E/W, any case) off the end or start of an angle.

    Parameters:
        string: Angle text such as ``"15.75S"`` or ``"W 69 25 12"``.

    Returns:
        ``(angle_text, hemisphere)`` with the hemisphere upper-cased, or None
        when no letter is present.
    """
    s = string.strip()
    match = _HEMISPHERE_SUFFIX.match(s) or _HEMISPHERE_PREFIX.match(s)
    if match is None:
        return (s, None)
    return (match.group('angle').strip(), match.group('hemi').upper())


def parse_altitude(string: str) -> float:
    """Parse an altitude into metres.

    Accepts a bare number (metres), a number with unit ``m``, ``ft``, ``yd``
    or ``in``, or feet and inches written ``5'6"``.

    Parameters:
        string: Altitude text.

    Returns:
        Altitude in metres.

    Raises:
        ValueError: If the text is not a recognised altitude.
    """
    s = string.strip()
    if s == '':
        raise ValueError('Empty altitude')
    match = _NUMBER_WITH_UNIT.match(s)
    if match is not None:
        unit = match.group('unit').lower() or 'm'
        if unit not in METERS_PER_UNIT:
            raise ValueError(
                f'Unknown altitude unit {unit!r}; use one of ' + ', '.join(METERS_PER_UNIT)
            )
        return float(match.group('value')) * METERS_PER_UNIT[unit]
    match = _FEET_INCHES.match(s)
    if match is not None and (match.group('feet') or match.group('inches')):
        feet = float(match.group('feet') or 0.0)
        inches = float(match.group('inches') or 0.0)
        sign = -1.0 if feet < 0 or s.startswith('-') else 1.0
        total = abs(feet) * METERS_PER_UNIT['ft'] + inches * METERS_PER_UNIT['in']
        return sign * total
    raise ValueError(f'Invalid altitude {string!r}')


def dms_components(value: float) -> tuple[str, int, int, int]:
    """Split an angle in degrees into sign and whole degrees, minutes, seconds.

    Seconds are rounded to the nearest whole second with carry into minutes
    and degrees.

    Parameters:
        value: Angle in degrees.

    Returns:
        ``(sign, degrees, minutes, seconds)`` with sign ``'+'`` or ``'-'``.
    """
    sign = '+' if value >= 0 else '-'
    isec = round(abs(value) * ARCSEC_PER_DEGREE)
    imin = isec // 60
    isec = isec - 60 * imin
    ideg = imin // 60
    imin = imin - 60 * ideg
    if ideg == 0 and imin == 0 and isec == 0:
        sign = '+'
    return (sign, int(ideg), int(imin), int(isec))
