"""Time conversion wrappers around rms-julian, plus clock helpers for the redraw loop."""

from __future__ import annotations

import logging
import math
from datetime import datetime, timedelta, timezone, tzinfo

import julian

from orrery.config import get_leapsecs_path
from orrery.constants import SECONDS_PER_DAY, SECONDS_PER_MINUTE, UNIX_J2000_OFFSET

logger = logging.getLogger(__name__)

# Leap seconds loaded once at first use.
_leapsecs_loaded = False

_ONE_HOUR = timedelta(hours=1)


def _ensure_leapsecs() -> None:
    """Load leap seconds file if not already loaded.

    rms-julian requires a NAIF LSK (e.g. naif0012.tls). If the configured file
    is missing or not in LSK format, falls back to rms-julian's bundled LSK.
    """
    global _leapsecs_loaded
    if _leapsecs_loaded:
        return
    # Same UT model as the SPICE kernels the positions come from.
    julian.set_ut_model('SPICE')
    path = get_leapsecs_path()
    try:
        julian.load_lsk(path)
        _leapsecs_loaded = True
    except (OSError, KeyError, ValueError) as e:
        logger.info(
            'Leap seconds from %s not used (%s); using rms-julian bundled LSK.',
            path,
            e,
        )
        try:
            julian.load_lsk()
        except Exception as fallback_err:
            logger.error(
                'Fallback to rms-julian bundled LSK failed: %s',
                fallback_err,
                exc_info=True,
            )
            raise
        _leapsecs_loaded = True


def day_sec_from_datetime(when: datetime) -> tuple[int, float]:
    """Convert an aware datetime to UTC (day, sec) since J2000.

    Parameters:
        when: Timezone-aware datetime.

    Returns:
        (day, sec) where day is days since 2000-01-01 and sec is seconds within that day.
    """
    unix = when.timestamp() - UNIX_J2000_OFFSET
    day = math.floor(unix / SECONDS_PER_DAY)
    return (int(day), unix - day * SECONDS_PER_DAY)


def datetime_from_day_sec(day: int, sec: float) -> datetime:
    """Convert UTC (day, sec) since J2000 back to an aware UTC datetime.

    A leap second (sec >= 86400) is folded into the following day.
    """
    unix = UNIX_J2000_OFFSET + day * SECONDS_PER_DAY + min(sec, SECONDS_PER_DAY)
    return datetime.fromtimestamp(unix, tz=timezone.utc)


def et_from_datetime(when: datetime) -> float:
    """Convert an aware datetime to ET (TDB seconds past J2000) for SPICE.

    Parameters:
        when: Timezone-aware datetime.

    Returns:
        ET (TDB) in seconds.
    """
    _ensure_leapsecs()
    day, sec = day_sec_from_datetime(when)
    tai = float(julian.tai_from_day_sec(day, sec))
    return float(julian.tdb_from_tai(tai))


def datetime_from_et(et: float) -> datetime:
    """Convert ET (TDB seconds) to an aware UTC datetime (inverse of et_from_datetime)."""
    _ensure_leapsecs()
    tai = float(julian.tai_from_tdb(et))
    day, sec = julian.day_sec_from_tai(tai)
    return datetime_from_day_sec(int(day), float(sec))


def truncate_to_hour(when: datetime) -> datetime:
    """Return ``when`` with minutes, seconds and microseconds zeroed."""
    return when.replace(minute=0, second=0, microsecond=0)


def step_hours(when: datetime, direction: int) -> datetime:
    """Truncate to the top of the hour, then move one hour in ``direction`` (-1 or +1).

    Raises:
        ValueError: If direction is not -1 or +1.
    """
    if direction not in (-1, 1):
        raise ValueError(f'direction must be -1 or +1, got {direction!r}')
    return truncate_to_hour(when) + direction * _ONE_HOUR


def seconds_until_next_minute(epoch_seconds: float) -> float:
    """Seconds from ``epoch_seconds`` to the next minute boundary, in (0, 60]."""
    return SECONDS_PER_MINUTE - (epoch_seconds % SECONDS_PER_MINUTE)


def format_event_time(event: datetime | None, reference: datetime, tz: tzinfo | None) -> str:
    """Format a rise/transit/set time for the info panel.

    Parameters:
        event: Event time (aware), or None when the event does not occur.
        reference: Observation moment; its local date decides whether the
            event date is shown.
        tz: Display time zone; None for system local time.

    Returns:
        ``'HH:MM'`` on the reference's local date, ``'HH:MM DD Mon'`` on any
        other date, or ``'never'``.
    """
    if event is None:
        return 'never'
    local = event.astimezone(tz)
    if local.date() == reference.astimezone(tz).date():
        return local.strftime('%H:%M')
    return local.strftime('%H:%M %d %b')
