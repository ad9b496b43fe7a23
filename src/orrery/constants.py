"""Fixed constants: time and angle units, event search, terminal layout sizes."""

import math

# Time: seconds per unit
SECONDS_PER_MINUTE = 60.0
SECONDS_PER_HOUR = 3600.0
SECONDS_PER_DAY = 86400.0
J2000_JD = 2451545.0  # Julian date of J2000 (TDB), where ET is zero
UNIX_J2000_OFFSET = 946684800  # Unix seconds at 2000-01-01T00:00:00 UTC (rms-julian day 0)

# Angle: sexagesimal units
TWOPI = 2.0 * math.pi
HALFPI = 0.5 * math.pi
ARCMIN_PER_DEGREE = 60.0
ARCSEC_PER_DEGREE = 3600.0

# Length: metres per unit (altitude suffixes)
METERS_PER_UNIT: dict[str, float] = {
    'm': 1.0,
    'ft': 0.3048,
    'yd': 0.9144,
    'in': 0.0254,
}

# GRS 80 reference spheroid
EARTH_RAD_KM = 6378.137
EARTH_FLAT = 1.0 / 298.257222

# Rise/transit/set search: sample step, half-window and refinement tolerance (seconds)
EVENT_SEARCH_STEP = 600.0
EVENT_SEARCH_HALF_WINDOW = 36.0 * SECONDS_PER_HOUR
EVENT_SEARCH_TOLERANCE = 1.0
# Longest rise-to-transit or transit-to-set interval considered one diurnal arc
HALF_ARC_LIMIT = 13.0 * SECONDS_PER_HOUR

# Axis ticks and labels (degrees)
AZIMUTH_TICKS_DEG = (45, 90, 135, 180, 225, 270, 315)
ELEVATION_LABELS_DEG = (-60, -30, 0, 30, 60)

# Help overlay needs at least this much room
HELP_LINES = 13
HELP_COLS = 60

# Moon phase buckets: (upper bound of lunation fraction, name)
MOON_PHASE_BUCKETS = (
    (0.02, 'new'),
    (0.24, 'waxing crescent'),
    (0.26, 'first quarter'),
    (0.49, 'waxing gibbous'),
    (0.51, 'full'),
    (0.74, 'waning gibbous'),
    (0.76, 'last quarter'),
    (0.99, 'waning crescent'),
)
