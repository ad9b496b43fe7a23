"""Configuration: SPICE kernel paths, display time zone and logging from environment."""

import os
from pathlib import Path

# Env var overrides with sensible defaults.
DEFAULT_SPICE_PATH = '~/.local/share/orrery/spice/'
DEFAULT_KERNELS = ('naif0012.tls', 'pck00010.tpc', 'de440s.bsp')
DEFAULT_LOG_LEVEL = 'WARNING'


def get_spice_path() -> str:
    """Return SPICE kernel root directory (SPICE_PATH env var or default).

    Returns:
        Path string with ``~`` expanded.
    """
    return os.path.expanduser(os.environ.get('SPICE_PATH', DEFAULT_SPICE_PATH))


def get_kernel_names() -> list[str]:
    """Return kernel file names to load, relative to SPICE_PATH.

    ORRERY_KERNELS is a comma-separated list; absolute entries are used as-is.

    Returns:
        Kernel names in load order.
    """
    raw = os.environ.get('ORRERY_KERNELS', '').strip()
    if not raw:
        return list(DEFAULT_KERNELS)
    return [name.strip() for name in raw.split(',') if name.strip()]


def get_leapsecs_path() -> str:
    """Return path to a NAIF LSK leap seconds file for rms-julian.

    Prefers JULIAN_LEAPSECS, then a known .tls under SPICE_PATH, then
    leapsecs.txt (which makes rms-julian fall back to its bundled LSK).

    Returns:
        Path string to LSK or leapsecs file.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    if path:
        return path
    base = Path(get_spice_path())
    for name in ('naif0012.tls', 'naif0011.tls', 'leapseconds.tls'):
        p = base / name
        if p.exists():
            return str(p)
    return str(base / 'leapsecs.txt')


def get_time_zone_name() -> str | None:
    """Return the IANA display time zone (ORRERY_TZ), or None for system local time."""
    name = os.environ.get('ORRERY_TZ', '').strip()
    return name or None


def get_log_level() -> str:
    """Return log level name from ORRERY_LOG (DEBUG..CRITICAL), default WARNING."""
    level = os.environ.get('ORRERY_LOG', '').strip().upper()
    if level in ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'):
        return level
    return DEFAULT_LOG_LEVEL


def get_log_file() -> str | None:
    """Return log file path (ORRERY_LOG_FILE), or None to log to stderr."""
    path = os.environ.get('ORRERY_LOG_FILE', '').strip()
    return path or None
