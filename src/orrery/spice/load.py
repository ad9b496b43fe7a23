"""SPICE kernel loading for the chart bodies (leap seconds, Earth frame, planetary SPK)."""

from __future__ import annotations

import logging
from pathlib import Path

import cspyce

from orrery.config import get_kernel_names, get_spice_path
from orrery.spice.common import get_state

logger = logging.getLogger(__name__)


def load_kernels(
    kernel_names: list[str] | None = None,
    spice_path: str | None = None,
) -> tuple[bool, str | None]:
    """Furnish the kernels needed for topocentric positions of the chart bodies.

    Returns (True, None) if loaded (or already loaded), (False, reason) on failure.

    kernel_names: file names relative to spice_path, or absolute paths;
        None means ORRERY_KERNELS or the default set.
    spice_path: kernel directory; None means SPICE_PATH or the default.
    """
    state = get_state()
    if state.kernels_loaded:
        return (True, None)
    base = Path(spice_path if spice_path is not None else get_spice_path())
    names = kernel_names if kernel_names is not None else get_kernel_names()
    missing: list[str] = []
    paths: list[Path] = []
    for name in names:
        p = Path(name) if Path(name).is_absolute() else base / name
        if p.exists():
            paths.append(p)
        else:
            missing.append(str(p))
    if missing:
        logger.warning('Kernel files not found: %s', ', '.join(missing))
        return (
            False,
            f"Kernel files not found: {', '.join(missing)}. "
            'Set SPICE_PATH to a directory holding them, or list others in ORRERY_KERNELS.',
        )
    for p in paths:
        try:
            cspyce.furnsh(str(p))
        except Exception as e:
            logger.error('Failed to load %s: %s', p, e)
            return (False, f'Failed to load {p}: {e}')
        logger.info('Loaded kernel %s', p)
        state.loaded.append(str(p))
    state.kernels_loaded = True
    return (True, None)
