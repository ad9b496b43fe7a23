"""Azimuth/elevation to terminal cell projection over a configurable visible range."""

from __future__ import annotations

import math
from dataclasses import dataclass

from orrery.constants import HALFPI, TWOPI


class ConfigurationError(ValueError):
    """A visible range or viewport that cannot be projected onto (zero-width axis)."""


@dataclass(frozen=True)
class VisibleRange:
    """Azimuth and elevation bounds of the chart (radians); max > min on both axes."""

    min_azimuth: float
    max_azimuth: float
    min_elevation: float
    max_elevation: float

    def __post_init__(self) -> None:
        if not self.max_azimuth > self.min_azimuth:
            raise ConfigurationError(
                f'azimuth range is empty: [{self.min_azimuth}, {self.max_azimuth}]'
            )
        if not self.max_elevation > self.min_elevation:
            raise ConfigurationError(
                f'elevation range is empty: [{self.min_elevation}, {self.max_elevation}]'
            )


def default_range(latitude_deg: float) -> VisibleRange:
    """Full-sky range centred due south for northern observers, due north otherwise."""
    if latitude_deg > 0:
        return VisibleRange(0.0, TWOPI, -HALFPI, HALFPI)
    return VisibleRange(-math.pi, math.pi, -HALFPI, HALFPI)


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def project(
    azimuth: float,
    elevation: float,
    visible_range: VisibleRange,
    rows: int,
    cols: int,
) -> tuple[int, int]:
    """Map azimuth/elevation (radians) to a terminal (row, col).

    An azimuth past the range's maximum is moved back one turn first, so a
    body just beyond the right edge lands just off the right side rather
    than wrapping to the left. The minimum elevation maps to row ``rows``
    and the maximum to row 0; the minimum azimuth maps to column 0 and the
    maximum to column ``cols``. Results may lie outside the viewport.

    Parameters:
        azimuth: Azimuth in radians (0 = north, clockwise).
        elevation: Elevation in radians.
        visible_range: Chart bounds.
        rows: Viewport height in cells.
        cols: Viewport width in cells.

    Returns:
        (row, col).

    Raises:
        ConfigurationError: If the viewport is not positive.
    """
    if rows <= 0 or cols <= 0:
        raise ConfigurationError(f'viewport must be positive, got {rows}x{cols}')
    r = visible_range
    if azimuth > r.max_azimuth:
        azimuth -= TWOPI
    row = round_half_away(
        rows - rows * (elevation - r.min_elevation) / (r.max_elevation - r.min_elevation)
    )
    col = round_half_away(cols * (azimuth - r.min_azimuth) / (r.max_azimuth - r.min_azimuth))
    return (row, col)


def azimuth_to_column(azimuth: float, visible_range: VisibleRange, rows: int, cols: int) -> int:
    """Column of an azimuth (the projection with elevation fixed at 0)."""
    return project(azimuth, 0.0, visible_range, rows, cols)[1]


def elevation_to_row(elevation: float, visible_range: VisibleRange, rows: int, cols: int) -> int:
    """Row of an elevation (the projection with azimuth fixed at 0)."""
    return project(0.0, elevation, visible_range, rows, cols)[0]
