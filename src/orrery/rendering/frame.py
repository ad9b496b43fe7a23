"""Frame builder: axes, body glyphs, selection panel and status line as draw ops."""

from __future__ import annotations

import math
from datetime import datetime

from orrery.angle_utils import dms_components
from orrery.bodies import DRAW_ORDER, MOON, SUN
from orrery.constants import AZIMUTH_TICKS_DEG, ELEVATION_LABELS_DEG
from orrery.params import Observer
from orrery.rendering.draw_ops import (
    BULLET,
    DEGREE,
    PLUS,
    DrawOp,
    Glyph,
    HLine,
    Text,
    VLine,
)
from orrery.rendering.projection import (
    VisibleRange,
    azimuth_to_column,
    elevation_to_row,
    project,
)
from orrery.sky import BodyPosition, MoonPhase, RiseTransitSet, moon_phase_name
from orrery.time_utils import format_event_time
from orrery.view_state import ViewState

# Info panel value columns: event times, and the az/el numbers
PANEL_VALUE_COL = 11
PANEL_ANGLE_COL = 13


def build_frame(
    state: ViewState,
    when: datetime,
    positions: list[BodyPosition],
    moon_phase: MoonPhase,
    rows: int,
    cols: int,
    rise_transit_set: RiseTransitSet | None = None,
) -> list[DrawOp]:
    """Build the draw ops for one full frame, in drawing order.

    Parameters:
        state: Current view state.
        when: Observation time the positions were computed for.
        positions: Positions of the chart bodies at ``when``.
        moon_phase: Moon phase at ``when``.
        rows: Viewport height.
        cols: Viewport width.
        rise_transit_set: Events of the selected body (ignored without a
            selection; None shows every event as never).

    Returns:
        Draw ops: axes, bodies farthest first, selection panel, status line.
    """
    ops: list[DrawOp] = []
    ops.extend(axis_ops(state.visible_range, rows, cols))
    by_body = {position.body: position for position in positions}
    for body in DRAW_ORDER:
        if body in by_body:
            ops.append(
                body_op(by_body[body], state.visible_range, rows, cols, state.display.unicode)
            )
    selected = state.selected_body
    if selected is not None and selected in by_body:
        ops.extend(
            selection_ops(
                by_body[selected],
                state,
                when,
                rise_transit_set or RiseTransitSet(),
                rows,
                cols,
            )
        )
    ops.extend(status_ops(state, when, moon_phase, rows, cols))
    return ops


def axis_ops(visible_range: VisibleRange, rows: int, cols: int) -> list[DrawOp]:
    """Horizon line with compass ticks, and the north/south elevation axes.

    A vertical axis that falls on an edge of the azimuth range is skipped.
    """
    ops: list[DrawOp] = []
    y_line = elevation_to_row(0.0, visible_range, rows, cols)
    ops.append(HLine(y_line, 0, cols))
    for az in AZIMUTH_TICKS_DEG:
        x_label = azimuth_to_column(math.radians(az), visible_range, rows, cols)
        if az == 90:
            ops.append(Text(y_line, x_label, 'E'))
        elif az == 270:
            ops.append(Text(y_line, x_label, 'W'))
        else:
            ops.append(Glyph(y_line, x_label, PLUS))

    for az in (0.0, math.pi):
        if az in (visible_range.min_azimuth, visible_range.max_azimuth):
            continue
        x_line = azimuth_to_column(az, visible_range, rows, cols)
        ops.append(VLine(0, x_line, rows))
        ops.append(Glyph(y_line, x_line, PLUS))
        for el in ELEVATION_LABELS_DEG:
            y_label = elevation_to_row(math.radians(el), visible_range, rows, cols)
            if el == 0:
                ops.append(Glyph(y_label, x_line, PLUS))
            else:
                ops.append(Text(y_label, x_line - 2, f'{el: d}'))
                ops.append(Glyph(y_label, x_line + 1, DEGREE))
    return ops


def body_op(
    position: BodyPosition,
    visible_range: VisibleRange,
    rows: int,
    cols: int,
    unicode: bool,
    reverse: bool = False,
) -> Text:
    """Glyph of one body at its projected cell."""
    row, col = project(position.azimuth, position.elevation, visible_range, rows, cols)
    return Text(row, col, position.body.glyph(unicode), reverse=reverse)


def selection_ops(
    position: BodyPosition,
    state: ViewState,
    when: datetime,
    rise_transit_set: RiseTransitSet,
    rows: int,
    cols: int,
) -> list[DrawOp]:
    """Highlighted glyph and the top-left info panel for the selected body."""
    tz = state.display.time_zone
    ops: list[DrawOp] = [
        body_op(position, state.visible_range, rows, cols, state.display.unicode, reverse=True),
        Text(0, 0, position.body.name),
        Text(2, 2, 'azimuth:'),
        Text(2, PANEL_ANGLE_COL, f'{int(math.degrees(position.azimuth)): 3d}'),
        Glyph(2, PANEL_ANGLE_COL + 3, DEGREE),
        Text(3, 0, 'elevation:'),
        Text(3, PANEL_ANGLE_COL, f'{int(math.degrees(position.elevation)): 3d}'),
        Glyph(3, PANEL_ANGLE_COL + 3, DEGREE),
        Text(5, 5, 'rise:'),
        Text(5, PANEL_VALUE_COL, format_event_time(rise_transit_set.rise, when, tz)),
        Text(6, 2, 'transit:'),
        Text(6, PANEL_VALUE_COL, format_event_time(rise_transit_set.transit, when, tz)),
        Text(7, 6, 'set:'),
        Text(7, PANEL_VALUE_COL, format_event_time(rise_transit_set.set, when, tz)),
    ]
    return ops


def location_text(observer: Observer) -> str:
    """Observer as ``DDD MM'SS"H DDD MM'SS"H AAAAm`` (degree marks drawn separately)."""
    lat_sign, lat_d, lat_m, lat_s = dms_components(observer.latitude_deg)
    lon_sign, lon_d, lon_m, lon_s = dms_components(observer.longitude_deg)
    return (
        f'{lat_d:3d} {lat_m:02d}\'{lat_s:02d}"{"N" if lat_sign == "+" else "S"} '
        f'{lon_d:3d} {lon_m:02d}\'{lon_s:02d}"{"E" if lon_sign == "+" else "W"} '
        f'{int(observer.altitude_m):4d}m'
    )


def moon_text(moon_phase: MoonPhase) -> str:
    """Phase name and illuminated percentage, e.g. ``waxing gibbous 93%``."""
    name = moon_phase_name(moon_phase.phase)
    if moon_phase.illumination < 1.0:
        return f'{name} {int(moon_phase.illumination * 100):2d}%'
    return f'{name} --%'


def status_ops(
    state: ViewState,
    when: datetime,
    moon_phase: MoonPhase,
    rows: int,
    cols: int,
) -> list[DrawOp]:
    """Bottom rows: location and altitude left; Moon phase and local time right."""
    bottom = rows - 1
    ops: list[DrawOp] = [
        Text(bottom, 0, location_text(state.observer)),
        Glyph(bottom, 3, DEGREE),
        Glyph(bottom, 15, DEGREE),
    ]
    phase = moon_text(moon_phase)
    ops.append(Text(bottom - 1, cols - len(phase), phase))
    clock = when.astimezone(state.display.time_zone).strftime('%a %Y-%m-%d %H:%M')
    ops.append(Text(bottom, cols - len(clock), clock))
    if state.is_frozen:
        ops.append(Glyph(bottom, cols - 23, BULLET))
    if state.display.unicode:
        ops.append(Text(bottom - 1, cols - 22, MOON.symbol))
        ops.append(Text(bottom, cols - 22, SUN.symbol))
    return ops
