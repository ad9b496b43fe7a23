"""Main loop: compute the sky, draw a frame, wait for one event, repeat."""

from __future__ import annotations

import logging
import time
from datetime import datetime
from typing import Protocol

from orrery.bodies import BODIES
from orrery.commands import Command, apply_command, command_for_key
from orrery.rendering.curses_sink import Event, KeyPress
from orrery.rendering.draw_ops import DrawOp
from orrery.rendering.frame import build_frame
from orrery.rendering.help import build_help
from orrery.sky import CelestialPositionProvider, RiseTransitSet, select_rise_transit_set
from orrery.time_utils import seconds_until_next_minute
from orrery.view_state import ViewState

logger = logging.getLogger(__name__)


class Terminal(Protocol):
    """What the main loop needs from a terminal (``CursesTerminal`` in practice)."""

    def size(self) -> tuple[int, int]:
        ...

    def render(self, ops: list[DrawOp], clear: bool = True) -> None:
        ...

    def next_event(self, timeout: float | None) -> Event:
        ...


def _selected_events(
    state: ViewState, sky: CelestialPositionProvider, when: datetime
) -> RiseTransitSet | None:
    body = state.selected_body
    if body is None:
        return None
    return select_rise_transit_set(sky.events(body, state.observer, when), when)


def run_orrery(
    state: ViewState,
    sky: CelestialPositionProvider,
    terminal: Terminal,
) -> int:
    """Run the interactive chart until the user quits.

    Each pass resolves the observation time once, so every body, the Moon
    phase and the clock in a frame agree. The wait ends at the next minute
    boundary so a Live chart stays current.

    While the help overlay is up the loop waits without a timeout. Only a
    key press closes it; a resize redraws the chart and the overlay at the
    new size.

    Parameters:
        state: View state; mutated by the user's commands.
        sky: Provider of positions, events and the Moon phase.
        terminal: Draw-op sink and event source.

    Returns:
        Process exit code (0).
    """
    showing_help = False
    while True:
        rows, cols = terminal.size()
        when = state.observation_time()
        positions = [sky.position(body, state.observer, when) for body in BODIES]
        moon_phase = sky.moon_phase(when)
        terminal.render(
            build_frame(
                state,
                when,
                positions,
                moon_phase,
                rows,
                cols,
                _selected_events(state, sky, when),
            )
        )

        if showing_help:
            ops = build_help(state.display, rows, cols)
            if ops is None:
                showing_help = False
            else:
                terminal.render(ops, clear=False)
                # the dismissing key is not a command
                if isinstance(terminal.next_event(None), KeyPress):
                    showing_help = False
                continue

        event = terminal.next_event(seconds_until_next_minute(time.time()))
        if not isinstance(event, KeyPress):
            continue
        command = command_for_key(event.key)
        if command is None:
            continue
        if command is Command.QUIT:
            logger.info('Quit requested')
            return 0
        if command is Command.HELP:
            showing_help = True
            continue
        apply_command(state, command)
