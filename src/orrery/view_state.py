"""Interactive view state: observation moment, selected body and visible range."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Union

from orrery.bodies import BODIES, CelestialBody
from orrery.params import DisplayConfig, Observer
from orrery.rendering.projection import VisibleRange, default_range
from orrery.time_utils import step_hours

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Current wall-clock time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Live:
    """Follow the wall clock; resolved again on every redraw."""


@dataclass(frozen=True)
class Frozen:
    """A fixed observation time (aware datetime) kept until cleared."""

    timestamp: datetime


ObservationMoment = Union[Live, Frozen]


@dataclass
class ViewState:
    """Everything the chart shows besides the sky itself; mutated by user commands.

    Attributes:
        observer: Observer location (immutable).
        display: Display options fixed at startup (glyph set, time zone).
        visible_range: Chart bounds; defaults by observer hemisphere.
        moment: Live or Frozen observation time.
        selection: Index into BODIES, or None.
        clock: Source of the current UTC time.
    """

    observer: Observer
    display: DisplayConfig = field(default_factory=DisplayConfig)
    visible_range: VisibleRange | None = None
    moment: ObservationMoment = field(default_factory=Live)
    selection: int | None = None
    clock: Callable[[], datetime] = utc_now

    def __post_init__(self) -> None:
        if self.visible_range is None:
            self.visible_range = default_range(self.observer.latitude_deg)

    @property
    def is_frozen(self) -> bool:
        """True while the time axis is Frozen."""
        return isinstance(self.moment, Frozen)

    @property
    def selected_body(self) -> CelestialBody | None:
        """The selected body, or None."""
        return None if self.selection is None else BODIES[self.selection]

    def observation_time(self) -> datetime:
        """Concrete time to draw: the frozen timestamp, or now when Live."""
        if isinstance(self.moment, Frozen):
            return self.moment.timestamp
        return self.clock()

    def step_time(self, direction: int) -> None:
        """Move one hour back (-1) or forward (+1) from the top of the current hour.

        From Live, the current time is snapshotted first, so the first step
        lands on an hour boundary next to now. The result is always Frozen.
        """
        self.moment = Frozen(step_hours(self.observation_time(), direction))
        logger.debug('Time frozen at %s', self.moment.timestamp.isoformat())

    def reset_to_live(self) -> None:
        """Discard any frozen time and follow the wall clock again."""
        self.moment = Live()

    def select_next(self) -> None:
        """Select the next body; from no selection, the first."""
        if self.selection is None:
            self.selection = 0
        else:
            self.selection = (self.selection + 1) % len(BODIES)

    def select_previous(self) -> None:
        """Select the previous body; from no selection, the last."""
        if self.selection is None:
            self.selection = len(BODIES) - 1
        else:
            self.selection = (self.selection - 1) % len(BODIES)

    def clear_selection(self) -> None:
        """Select nothing."""
        self.selection = None
