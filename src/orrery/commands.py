"""User commands and the key-binding table that maps keypresses onto them."""

from __future__ import annotations

import curses
import enum
import logging

from orrery.view_state import ViewState

logger = logging.getLogger(__name__)

ESCAPE = '\x1b'


class Command(enum.Enum):
    """Everything a keypress can ask for."""

    STEP_BACK = 'step back'
    STEP_FORWARD = 'step forward'
    LIVE = 'live'
    SELECT_NEXT = 'select next'
    SELECT_PREVIOUS = 'select previous'
    CLEAR_SELECTION = 'clear selection'
    HELP = 'help'
    QUIT = 'quit'


# Keys are characters (str) or curses special-key codes (int).
KEY_BINDINGS: dict[str | int, Command] = {
    'h': Command.STEP_BACK,
    curses.KEY_LEFT: Command.STEP_BACK,
    'l': Command.STEP_FORWARD,
    curses.KEY_RIGHT: Command.STEP_FORWARD,
    'n': Command.LIVE,
    'j': Command.SELECT_NEXT,
    curses.KEY_DOWN: Command.SELECT_NEXT,
    'k': Command.SELECT_PREVIOUS,
    curses.KEY_UP: Command.SELECT_PREVIOUS,
    'c': Command.CLEAR_SELECTION,
    ESCAPE: Command.CLEAR_SELECTION,
    '?': Command.HELP,
    'q': Command.QUIT,
}


def command_for_key(key: str | int) -> Command | None:
    """Look up the command bound to a key, or None if unbound."""
    command = KEY_BINDINGS.get(key)
    if command is None:
        logger.debug('Unbound key %r', key)
    return command


def apply_command(state: ViewState, command: Command) -> None:
    """Apply a state-changing command to the view state.

    HELP and QUIT do not change the view state; the main loop handles them.

    Raises:
        ValueError: If given HELP or QUIT.
    """
    if command is Command.STEP_BACK:
        state.step_time(-1)
    elif command is Command.STEP_FORWARD:
        state.step_time(1)
    elif command is Command.LIVE:
        state.reset_to_live()
    elif command is Command.SELECT_NEXT:
        state.select_next()
    elif command is Command.SELECT_PREVIOUS:
        state.select_previous()
    elif command is Command.CLEAR_SELECTION:
        state.clear_selection()
    else:
        raise ValueError(f'{command} is handled by the main loop, not the view state')
