"""Tests for the key-binding table and applying commands to the view state."""

from __future__ import annotations

import curses
from datetime import datetime, timezone

import pytest

from orrery.commands import ESCAPE, Command, apply_command, command_for_key
from orrery.params import Observer
from orrery.view_state import Live, ViewState


def _state() -> ViewState:
    return ViewState(
        observer=Observer(latitude_deg=-15.75, longitude_deg=-69.42),
        clock=lambda: datetime(2020, 2, 7, 0, 30, tzinfo=timezone.utc),
    )


@pytest.mark.parametrize(
    ('key', 'command'),
    [
        ('h', Command.STEP_BACK),
        (curses.KEY_LEFT, Command.STEP_BACK),
        ('l', Command.STEP_FORWARD),
        (curses.KEY_RIGHT, Command.STEP_FORWARD),
        ('n', Command.LIVE),
        ('j', Command.SELECT_NEXT),
        (curses.KEY_DOWN, Command.SELECT_NEXT),
        ('k', Command.SELECT_PREVIOUS),
        (curses.KEY_UP, Command.SELECT_PREVIOUS),
        ('c', Command.CLEAR_SELECTION),
        (ESCAPE, Command.CLEAR_SELECTION),
        ('?', Command.HELP),
        ('q', Command.QUIT),
    ],
)
def test_key_bindings(key: str | int, command: Command) -> None:
    assert command_for_key(key) is command


@pytest.mark.parametrize('key', ['x', 'Q', ' ', curses.KEY_HOME])
def test_unbound_keys(key: str | int) -> None:
    assert command_for_key(key) is None


def test_apply_time_commands() -> None:
    state = _state()
    apply_command(state, Command.STEP_FORWARD)
    assert state.observation_time() == datetime(2020, 2, 7, 1, tzinfo=timezone.utc)
    apply_command(state, Command.STEP_BACK)
    assert state.observation_time() == datetime(2020, 2, 7, 0, tzinfo=timezone.utc)
    apply_command(state, Command.LIVE)
    assert state.moment == Live()


def test_apply_selection_commands() -> None:
    state = _state()
    apply_command(state, Command.SELECT_PREVIOUS)
    assert state.selection == 8
    apply_command(state, Command.SELECT_NEXT)
    assert state.selection == 0
    apply_command(state, Command.CLEAR_SELECTION)
    assert state.selection is None


@pytest.mark.parametrize('command', [Command.HELP, Command.QUIT])
def test_loop_commands_are_not_state_transitions(command: Command) -> None:
    with pytest.raises(ValueError):
        apply_command(_state(), command)
