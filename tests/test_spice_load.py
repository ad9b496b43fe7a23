"""Tests for SPICE kernel loading."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from orrery.spice.common import get_state
from orrery.spice.load import load_kernels
from orrery.spice.provider import SpiceSky


@pytest.fixture(autouse=True)
def fresh_state() -> Iterator[None]:
    """Each test starts with an empty kernel pool record and leaves one behind."""

    state = get_state()
    saved = (state.kernels_loaded, list(state.loaded))
    state.reset()
    yield
    state.kernels_loaded, state.loaded = saved


@pytest.fixture
def furnished(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    paths: list[str] = []
    monkeypatch.setattr('cspyce.furnsh', paths.append)
    return paths


def test_loads_kernels_in_order(tmp_path: Path, furnished: list[str]) -> None:
    for name in ('a.tls', 'b.tpc', 'c.bsp'):
        (tmp_path / name).touch()

    ok, reason = load_kernels(['a.tls', 'b.tpc', 'c.bsp'], str(tmp_path))

    assert (ok, reason) == (True, None)
    expected = [str(tmp_path / n) for n in ('a.tls', 'b.tpc', 'c.bsp')]
    assert furnished == expected
    assert get_state().kernels_loaded is True
    assert get_state().loaded == expected


def test_absolute_kernel_paths_ignore_spice_path(tmp_path: Path, furnished: list[str]) -> None:
    kernel = tmp_path / 'elsewhere.bsp'
    kernel.touch()

    ok, _ = load_kernels([str(kernel)], '/nonexistent')

    assert ok is True
    assert furnished == [str(kernel)]


def test_uses_environment_defaults(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path, furnished: list[str]
) -> None:
    (tmp_path / 'only.bsp').touch()
    monkeypatch.setenv('SPICE_PATH', str(tmp_path))
    monkeypatch.setenv('ORRERY_KERNELS', 'only.bsp')

    assert load_kernels() == (True, None)
    assert furnished == [str(tmp_path / 'only.bsp')]


def test_missing_kernels_load_nothing(tmp_path: Path, furnished: list[str]) -> None:
    (tmp_path / 'a.tls').touch()

    ok, reason = load_kernels(['a.tls', 'missing.bsp'], str(tmp_path))

    assert ok is False
    assert reason is not None
    assert str(tmp_path / 'missing.bsp') in reason
    assert 'SPICE_PATH' in reason
    assert furnished == []
    assert get_state().kernels_loaded is False


def test_furnsh_failure(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (tmp_path / 'bad.bsp').touch()

    def _furnsh(path: str) -> None:
        raise OSError('SPICE(INVALIDFORMAT)')

    monkeypatch.setattr('cspyce.furnsh', _furnsh)

    ok, reason = load_kernels(['bad.bsp'], str(tmp_path))

    assert ok is False
    assert reason is not None
    assert 'INVALIDFORMAT' in reason


def test_loads_only_once(tmp_path: Path, furnished: list[str]) -> None:
    (tmp_path / 'a.bsp').touch()

    assert load_kernels(['a.bsp'], str(tmp_path)) == (True, None)
    assert load_kernels(['other.bsp'], str(tmp_path)) == (True, None)
    assert furnished == [str(tmp_path / 'a.bsp')]


def test_spice_sky_raises_without_kernels(tmp_path: Path, furnished: list[str]) -> None:
    with pytest.raises(RuntimeError, match='SPICE kernels not loaded'):
        SpiceSky(['de440s.bsp'], str(tmp_path))
