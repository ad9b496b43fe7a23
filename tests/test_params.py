"""Tests for Observer, DisplayConfig and command-line location parsing."""

from __future__ import annotations

import pytest

from orrery.params import (
    DisplayConfig,
    Observer,
    codeset_is_unicode,
    parse_location,
    resolve_time_zone,
)


def test_parse_location_signed_decimal() -> None:
    observer = parse_location('-15.75', '-69.42', '3812')

    assert observer == Observer(latitude_deg=-15.75, longitude_deg=-69.42, altitude_m=3812.0)


def test_parse_location_defaults_altitude_to_sea_level() -> None:
    assert parse_location('51.5', '0').altitude_m == 0.0


def test_parse_location_hemisphere_letters() -> None:
    observer = parse_location('15 45 S', '69:25:12W', '12500ft')

    assert observer.latitude_deg == pytest.approx(-15.75)
    assert observer.longitude_deg == pytest.approx(-69.42)
    assert observer.altitude_m == pytest.approx(3810.0)


def test_parse_location_swaps_longitude_first() -> None:
    """A longitude marked E/W given first is moved to second place."""

    observer = parse_location('69.42W', '15.75S')

    assert observer.latitude_deg == pytest.approx(-15.75)
    assert observer.longitude_deg == pytest.approx(-69.42)


def test_parse_location_swaps_on_latitude_letter_second() -> None:
    observer = parse_location('12.5', '40N')

    assert observer.latitude_deg == pytest.approx(40.0)
    assert observer.longitude_deg == pytest.approx(12.5)


@pytest.mark.parametrize(
    ('latitude', 'longitude'),
    [
        ('10N', '20S'),
        ('10E', '20W'),
        ('-10S', '20'),
        ('10', '+20E'),
        ('abc', '20'),
        ('10', ''),
        ('95', '0'),
    ],
)
def test_parse_location_rejects(latitude: str, longitude: str) -> None:
    with pytest.raises(ValueError):
        parse_location(latitude, longitude)


def test_parse_location_rejects_bad_altitude() -> None:
    with pytest.raises(ValueError):
        parse_location('10', '20', '3 parsecs')


@pytest.mark.parametrize(
    ('longitude', 'normalized'),
    [(190.0, -170.0), (-180.0, 180.0), (180.0, 180.0), (360.0, 0.0), (-190.0, 170.0)],
)
def test_observer_normalizes_longitude(longitude: float, normalized: float) -> None:
    assert Observer(latitude_deg=0.0, longitude_deg=longitude).longitude_deg == pytest.approx(
        normalized
    )


@pytest.mark.parametrize('latitude', [-90.5, 91.0])
def test_observer_rejects_latitude(latitude: float) -> None:
    with pytest.raises(ValueError):
        Observer(latitude_deg=latitude, longitude_deg=0.0)


def test_display_config_defaults() -> None:
    display = DisplayConfig()
    assert display.unicode is True
    assert display.time_zone is None


@pytest.mark.parametrize(
    ('codeset', 'expected'),
    [('UTF-8', True), ('utf8', True), ('UCS-4', True), ('ANSI_X3.4-1968', False), ('ISO-8859-1', False)],
)
def test_codeset_is_unicode(codeset: str, expected: bool) -> None:
    assert codeset_is_unicode(codeset) is expected


def test_resolve_time_zone() -> None:
    assert resolve_time_zone(None) is None
    with pytest.raises(ValueError):
        resolve_time_zone('Not/A_Zone')
