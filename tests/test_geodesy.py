from __future__ import annotations

import math

import pytest

from parcelplot.schemas.geometry import Coordinate
from parcelplot.services.geodesy import (
    VALID_QUADRANT_PAIRS,
    azimuth_to_quadrant,
    destination,
    distance_ft,
    inverse,
    resolve_azimuth,
)

QUADRANT_CASES = [
    ("N", "E", 30.0),
    ("S", "E", 150.0),
    ("S", "W", 210.0),
    ("N", "W", 330.0),
    ("E", "N", 60.0),
    ("E", "S", 120.0),
    ("W", "S", 240.0),
    ("W", "N", 300.0),
]


def test_eight_quadrant_pairs_are_known() -> None:
    assert VALID_QUADRANT_PAIRS == {(s, e) for s, e, _ in QUADRANT_CASES}


@pytest.mark.parametrize(("start", "end", "expected"), QUADRANT_CASES)
def test_resolve_azimuth_for_30_degrees(start: str, end: str, expected: float) -> None:
    assert resolve_azimuth(start, end, 30.0) == pytest.approx(expected)


@pytest.mark.parametrize(("start", "end"), sorted(VALID_QUADRANT_PAIRS))
@pytest.mark.parametrize("angle", [0.0, 0.5, 45.0, 89.99, 90.0])
def test_resolved_azimuth_stays_in_range(start: str, end: str, angle: float) -> None:
    theta = resolve_azimuth(start, end, angle)
    assert 0.0 <= theta < 360.0


@pytest.mark.parametrize(("start", "end", "expected"), QUADRANT_CASES)
def test_plotted_direction_matches_quadrant(origin: Coordinate, start: str, end: str, expected: float) -> None:
    # walk 1000 ft and check the north/east components of the move
    p = destination(origin, resolve_azimuth(start, end, 30.0), 1000.0)
    north = math.copysign(distance_ft(origin, Coordinate(lat=p.lat, lng=origin.lng)), p.lat)
    east = math.copysign(distance_ft(origin, Coordinate(lat=origin.lat, lng=p.lng)), p.lng)
    assert north == pytest.approx(1000.0 * math.cos(math.radians(expected)), abs=0.5)
    assert east == pytest.approx(1000.0 * math.sin(math.radians(expected)), abs=0.5)


def test_resolve_azimuth_rejects_non_quadrant() -> None:
    with pytest.raises(ValueError):
        resolve_azimuth("N", "S", 10.0)


@pytest.mark.parametrize(
    ("theta", "expected"),
    [
        (0.0, ("N", 0.0, "E")),
        (45.0, ("N", 45.0, "E")),
        (135.0, ("S", 45.0, "E")),
        (225.0, ("S", 45.0, "W")),
        (323.13, ("N", 36.87, "W")),
        (-10.0, ("N", 10.0, "W")),
    ],
)
def test_azimuth_to_quadrant(theta: float, expected) -> None:
    start, angle, end = azimuth_to_quadrant(theta)
    assert (start, end) == (expected[0], expected[2])
    assert angle == pytest.approx(expected[1])
    assert resolve_azimuth(start, end, angle) == pytest.approx(theta % 360.0)


def test_destination_and_inverse_agree(gainesville: Coordinate) -> None:
    p = destination(gainesville, 73.25, 2640.0)
    theta, dist = inverse(gainesville, p)
    assert theta == pytest.approx(73.25, abs=1e-6)
    assert dist == pytest.approx(2640.0, abs=1e-6)


def test_zero_distance_returns_same_point(gainesville: Coordinate) -> None:
    assert destination(gainesville, 123.0, 0.0) == gainesville
