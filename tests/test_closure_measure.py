from __future__ import annotations

import pytest

from parcelplot.schemas.geometry import Coordinate
from parcelplot.services.closure import suggest_closing_call, to_dms, validate_closure
from parcelplot.services.geodesy import destination
from parcelplot.services.measure import calculate_area, calculate_perimeter, closed_ring
from parcelplot.services.parsing import extract_calls, normalize_description
from parcelplot.services.plotting import plot_calls


@pytest.fixture
def open_triangle(origin: Coordinate):
    calls, _ = extract_calls(normalize_description("N90E 300\nS00E 400"))
    coords, _ = plot_calls(calls, origin)
    return coords


def test_too_few_points_is_reported(origin: Coordinate) -> None:
    is_closed, errors = validate_closure([origin, origin])
    assert not is_closed
    assert errors == ["insufficient points: at least 3 coordinates are required, got 2"]


def test_open_boundary_is_reported(open_triangle) -> None:
    is_closed, errors = validate_closure(open_triangle)
    assert not is_closed
    assert len(errors) == 1
    assert errors[0].startswith("boundary is not closed: last point is 500.")


def test_tolerance_is_configurable(open_triangle) -> None:
    assert validate_closure(open_triangle, tolerance_ft=600.0) == (True, [])


def test_closing_suggestion(open_triangle) -> None:
    s = suggest_closing_call(open_triangle)
    assert (s.start_cardinal, s.end_cardinal) == ("N", "W")
    assert (s.angle.degrees, s.angle.minutes) == (36, 52)
    assert s.distance_ft == pytest.approx(500.0, abs=0.5)
    assert s.description.startswith("N 36.52.")
    assert s.description.endswith(" W 500.00")


def test_closing_suggestion_needs_two_points(origin: Coordinate) -> None:
    assert suggest_closing_call([origin]) is None


def test_to_dms_rounds_to_seconds() -> None:
    dms = to_dms(36.869897)
    assert (dms.degrees, dms.minutes, dms.seconds) == (36, 52, 12)
    assert str(dms) == "36.52.12"


def test_area_of_open_triangle(open_triangle) -> None:
    assert calculate_area(open_triangle) == pytest.approx(60000.0, abs=60.0)
    assert calculate_perimeter(open_triangle) == pytest.approx(1200.0, abs=0.5)


def test_two_points_measure_without_error(origin: Coordinate) -> None:
    b = destination(origin, 90.0, 250.0)
    assert calculate_area([origin, b]) == 0.0
    # the closing leg counts
    assert calculate_perimeter([origin, b]) == pytest.approx(500.0, abs=1e-6)


def test_measure_does_not_mutate_input(open_triangle) -> None:
    before = list(open_triangle)
    calculate_area(open_triangle)
    calculate_perimeter(open_triangle)
    assert open_triangle == before
    assert len(closed_ring(open_triangle)) == len(before) + 1


def test_empty_inputs() -> None:
    assert calculate_area([]) == 0.0
    assert calculate_perimeter([]) == 0.0
