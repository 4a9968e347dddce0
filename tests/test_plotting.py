from __future__ import annotations

import pytest

from parcelplot.schemas.geometry import Coordinate, CurveSegment, LineSegment
from parcelplot.schemas.parsing import BearingCall, DMSAngle
from parcelplot.services.geodesy import destination, distance_ft
from parcelplot.services.parsing import extract_calls, normalize_description
from parcelplot.services.plotting import curve_steps, plot_bearing, plot_calls


def _calls(text: str):
    calls, errors = extract_calls(normalize_description(text))
    assert errors == []
    return calls


def test_coordinates_and_segments_follow_calls(gainesville: Coordinate) -> None:
    calls = _calls("N45E 100; S45E 100; S45W 100")
    coords, segments = plot_calls(calls, gainesville)
    assert len(coords) == len(calls) + 1
    assert len(segments) == len(calls)
    assert coords[0] == gainesville
    for i, seg in enumerate(segments):
        assert seg.index == i
        assert seg.start == coords[i]
        assert seg.end == coords[i + 1]


def test_retrace_returns_to_start(gainesville: Coordinate) -> None:
    coords, _ = plot_calls(_calls("N45E 100; S45W 100"), gainesville)
    assert distance_ft(coords[0], coords[-1]) < 0.01


def test_square_closes(origin: Coordinate) -> None:
    coords, segments = plot_calls(_calls("N00E 100; N90E 100; S00E 100; N90W 100"), origin)
    assert all(isinstance(s, LineSegment) for s in segments)
    assert distance_ft(coords[0], coords[-1]) < 0.01
    assert [s.azimuth for s in segments] == pytest.approx([0.0, 90.0, 180.0, 270.0])


def test_zero_distance_leg_is_degenerate(origin: Coordinate) -> None:
    call = BearingCall(start_cardinal="N", end_cardinal="E", angle=DMSAngle(degrees=10), distance_ft=0)
    seg = plot_bearing(call, origin)
    assert seg.start == seg.end == origin
    assert seg.description == "N10.00.00E 0'"


def test_curve_render_points(origin: Coordinate) -> None:
    calls = _calls("curve right radius 100 arc 157.08 delta 90 chord n45e 141.42")
    coords, segments = plot_calls(calls, origin)
    seg = segments[0]
    assert isinstance(seg, CurveSegment)
    # 90 degrees of sweep -> 45 steps
    assert len(seg.render_points) == 46
    assert distance_ft(seg.render_points[0], origin) < 1e-6
    assert seg.render_points[-1] == seg.end == coords[-1]
    chord_end = destination(origin, 45.0, 141.42)
    assert distance_ft(seg.end, chord_end) < 0.5


def test_curve_centre_is_equidistant(origin: Coordinate) -> None:
    seg = plot_calls(_calls("curve left radius 250 arc 130.9 delta 30 chord n15w 129.41"), origin)[1][0]
    radii = [distance_ft(seg.center, p) for p in seg.render_points]
    assert max(radii) - min(radii) < 1e-6
    assert radii[0] == pytest.approx(250.0, abs=0.5)
    # left curve heading north-west bends towards the west
    assert seg.center.lng < origin.lng


@pytest.mark.parametrize(("delta", "steps"), [(5.0, 10), (20.0, 10), (21.0, 11), (90.0, 45)])
def test_curve_steps(delta: float, steps: int) -> None:
    assert curve_steps(delta, min_steps=10) == steps


@pytest.mark.parametrize(
    "text",
    [
        "curve right radius 0 arc 0 delta 90 chord n45e 100",
        "curve left radius 100 arc 0 delta 0 chord n45e 0",
    ],
)
def test_zero_curve_is_degenerate(origin: Coordinate, text: str) -> None:
    coords, segments = plot_calls(_calls(text), origin)
    seg = segments[0]
    assert isinstance(seg, CurveSegment)
    assert seg.start == seg.end == seg.center == origin
    assert coords[-1] == origin
    assert len(seg.render_points) >= 11
    assert set(seg.render_points) == {origin}
