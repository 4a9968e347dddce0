import math
from typing import List, Optional, Sequence, Tuple

from parcelplot.core.config import settings
from parcelplot.schemas.geometry import Coordinate, CurveSegment, LineSegment
from parcelplot.schemas.parsing import BearingCall, CurveCall
from parcelplot.services.geodesy import destination, inverse, normalize_azimuth, resolve_azimuth


def plot_bearing(call: BearingCall, current: Coordinate, index: int = 0) -> LineSegment:
    angle = call.angle.decimal
    theta = resolve_azimuth(call.start_cardinal, call.end_cardinal, angle)
    end = destination(current, theta, call.distance_ft)
    return LineSegment(
        index=index,
        start=current,
        end=end,
        azimuth=theta,
        distance_ft=call.distance_ft,
        description=f"{call.start_cardinal}{call.angle}{call.end_cardinal} {call.distance_ft:g}'",
    )


def curve_steps(delta: float, min_steps: Optional[int] = None) -> int:
    """Polyline resolution: at least min_steps, one more per 2 degrees of sweep."""
    floor = settings.curve_min_steps if min_steps is None else min_steps
    return max(floor, math.ceil(delta / 2.0))


def plot_curve(call: CurveCall, current: Coordinate, index: int = 0,
               min_steps: Optional[int] = None) -> CurveSegment:
    """
    Walk a circular curve from the current point.

    The centre sits on the perpendicular bisector of the chord, to the right of the chord
    for a right (clockwise) curve and to the left otherwise. The sweep is measured from
    the centre, so the render polyline starts exactly at the current point.
    """
    clockwise = call.direction == "right"
    sign = 1.0 if clockwise else -1.0

    chord_az = resolve_azimuth(call.chord.start_cardinal, call.chord.end_cardinal, call.chord.angle)
    steps = curve_steps(call.delta, min_steps)

    if call.radius_ft == 0 or call.chord_length_ft == 0:
        # degenerate curve: nothing to sweep, stay on the current point
        return _curve_segment(call, index, current, current, current, chord_az,
                              [current] * (steps + 1))

    perp_az = normalize_azimuth(chord_az + sign * 90.0)

    half_chord = call.chord_length_ft / 2.0
    # sqrt(R^2 - (c/2)^2) == R*cos(delta/2) when radius, delta and chord agree
    offset = math.sqrt(max(call.radius_ft ** 2 - half_chord ** 2, 0.0))

    midpoint = destination(current, chord_az, half_chord)
    center = destination(midpoint, perp_az, offset)

    start_az, sweep_radius = inverse(center, current)
    end = destination(center, normalize_azimuth(start_az + sign * call.delta), sweep_radius)

    render_points = [current]
    for i in range(1, steps):
        step_az = normalize_azimuth(start_az + sign * call.delta * i / steps)
        render_points.append(destination(center, step_az, sweep_radius))
    render_points.append(end)

    return _curve_segment(call, index, current, end, center, chord_az, render_points)


def _curve_segment(call: CurveCall, index: int, start: Coordinate, end: Coordinate,
                   center: Coordinate, chord_az: float,
                   render_points: List[Coordinate]) -> CurveSegment:
    return CurveSegment(
        index=index,
        start=start,
        end=end,
        center=center,
        radius_ft=call.radius_ft,
        delta=call.delta,
        direction=call.direction,
        arc_length_ft=call.arc_length_ft,
        chord_azimuth=chord_az,
        render_points=render_points,
        description=(
            f"curve {call.direction} radius {call.radius_ft:g}' arc {call.arc_length_ft:g}' "
            f"delta {call.delta:g}°"
        ),
    )


def plot_calls(calls: Sequence, start: Coordinate,
               min_steps: Optional[int] = None) -> Tuple[List[Coordinate], List]:
    """
    Walk the calls from the start point.

    Returns (coordinates, segments) with len(coordinates) == len(calls) + 1.
    """
    out: List[Coordinate] = [start]
    segments = []
    current = start

    for i, call in enumerate(calls):
        if isinstance(call, CurveCall):
            seg = plot_curve(call, current, index=i, min_steps=min_steps)
        else:
            seg = plot_bearing(call, current, index=i)
        segments.append(seg)
        out.append(seg.end)
        current = seg.end

    return out, segments
