from typing import List, Optional, Sequence, Tuple

from parcelplot.core.config import settings
from parcelplot.schemas.geometry import Coordinate
from parcelplot.schemas.parsing import ClosingSuggestion, DMSAngle
from parcelplot.services.geodesy import azimuth_to_quadrant, distance_ft, inverse

MIN_POLYGON_POINTS = 3


def validate_closure(coordinates: Sequence[Coordinate],
                     tolerance_ft: Optional[float] = None) -> Tuple[bool, List[str]]:
    """
    Check whether the plotted path returns to its point of beginning.

    Returns (is_closed, errors). Failures are reported, never raised; the coordinates are
    left untouched so an open boundary can still be drawn.
    """
    if len(coordinates) < MIN_POLYGON_POINTS:
        return False, [
            f"insufficient points: at least {MIN_POLYGON_POINTS} coordinates are required, "
            f"got {len(coordinates)}"
        ]

    tolerance = settings.closure_tolerance_ft if tolerance_ft is None else tolerance_ft
    gap = distance_ft(coordinates[0], coordinates[-1])
    if gap < tolerance:
        return True, []
    return False, [f"boundary is not closed: last point is {gap:.2f} ft from the point of beginning"]


def to_dms(angle: float) -> DMSAngle:
    total = int(round(angle * 3600))
    degrees, rem = divmod(total, 3600)
    minutes, seconds = divmod(rem, 60)
    return DMSAngle(degrees=degrees, minutes=minutes, seconds=seconds)


def suggest_closing_call(coordinates: Sequence[Coordinate]) -> Optional[ClosingSuggestion]:
    """
    Call that would run from the last point back to the first, written the way the
    call grammars read it, e.g. "N 36.52.12 W 500.00".
    """
    if len(coordinates) < 2:
        return None

    theta, dist = inverse(coordinates[-1], coordinates[0])
    start, angle, end = azimuth_to_quadrant(theta)
    dms = to_dms(angle)
    return ClosingSuggestion(
        azimuth=theta,
        start_cardinal=start,
        angle=dms,
        end_cardinal=end,
        distance_ft=dist,
        description=f"{start} {dms} {end} {dist:.2f}",
    )
