from typing import List, Sequence

from parcelplot.schemas.geometry import Coordinate
from parcelplot.services.geodesy import METERS_PER_FOOT, distance_ft, geod

SQ_METERS_PER_SQ_FOOT = METERS_PER_FOOT ** 2


def closed_ring(coordinates: Sequence[Coordinate]) -> List[Coordinate]:
    """Copy of the coordinates with the first point repeated at the end if needed."""
    ring = list(coordinates)
    if ring and ring[0] != ring[-1]:
        ring.append(ring[0])
    return ring


def calculate_area(coordinates: Sequence[Coordinate]) -> float:
    """Geodesic area of the implicitly closed ring, in square feet."""
    if len(coordinates) < 3:
        return 0.0

    poly = geod.Polygon()
    for c in closed_ring(coordinates)[:-1]:
        poly.AddPoint(c.lat, c.lng)
    _, _, area_m2 = poly.Compute(False, True)
    return abs(area_m2) / SQ_METERS_PER_SQ_FOOT


def calculate_perimeter(coordinates: Sequence[Coordinate]) -> float:
    """Sum of geodesic edge lengths around the implicitly closed ring, in feet."""
    if len(coordinates) < 2:
        return 0.0

    ring = closed_ring(coordinates)
    return sum(distance_ft(a, b) for a, b in zip(ring, ring[1:]))
