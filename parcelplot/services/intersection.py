from typing import List, Optional, Sequence, Tuple

from parcelplot.schemas.geometry import Coordinate, IntersectionResult

Box = Tuple[float, float, float, float]   # min_lng, min_lat, max_lng, max_lat

# degrees; absorbs rounding on north-south and east-west legs whose boxes are flat
EPSILON = 1e-12


def bounding_box(points: Sequence[Coordinate]) -> Box:
    lngs = [p.lng for p in points]
    lats = [p.lat for p in points]
    return min(lngs), min(lats), max(lngs), max(lats)


def _boxes_overlap(a: Box, b: Box) -> bool:
    return a[0] <= b[2] and b[0] <= a[2] and a[1] <= b[3] and b[1] <= a[3]


def _within(box: Box, lng: float, lat: float) -> bool:
    return (box[0] - EPSILON <= lng <= box[2] + EPSILON
            and box[1] - EPSILON <= lat <= box[3] + EPSILON)


def line_intersection(p1: Coordinate, p2: Coordinate,
                      q1: Coordinate, q2: Coordinate) -> Optional[Coordinate]:
    """
    Planar intersection of segments p1-p2 and q1-q2, treating (lng, lat) as (x, y).

    Parallel segments (zero determinant) never intersect. A solution counts when it falls
    inside both segments' bounding boxes; this is looser than a true on-segment test and
    can accept near-parallel neighbours.
    """
    # a*x + b*y = c for each line
    a1 = p2.lat - p1.lat
    b1 = p1.lng - p2.lng
    c1 = a1 * p1.lng + b1 * p1.lat

    a2 = q2.lat - q1.lat
    b2 = q1.lng - q2.lng
    c2 = a2 * q1.lng + b2 * q1.lat

    det = a1 * b2 - a2 * b1
    if det == 0:
        return None

    x = (b2 * c1 - b1 * c2) / det
    y = (a1 * c2 - a2 * c1) / det

    if _within(bounding_box((p1, p2)), x, y) and _within(bounding_box((q1, q2)), x, y):
        return Coordinate(lat=y, lng=x)
    return None


def check_intersection(boundary_a: Sequence[Coordinate],
                       boundary_b: Sequence[Coordinate]) -> IntersectionResult:
    """Test every segment of one plotted boundary against every segment of the other."""
    if len(boundary_a) < 2 or len(boundary_b) < 2:
        return IntersectionResult(intersects=False, points=[])
    if not _boxes_overlap(bounding_box(boundary_a), bounding_box(boundary_b)):
        return IntersectionResult(intersects=False, points=[])

    points: List[Coordinate] = []
    for p1, p2 in zip(boundary_a, boundary_a[1:]):
        for q1, q2 in zip(boundary_b, boundary_b[1:]):
            hit = line_intersection(p1, p2, q1, q2)
            if hit is not None:
                points.append(hit)

    return IntersectionResult(intersects=bool(points), points=points)
