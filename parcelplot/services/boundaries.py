import logging
import random
import uuid
from itertools import combinations
from typing import List, Optional, Sequence

from pydantic import TypeAdapter, ValidationError

from parcelplot.schemas.boundary import Boundary, BoundaryIntersection, BoundaryMetadata, BoundaryStyle
from parcelplot.schemas.geometry import Bounds, Coordinate
from parcelplot.schemas.parsing import ParseResult
from parcelplot.services.intersection import bounding_box, check_intersection

logger = logging.getLogger(__name__)

PALETTE = [
    "#3388ff",  # blue
    "#33a02c",  # green
    "#e31a1c",  # red
    "#ff7f00",  # orange
    "#6a3d9a",  # purple
    "#b15928",  # brown
    "#a6cee3",  # light blue
    "#b2df8a",  # light green
    "#fb9a99",  # light red
    "#fdbf6f",  # light orange
]

_BOUNDARY_LIST = TypeAdapter(List[Boundary])


def create_boundary(
    name: Optional[str],
    description: str,
    result: ParseResult,
    style: Optional[BoundaryStyle] = None,
    source: str = "manual",
) -> Boundary:
    if style is None:
        style = BoundaryStyle(color=random.choice(PALETTE))
    if style.fill_color is None:
        style = style.model_copy(update={"fill_color": style.color})

    return Boundary(
        id=uuid.uuid4().hex,
        name=(name or "").strip() or "Unnamed Parcel",
        description=description or "",
        result=result,
        style=style,
        metadata=BoundaryMetadata(source=source),
    )


def find_intersections(boundaries: Sequence[Boundary]) -> List[BoundaryIntersection]:
    """All unordered pairs of boundaries whose plotted outlines cross."""
    found: List[BoundaryIntersection] = []
    for first, second in combinations(boundaries, 2):
        res = check_intersection(first.coordinates, second.coordinates)
        if res.intersects:
            found.append(BoundaryIntersection(first_id=first.id, second_id=second.id, points=res.points))
    logger.debug("%d intersecting pair(s) among %d boundaries", len(found), len(boundaries))
    return found


def calculate_bounds(boundaries: Sequence[Boundary]) -> Optional[Bounds]:
    points = [c for b in boundaries for c in b.coordinates]
    if not points:
        return None
    min_lng, min_lat, max_lng, max_lat = bounding_box(points)
    return Bounds(
        southwest=Coordinate(lat=min_lat, lng=min_lng),
        northeast=Coordinate(lat=max_lat, lng=max_lng),
    )


def serialize_boundaries(boundaries: Sequence[Boundary]) -> str:
    return _BOUNDARY_LIST.dump_json(list(boundaries)).decode("utf-8")


def deserialize_boundaries(data: str) -> List[Boundary]:
    try:
        return _BOUNDARY_LIST.validate_json(data)
    except ValidationError as e:
        raise ValueError(f"Invalid boundary data: {e.error_count()} error(s)") from e
