from typing import List, Optional

from fastapi import APIRouter

from parcelplot.schemas.boundary import Boundary, BoundaryCreate, BoundaryIntersection
from parcelplot.schemas.geometry import Bounds
from parcelplot.services.boundaries import calculate_bounds, create_boundary, find_intersections
from parcelplot.services.engine import parse

router = APIRouter(prefix="/api/v1/boundaries", tags=["Boundaries"])


@router.post("", response_model=Boundary)
def plot_boundary(payload: BoundaryCreate):
    # Boundaries are not stored; the caller keeps them
    result = parse(payload.description, payload.start)
    return create_boundary(payload.name, payload.description, result, style=payload.style)


@router.post("/intersections", response_model=List[BoundaryIntersection])
def boundary_intersections(boundaries: List[Boundary]):
    return find_intersections(boundaries)


@router.post("/bounds", response_model=Optional[Bounds])
def boundary_bounds(boundaries: List[Boundary]):
    return calculate_bounds(boundaries)
