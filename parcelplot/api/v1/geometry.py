from fastapi import APIRouter

from parcelplot.schemas.geometry import IntersectionRequest, IntersectionResult, MeasureRequest, MeasureResponse
from parcelplot.services.intersection import check_intersection
from parcelplot.services.measure import calculate_area, calculate_perimeter

router = APIRouter(prefix="/api/v1/geometry", tags=["Geometry"])


@router.post("/intersection", response_model=IntersectionResult)
def intersection(payload: IntersectionRequest):
    return check_intersection(payload.boundary_a, payload.boundary_b)


@router.post("/measure", response_model=MeasureResponse)
def measure(payload: MeasureRequest):
    return MeasureResponse(
        area_sq_ft=calculate_area(payload.coordinates),
        perimeter_ft=calculate_perimeter(payload.coordinates),
    )
