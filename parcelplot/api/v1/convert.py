from fastapi import APIRouter, HTTPException

from parcelplot.schemas.geometry import Coordinate, StatePlaneRequest
from parcelplot.services.projection import state_plane_to_wgs84

router = APIRouter(prefix="/api/v1/convert", tags=["Convert"])


@router.post("/state-plane", response_model=Coordinate)
def convert_state_plane(req: StatePlaneRequest):
    # Florida State Plane (US ft) -> WGS84, e.g. to seed the point of beginning
    try:
        return state_plane_to_wgs84(req.easting, req.northing, req.zone)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
