from typing import List

from fastapi import APIRouter, HTTPException, Query

from parcelplot.data.florida import COUNTIES, COUNTIES_BY_KEY, FLORIDA_CENTER, FLORIDA_ZOOM, county_key
from parcelplot.schemas.county import CountyDetectResponse, CountyOut
from parcelplot.schemas.geometry import Coordinate
from parcelplot.services.plss import detect_county_from_reference

router = APIRouter(prefix="/api/v1/counties", tags=["Counties"])


@router.get("", response_model=List[str])
def list_counties():
    return [c.name for c in COUNTIES]


@router.get("/detect", response_model=CountyDetectResponse)
def detect_county(description: str = Query(..., description="Text starting with e.g. /SW,20,2S,19W")):
    return CountyDetectResponse(county=detect_county_from_reference(description))


@router.get("/{name}", response_model=CountyOut)
def get_county(name: str):
    if county_key(name) == "florida":
        lat, lng = FLORIDA_CENTER
        return CountyOut(name="Florida", center=Coordinate(lat=lat, lng=lng), zoom=FLORIDA_ZOOM)

    county = COUNTIES_BY_KEY.get(county_key(name))
    if not county:
        raise HTTPException(status_code=404, detail=f"County '{name}' not found.")
    lat, lng = county.center
    return CountyOut(name=county.name, center=Coordinate(lat=lat, lng=lng), zoom=county.zoom)
