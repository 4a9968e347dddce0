from typing import Optional
from pydantic import BaseModel

from parcelplot.schemas.geometry import Coordinate


class CountyOut(BaseModel):
    name: str
    center: Coordinate
    zoom: int


class CountyDetectResponse(BaseModel):
    county: Optional[str] = None
