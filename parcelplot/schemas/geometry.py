from __future__ import annotations
from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, ConfigDict, Field


class Coordinate(BaseModel):
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)

    model_config = ConfigDict(frozen=True)


class LineSegment(BaseModel):
    kind: Literal["line"] = "line"
    index: int
    start: Coordinate
    end: Coordinate
    azimuth: float          # degrees clockwise from north, [0, 360)
    distance_ft: float
    description: str


class CurveSegment(BaseModel):
    kind: Literal["curve"] = "curve"
    index: int
    start: Coordinate
    end: Coordinate
    center: Coordinate
    radius_ft: float
    delta: float            # central angle, decimal degrees
    direction: Literal["left", "right"]
    arc_length_ft: float
    chord_azimuth: float
    render_points: List[Coordinate] = []   # display only
    description: str


Segment = Annotated[Union[LineSegment, CurveSegment], Field(discriminator="kind")]


class IntersectionRequest(BaseModel):
    boundary_a: List[Coordinate]
    boundary_b: List[Coordinate]


class IntersectionResult(BaseModel):
    intersects: bool
    points: List[Coordinate] = []


class MeasureRequest(BaseModel):
    coordinates: List[Coordinate]


class MeasureResponse(BaseModel):
    area_sq_ft: float
    perimeter_ft: float


class Bounds(BaseModel):
    southwest: Coordinate
    northeast: Coordinate


class StatePlaneRequest(BaseModel):
    easting: float
    northing: float
    zone: Literal["east", "west", "north"] = "east"
