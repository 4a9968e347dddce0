from __future__ import annotations
from datetime import datetime, timezone
from typing import List, Optional
from pydantic import BaseModel, Field

from parcelplot.schemas.geometry import Coordinate
from parcelplot.schemas.parsing import ParseResult


class BoundaryStyle(BaseModel):
    color: str = "#3388ff"
    weight: float = 2
    opacity: float = 1
    fill_color: Optional[str] = None   # falls back to color
    fill_opacity: float = 0.2


class BoundaryMetadata(BaseModel):
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    source: str = "manual"
    notes: str = ""
    tags: List[str] = []


class Boundary(BaseModel):
    id: str
    name: str = "Unnamed Parcel"
    description: str = ""
    result: ParseResult
    style: BoundaryStyle = Field(default_factory=BoundaryStyle)
    metadata: BoundaryMetadata = Field(default_factory=BoundaryMetadata)

    @property
    def coordinates(self) -> List[Coordinate]:
        return self.result.coordinates


class BoundaryCreate(BaseModel):
    name: Optional[str] = None
    description: str
    start: Optional[Coordinate] = None
    style: Optional[BoundaryStyle] = None


class BoundaryIntersection(BaseModel):
    first_id: str
    second_id: str
    points: List[Coordinate]
