from __future__ import annotations
from typing import Annotated, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field

from parcelplot.schemas.geometry import Coordinate, Segment

Cardinal = Literal["N", "S", "E", "W"]


class DMSAngle(BaseModel):
    degrees: float = Field(0, ge=0)
    minutes: float = Field(0, ge=0)
    seconds: float = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)

    @property
    def decimal(self) -> float:
        return self.degrees + self.minutes / 60.0 + self.seconds / 3600.0

    def __str__(self) -> str:
        # dotted D.M.S notation understood by the call grammars
        sec = f"{self.seconds:g}"
        return f"{self.degrees:g}.{self.minutes:02g}.{sec.zfill(2)}"


class BearingCall(BaseModel):
    kind: Literal["bearing"] = "bearing"
    start_cardinal: Cardinal
    end_cardinal: Cardinal
    angle: DMSAngle
    distance_ft: float = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class ChordBearing(BaseModel):
    start_cardinal: Cardinal
    angle: float = Field(..., ge=0)     # decimal degrees
    end_cardinal: Cardinal

    model_config = ConfigDict(frozen=True)


class CurveCall(BaseModel):
    kind: Literal["curve"] = "curve"
    direction: Literal["left", "right"]
    radius_ft: float = Field(..., ge=0)
    arc_length_ft: float = Field(..., ge=0)
    delta: float = Field(..., ge=0)     # decimal degrees
    chord: ChordBearing
    chord_length_ft: float = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


Call = Annotated[Union[BearingCall, CurveCall], Field(discriminator="kind")]


class PLSSReference(BaseModel):
    aliquot: str                # e.g. "SW"
    section: int
    township: str               # e.g. "2S"
    range: str                  # e.g. "19W"
    raw: str = ""               # matched prefix as written

    @property
    def key(self) -> str:
        return f"{self.township} {self.range}"


class ClosingSuggestion(BaseModel):
    azimuth: float
    start_cardinal: Cardinal
    angle: DMSAngle
    end_cardinal: Cardinal
    distance_ft: float
    description: str


class ParseResult(BaseModel):
    coordinates: List[Coordinate] = []
    segments: List[Segment] = []
    is_valid: bool = False
    is_closed: bool = False
    area_sq_ft: float = 0.0
    perimeter_ft: float = 0.0
    errors: List[str] = []
    closing_suggestion: Optional[ClosingSuggestion] = None
    plss_reference: Optional[PLSSReference] = None


# --- API payloads ---

class DescriptionRequest(BaseModel):
    description: str
    start: Optional[Coordinate] = None
    # When no start is given, seed the walk at the estimated PLSS location
    use_plss_start: bool = False


class ExtractRequest(BaseModel):
    text: str


class ExtractResponse(BaseModel):
    text: str
