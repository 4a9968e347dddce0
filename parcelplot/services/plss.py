import json
import logging
import math
import re
from functools import lru_cache
from typing import Dict, Mapping, Optional, Tuple

from parcelplot.core.config import settings
from parcelplot.data.florida import COUNTIES, INITIAL_POINT
from parcelplot.schemas.geometry import Coordinate
from parcelplot.schemas.parsing import PLSSReference
from parcelplot.services.geodesy import FEET_PER_MILE, destination
from parcelplot.utils.strings import norm_upper

logger = logging.getLogger(__name__)

# "/SW,20,2S,19W" -> aliquot, section, township, range
PLSS_RX = re.compile(
    r'^\s*/(?P<aliquot>[NESW]{1,2})\s*,\s*'
    r'(?P<section>\d+)\s*,\s*'
    r'(?P<township>\d+[NS])\s*,\s*'
    r'(?P<range>\d+[EW])',
    flags=re.IGNORECASE
)

TOWNSHIP_MILES = 6.0


def extract_plss_reference(text: str) -> Tuple[Optional[PLSSReference], str]:
    """
    Recognize a leading survey-grid token.

    Returns (reference, matched_prefix); (None, "") when the text does not start with one.
    """
    m = PLSS_RX.match(text or "")
    if not m:
        return None, ""
    ref = PLSSReference(
        aliquot=norm_upper(m.group("aliquot")),
        section=int(m.group("section")),
        township=norm_upper(m.group("township")),
        range=norm_upper(m.group("range")),
        raw=m.group(0).strip(),
    )
    return ref, m.group(0)


def _split_grid(value: str) -> Tuple[int, str]:
    return int(value[:-1]), value[-1].upper()


def estimate_township_center(township: str, range_: str) -> Coordinate:
    """
    Centre of a township on the Tallahassee meridian grid, assuming regular 6-mile
    townships. Good enough to pick a county, not to survey from.
    """
    t_num, t_dir = _split_grid(township)
    r_num, r_dir = _split_grid(range_)
    north_miles = (t_num - 0.5) * TOWNSHIP_MILES * (1 if t_dir == "N" else -1)
    east_miles = (r_num - 0.5) * TOWNSHIP_MILES * (1 if r_dir == "E" else -1)
    return _offset(Coordinate(lat=INITIAL_POINT[0], lng=INITIAL_POINT[1]), north_miles, east_miles)


def estimate_reference_location(ref: PLSSReference) -> Coordinate:
    """
    Approximate centre of the aliquot part named by a reference.

    Sections run 1..36 boustrophedon from the north-east corner of the township
    (1-6 westward, 7-12 eastward, ...), each one mile square.
    """
    center = estimate_township_center(ref.township, ref.range)
    section = min(max(ref.section, 1), 36) - 1
    row, pos = divmod(section, 6)
    col_from_west = 5 - pos if row % 2 == 0 else pos
    # offsets from the township centre, in miles
    east = col_from_west + 0.5 - TOWNSHIP_MILES / 2
    north = TOWNSHIP_MILES / 2 - (row + 0.5)
    for letter in ref.aliquot.upper():
        if letter == "N":
            north += 0.25
        elif letter == "S":
            north -= 0.25
        elif letter == "E":
            east += 0.25
        elif letter == "W":
            east -= 0.25
    return _offset(center, north, east)


def _offset(origin: Coordinate, north_miles: float, east_miles: float) -> Coordinate:
    p = destination(origin, 0.0 if north_miles >= 0 else 180.0, abs(north_miles) * FEET_PER_MILE)
    return destination(p, 90.0 if east_miles >= 0 else 270.0, abs(east_miles) * FEET_PER_MILE)


def county_for_point(point: Coordinate) -> Optional[str]:
    """County whose bounding box holds the point; nearest box centre wins on overlap."""
    best, best_d = None, math.inf
    for county in COUNTIES:
        (south, west), (north, east) = county.bounds
        if south <= point.lat <= north and west <= point.lng <= east:
            d = math.hypot((south + north) / 2 - point.lat, (west + east) / 2 - point.lng)
            if d < best_d:
                best, best_d = county.name, d
    return best


@lru_cache(maxsize=4)
def load_county_table(path: str) -> Dict[str, str]:
    with open(path, "r", encoding="utf-8") as fh:
        raw = json.load(fh)
    if not isinstance(raw, dict):
        raise ValueError("PLSS county table must be a JSON object.")
    return {" ".join(str(k).upper().split()): str(v) for k, v in raw.items()}


def _default_table() -> Mapping[str, str]:
    if settings.plss_county_table_path:
        return load_county_table(settings.plss_county_table_path)
    return {}


def detect_county_from_reference(description: str, table: Optional[Mapping[str, str]] = None) -> Optional[str]:
    """
    Jurisdiction hint from a leading PLSS reference, e.g. "/SW,20,2S,19W" -> "Walton".

    Keys are "<township> <range>". Unlisted keys fall back to locating the township
    on the grid and matching county bounding boxes.
    """
    ref, _ = extract_plss_reference(description)
    if ref is None:
        return None

    lookup = table if table is not None else _default_table()
    county = lookup.get(ref.key)
    if county:
        return county

    county = county_for_point(estimate_township_center(ref.township, ref.range))
    logger.debug("PLSS %s not in county table, grid estimate gave %s", ref.key, county)
    return county
