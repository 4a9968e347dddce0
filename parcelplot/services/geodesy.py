from typing import Tuple

from geographiclib.geodesic import Geodesic

from parcelplot.schemas.geometry import Coordinate


geod = Geodesic.WGS84

METERS_PER_FOOT = 0.3048
FEET_PER_MILE = 5280.0

# (start cardinal, end cardinal) -> azimuth for a quadrant angle
_QUADRANT_RULES = {
    ("N", "E"): lambda a: a,
    ("S", "E"): lambda a: 180.0 - a,
    ("S", "W"): lambda a: 180.0 + a,
    ("N", "W"): lambda a: 360.0 - a,
    ("E", "N"): lambda a: 90.0 - a,
    ("E", "S"): lambda a: 90.0 + a,
    ("W", "S"): lambda a: 270.0 - a,
    ("W", "N"): lambda a: 270.0 + a,
}

VALID_QUADRANT_PAIRS = frozenset(_QUADRANT_RULES)


def normalize_azimuth(theta_deg: float) -> float:
    theta = theta_deg % 360.0
    # float modulo can round a tiny negative up to exactly 360
    return 0.0 if theta >= 360.0 else theta


def resolve_azimuth(start: str, end: str, angle_deg: float) -> float:
    """
    Quadrant bearing (e.g. N 45 E, E 30 S) -> azimuth in [0, 360).
    Raises ValueError for pairs that do not name a quadrant (N/S, E/W, N/N ...).
    """
    rule = _QUADRANT_RULES.get((start.upper(), end.upper()))
    if rule is None:
        raise ValueError(f"Not a quadrant bearing: {start}{angle_deg}{end}")
    return normalize_azimuth(rule(angle_deg))


def azimuth_to_quadrant(theta_deg: float) -> Tuple[str, float, str]:
    """Inverse of resolve_azimuth, always expressed from N or S."""
    theta = normalize_azimuth(theta_deg)
    if theta < 90.0:
        return "N", theta, "E"
    if theta < 180.0:
        return "S", 180.0 - theta, "E"
    if theta < 270.0:
        return "S", theta - 180.0, "W"
    return "N", 360.0 - theta, "W"


def next_point(lat: float, lon: float, theta_deg: float, distance_m: float):
    r = geod.Direct(lat, lon, theta_deg, distance_m)
    return r["lat2"], r["lon2"]


def destination(origin: Coordinate, azimuth: float, distance_ft: float) -> Coordinate:
    if distance_ft == 0:
        return origin
    lat2, lon2 = next_point(origin.lat, origin.lng, azimuth, distance_ft * METERS_PER_FOOT)
    return Coordinate(lat=lat2, lng=lon2)


def inverse(a: Coordinate, b: Coordinate) -> Tuple[float, float]:
    """(initial azimuth a->b in [0, 360), geodesic distance in feet)"""
    r = geod.Inverse(a.lat, a.lng, b.lat, b.lng)
    return normalize_azimuth(r["azi1"]), r["s12"] / METERS_PER_FOOT


def distance_ft(a: Coordinate, b: Coordinate) -> float:
    return inverse(a, b)[1]
