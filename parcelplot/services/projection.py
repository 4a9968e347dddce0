from functools import lru_cache

from pyproj import Transformer

from parcelplot.schemas.geometry import Coordinate

# NAD83 / Florida State Plane zones, US survey feet
STATE_PLANE_ZONES = {
    "east": "EPSG:2236",
    "west": "EPSG:2237",
    "north": "EPSG:2238",
}


@lru_cache(maxsize=len(STATE_PLANE_ZONES))
def _transformer(crs: str) -> Transformer:
    return Transformer.from_crs(crs, "EPSG:4326", always_xy=True)


def state_plane_to_wgs84(easting: float, northing: float, zone: str = "east") -> Coordinate:
    crs = STATE_PLANE_ZONES.get(zone.lower())
    if crs is None:
        raise ValueError(f"Unknown state plane zone: {zone!r}")
    lon, lat = _transformer(crs).transform(easting, northing)
    return Coordinate(lat=lat, lng=lon)
