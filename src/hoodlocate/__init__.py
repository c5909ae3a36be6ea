"""hoodlocate — Resolve a coordinate to its hood by polygon or nearest center."""

from hoodlocate.client import HoodLocator
from hoodlocate.exceptions import (
    DatabaseInvalid,
    DatabaseNotFound,
    HoodLocateError,
    MalformedPointString,
    NoHoodFound,
)
from hoodlocate.geomath import haversine_distance_km
from hoodlocate.models import Gateway, Point, Polygon, Region, RegionMatch
from hoodlocate.polygon import point_in_polygon
from hoodlocate.resolver import match_region, resolve_region

__all__ = [
    "HoodLocator",
    "Point",
    "Polygon",
    "Region",
    "RegionMatch",
    "Gateway",
    "haversine_distance_km",
    "point_in_polygon",
    "resolve_region",
    "match_region",
    "HoodLocateError",
    "MalformedPointString",
    "NoHoodFound",
    "DatabaseNotFound",
    "DatabaseInvalid",
]
