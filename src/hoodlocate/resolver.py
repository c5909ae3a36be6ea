"""Resolve a point to a region: polygon containment first, then nearest center."""

from __future__ import annotations

from typing import Optional, Sequence

from hoodlocate.geomath import haversine_distance_km
from hoodlocate.log import debug_enabled, get_logger
from hoodlocate.models import Point, PointLike, Region, RegionMatch
from hoodlocate.polygon import point_in_polygon

logger = get_logger(__name__)

MATCH_POLYGON = "polygon"
MATCH_DISTANCE = "distance"


def find_containing_region(
    point: Point, candidates: Sequence[Region]
) -> Optional[Region]:
    """
    Return the first region with a polygon containing *point*.

    Overlapping polygons are a data problem; candidate order decides.
    """
    trace = debug_enabled(__name__)
    for region in candidates:
        for polygon in region.polygons:
            if point_in_polygon(point, polygon):
                if trace:
                    logger.debug(
                        "polygon_match",
                        hood_id=region.id,
                        hood=region.name,
                        polygon_id=polygon.polygon_id,
                    )
                return region
    return None


def nearest_region(
    point: Point, candidates: Sequence[Region]
) -> Optional[tuple[Region, float]]:
    """
    Return (region, distance_km) for the region with the nearest center.

    Regions without a center are skipped. A candidate at a distance equal
    to the best so far replaces it, so the last of several equidistant
    regions wins.
    """
    best: Optional[tuple[Region, float]] = None
    trace = debug_enabled(__name__)

    for region in candidates:
        if region.center is None:
            continue

        distance = haversine_distance_km(
            region.center.lat, region.center.lon, point.lat, point.lon
        )
        if trace:
            logger.debug(
                "hood_distance",
                hood_id=region.id,
                hood=region.name,
                distance_km=distance,
            )

        if best is None or distance <= best[1]:
            if trace:
                logger.debug(
                    "shorter_distance_found",
                    hood_id=region.id,
                    hood=region.name,
                )
            best = (region, distance)

    return best


def match_region(
    point: PointLike, candidates: Sequence[Region]
) -> Optional[RegionMatch]:
    """
    Resolve *point* against *candidates*, recording how the match was made.

    Returns None when no polygon contains the point and no candidate has
    a center.
    """
    pt = Point.coerce(point)

    region = find_containing_region(pt, candidates)
    if region is not None:
        return RegionMatch(region=region, matched_by=MATCH_POLYGON)

    nearest = nearest_region(pt, candidates)
    if nearest is None:
        logger.debug("no_region_found", lat=pt.lat, lon=pt.lon)
        return None

    region, distance = nearest
    return RegionMatch(
        region=region, matched_by=MATCH_DISTANCE, distance_km=distance
    )


def resolve_region(
    point: PointLike, candidates: Sequence[Region]
) -> Optional[Region]:
    """Return the best-matching region for *point*, or None."""
    match = match_region(point, candidates)
    return match.region if match is not None else None
