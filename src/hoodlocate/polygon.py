"""Point-in-polygon test with explicit boundary handling."""

from __future__ import annotations

from typing import Iterable, Sequence

from hoodlocate.models import Point, PointLike, Polygon


def point_on_vertex(point: Point, vertices: Iterable[Point]) -> bool:
    """Return True if *point* coincides exactly with one of *vertices*."""
    return any(point == vertex for vertex in vertices)


def _vertices(polygon: Polygon | Sequence[PointLike]) -> tuple[Point, ...]:
    if isinstance(polygon, Polygon):
        return polygon.vertices
    return tuple(Point.coerce(v) for v in polygon)


def point_in_polygon(
    point: PointLike,
    polygon: Polygon | Sequence[PointLike],
    treat_vertex_as_outside: bool = True,
) -> bool:
    """
    Even-odd ray casting; points on the boundary are never contained.

    *point* and each vertex may be a Point, a (lon, lat) pair or a
    'lon lat' string. Edges run from vertex i-1 to vertex i for
    i = 1 .. n-1 only: the ring is not closed for the caller, so pass the
    first vertex again at the end.

    Rings with fewer than 3 vertices contain nothing.
    """
    pt = Point.coerce(point)
    vertices = _vertices(polygon)

    if len(vertices) < 3:
        return False

    if treat_vertex_as_outside and point_on_vertex(pt, vertices):
        return False

    intersections = 0
    for v1, v2 in zip(vertices, vertices[1:]):
        # On a horizontal edge
        if (
            v1.lat == v2.lat == pt.lat
            and min(v1.lon, v2.lon) < pt.lon < max(v1.lon, v2.lon)
        ):
            return False

        if (
            v1.lat != v2.lat
            and min(v1.lat, v2.lat) < pt.lat <= max(v1.lat, v2.lat)
            and pt.lon <= max(v1.lon, v2.lon)
        ):
            xinters = (pt.lat - v1.lat) * (v2.lon - v1.lon) / (
                v2.lat - v1.lat
            ) + v1.lon
            # On any other edge
            if xinters == pt.lon:
                return False
            if v1.lon == v2.lon or pt.lon <= xinters:
                intersections += 1

    return intersections % 2 != 0
