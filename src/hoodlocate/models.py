"""Typed value models for hoodlocate."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Sequence, Union

from hoodlocate.exceptions import MalformedPointString

PointLike = Union["Point", str, Sequence[float]]


@dataclass(frozen=True)
class Point:
    """A WGS84 coordinate, stored longitude first like the polygon tables."""

    lon: float
    lat: float

    def __post_init__(self):
        if not (math.isfinite(self.lon) and math.isfinite(self.lat)):
            raise ValueError(
                f"Point components must be finite, got ({self.lon}, {self.lat})"
            )

    @classmethod
    def from_string(cls, raw: str) -> Point:
        """
        Parse a 'lon lat' string, e.g. '10.89 49.89'.

        The string must split on a single space into exactly two numeric,
        finite components. Raises MalformedPointString otherwise.
        """
        parts = raw.split(" ")
        if len(parts) != 2:
            raise MalformedPointString(raw)
        try:
            lon, lat = float(parts[0]), float(parts[1])
        except ValueError:
            raise MalformedPointString(raw) from None
        if not (math.isfinite(lon) and math.isfinite(lat)):
            raise MalformedPointString(raw)
        return cls(lon=lon, lat=lat)

    @classmethod
    def coerce(cls, value: PointLike) -> Point:
        """Accept a Point, a 'lon lat' string or a (lon, lat) pair."""
        if isinstance(value, Point):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if len(value) != 2:
            raise ValueError(f"Expected a (lon, lat) pair, got {value!r}")
        return cls(lon=float(value[0]), lat=float(value[1]))

    def to_dict(self) -> dict:
        return {"lat": self.lat, "lon": self.lon}


@dataclass(frozen=True)
class Polygon:
    """
    An ordered ring of vertices.

    The ring is taken exactly as given: the last vertex is NOT implicitly
    joined to the first, so closed rings must repeat their first vertex.
    """

    vertices: tuple[Point, ...]
    polygon_id: Optional[int] = None

    @classmethod
    def from_coordinates(
        cls, coords: Iterable[PointLike], polygon_id: Optional[int] = None
    ) -> Polygon:
        return cls(
            vertices=tuple(Point.coerce(c) for c in coords),
            polygon_id=polygon_id,
        )

    @property
    def is_degenerate(self) -> bool:
        """Fewer than 3 vertices cannot enclose anything."""
        return len(self.vertices) < 3

    @property
    def is_closed(self) -> bool:
        return len(self.vertices) > 1 and self.vertices[0] == self.vertices[-1]

    def __len__(self) -> int:
        return len(self.vertices)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.vertices)


@dataclass(frozen=True)
class Region:
    """A hood: identifier, name, optional center and bounding polygons."""

    id: int
    name: str
    center: Optional[Point] = None
    polygons: tuple[Polygon, ...] = ()
    # Remaining hood columns (essid, mesh_bssid, channel2, ...)
    attributes: dict = field(default_factory=dict, compare=False)

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        data = {
            "id": self.id,
            "name": self.name,
            "lat": self.center.lat if self.center else None,
            "lon": self.center.lon if self.center else None,
        }
        data.update(self.attributes)
        return data


@dataclass(frozen=True)
class RegionMatch:
    """The outcome of a successful resolution."""

    region: Region
    matched_by: str                  # "polygon" or "distance"
    distance_km: Optional[float] = None

    def to_dict(self) -> dict:
        data = self.region.to_dict()
        data["matched_by"] = self.matched_by
        data["distance_km"] = self.distance_km
        return data


@dataclass(frozen=True)
class Gateway:
    """A VPN gateway serving one hood."""

    name: str
    address: str
    port: int
    key: str
    protocol: str = "fastd"

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "protocol": self.protocol,
            "address": self.address,
            "port": self.port,
            "key": self.key,
        }
