"""HoodLocator: the hood database adapter around the resolver."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from hoodlocate import resolver
from hoodlocate._db import _DatabasePool
from hoodlocate.config import Settings, load_settings
from hoodlocate.exceptions import NoHoodFound
from hoodlocate.log import get_logger
from hoodlocate.models import Gateway, Point, Polygon, Region, RegionMatch

logger = get_logger(__name__)

DEFAULT_HOOD_ID = 0

# Columns of the hoods table that map onto Region fields directly
_CORE_HOOD_COLUMNS = {"id", "name", "lat", "lon"}

# Column name -> key the hood service reports it under
_HOOD_COLUMN_ALIASES = {
    "essid_ap": "essid",
    "bssid_mesh": "mesh_bssid",
    "essid_mesh": "mesh_essid",
    "changedon": "timestamp",
}


class HoodLocator:
    """
    Resolves coordinates to hoods stored in a SQLite hood database.

    The database is opened read-only and must contain the ``hoods`` and
    ``polyhood`` tables; ``gateways`` is only needed by gateways().
    Regions are loaded on every lookup, nothing is cached.
    """

    def __init__(
        self,
        db: str | Path,
        default_hood_id: int = DEFAULT_HOOD_ID,
    ):
        self._default_hood_id = default_hood_id
        self._pool = _DatabasePool(Path(db), "Hood")
        self._pool.validate_tables(["hoods", "polyhood"])

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> HoodLocator:
        """Build a locator from Settings, reading the environment if omitted."""
        settings = settings or load_settings()
        return cls(settings.db_path)

    # ── Public API ────────────────────────────────────────────────

    def find_hood(self, lat: float, lon: float) -> RegionMatch:
        """
        Resolve a coordinate to a hood.

        Raises NoHoodFound if no polygon contains the point and no hood
        has a center to measure against.
        """
        match = resolver.match_region(Point(lon=lon, lat=lat), self.regions())
        if match is None:
            raise NoHoodFound(lat, lon)
        logger.info(
            "hood_resolved",
            hood_id=match.region.id,
            matched_by=match.matched_by,
            distance_km=match.distance_km,
        )
        return match

    def regions(self) -> list[Region]:
        """Load every hood together with its polygons."""
        polygons = self._load_polygons()
        cur = self._pool.execute("SELECT * FROM hoods ORDER BY rowid")
        return [
            self._row_to_region(row, polygons.get(int(row["ID"]), ()))
            for row in cur
        ]

    def default_hood(self) -> Optional[Region]:
        """Return the fallback hood (ID 0 by default), or None if absent."""
        row = self._pool.execute(
            "SELECT * FROM hoods WHERE ID = ?", (self._default_hood_id,)
        ).fetchone()
        if row is None:
            return None
        hood_id = int(row["ID"])
        polygons = self._load_polygons(hood_id).get(hood_id, ())
        return self._row_to_region(row, polygons)

    def gateways(self, hood_id: int) -> list[Gateway]:
        """Return all VPN gateways of the given hood."""
        self._pool.validate_tables(["gateways"])
        cur = self._pool.execute(
            "SELECT name, ip, port, publickey FROM gateways "
            "WHERE hood_ID = ? ORDER BY rowid",
            (hood_id,),
        )
        return [
            Gateway(
                name=row["name"],
                address=row["ip"],
                port=int(row["port"]),
                key=row["publickey"],
            )
            for row in cur
        ]

    def health_check(self) -> dict:
        """
        Verify the database is accessible and contains the hood tables.

        Returns a dict with status information.
        """
        status: dict = {"healthy": True, "hood_db": "ok"}
        try:
            self._pool.validate_tables(["hoods", "polyhood"])
        except Exception as exc:
            status["healthy"] = False
            status["hood_db"] = str(exc)
        return status

    def close(self) -> None:
        """Close the database connection."""
        self._pool.close()

    def __enter__(self) -> HoodLocator:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    # ── Private helpers ───────────────────────────────────────────

    def _load_polygons(
        self, hood_id: Optional[int] = None
    ) -> dict[int, tuple[Polygon, ...]]:
        """
        Group polyhood rows by hood, then by polygon id, keeping row order.

        Vertices are stored as (lat, lon) columns; the ring is used exactly
        as stored, so closed rings must repeat their first vertex. Hood and
        polygon ids are normalised to int since dumps often store them as
        TEXT. Pass *hood_id* to load a single hood's polygons.
        """
        sql = "SELECT polyid, lat, lon, hoodid FROM polyhood"
        params: tuple = ()
        if hood_id is not None:
            sql += " WHERE CAST(hoodid AS INTEGER) = ?"
            params = (hood_id,)
        cur = self._pool.execute(sql + " ORDER BY rowid", params)

        grouped: dict[int, dict[int, list[Point]]] = {}
        for row in cur:
            rings = grouped.setdefault(int(row["hoodid"]), {})
            rings.setdefault(int(row["polyid"]), []).append(
                Point(lon=float(row["lon"]), lat=float(row["lat"]))
            )
        return {
            hood: tuple(
                Polygon(vertices=tuple(vertices), polygon_id=poly_id)
                for poly_id, vertices in rings.items()
            )
            for hood, rings in grouped.items()
        }

    @staticmethod
    def _row_to_region(
        row: sqlite3.Row, polygons: tuple[Polygon, ...]
    ) -> Region:
        lat, lon = row["lat"], row["lon"]
        center = None
        if lat is not None and lon is not None:
            center = Point(lon=float(lon), lat=float(lat))
        attributes = {}
        for column in row.keys():
            name = column.lower()
            if name in _CORE_HOOD_COLUMNS:
                continue
            value = row[column]
            if name == "changedon":
                value = _unix_timestamp(value)
            attributes[_HOOD_COLUMN_ALIASES.get(name, name)] = value
        return Region(
            id=int(row["ID"]),
            name=row["name"],
            center=center,
            polygons=polygons,
            attributes=attributes,
        )


def _unix_timestamp(value: object) -> Optional[int]:
    """
    Convert a changedOn value to Unix seconds.

    Accepts numbers or 'YYYY-MM-DD HH:MM:SS' strings; naive datetimes
    are read as UTC.
    """
    if value is None:
        return None
    if isinstance(value, (int, float)):
        return int(value)
    changed = datetime.fromisoformat(str(value))
    if changed.tzinfo is None:
        changed = changed.replace(tzinfo=timezone.utc)
    return int(changed.timestamp())
