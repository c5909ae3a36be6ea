"""Shared test fixtures — small hood databases and in-memory regions."""

import sqlite3
from pathlib import Path

import pytest

from hoodlocate.models import Point, Polygon, Region

# Closed 10x10 ring, (lon, lat)
SQUARE = [(0, 0), (0, 10), (10, 10), (10, 0), (0, 0)]


def _ring(lon_min, lat_min, lon_max, lat_max):
    return [
        (lon_min, lat_min),
        (lon_min, lat_max),
        (lon_max, lat_max),
        (lon_max, lat_min),
        (lon_min, lat_min),
    ]


def _create_schema(conn: sqlite3.Connection, with_gateways: bool = True):
    conn.execute(
        """
        CREATE TABLE hoods (
            ID INTEGER PRIMARY KEY,
            name TEXT,
            ESSID_AP TEXT,
            BSSID_MESH TEXT,
            ESSID_MESH TEXT,
            changedOn TEXT,
            channel2 INTEGER,
            lat REAL,
            lon REAL
        )
        """
    )
    conn.execute(
        "CREATE TABLE polyhood (polyid INTEGER, lat REAL, lon REAL, hoodid INTEGER)"
    )
    if with_gateways:
        conn.execute(
            """
            CREATE TABLE gateways (
                name TEXT,
                ip TEXT,
                port INTEGER,
                publickey TEXT,
                hood_ID INTEGER
            )
            """
        )


@pytest.fixture()
def hood_db(tmp_path: Path) -> Path:
    """Create a small hood database with polygons and gateways."""
    db_path = tmp_path / "hoods.db"
    conn = sqlite3.connect(str(db_path))
    _create_schema(conn)
    hoods = [
        (0, "Trainstation", "trainstation.ffx", "02:ca:ff:ee:00:00", "mesh.ffx",
         "2018-03-01 12:00:00", 1, 49.0, 10.0),
        (1, "Fuerth", "fuerth.ffx", "02:ca:ff:ee:00:01", "mesh.ffx",
         "2018-03-01 12:00:00", 1, 49.47, 10.99),
        (2, "Erlangen", "erlangen.ffx", "02:ca:ff:ee:00:02", "mesh.ffx",
         "2019-06-15 08:30:00", 6, 49.59, 11.0),
        # No center: only reachable through its two polygons
        (3, "Exclave", "exclave.ffx", "02:ca:ff:ee:00:03", "mesh.ffx",
         None, 11, None, None),
    ]
    conn.executemany("INSERT INTO hoods VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?)", hoods)

    polygons = [
        (1, 1, _ring(10.9, 49.4, 11.1, 49.55)),
        (2, 3, _ring(12.0, 50.0, 13.0, 51.0)),
        (3, 3, _ring(14.0, 50.0, 15.0, 51.0)),
    ]
    for poly_id, hood_id, ring in polygons:
        conn.executemany(
            "INSERT INTO polyhood VALUES (?, ?, ?, ?)",
            [(poly_id, lat, lon, hood_id) for lon, lat in ring],
        )

    gateways = [
        ("fff-gw-fue1", "gw1.fuerth.example", 10000, "abc123", 1),
        ("fff-gw-fue2", "gw2.fuerth.example", 10001, "def456", 1),
        ("fff-gw-erl1", "gw1.erlangen.example", 10000, "987fed", 2),
    ]
    conn.executemany("INSERT INTO gateways VALUES (?, ?, ?, ?, ?)", gateways)
    conn.commit()
    conn.close()
    return db_path


@pytest.fixture()
def empty_hood_db(tmp_path: Path) -> Path:
    """Hood database with the tables but no rows and no gateways table."""
    db_path = tmp_path / "empty.db"
    conn = sqlite3.connect(str(db_path))
    _create_schema(conn, with_gateways=False)
    conn.commit()
    conn.close()
    return db_path


@pytest.fixture()
def locator(hood_db: Path):
    """Create a HoodLocator over the test database."""
    from hoodlocate import HoodLocator

    loc = HoodLocator(hood_db)
    yield loc
    loc.close()


@pytest.fixture()
def square() -> Polygon:
    return Polygon.from_coordinates(SQUARE)


@pytest.fixture()
def regions() -> list:
    """In-memory catalog: one polygon hood, two center-only hoods."""
    return [
        Region(
            id=1,
            name="Square",
            center=Point(lon=50.0, lat=50.0),
            polygons=(Polygon.from_coordinates(SQUARE, polygon_id=1),),
        ),
        Region(id=2, name="Near", center=Point(lon=6.0, lat=5.0)),
        Region(id=3, name="Far", center=Point(lon=40.0, lat=40.0)),
    ]
