"""Internal read-only access to the hood database."""

import sqlite3
from pathlib import Path

from hoodlocate.exceptions import DatabaseInvalid, DatabaseNotFound


class _DatabasePool:
    """
    Holds one read-only SQLite connection for the lifetime of a client.

    Rows come back as sqlite3.Row so hood columns can be read by name.
    """

    def __init__(self, path: Path, name: str):
        self._path = path
        self._name = name
        self._conn: sqlite3.Connection | None = None

    def get_connection(self) -> sqlite3.Connection:
        """Return an open read-only connection, creating one if needed."""
        if self._conn is None:
            self._open()
        return self._conn

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """
        Execute a query, translating a vanished database file into
        DatabaseNotFound. Other query errors propagate unchanged.
        """
        conn = self.get_connection()
        try:
            return conn.execute(sql, params)
        except sqlite3.OperationalError:
            if not self._path.is_file():
                self.close()
                raise DatabaseNotFound(str(self._path), self._name)
            raise

    def _open(self) -> None:
        if not self._path.is_file():
            raise DatabaseNotFound(str(self._path), self._name)
        self._conn = sqlite3.connect(f"file:{self._path}?mode=ro", uri=True)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA query_only = ON")

    def table_names(self) -> set[str]:
        cur = self.execute("SELECT name FROM sqlite_master WHERE type='table'")
        return {row[0] for row in cur}

    def validate_tables(self, expected: list[str]) -> None:
        """Raise DatabaseInvalid if any of *expected* tables is missing."""
        missing = set(expected) - self.table_names()
        if missing:
            raise DatabaseInvalid(
                str(self._path),
                f"missing tables: {', '.join(sorted(missing))}",
            )

    def close(self) -> None:
        """Close the connection if open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None
