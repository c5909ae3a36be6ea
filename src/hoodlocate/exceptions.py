"""Custom exception hierarchy for hoodlocate."""


class HoodLocateError(Exception):
    """Base exception for all hoodlocate errors."""


class MalformedPointString(HoodLocateError):
    """A coordinate string is not of the form 'lon lat'."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Malformed point string: '{value}'")


class NoHoodFound(HoodLocateError):
    """Neither a containing polygon nor a hood center was available."""

    def __init__(self, lat: float, lon: float):
        self.lat = lat
        self.lon = lon
        super().__init__(f"No hood found for lat={lat}, lon={lon}")


class DatabaseNotFound(HoodLocateError):
    """The hood SQLite database file does not exist."""

    def __init__(self, path: str, db_name: str):
        self.path = path
        self.db_name = db_name
        super().__init__(f"{db_name} database not found at: {path}")


class DatabaseInvalid(HoodLocateError):
    """A database exists but is missing expected tables."""

    def __init__(self, path: str, detail: str):
        self.path = path
        super().__init__(f"Invalid database at {path}: {detail}")
