"""Settings read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

# Environment variables take priority; the database falls back to the
# current working directory.
DB_ENV = "HOODLOCATE_DB"
LOG_LEVEL_ENV = "HOODLOCATE_LOG_LEVEL"
JSON_LOGS_ENV = "HOODLOCATE_JSON_LOGS"

_DEFAULT_DB_NAME = "hoods.db"
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    db_path: Path
    log_level: str = "INFO"
    json_logs: bool = False


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from *environ* (defaults to os.environ)."""
    env = os.environ if environ is None else environ
    db_path = env.get(DB_ENV) or str(Path.cwd() / _DEFAULT_DB_NAME)
    return Settings(
        db_path=Path(db_path),
        log_level=env.get(LOG_LEVEL_ENV, "INFO").upper(),
        json_logs=env.get(JSON_LOGS_ENV, "").strip().lower() in _TRUTHY,
    )
