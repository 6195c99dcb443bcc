"""
Configuration helpers for the Person API.

Settings are read from environment variables once per process and exposed as
an immutable ``Settings`` object so that repositories/services never touch
``os.environ`` directly.
"""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from functools import lru_cache
from pathlib import Path

from .errors import ConfigurationError

DEFAULT_CSV_PATH = os.path.join("Data", "sample-input.csv")
DEFAULT_DATABASE_URL = "sqlite:///persons.db"
DEFAULT_COLOR_MAPPING = {
    1: "blau",
    2: "grün",
    3: "violett",
    4: "rot",
    5: "gelb",
    6: "türkis",
    7: "weiß",
}


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_source_type: str
    csv_path: Path
    database_url: str
    import_on_startup: bool
    log_level: str
    color_mapping: dict[int, str] = field(default_factory=dict)


def parse_color_mapping(raw: str | None) -> dict[int, str]:
    """Parse a JSON object such as ``{"1": "blau"}`` into an int-keyed dict.

    Key order of the JSON document is preserved.
    """
    if raw is None or not raw.strip():
        return dict(DEFAULT_COLOR_MAPPING)
    try:
        data = json.loads(raw)
    except ValueError as exc:
        raise ConfigurationError(f"COLOR_MAPPING is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError("COLOR_MAPPING must be a JSON object of code -> color name.")
    mapping: dict[int, str] = {}
    for key, value in data.items():
        try:
            code = int(key)
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"COLOR_MAPPING key {key!r} is not an integer.") from exc
        mapping[code] = str(value)
    return mapping


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    csv_path = Path(os.getenv("CSV_PATH") or DEFAULT_CSV_PATH)
    if not csv_path.is_absolute():
        csv_path = Path.cwd() / csv_path

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_source_type=os.getenv("DATA_SOURCE_TYPE", "csv"),
        csv_path=csv_path,
        database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
        import_on_startup=_bool(os.getenv("IMPORT_ON_STARTUP"), False),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        color_mapping=parse_color_mapping(os.getenv("COLOR_MAPPING")),
    )
