"""Data source selection for the person repositories."""
from __future__ import annotations

from enum import Enum

from person_api.core.errors import ConfigurationError


class DataSourceType(str, Enum):
    CSV = "csv"
    DATABASE = "database"

    @classmethod
    def parse(cls, value: str | None) -> "DataSourceType":
        """Resolve a configuration value (case-insensitive) to a member."""
        candidate = (value or "").strip().lower()
        if not candidate:
            raise ConfigurationError("DATA_SOURCE_TYPE is not set or empty.")
        try:
            return cls(candidate)
        except ValueError as exc:
            allowed = ", ".join(member.value for member in cls)
            raise ConfigurationError(
                f"DATA_SOURCE_TYPE {value!r} is not one of: {allowed}."
            ) from exc
