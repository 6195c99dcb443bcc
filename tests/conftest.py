"""Shared fixtures: temporary SQLite database and CSV files."""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the person_api package importable during local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from person_api.core import config as core_config  # noqa: E402
from person_api.db import models  # noqa: E402
from person_api.db import session as db_session  # noqa: E402
from person_api.domain.colors import ColorTable  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def colors() -> ColorTable:
    return ColorTable({1: "blau", 2: "grün", 3: "violett"})


@pytest.fixture()
def write_csv(tmp_path):
    """Write ``lines`` joined by newlines to a CSV file and return its path."""
    def _write(*lines: str, name: str = "sample-input.csv") -> Path:
        path = tmp_path / name
        path.write_text("\n".join(lines), encoding="utf-8")
        return path

    return _write


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset settings/engine caches."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    _clear_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _clear_caches()
