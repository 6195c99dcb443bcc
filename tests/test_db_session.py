from __future__ import annotations

import threading

import pytest
from sqlalchemy import inspect

from person_api.core import config as core_config
from person_api.db import session as db_session
from person_api.domain.person import Person
from person_api.repositories.sql_repository import SQLPersonRepository


@pytest.fixture()
def nested_db(tmp_path, monkeypatch):
    db_file = tmp_path / "var" / "data" / "persons.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]

    yield db_file

    db_session.get_engine().dispose()
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


def test_create_tables_creates_missing_directory_and_table(nested_db):
    db_session.create_tables()

    assert nested_db.exists()
    assert "persons" in inspect(db_session.get_engine()).get_table_names()


def test_create_tables_is_idempotent(nested_db):
    db_session.create_tables()
    SQLPersonRepository().add(Person(first_name="A", last_name="B"))

    db_session.create_tables()

    assert len(SQLPersonRepository().get_all()) == 1


def test_sqlite_connection_is_usable_from_other_threads(nested_db):
    db_session.create_tables()
    repo = SQLPersonRepository()
    repo.add(Person(first_name="A", last_name="B"))
    results = []
    errors = []

    def worker():
        try:
            results.append(len(repo.get_all()))
        except Exception as exc:  # pragma: no cover - reported below
            errors.append(exc)

    threads = [threading.Thread(target=worker) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert errors == []
    assert results == [1] * 4


def test_blank_database_url_is_rejected(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "  ")
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    try:
        with pytest.raises(RuntimeError, match="DATABASE_URL"):
            db_session.get_engine()
    finally:
        core_config.get_settings.cache_clear()
        db_session.get_engine.cache_clear()
