"""
SQLAlchemy plumbing for the database backend.

One engine per process, built from ``DATABASE_URL`` on first use. SQLite is
the default target: its connections are shared with FastAPI's worker threads
and the directory holding the database file is created on demand.
"""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from pathlib import Path
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from person_api.core.config import get_settings

Base = declarative_base()


def _sqlite_connect_args(url) -> dict:
    database = url.database or ""
    if database and database != ":memory:" and not database.startswith("file:"):
        Path(database).expanduser().parent.mkdir(parents=True, exist_ok=True)
    return {"check_same_thread": False}


@lru_cache
def get_engine() -> Engine:
    """Engine for the configured ``DATABASE_URL``; raises when it is blank."""
    raw_url = (get_settings().database_url or "").strip()
    if not raw_url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    url = make_url(raw_url)
    connect_args = _sqlite_connect_args(url) if url.get_backend_name() == "sqlite" else {}
    return create_engine(url, future=True, pool_pre_ping=True, connect_args=connect_args)


@lru_cache
def _get_sessionmaker():
    # Persons are detached into plain values before the session closes.
    return sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=False, future=True)


@contextmanager
def get_session() -> Iterator[Session]:
    session: Session = _get_sessionmaker()()
    try:
        yield session
    finally:
        session.close()


def create_tables() -> None:
    """Create the ``persons`` table if it does not exist yet."""
    from . import models  # noqa: F401  # registers PersonRecord on Base.metadata

    Base.metadata.create_all(bind=get_engine())
