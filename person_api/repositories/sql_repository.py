"""Person repository backed by SQLAlchemy."""
from __future__ import annotations

import threading
from typing import Optional

from sqlalchemy import select

from person_api.db.models import PersonRecord
from person_api.db.session import get_session
from person_api.domain.person import Person

from .base import PersonRepository, check_cancelled


class SQLPersonRepository(PersonRepository):
    """Pass-through to the ``persons`` table; the database assigns ids.

    Rows are converted to immutable ``Person`` values before the session
    closes, so callers never hold ORM objects.
    """

    def get_all(self, *, cancel_event: Optional[threading.Event] = None) -> list[Person]:
        check_cancelled(cancel_event)
        with get_session() as session:
            stmt = select(PersonRecord).order_by(PersonRecord.id)
            return [row.to_person() for row in session.execute(stmt).scalars().all()]

    def get_by_id(self, person_id: int, *, cancel_event: Optional[threading.Event] = None) -> Optional[Person]:
        check_cancelled(cancel_event)
        with get_session() as session:
            record = session.get(PersonRecord, person_id)
            return record.to_person() if record else None

    def get_by_color(self, color: str, *, cancel_event: Optional[threading.Event] = None) -> list[Person]:
        check_cancelled(cancel_event)
        wanted = (color or "").lower()
        if not wanted.strip():
            return []
        with get_session() as session:
            # Compared in Python: SQLite's lower() only folds ASCII.
            stmt = select(PersonRecord).where(PersonRecord.color.is_not(None)).order_by(PersonRecord.id)
            rows = session.execute(stmt).scalars().all()
            return [row.to_person() for row in rows if row.color.lower() == wanted]

    def add(self, person: Person, *, cancel_event: Optional[threading.Event] = None) -> Person:
        check_cancelled(cancel_event)
        record = PersonRecord.from_person(person)
        with get_session() as session:
            session.add(record)
            session.commit()
            session.refresh(record)
            return record.to_person()
