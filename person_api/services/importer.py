"""One-shot import of the CSV file into the database."""
from __future__ import annotations

import logging

from sqlalchemy import delete, text
from sqlalchemy.orm import Session

from person_api.db.models import PersonRecord
from person_api.db.session import get_session
from person_api.repositories.csv_repository import CsvPersonRepository

logger = logging.getLogger(__name__)

# Rows are inserted with explicit ids; PostgreSQL's serial sequence must be
# moved past them or the next insert collides. SQLite continues from max(rowid).
_POSTGRES_SYNC_SEQUENCE = text(
    "SELECT setval(pg_get_serial_sequence('persons', 'id'), "
    "COALESCE(MAX(id), 1), MAX(id) IS NOT NULL) FROM persons"
)


def sync_id_sequence(session: Session) -> None:
    if session.get_bind().dialect.name == "postgresql":
        session.execute(_POSTGRES_SYNC_SEQUENCE)


class CsvToDbImporter:
    """Replaces the ``persons`` table with the content of the CSV file.

    WARNING: destructive. Existing rows are deleted and committed before the
    CSV rows are inserted in a second commit; a failure in between leaves the
    table empty. Nothing is retried or rolled back.
    """

    def __init__(self, csv_repository: CsvPersonRepository) -> None:
        self._csv_repository = csv_repository

    def import_all(self) -> int:
        persons = self._csv_repository.get_all()

        with get_session() as session:
            result = session.execute(delete(PersonRecord))
            session.commit()
            logger.info("Deleted %s existing persons from the database", result.rowcount)

            session.add_all([PersonRecord.from_person(p, keep_id=True) for p in persons])
            session.flush()
            sync_id_sequence(session)
            session.commit()

        logger.info("Imported %d persons from %s", len(persons), self._csv_repository.file_path)
        return len(persons)
