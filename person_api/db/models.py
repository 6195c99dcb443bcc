"""SQLAlchemy models for the SQL backend."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String

from person_api.domain.person import Person

from .session import Base


class PersonRecord(Base):
    __tablename__ = "persons"

    id = Column(Integer, primary_key=True, autoincrement=True)
    last_name = Column(String(200), nullable=True)
    first_name = Column(String(200), nullable=True)
    zip_code = Column(String(20), nullable=True)
    city = Column(String(200), nullable=True)
    color = Column(String(100), nullable=True)

    @classmethod
    def from_person(cls, person: Person, *, keep_id: bool = False) -> "PersonRecord":
        record = cls(
            last_name=person.last_name,
            first_name=person.first_name,
            zip_code=person.zip_code,
            city=person.city,
            color=person.color,
        )
        if keep_id and person.id:
            record.id = person.id
        return record

    def to_person(self) -> Person:
        return Person(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            zip_code=self.zip_code,
            city=self.city,
            color=self.color,
        )
