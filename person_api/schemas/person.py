"""
Pydantic schemas for person entries.

JSON field names follow the published contract (``name``, ``lastname``,
``zipcode``); Python code uses the snake_case attribute names. Both spellings
are accepted on input.
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from person_api.domain.person import Person


class PersonCreate(BaseModel):
    """Payload for creating a person. Names are checked by the router."""

    model_config = ConfigDict(populate_by_name=True)

    first_name: Optional[str] = Field(None, alias="name", description="First name")
    last_name: Optional[str] = Field(None, alias="lastname", description="Last name")
    zip_code: Optional[str] = Field(None, alias="zipcode", description="Five digit zip code")
    city: Optional[str] = Field(None, description="City")
    color: Optional[str] = Field(None, description="Favourite color name, e.g. 'blau'")

    def to_person(self) -> Person:
        return Person(
            first_name=self.first_name,
            last_name=self.last_name,
            zip_code=self.zip_code,
            city=self.city,
            color=self.color,
        )


class PersonRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    first_name: Optional[str] = Field(None, alias="name")
    last_name: Optional[str] = Field(None, alias="lastname")
    zip_code: Optional[str] = Field(None, alias="zipcode")
    city: Optional[str] = None
    color: Optional[str] = None

    @classmethod
    def from_person(cls, person: Person) -> "PersonRead":
        return cls(
            id=person.id,
            first_name=person.first_name,
            last_name=person.last_name,
            zip_code=person.zip_code,
            city=person.city,
            color=person.color,
        )
