"""The Person record shared by every storage backend."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class Person:
    """A person entry. ``id`` is 0 until a repository assigns one."""

    id: int = 0
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    zip_code: Optional[str] = None
    city: Optional[str] = None
    color: Optional[str] = None

    def with_id(self, person_id: int) -> "Person":
        return replace(self, id=person_id)
