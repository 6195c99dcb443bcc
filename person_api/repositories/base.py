"""Repository contract shared by the CSV and SQL backends."""
from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from typing import Optional

from person_api.core.errors import OperationCancelledError
from person_api.domain.person import Person


def check_cancelled(cancel_event: Optional[threading.Event]) -> None:
    """Raise when the caller already cancelled before the call started.

    Backends check this once on entry only; parsing and store round-trips
    are never interrupted.
    """
    if cancel_event is not None and cancel_event.is_set():
        raise OperationCancelledError("Operation cancelled by caller.")


class PersonRepository(ABC):
    """Read/append access to person records.

    "Not found" is a normal result: ``get_by_id`` returns None and the list
    operations return an empty list.
    """

    @abstractmethod
    def get_all(self, *, cancel_event: Optional[threading.Event] = None) -> list[Person]:
        """Return every known person in a stable order."""

    @abstractmethod
    def get_by_id(self, person_id: int, *, cancel_event: Optional[threading.Event] = None) -> Optional[Person]:
        """Return the person with ``person_id`` or None."""

    @abstractmethod
    def get_by_color(self, color: str, *, cancel_event: Optional[threading.Event] = None) -> list[Person]:
        """Return persons whose color equals ``color`` ignoring case."""

    @abstractmethod
    def add(self, person: Person, *, cancel_event: Optional[threading.Event] = None) -> Person:
        """Persist ``person`` and return the stored copy with its id set."""
