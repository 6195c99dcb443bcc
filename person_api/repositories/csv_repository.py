"""
CSV-backed person repository.

The file is read once, on first access, into an in-memory cache that serves
every subsequent read. New persons are appended both to the cache and to the
end of the file. Line format::

    <last name>, <first name>, <zip code> <city>, <color code>
"""
from __future__ import annotations

import logging
import re
import threading
from pathlib import Path
from typing import Iterable, Mapping, Optional

from person_api.core.config import get_settings
from person_api.core.errors import ConfigurationError
from person_api.domain.colors import ColorTable
from person_api.domain.person import Person

from .base import PersonRepository, check_cancelled

logger = logging.getLogger(__name__)

BOM = "\ufeff"
FIELD_COUNT = 4
ZIP_CITY_PATTERN = re.compile(r"^(\d{5})\s+(.*)$")
COLOR_CODE_PATTERN = re.compile(r"[+-]?[0-9]+")
# Codes outside the 32-bit range are kept as color names.
COLOR_CODE_MIN = -(2**31)
COLOR_CODE_MAX = 2**31 - 1


def parse_zip_city(raw: Optional[str]) -> tuple[Optional[str], Optional[str]]:
    """Split ``"12345 Berlin"`` into zip code and city.

    Text without a leading 5-digit code is returned entirely as the city.
    """
    if raw is None or not raw.strip():
        return None, None
    match = ZIP_CITY_PATTERN.match(raw)
    if match:
        return match.group(1), match.group(2)
    return None, raw


def parse_color(raw: Optional[str], colors: Mapping[int, str]) -> Optional[str]:
    """Resolve a numeric color code; non-numeric text is taken as the name itself."""
    if raw is None or not raw.strip():
        return None
    if COLOR_CODE_PATTERN.fullmatch(raw):
        code = int(raw)
        if COLOR_CODE_MIN <= code <= COLOR_CODE_MAX:
            return colors.get(code)
    return raw


def parse_lines(lines: Iterable[str], colors: Mapping[int, str]) -> list[Person]:
    """Parse CSV lines into persons, numbering accepted lines from 1.

    Lines with fewer than four comma separated parts are skipped and do not
    consume an id.
    """
    result: list[Person] = []
    counter = 0
    for raw in lines:
        parts = raw.replace(BOM, "").split(",", FIELD_COUNT - 1)
        if len(parts) < FIELD_COUNT:
            continue
        zip_code, city = parse_zip_city(parts[2].strip())
        counter += 1
        result.append(
            Person(
                id=counter,
                last_name=parts[0].strip(),
                first_name=parts[1].strip(),
                zip_code=zip_code,
                city=city,
                color=parse_color(parts[3].strip(), colors),
            )
        )
    return result


def format_line(person: Person, colors: ColorTable) -> str:
    """Render a person in file format. Missing values render as empty text."""
    def _text(value: Optional[str]) -> str:
        return "" if value is None else value

    color_code = colors.code_for(person.color)
    return (
        f"{_text(person.last_name)}, {_text(person.first_name)}, "
        f"{_text(person.zip_code)} {_text(person.city)}, {color_code}"
    )


class CsvPersonRepository(PersonRepository):
    """Reads and appends persons in a CSV file, caching its content in memory."""

    def __init__(
        self,
        colors: Optional[Mapping[int, str]],
        file_path: Optional[Path | str] = None,
    ) -> None:
        if colors is None:
            raise ConfigurationError("A color table is required for the CSV repository.")
        self._colors = colors if isinstance(colors, ColorTable) else ColorTable(colors)
        self._file_path = Path(file_path) if file_path is not None else get_settings().csv_path
        self._cache: Optional[list[Person]] = None
        self._lock = threading.Lock()

    @property
    def file_path(self) -> Path:
        return self._file_path

    @property
    def colors(self) -> ColorTable:
        return self._colors

    def get_all(self, *, cancel_event: Optional[threading.Event] = None) -> list[Person]:
        check_cancelled(cancel_event)
        return list(self._ensure_loaded())

    def get_by_id(self, person_id: int, *, cancel_event: Optional[threading.Event] = None) -> Optional[Person]:
        check_cancelled(cancel_event)
        for person in self._ensure_loaded():
            if person.id == person_id:
                return person
        return None

    def get_by_color(self, color: str, *, cancel_event: Optional[threading.Event] = None) -> list[Person]:
        check_cancelled(cancel_event)
        wanted = (color or "").lower()
        if not wanted.strip():
            return []
        return [p for p in self._ensure_loaded() if p.color is not None and p.color.lower() == wanted]

    def add(self, person: Person, *, cancel_event: Optional[threading.Event] = None) -> Person:
        """Append ``person`` with the next free id.

        Concurrent calls are not serialized and may compute the same id.
        """
        check_cancelled(cancel_event)
        cache = self._ensure_loaded()
        new_id = max((p.id for p in cache), default=0) + 1
        created = person.with_id(new_id)

        line = format_line(created, self._colors)
        with self._file_path.open("a", encoding="utf-8") as handle:
            handle.write("\n" + line)
        cache.append(created)
        logger.info("Appended person %s to %s", new_id, self._file_path)
        return created

    def _ensure_loaded(self) -> list[Person]:
        cache = self._cache
        if cache is not None:
            return cache
        with self._lock:
            if self._cache is None:
                self._cache = self._load()
            return self._cache

    def _load(self) -> list[Person]:
        if not self._file_path.exists():
            logger.warning("CSV file %s not found; starting with no persons", self._file_path)
            return []
        with self._file_path.open("r", encoding="utf-8", errors="replace") as handle:
            lines = [line.rstrip("\n") for line in handle]
        persons = parse_lines(lines, self._colors)
        skipped = sum(1 for line in lines if line.strip()) - len(persons)
        logger.info("Loaded %d persons from %s (%d lines skipped)", len(persons), self._file_path, skipped)
        return persons
