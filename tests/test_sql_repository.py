"""
Smoke tests for the SQLPersonRepository against a temporary SQLite database.
"""
from __future__ import annotations

import threading

import pytest

from person_api.core.errors import OperationCancelledError
from person_api.domain.person import Person
from person_api.repositories.sql_repository import SQLPersonRepository


def _seed(repo: SQLPersonRepository) -> list[Person]:
    return [
        repo.add(Person(first_name="Hans", last_name="Müller", zip_code="12345", city="Berlin", color="blau")),
        repo.add(Person(first_name="Anna", last_name="Schmidt", zip_code="54321", city="Hamburg", color="grün")),
        repo.add(Person(first_name="Max", last_name="Fischer", zip_code="10115", city="Berlin", color="Blau")),
    ]


def test_empty_table(temp_db):
    repo = SQLPersonRepository()
    assert repo.get_all() == []
    assert repo.get_by_id(1) is None
    assert repo.get_by_color("blau") == []


def test_add_assigns_ids_and_persists(temp_db):
    repo = SQLPersonRepository()
    new_person = Person(first_name="Hans", last_name="Müller", zip_code="12345", city="Berlin", color="blau")

    added = repo.add(new_person)

    assert added.id > 0
    assert added == new_person.with_id(added.id)
    assert new_person.id == 0
    assert repo.get_by_id(added.id) == added
    assert added in repo.get_all()


def test_ids_increase(temp_db):
    persons = _seed(SQLPersonRepository())
    ids = [p.id for p in persons]
    assert ids == sorted(ids)
    assert len(set(ids)) == 3


def test_get_by_id_missing_returns_none(temp_db):
    repo = SQLPersonRepository()
    _seed(repo)
    assert repo.get_by_id(99999) is None


def test_get_by_color_ignores_case(temp_db):
    repo = SQLPersonRepository()
    _seed(repo)

    blau = repo.get_by_color("blau")
    assert [p.first_name for p in blau] == ["Hans", "Max"]
    assert repo.get_by_color("BLAU") == blau


@pytest.mark.parametrize("color", ["pink", "", "  "])
def test_get_by_color_unknown_or_empty(temp_db, color):
    repo = SQLPersonRepository()
    _seed(repo)
    assert repo.get_by_color(color) == []


def test_persons_without_color_never_match(temp_db):
    repo = SQLPersonRepository()
    repo.add(Person(first_name="No", last_name="Color"))
    assert repo.get_by_color("blau") == []
    assert repo.get_all()[0].color is None


def test_cancelled_call_is_rejected(temp_db):
    repo = SQLPersonRepository()
    cancel = threading.Event()
    cancel.set()
    with pytest.raises(OperationCancelledError):
        repo.add(Person(first_name="A", last_name="B"), cancel_event=cancel)
    assert repo.get_all() == []


def test_get_by_color_folds_non_ascii_letters(temp_db):
    repo = SQLPersonRepository()
    stored = repo.add(Person(first_name="Eva", last_name="Neu", color="GRÜN"))

    assert repo.get_by_color("grün") == [stored]
    assert repo.get_by_color("GRÜN") == [stored]
    assert repo.get_by_color("Grün") == [stored]
