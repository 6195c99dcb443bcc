"""Selects the person repository for the configured data source."""
from __future__ import annotations

from person_api.core.errors import UnsupportedDataSourceError
from person_api.domain.data_source import DataSourceType

from .base import PersonRepository
from .csv_repository import CsvPersonRepository
from .sql_repository import SQLPersonRepository


class PersonRepositoryFactory:
    """Holds both repositories and hands out the one matching a data source.

    Both repositories are built by the caller up front; nothing is
    constructed lazily here.
    """

    def __init__(self, csv_repository: CsvPersonRepository, db_repository: SQLPersonRepository) -> None:
        self._csv_repository = csv_repository
        self._db_repository = db_repository

    def create_repository(self, data_source: DataSourceType) -> PersonRepository:
        if data_source is DataSourceType.CSV:
            return self._csv_repository
        if data_source is DataSourceType.DATABASE:
            return self._db_repository
        raise UnsupportedDataSourceError(data_source)
