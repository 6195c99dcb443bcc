import logging

from fastapi import FastAPI

from person_api.core.config import get_settings
from person_api.core.logging_config import setup_logging
from person_api.db.session import create_tables
from person_api.domain.colors import ColorTable
from person_api.domain.data_source import DataSourceType
from person_api.repositories.csv_repository import CsvPersonRepository
from person_api.repositories.factory import PersonRepositoryFactory
from person_api.repositories.sql_repository import SQLPersonRepository
from person_api.routers import persons as persons_router
from person_api.services.importer import CsvToDbImporter

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    """Factory compatible with uvicorn/gunicorn.

    The data source is fixed for the lifetime of the returned app.
    """
    settings = get_settings()
    setup_logging(settings.log_level)
    data_source = DataSourceType.parse(settings.data_source_type)

    csv_repo = CsvPersonRepository(ColorTable(settings.color_mapping), settings.csv_path)
    db_repo = SQLPersonRepository()
    factory = PersonRepositoryFactory(csv_repo, db_repo)

    if data_source is DataSourceType.DATABASE or settings.import_on_startup:
        create_tables()
    if settings.import_on_startup:
        CsvToDbImporter(csv_repo).import_all()

    app = FastAPI(title="Person API")
    app.state.repository_factory = factory
    app.state.person_repository = factory.create_repository(data_source)
    app.include_router(persons_router.router)
    logger.info("Person API started with data source '%s'", data_source.value)
    return app
