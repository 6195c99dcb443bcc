"""Entry point for uvicorn: ``uvicorn person_api.app_factory:app``."""
from person_api.app import create_app

app = create_app()

__all__ = ["app", "create_app"]
