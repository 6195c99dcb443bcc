"""
FastAPI routers.

Each module exposes an ``APIRouter`` included by ``person_api.app``. Routers
read their collaborators from ``request.app.state``.
"""
