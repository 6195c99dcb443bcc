from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Body, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from person_api.repositories.base import PersonRepository
from person_api.schemas.person import PersonCreate, PersonRead

router = APIRouter(prefix="/persons", tags=["persons"])


def _get_repository(request: Request) -> PersonRepository:
    repo = getattr(getattr(request.app, "state", None), "person_repository", None)
    if not repo:
        raise RuntimeError("PersonRepository not configured")
    return repo


@router.get("", response_model=list[PersonRead])
def list_persons(request: Request):
    repo = _get_repository(request)
    return [PersonRead.from_person(p) for p in repo.get_all()]


@router.get("/color/{color}", response_model=list[PersonRead])
def persons_by_color(color: str, request: Request):
    repo = _get_repository(request)
    return [PersonRead.from_person(p) for p in repo.get_by_color(color)]


@router.get("/{person_id}", response_model=PersonRead)
def get_person(person_id: int, request: Request):
    person = _get_repository(request).get_by_id(person_id)
    if person is None:
        raise HTTPException(status.HTTP_404_NOT_FOUND, "Person not found")
    return PersonRead.from_person(person)


@router.post("", response_model=PersonRead, status_code=status.HTTP_201_CREATED)
def create_person(request: Request, response: Response, payload: Optional[PersonCreate] = Body(None)):
    if payload is None:
        return JSONResponse(
            {"error": "Person data must be provided."},
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    if not (payload.first_name or "").strip() or not (payload.last_name or "").strip():
        return JSONResponse(
            {"error": "Name and Lastname are required."},
            status_code=status.HTTP_400_BAD_REQUEST,
        )
    created = _get_repository(request).add(payload.to_person())
    response.headers["Location"] = f"/persons/{created.id}"
    return PersonRead.from_person(created)
