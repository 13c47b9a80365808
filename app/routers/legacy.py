"""
Legacy router — the original unauthenticated /developers endpoints.

Deprecated: kept so clients of the first API version keep working. New
clients should use /api/developers. These routes share the developers
collection and the role enum with the authenticated family, but expose
only listing (role + tech filters, no pagination) and creation.

Endpoints:
  GET  /developers?role=&tech=  — Every matching developer, stored order
  POST /developers              — Create (no createdBy)
"""

from fastapi import APIRouter, Depends, Query, status

from app.models.developer import Developer
from app.schemas.developer import LegacyDeveloperRequest
from app.services import developer_service
from app.storage import RecordStore, get_developer_store

router = APIRouter()


@router.get(
    "",
    response_model=list[Developer],
    response_model_exclude_none=True,
    summary="[Deprecated] List developers",
    deprecated=True,
)
async def list_developers(
    role: str | None = Query(None, description="Exact role, or 'All'"),
    tech: str | None = Query(None, description="Substring of the tech stack"),
    developers: RecordStore[Developer] = Depends(get_developer_store),
):
    return await developer_service.list_developers_legacy(developers, role=role, tech=tech)


@router.post(
    "",
    response_model=Developer,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="[Deprecated] Create a developer",
    deprecated=True,
)
async def create_developer(
    request: LegacyDeveloperRequest,
    developers: RecordStore[Developer] = Depends(get_developer_store),
):
    return await developer_service.create_developer(developers, request)
