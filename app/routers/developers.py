"""
Developers router — the authenticated directory endpoints.

All endpoints require a JWT (see app/dependencies.py):

  GET    /api/developers            — Filtered, sorted, paginated listing
  GET    /api/developers/{id}       — One developer
  POST   /api/developers            — Create (stamps createdBy)
  PUT    /api/developers/{id}       — Full replace
  DELETE /api/developers/{id}       — Remove

Responses omit unset optional fields (description, joiningDate,
updatedAt, createdBy) rather than sending nulls.
"""

from fastapi import APIRouter, Depends, Query, status

from app.config import settings
from app.dependencies import get_current_identity
from app.models.developer import Developer
from app.models.user import Identity
from app.schemas.developer import (
    DeveloperListResponse,
    DeveloperQuery,
    DeveloperRequest,
    MessageResponse,
)
from app.services import developer_service
from app.storage import RecordStore, get_developer_store

router = APIRouter()


@router.get(
    "",
    response_model=DeveloperListResponse,
    response_model_exclude_none=True,
    summary="List developers",
)
async def list_developers(
    role: str | None = Query(None, description="Exact role, or 'All'"),
    search: str | None = Query(None, description="Substring of name or tech stack"),
    sort: str | None = Query(None, description="experience-asc | experience-desc (default: newest)"),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
    identity: Identity = Depends(get_current_identity),
    developers: RecordStore[Developer] = Depends(get_developer_store),
):
    """
    List developers, newest first unless a sort is given.

    Filters are applied before pagination, so `pagination.totalItems`
    counts every match. Asking for a page past the end returns an empty
    list with the real totals.
    """
    query = DeveloperQuery(role=role, search=search, sort=sort, page=page, limit=limit)
    return await developer_service.list_developers(developers, query)


@router.get(
    "/{developer_id}",
    response_model=Developer,
    response_model_exclude_none=True,
    summary="Get a developer",
)
async def get_developer(
    developer_id: str,
    identity: Identity = Depends(get_current_identity),
    developers: RecordStore[Developer] = Depends(get_developer_store),
):
    """Get a single developer by id. Returns 404 if it doesn't exist."""
    return await developer_service.get_developer(developers, developer_id)


@router.post(
    "",
    response_model=Developer,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a developer",
)
async def create_developer(
    request: DeveloperRequest,
    identity: Identity = Depends(get_current_identity),
    developers: RecordStore[Developer] = Depends(get_developer_store),
):
    """
    Add a developer to the directory.

    - **name**, **role** (Frontend | Backend | Full-Stack), **techStack**,
      **experience** (years, >= 0) are required
    - **description** (up to 1000 characters) and **joiningDate** are optional

    The authenticated user is recorded as `createdBy`.
    """
    return await developer_service.create_developer(developers, request, created_by=identity)


@router.put(
    "/{developer_id}",
    response_model=Developer,
    response_model_exclude_none=True,
    summary="Replace a developer",
)
async def update_developer(
    developer_id: str,
    request: DeveloperRequest,
    identity: Identity = Depends(get_current_identity),
    developers: RecordStore[Developer] = Depends(get_developer_store),
):
    """
    Replace every editable field of a developer.

    The id, createdAt and createdBy are kept; updatedAt is set to now.
    """
    return await developer_service.update_developer(developers, developer_id, request)


@router.delete(
    "/{developer_id}",
    response_model=MessageResponse,
    summary="Delete a developer",
)
async def delete_developer(
    developer_id: str,
    identity: Identity = Depends(get_current_identity),
    developers: RecordStore[Developer] = Depends(get_developer_store),
):
    """Remove a developer. Returns 404 if it doesn't exist."""
    message = await developer_service.delete_developer(developers, developer_id)
    return MessageResponse(message=message)
