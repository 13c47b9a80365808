"""
Developer service — business logic for directory records.

This module handles:
  - Listing (through the query pipeline) and fetching by id
  - Creating, replacing, and deleting a single developer

Every write is a read-modify-write of the whole collection: load all
developers, change one in memory, save all of them back. There is no
locking, so two concurrent writes can lose one of the changes.

Identity:
  create_developer() takes the caller's Identity as an explicit argument
  (resolved once by the auth dependency). The legacy route passes None,
  which leaves created_by unset.
"""

import logging
import uuid
from datetime import datetime, timezone

from app.exceptions import DeveloperNotFoundError
from app.models.developer import Developer
from app.models.user import Identity
from app.schemas.developer import (
    DeveloperListResponse,
    DeveloperQuery,
    DeveloperRequest,
    LegacyDeveloperRequest,
)
from app.services import query_pipeline
from app.storage import RecordStore


logger = logging.getLogger(__name__)


def _find_index(developers: list[Developer], developer_id: str) -> int:
    """Position of `developer_id` in the collection, or DeveloperNotFoundError."""
    for index, developer in enumerate(developers):
        if developer.id == developer_id:
            return index
    raise DeveloperNotFoundError(developer_id)


async def list_developers(
    store: RecordStore[Developer],
    query: DeveloperQuery,
) -> DeveloperListResponse:
    """Return one page of developers matching `query`, with pagination metadata."""
    developers = await store.load()
    return query_pipeline.run_query(developers, query)


async def list_developers_legacy(
    store: RecordStore[Developer],
    role: str | None = None,
    tech: str | None = None,
) -> list[Developer]:
    """Return every developer matching the legacy role/tech filters."""
    developers = await store.load()
    return query_pipeline.legacy_filter(developers, role=role, tech=tech)


async def get_developer(store: RecordStore[Developer], developer_id: str) -> Developer:
    """
    Get a single developer by id.

    Raises:
        DeveloperNotFoundError: If no developer has this id.
    """
    developers = await store.load()
    return developers[_find_index(developers, developer_id)]


async def create_developer(
    store: RecordStore[Developer],
    data: DeveloperRequest | LegacyDeveloperRequest,
    created_by: Identity | None = None,
) -> Developer:
    """
    Create a developer and persist the collection.

    Args:
        store: The developers collection.
        data: Validated request body (legacy bodies carry no optional fields).
        created_by: The authenticated caller, stamped as the record's creator.

    Returns:
        The newly created Developer.
    """
    developers = await store.load()

    developer = Developer(
        id=str(uuid.uuid4()),
        created_at=datetime.now(timezone.utc),
        created_by=created_by.user_id if created_by else None,
        **data.model_dump(),
    )
    developers.append(developer)
    await store.save(developers)

    logger.info("Created developer %s", developer.id)
    return developer


async def update_developer(
    store: RecordStore[Developer],
    developer_id: str,
    data: DeveloperRequest,
) -> Developer:
    """
    Replace a developer's fields in place and persist the collection.

    The update is a full replace: optional fields omitted from `data`
    are cleared. id, created_at and created_by are preserved and
    updated_at is stamped.

    Raises:
        DeveloperNotFoundError: If no developer has this id.
    """
    developers = await store.load()
    index = _find_index(developers, developer_id)
    current = developers[index]

    updated = Developer(
        id=current.id,
        created_at=current.created_at,
        created_by=current.created_by,
        updated_at=datetime.now(timezone.utc),
        **data.model_dump(),
    )
    developers[index] = updated
    await store.save(developers)

    logger.info("Updated developer %s", developer_id)
    return updated


async def delete_developer(store: RecordStore[Developer], developer_id: str) -> str:
    """
    Remove a developer and persist the collection.

    Returns:
        A confirmation message.

    Raises:
        DeveloperNotFoundError: If no developer has this id.
    """
    developers = await store.load()
    index = _find_index(developers, developer_id)
    del developers[index]
    await store.save(developers)

    logger.info("Deleted developer %s", developer_id)
    return "Developer deleted successfully"
