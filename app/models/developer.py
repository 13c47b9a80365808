"""
Developer model — one entry in the directory.

Roles:
  - FRONTEND, BACKEND, FULL_STACK are the only accepted values, in both
    the legacy and the authenticated route families.

Lifecycle:
  - Created by a POST (legacy or authenticated); the authenticated variant
    stamps created_by with the caller's user id.
  - Replaced in place by PUT; id, created_at and created_by survive and
    updated_at is stamped.
  - Removed by DELETE.
"""

import enum
from datetime import date, datetime
from typing import Annotated

from pydantic import BeforeValidator, TypeAdapter

from app.models.base import CamelModel, UtcDatetime


_timestamp = TypeAdapter(datetime)


def _date_part(value):
    """Accept a full ISO timestamp ("2024-05-01T09:30:00.000Z") and keep its date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and "T" in value:
        return _timestamp.validate_python(value).date()
    return value


JoiningDate = Annotated[date, BeforeValidator(_date_part)]


class DeveloperRole(str, enum.Enum):
    """
    The kind of work a developer does.

    Inherits from str so the enum value serializes naturally to JSON.
    """
    FRONTEND = "Frontend"
    BACKEND = "Backend"
    FULL_STACK = "Full-Stack"


class Developer(CamelModel):
    """A developer as persisted in the developers collection."""

    id: str
    name: str
    role: DeveloperRole
    tech_stack: str
    experience: float
    description: str | None = None
    joining_date: JoiningDate | None = None
    created_at: UtcDatetime
    # Only present once the record has been edited
    updated_at: UtcDatetime | None = None
    # User id of the authenticated creator (None for legacy records)
    created_by: str | None = None
