"""
Pydantic schemas for Developer endpoints.

Field names are camelCase on the wire (techStack, joiningDate) to match
the React client; see CamelModel.

Request bodies trim surrounding whitespace before length checks, and
experience accepts numeric strings ("3") as well as numbers. joiningDate
accepts a plain date or a full ISO timestamp, which is cut to its date.
"""

from typing import Annotated

from pydantic import Field, StringConstraints

from app.models.base import CamelModel
from app.models.developer import Developer, DeveloperRole, JoiningDate


Name = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
TechStack = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Description = Annotated[str, StringConstraints(strip_whitespace=True, max_length=1000)]
Experience = Annotated[float, Field(ge=0, allow_inf_nan=False, description="Years of experience")]


class DeveloperRequest(CamelModel):
    """Request body for POST /api/developers and PUT /api/developers/{id}."""
    name: Name
    role: DeveloperRole
    tech_stack: TechStack
    experience: Experience
    description: Description | None = None
    joining_date: JoiningDate | None = None


class LegacyDeveloperRequest(CamelModel):
    """Request body for the deprecated POST /developers."""
    name: Name
    role: DeveloperRole
    tech_stack: TechStack
    experience: Experience


class DeveloperQuery(CamelModel):
    """
    Listing parameters for GET /api/developers.

    - role: exact match, case-insensitive; "All" or empty means no filter
    - search: substring of name or techStack, case-insensitive
    - sort: "experience-asc", "experience-desc"; anything else means newest first
    - page: 1-based page number
    - limit: page size
    """
    role: str | None = None
    search: str | None = None
    sort: str | None = None
    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)


class PaginationResponse(CamelModel):
    """Pagination metadata for one page of results."""
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int


class DeveloperListResponse(CamelModel):
    """Response body for GET /api/developers."""
    developers: list[Developer]
    pagination: PaginationResponse


class MessageResponse(CamelModel):
    """Plain confirmation body (e.g. after a delete)."""
    message: str
