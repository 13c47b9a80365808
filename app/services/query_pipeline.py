"""
Query pipeline — filter, search, sort, and paginate the developer list.

Every listing request loads the whole collection and runs it through the
same pure steps, in this order:

  1. Role filter    — exact match, case-insensitive; "All" means no filter
  2. Search         — substring of name OR techStack, case-insensitive
  3. Sort           — experience asc/desc, otherwise newest createdAt first
  4. Totals         — totalItems = filtered count,
                      totalPages = ceil(totalItems / limit)
  5. Slice          — [(page - 1) * limit, page * limit)

Nothing here touches storage or mutates its input, so the same snapshot
and parameters always produce the same page. A page past the end is an
empty list with the true totals, not an error.

The deprecated /developers listing uses legacy_filter(): role and a
techStack substring only, no sorting and no pagination.
"""

import math

from app.models.developer import Developer
from app.schemas.developer import DeveloperListResponse, DeveloperQuery, PaginationResponse


ALL_ROLES = "All"

SORT_EXPERIENCE_ASC = "experience-asc"
SORT_EXPERIENCE_DESC = "experience-desc"


def filter_by_role(developers: list[Developer], role: str | None) -> list[Developer]:
    """Keep developers whose role equals `role`, ignoring case."""
    if not role or role.lower() == ALL_ROLES.lower():
        return list(developers)
    wanted = role.lower()
    return [dev for dev in developers if dev.role.value.lower() == wanted]


def filter_by_search(developers: list[Developer], search: str | None) -> list[Developer]:
    """Keep developers whose name or tech stack contains `search`, ignoring case."""
    if not search:
        return list(developers)
    needle = search.lower()
    return [
        dev for dev in developers
        if needle in dev.name.lower() or needle in dev.tech_stack.lower()
    ]


def sort_developers(developers: list[Developer], sort: str | None) -> list[Developer]:
    """Order developers by the requested sort key (newest first by default)."""
    if sort == SORT_EXPERIENCE_ASC:
        return sorted(developers, key=lambda dev: dev.experience)
    if sort == SORT_EXPERIENCE_DESC:
        return sorted(developers, key=lambda dev: dev.experience, reverse=True)
    return sorted(developers, key=lambda dev: dev.created_at, reverse=True)


def paginate(
    developers: list[Developer],
    page: int,
    limit: int,
) -> tuple[list[Developer], PaginationResponse]:
    """
    Slice one page out of an already filtered and sorted list.

    Args:
        developers: The full result set, in final order.
        page: 1-based page number.
        limit: Page size (must be positive).

    Returns:
        Tuple of (developers on this page, pagination metadata).
    """
    total_items = len(developers)
    start = (page - 1) * limit
    pagination = PaginationResponse(
        current_page=page,
        total_pages=math.ceil(total_items / limit),
        total_items=total_items,
        items_per_page=limit,
    )
    return developers[start:start + limit], pagination


def run_query(developers: list[Developer], query: DeveloperQuery) -> DeveloperListResponse:
    """Apply the full filter → search → sort → paginate pipeline."""
    result = filter_by_role(developers, query.role)
    result = filter_by_search(result, query.search)
    result = sort_developers(result, query.sort)
    page, pagination = paginate(result, query.page, query.limit)
    return DeveloperListResponse(developers=page, pagination=pagination)


def legacy_filter(
    developers: list[Developer],
    role: str | None = None,
    tech: str | None = None,
) -> list[Developer]:
    """
    Filter for the deprecated /developers listing.

    Role is matched exactly (ignoring case, "All" means no filter) and
    `tech` is a case-insensitive substring of the tech stack only. The
    stored order is preserved.
    """
    result = filter_by_role(developers, role)
    if tech:
        needle = tech.lower()
        result = [dev for dev in result if needle in dev.tech_stack.lower()]
    return result
