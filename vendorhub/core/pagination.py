"""Pagination helpers for list endpoints."""


from typing import Optional, TypeVar

from fastapi import Query

from vendorhub.core.config import settings

T = TypeVar("T")


def null_to_default(value: Optional[T], default: T) -> T:
    """Substitute ``default`` when ``value`` is absent."""
    return default if value is None else value


class PaginationParams:
    """FastAPI dependency for `?skip=0&limit=20`.

    Both values fall back to their defaults when absent. ``limit`` is capped
    at ``settings.vendor_list_max_limit``; a non-positive limit means the default.
    """

    def __init__(
        self,
        skip: Optional[int] = Query(default=None, description="Number of records to skip"),
        limit: Optional[int] = Query(default=None, description="Items per page (max 20)"),
    ):
        self.skip = max(null_to_default(skip, 0), 0)
        limit = null_to_default(limit, settings.vendor_list_default_limit)
        if limit <= 0:
            limit = settings.vendor_list_default_limit
        self.limit = min(limit, settings.vendor_list_max_limit)
