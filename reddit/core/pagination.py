"""Pagination helpers: the PagedList result and the list-endpoint query params."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fastapi import Query
from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from reddit.core.config import MAX_PAGE_SIZE, settings
from reddit.core.exceptions import PageOutOfRangeError

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class PagedList(Generic[T]):
    """One page of an ordered query plus the metadata needed to navigate it."""

    items: tuple[T, ...]
    page_number: int
    page_size: int
    total_count: int

    @property
    def has_next_page(self) -> bool:
        return self.page_number * self.page_size < self.total_count

    @property
    def has_previous_page(self) -> bool:
        return self.page_number > 1

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_count / self.page_size)

    def map(self, fn: Callable[[T], U]) -> PagedList[U]:
        """Return a page with the same metadata and ``fn`` applied to each item."""
        return PagedList(
            items=tuple(fn(item) for item in self.items),
            page_number=self.page_number,
            page_size=self.page_size,
            total_count=self.total_count,
        )

    @classmethod
    async def create(
        cls,
        session: AsyncSession,
        query: Select[Any],
        page_number: int,
        page_size: int,
    ) -> PagedList[Any]:
        """Count ``query`` and fetch the requested page of it.

        ``query`` must already carry its filters and ORDER BY; the page is
        cut with OFFSET/LIMIT so the caller's ordering is preserved. Runs
        exactly two statements (count, then fetch) on ``session``.
        """
        validate_page_request(page_number, page_size)

        count_q = select(func.count()).select_from(query.order_by(None).subquery())
        total = (await session.execute(count_q)).scalar_one()

        page_q = query.offset((page_number - 1) * page_size).limit(page_size)
        items = (await session.execute(page_q)).scalars().all()

        logger.debug(
            "Built page %d (size %d): %d of %d items", page_number, page_size, len(items), total,
        )
        return cls(
            items=tuple(items),
            page_number=page_number,
            page_size=page_size,
            total_count=total,
        )


def validate_page_request(page_number: int, page_size: int) -> None:
    """Raise PageOutOfRangeError unless page_number >= 1 and 1 <= page_size <= MAX_PAGE_SIZE."""
    if page_number < 1:
        raise PageOutOfRangeError("pageNumber", page_number, "must be greater than or equal to 1")
    if page_size < 1 or page_size > MAX_PAGE_SIZE:
        raise PageOutOfRangeError(
            "pageSize", page_size, f"must be between 1 and {MAX_PAGE_SIZE}",
        )


class PaginationParams:
    """FastAPI dependency for `?pageNumber=1&pageSize=10`.

    Ranges are not enforced here; PagedList.create reports them so HTTP and
    direct callers get the same error.
    """

    def __init__(
        self,
        page_number: int = Query(default=1, alias="pageNumber", description="Page number (1-based)"),
        page_size: int = Query(
            default=settings.default_page_size,
            alias="pageSize",
            description=f"Items per page (max {MAX_PAGE_SIZE})",
        ),
    ):
        self.page_number = page_number
        self.page_size = page_size
