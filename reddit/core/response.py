"""Standardized JSON response envelope helpers."""


from typing import Any, Generic, TypeVar

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from reddit.core.pagination import PagedList

T = TypeVar("T")


class DataResponse(BaseModel, Generic[T]):
    """Single-item response envelope: `{ data: {...} }`"""

    data: T

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }


class PagedResponse(BaseModel, Generic[T]):
    """Paged list envelope:
    `{ items: [...], pageNumber, pageSize, totalCount, hasNextPage, hasPreviousPage }`
    """

    items: list[T]
    page_number: int
    page_size: int
    total_count: int
    has_next_page: bool
    has_previous_page: bool

    model_config = {
        "populate_by_name": True,
        "alias_generator": to_camel,
    }

    @classmethod
    def from_page(cls, page: PagedList[Any]) -> "PagedResponse[T]":
        return cls(
            items=list(page.items),
            page_number=page.page_number,
            page_size=page.page_size,
            total_count=page.total_count,
            has_next_page=page.has_next_page,
            has_previous_page=page.has_previous_page,
        )
