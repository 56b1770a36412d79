"""User router: list, detail, and the posts / comments a user wrote.

Pattern:
  1. Declare a router with prefix and tags
  2. Inject the request-scoped DB session via Depends
  3. Call UserService and wrap the result in the response envelope
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from reddit.core.pagination import PaginationParams
from reddit.core.response import DataResponse, PagedResponse
from reddit.db.base import get_db
from reddit.schemas.common import ErrorResponse
from reddit.schemas.post import CommentOut, PostOut
from reddit.schemas.user import UserOut
from reddit.services.user import UserService

router = APIRouter(prefix="/users", tags=["Users"])

_PAGE_ERRORS = {422: {"model": ErrorResponse, "description": "pageNumber or pageSize out of range"}}
_USER_ERRORS = {404: {"model": ErrorResponse, "description": "User not found"}}


@router.get("", response_model=PagedResponse[UserOut], responses=_PAGE_ERRORS)
async def list_users(
    search_key: Optional[str] = Query(default=None, alias="searchKey", description="Substring of name or email"),
    sort_key: Optional[str] = Query(default=None, alias="sortKey", description="id | numberofposts"),
    is_ascending: bool = Query(default=True, alias="isAscending"),
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """List users (paged). Unknown sort keys sort by id."""
    page = await UserService(session).list_users(
        pagination.page_number,
        pagination.page_size,
        search_key=search_key,
        sort_key=sort_key,
        is_ascending=is_ascending,
    )
    return PagedResponse[UserOut].from_page(page.map(UserOut.model_validate))


@router.get("/{user_id}", response_model=DataResponse[UserOut], responses=_USER_ERRORS)
async def get_user(
    user_id: int,
    session: AsyncSession = Depends(get_db),
):
    user = await UserService(session).get_user(user_id)
    return {"data": UserOut.model_validate(user)}


@router.get(
    "/{user_id}/posts",
    response_model=PagedResponse[PostOut],
    responses={**_PAGE_ERRORS, **_USER_ERRORS},
)
async def list_user_posts(
    user_id: int,
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    """Posts written by one user, oldest first."""
    page = await UserService(session).list_user_posts(
        user_id, pagination.page_number, pagination.page_size
    )
    return PagedResponse[PostOut].from_page(page.map(PostOut.model_validate))


@router.get(
    "/{user_id}/comments",
    response_model=PagedResponse[CommentOut],
    responses={**_PAGE_ERRORS, **_USER_ERRORS},
)
async def list_user_comments(
    user_id: int,
    pagination: PaginationParams = Depends(),
    session: AsyncSession = Depends(get_db),
):
    page = await UserService(session).list_user_comments(
        user_id, pagination.page_number, pagination.page_size
    )
    return PagedResponse[CommentOut].from_page(page.map(CommentOut.model_validate))
