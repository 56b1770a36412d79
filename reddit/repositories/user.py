"""User repository: search, sort and page the user list."""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy import func, or_, select
from sqlalchemy.orm import selectinload

from reddit.core.pagination import PagedList
from reddit.domain.post import Post
from reddit.domain.user import User
from reddit.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


class UserSortKey(str, enum.Enum):
    ID = "id"
    NUMBER_OF_POSTS = "numberofposts"

    @classmethod
    def parse(cls, raw: str | None) -> UserSortKey:
        """Case-insensitive lookup; None, unknown and whitespace-padded keys sort by id."""
        if raw is None:
            return cls.ID
        try:
            return cls(raw.lower())
        except ValueError:
            logger.debug("Unknown user sort key %r, sorting by id", raw)
            return cls.ID


def _post_count():
    return (
        select(func.count(Post.id))
        .where(Post.author_id == User.id)
        .correlate(User)
        .scalar_subquery()
    )


_SORT_EXPRESSIONS: dict[UserSortKey, Callable[[], Any]] = {
    UserSortKey.ID: lambda: User.id,
    UserSortKey.NUMBER_OF_POSTS: _post_count,
}


class UserRepository(BaseRepository[User]):
    model = User

    async def get_users(
        self,
        page_number: int,
        page_size: int,
        search_key: str | None = None,
        sort_key: str | None = None,
        is_ascending: bool = True,
    ) -> PagedList[User]:
        """Return one page of users.

        ``search_key`` matches as a literal substring of name or email; ``%`` and
        ``_`` are escaped rather than treated as LIKE wildcards. ``sort_key``
        is resolved through UserSortKey; equal sort values fall back to id
        in the same direction.
        """
        q = self._base_query()

        if search_key is not None:
            q = q.where(
                or_(
                    User.name.contains(search_key, autoescape=True),
                    User.email.contains(search_key, autoescape=True),
                )
            )

        key = UserSortKey.parse(sort_key)
        columns = [_SORT_EXPRESSIONS[key]()]
        if key is not UserSortKey.ID:
            columns.append(User.id)
        q = q.order_by(*(c.asc() if is_ascending else c.desc() for c in columns))

        return await self.paginate(q, page_number, page_size)

    async def get_with_posts(self, user_id: int) -> User | None:
        """Load one user together with its posts collection."""
        result = await self._session.execute(
            self._base_query()
            .where(User.id == user_id)
            .options(selectinload(User.posts))
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()
