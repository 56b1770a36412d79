"""User service.

Rule: No SQLAlchemy queries / no FastAPI here. Delegates to the repositories.
"""


import logging

from sqlalchemy.ext.asyncio import AsyncSession

from reddit.core.exceptions import NotFoundError
from reddit.core.pagination import PagedList
from reddit.domain.comment import Comment
from reddit.domain.post import Post
from reddit.domain.user import User
from reddit.repositories.comment import CommentRepository
from reddit.repositories.post import PostRepository
from reddit.repositories.user import UserRepository

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, session: AsyncSession):
        self._repo = UserRepository(session)
        self._posts = PostRepository(session)
        self._comments = CommentRepository(session)

    async def list_users(
        self,
        page_number: int,
        page_size: int,
        search_key: str | None = None,
        sort_key: str | None = None,
        is_ascending: bool = True,
    ) -> PagedList[User]:
        logger.debug(
            "Listing users page=%d size=%d search=%r sort=%r asc=%s",
            page_number, page_size, search_key, sort_key, is_ascending,
        )
        return await self._repo.get_users(
            page_number, page_size,
            search_key=search_key, sort_key=sort_key, is_ascending=is_ascending,
        )

    async def get_user(self, user_id: int) -> User:
        user = await self._repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User", user_id)
        return user

    async def list_user_posts(self, user_id: int, page_number: int, page_size: int) -> PagedList[Post]:
        _ = await self.get_user(user_id)  # raises 404 if missing
        return await self._posts.get_posts_by_author(user_id, page_number, page_size)

    async def list_user_comments(
        self, user_id: int, page_number: int, page_size: int
    ) -> PagedList[Comment]:
        _ = await self.get_user(user_id)
        return await self._comments.get_comments_by_author(user_id, page_number, page_size)
