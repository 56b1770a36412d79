"""Comment repository."""

from __future__ import annotations

from reddit.core.pagination import PagedList
from reddit.domain.comment import Comment
from reddit.repositories.base import BaseRepository


class CommentRepository(BaseRepository[Comment]):
    model = Comment

    async def get_comments_for_post(
        self, post_id: int, page_number: int, page_size: int
    ) -> PagedList[Comment]:
        q = self._base_query().where(Comment.post_id == post_id).order_by(Comment.id)
        return await self.paginate(q, page_number, page_size)

    async def get_comments_by_author(
        self, author_id: int, page_number: int, page_size: int
    ) -> PagedList[Comment]:
        q = self._base_query().where(Comment.author_id == author_id).order_by(Comment.id)
        return await self.paginate(q, page_number, page_size)
