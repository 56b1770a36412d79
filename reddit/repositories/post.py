"""Post repository."""

from __future__ import annotations

from reddit.core.pagination import PagedList
from reddit.domain.post import Post
from reddit.repositories.base import BaseRepository


class PostRepository(BaseRepository[Post]):
    model = Post

    async def get_posts_by_author(
        self, author_id: int, page_number: int, page_size: int
    ) -> PagedList[Post]:
        q = self._base_query().where(Post.author_id == author_id).order_by(Post.id)
        return await self.paginate(q, page_number, page_size)
