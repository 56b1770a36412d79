"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  user.py     — User aggregate (owns posts and comments)
  post.py     — Posts (own their comments)
  comment.py  — Comments
  mixins.py   — Shared TimestampMixin
"""

from reddit.domain.comment import Comment
from reddit.domain.post import Post
from reddit.domain.user import User

__all__ = [
    "Comment",
    "Post",
    "User",
]
