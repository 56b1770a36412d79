"""SQLAlchemy ORM model for Users.

A user owns its posts and comments. The children only hold an indexed
``author_id`` column; there is no relationship pointing back at the user.
Use PostRepository / CommentRepository for author lookups.

The owned collections are never loaded implicitly: reading one that was not
loaded with an explicit loader option (see UserRepository.get_with_posts)
raises instead of returning an empty list.
"""

from __future__ import annotations

from typing import List

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from reddit.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)

    posts: Mapped[List["Post"]] = relationship(
        lazy="raise", passive_deletes=True
    )
    comments: Mapped[List["Comment"]] = relationship(
        lazy="raise", passive_deletes=True
    )
