"""Post and Comment Pydantic response models."""


from datetime import datetime

from reddit.schemas.common import CamelModel

class PostOut(CamelModel):
    id: int
    title: str
    content: str | None = None
    author_id: int | None = None
    created_at: datetime
    updated_at: datetime

class CommentOut(CamelModel):
    id: int
    content: str
    post_id: int
    author_id: int | None = None
    created_at: datetime
    updated_at: datetime
