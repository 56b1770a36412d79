"""User Pydantic response models.

Owned collections (posts, comments) are left out so a user serializes
without walking into its children.
"""


from reddit.schemas.common import CamelModel

class UserOut(CamelModel):
    id: int
    name: str
    email: str
