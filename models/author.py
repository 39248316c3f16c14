from sqlmodel import Field, SQLModel, Relationship
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from .post import Post


class AuthorBase(SQLModel):
    name: str = Field(index=True)
    email: str | None = Field(default=None, index=True)
    bio: str | None = Field(default=None)


class Author(AuthorBase, table=True):
    id: int | None = Field(default=None, primary_key=True)

    posts: List["Post"] = Relationship(back_populates="author")
