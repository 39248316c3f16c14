from pydantic import ConfigDict
from sqlmodel import Field, SQLModel, Relationship
from typing import Any, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .author import Author


class PostBase(SQLModel):
    title: str = Field(max_length=255)
    description: str


class Post(PostBase, table=True):
    id: int | None = Field(default=None, primary_key=True)
    author_id: int | None = Field(default=None, foreign_key="author.id", index=True)

    # Relationships
    author: Optional["Author"] = Relationship(back_populates="posts")


class PostCreate(PostBase):
    # Only title and description are writable, anything else is dropped
    model_config = ConfigDict(extra="ignore")


class PostUpdate(SQLModel):
    model_config = ConfigDict(extra="ignore")

    title: str | None = Field(default=None, max_length=255)
    description: str | None = None


class PostPublic(SQLModel):
    id: int
    title: str
    description: str
    author: dict[str, Any] | None


class PostForm(SQLModel):
    """Editable fields of a post, as a form-rendering client needs them"""
    id: int | None = None
    title: str | None = None
    description: str | None = None
