from typing import Any, Iterable

from models import Author, Post, PostPublic


def serialize_author(author: Author | None, fields: Iterable[str]) -> dict[str, Any] | None:
    """Render the configured subset of an author's fields, or None without an author"""
    if author is None:
        return None
    return author.model_dump(include=set(fields))


def serialize_post(post: Post, author_fields: Iterable[str]) -> PostPublic:
    """Convert a Post to PostPublic with its author embedded"""
    return PostPublic(
        id=post.id,
        title=post.title,
        description=post.description,
        author=serialize_author(post.author, author_fields),
    )
