import logging
from typing import Sequence

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlmodel import Session, select

from core.exceptions import PersistenceError
from models import Author, Post, PostCreate, PostUpdate

logger = logging.getLogger(__name__)


def list_posts(session: Session) -> Sequence[Post]:
    return session.exec(select(Post)).all()


def get_post(session: Session, post_id: int) -> Post | None:
    return session.get(Post, post_id)


def _commit(session: Session, post: Post, operation: str) -> Post:
    """Persist a post, raising PersistenceError if the write did not take effect"""
    try:
        session.add(post)
        session.commit()
    except IntegrityError as e:
        session.rollback()
        logger.warning(f"Post {operation} rejected by the database")
        raise PersistenceError(f"Post could not be {operation}d", status_code=422) from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.warning(f"Post {operation} failed")
        raise PersistenceError(f"Post could not be {operation}d") from e

    session.refresh(post)
    return post


def create_post(session: Session, post: PostCreate, author_id: int | None = None) -> Post:
    """Create a post from the whitelisted fields"""
    # The default author must resolve before the post is written
    if author_id is not None and session.get(Author, author_id) is None:
        raise PersistenceError(f"Default author {author_id} does not exist")

    post_db = Post.model_validate(post)
    post_db.author_id = author_id
    post_db = _commit(session, post_db, "create")
    logger.info(f"Created post {post_db.id}")
    return post_db


def update_post(session: Session, post_db: Post, post: PostUpdate) -> Post:
    """Apply a partial update; fields not supplied (or sent as null) are left alone"""
    post_data = post.model_dump(exclude_unset=True, exclude_none=True)
    post_db.sqlmodel_update(post_data)
    post_db = _commit(session, post_db, "update")
    logger.info(f"Updated post {post_db.id}")
    return post_db
