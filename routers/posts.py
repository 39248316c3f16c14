from typing import Annotated, List
from fastapi import APIRouter, Body, status
from prometheus_client import Counter
import logging

from models import PostCreate, PostUpdate, PostPublic, PostForm, ErrorResponse, PersistenceErrorResponse
from dependencies import SessionDep, SettingsDep, PostDep
from serializers import serialize_post
from services import posts as posts_service

router = APIRouter()
logger = logging.getLogger(__name__)

posts_written_total = Counter(
    "posts_written_total",
    "Number of posts successfully written",
    ["operation"],
)

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Post not found"}}
WRITE_ERRORS = {
    422: {"description": "Invalid payload or write rejected by the database"},
    500: {"model": PersistenceErrorResponse, "description": "Write failed"},
}


@router.get("", response_model=List[PostPublic])
async def list_posts(session: SessionDep, settings: SettingsDep) -> List[PostPublic]:
    """List every post"""
    posts = posts_service.list_posts(session)
    return [serialize_post(post, settings.AUTHOR_FIELDS) for post in posts]


@router.get("/new", response_model=PostForm)
async def new_post() -> PostForm:
    """Blank form payload for a post that has not been saved yet"""
    return PostForm()


@router.post(
    "",
    response_model=PostPublic,
    status_code=status.HTTP_201_CREATED,
    responses=WRITE_ERRORS,
)
async def create_post(
    post: Annotated[PostCreate, Body(embed=True)],
    session: SessionDep,
    settings: SettingsDep,
) -> PostPublic:
    """Create a new post from its title and description"""
    post_db = posts_service.create_post(session, post, author_id=settings.DEFAULT_AUTHOR_ID)
    posts_written_total.labels(operation="create").inc()
    return serialize_post(post_db, settings.AUTHOR_FIELDS)


@router.get("/{post_id}", response_model=PostPublic, responses=NOT_FOUND)
async def get_post(post: PostDep, settings: SettingsDep) -> PostPublic:
    """Get a specific post by ID"""
    return serialize_post(post, settings.AUTHOR_FIELDS)


@router.get("/{post_id}/edit", response_model=PostForm, responses=NOT_FOUND)
async def edit_post(post: PostDep) -> PostForm:
    """Form payload with the current editable fields of a post"""
    return PostForm(id=post.id, title=post.title, description=post.description)


@router.api_route(
    "/{post_id}",
    methods=["PATCH", "PUT"],
    response_model=PostPublic,
    status_code=status.HTTP_202_ACCEPTED,
    responses={**NOT_FOUND, **WRITE_ERRORS},
)
async def update_post(
    post_db: PostDep,
    post: Annotated[PostUpdate, Body(embed=True)],
    session: SessionDep,
    settings: SettingsDep,
) -> PostPublic:
    """Update the title and/or description of a post"""
    post_db = posts_service.update_post(session, post_db, post)
    posts_written_total.labels(operation="update").inc()
    return serialize_post(post_db, settings.AUTHOR_FIELDS)
