from .author import Author, AuthorBase
from .post import Post, PostCreate, PostUpdate, PostPublic, PostForm
from .response import ErrorResponse, PersistenceErrorResponse, HealthResponse

__all__ = [
    "Author", "AuthorBase",
    "Post", "PostCreate", "PostUpdate", "PostPublic", "PostForm",
    "ErrorResponse", "PersistenceErrorResponse", "HealthResponse",
]
