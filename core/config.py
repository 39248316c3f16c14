from pydantic_settings import BaseSettings
from functools import lru_cache
from pathlib import Path


class Settings(BaseSettings):
    # App
    APP_NAME: str = "Posts API"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = """
    JSON API for blog posts.

    ## Features
    * List, show, create and update posts
    * Every post embeds its author
    * Only `title` and `description` can be written by clients
    """
    DOCS_URL: str = "/docs"
    REDOC_URL: str = "/redoc"
    OPENAPI_URL: str = "/openapi.json"
    OPENAPI_TAGS: list[dict] = [
        {
            "name": "posts",
            "description": "Post listing, retrieval, creation and update operations"
        },
        {
            "name": "health",
            "description": "Service health checks"
        }
    ]
    CONTACT: dict = {"name": "Posts API maintainers"}
    LICENSE_INFO: dict = {
        "name": "MIT",
        "url": "https://opensource.org/licenses/MIT",
        "identifier": "MIT",
    }

    # CORS
    CORS_ALLOWED_ORIGINS: list[str] = ["http://localhost:5173", "http://localhost"]

    # Database
    DB_USER: str = "posts"
    DB_PASS: str = "posts"
    DB_NAME: str = "posts"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432
    # Full SQLAlchemy URL, takes precedence over the DB_* parts when set
    DB_URL: str | None = None
    DB_ECHO: bool = False

    @property
    def DATABASE_URL(self) -> str:
        if self.DB_URL:
            return self.DB_URL
        return f"postgresql://{self.DB_USER}:{self.DB_PASS}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # console | json

    # Serialization
    AUTHOR_FIELDS: list[str] = ["id", "name"]

    # Posts created through the API are attributed to this author when set
    DEFAULT_AUTHOR_ID: int | None = None

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    # Get the current file's directory
    current_dir = Path(__file__).resolve().parent
    # Go up one level to the project root
    project_dir = current_dir.parent

    # Initialize settings with explicit .env path
    return Settings(_env_file=project_dir / ".env")
