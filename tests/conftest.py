import os

# Point the application at an in-memory database before it is imported
os.environ["DB_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel
from main import app
from core.config import get_settings
from dependencies import engine, get_session
from models import Author, Post

@pytest.fixture(scope="session")
def settings():
    return get_settings()

@pytest.fixture
def test_db_engine():
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)

@pytest.fixture
def db_session(test_db_engine):
    with Session(test_db_engine) as session:
        yield session

@pytest.fixture
def app_settings(settings):
    return settings.model_copy()

@pytest.fixture
def client(db_session, app_settings):
    app.dependency_overrides[get_session] = lambda: db_session
    app.dependency_overrides[get_settings] = lambda: app_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()

@pytest.fixture
def author(db_session):
    author = Author(name="Ada Lovelace", email="ada@example.com", bio="Writes about engines")
    db_session.add(author)
    db_session.commit()
    db_session.refresh(author)
    return author

@pytest.fixture
def post(db_session, author):
    post = Post(title="First post", description="Hello world", author_id=author.id)
    db_session.add(post)
    db_session.commit()
    db_session.refresh(post)
    return post
