"""Shared fixtures: an in-memory store database and clients for both apps."""

import os

# Point the store's import-time engine at a throwaway database.
os.environ.setdefault("DATABASE_URL", "sqlite://")

from collections.abc import Iterator
from typing import Any

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from post_store.crud import user as user_crud
from post_store.db.session import Base, get_db
from post_store.main import app as store_app
from post_store.models.post import Post
from post_store.models.user import User
from post_viewer.main import app as viewer_app

VALID_TITLE = "Hello from the store"
VALID_CONTENT = "This body is comfortably longer than twenty characters."


def make_post_payload(**overrides: Any) -> dict[str, Any]:
    """Create a post API payload with test defaults. Override any field."""
    payload: dict[str, Any] = {"title": VALID_TITLE, "content": VALID_CONTENT, "user_id": 1}
    payload.update(overrides)
    return payload


def make_post_data(post_id: int, **overrides: Any) -> dict[str, Any]:
    """A post as the store serializes it, for feeding the viewer."""
    data: dict[str, Any] = {
        "id": post_id,
        "title": f"Post number {post_id} title",
        "content": f"Post number {post_id} has some content worth reading.",
        "user_id": 1,
        "created_at": "2017-10-08T12:00:00",
        "updated_at": "2017-10-08T12:00:00",
    }
    data.update(overrides)
    return data


@pytest.fixture
def db_session() -> Iterator[Session]:
    engine = create_engine(
        "sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()

    def override_get_db() -> Iterator[Session]:
        yield session

    store_app.dependency_overrides[get_db] = override_get_db
    try:
        yield session
    finally:
        store_app.dependency_overrides.clear()
        session.close()
        engine.dispose()


@pytest.fixture
def store_client(db_session: Session) -> Iterator[TestClient]:
    with TestClient(store_app) as client:
        yield client


@pytest.fixture
def viewer_client() -> Iterator[TestClient]:
    with TestClient(viewer_app) as client:
        yield client


@pytest.fixture
def author(db_session: Session) -> User:
    return user_crud.create_user(db_session, "bin@blog.org")


@pytest.fixture
def make_post(db_session: Session, author: User):
    """Factory that stores posts directly through the ORM."""

    def _make(title: str = VALID_TITLE, content: str = VALID_CONTENT) -> Post:
        post = Post(title=title, content=content, user_id=author.id)
        db_session.add(post)
        db_session.commit()
        db_session.refresh(post)
        return post

    return _make
