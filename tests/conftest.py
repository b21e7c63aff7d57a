import os

# Settings are read at import time, so the environment must be ready first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["DEBUG"] = "false"
os.environ["TESTING_ENDPOINTS_ENABLED"] = "true"

import base64
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.base import Base
from app.db.models import Blog, Comment, Post, User
from app.db.session import get_db
from app.main import app
from app.security.jwt import create_access_token
from app.security.passwords import hash_password

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

TEST_PASSWORD = "secret123"


class FakeClock:
    """Strictly increasing timestamps, one second apart."""

    def __init__(self, start=None, step=timedelta(seconds=1)):
        self.now = start or datetime(2026, 1, 1, 12, 0, 0, tzinfo=timezone.utc)
        self.step = step

    def __call__(self):
        self.now = self.now + self.step
        return self.now


@pytest.fixture
def db():
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def admin_headers():
    token = base64.b64encode(b"admin:qwerty").decode()
    return {"Authorization": f"Basic {token}"}


@pytest.fixture
def make_user(db):
    def _make_user(login: str, password: str = TEST_PASSWORD) -> User:
        user = User(login=login, email=f"{login}@example.com", password_hash=hash_password(password))
        db.add(user)
        db.commit()
        db.refresh(user)
        return user
    return _make_user


@pytest.fixture
def auth_headers():
    def _auth_headers(user: User) -> dict:
        token = create_access_token(user_id=user.id, login=user.login)
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers


@pytest.fixture
def make_blog(db):
    def _make_blog(name: str = "Tech notes") -> Blog:
        blog = Blog(name=name, description="About backends", website_url="https://tech.example.com")
        db.add(blog)
        db.commit()
        db.refresh(blog)
        return blog
    return _make_blog


@pytest.fixture
def make_post(db):
    def _make_post(blog: Blog, title: str = "First post") -> Post:
        post = Post(title=title, short_description="Short", content="Post body", blog_id=blog.id)
        db.add(post)
        db.commit()
        db.refresh(post)
        return post
    return _make_post


@pytest.fixture
def make_comment(db):
    def _make_comment(post: Post, user: User, content: str = "This is a comment long enough") -> Comment:
        comment = Comment(content=content, post_id=post.id, commentator_id=user.id)
        db.add(comment)
        db.commit()
        db.refresh(comment)
        return comment
    return _make_comment
