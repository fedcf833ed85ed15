"""Shared test fixtures."""

import uuid
from contextlib import asynccontextmanager
from datetime import UTC, datetime
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from devconnector.audit.models import AuditLog
from devconnector.auth.models import User
from devconnector.auth.service import hash_password
from devconnector.auth.tokens import create_access_token
from devconnector.database.base import Base
from devconnector.posts.models import Post
from devconnector.profiles.models import Profile

# Models must be imported so Base.metadata.create_all() sees all tables.
_ALL_MODELS = [User, Profile, Post, AuditLog]


@pytest.fixture
def db_session():
    """Create an in-memory SQLite database for testing.

    Note: SQLite doesn't support all PostgreSQL features (row locks, native UUID),
    but works for service and route testing.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestSession = sessionmaker(bind=engine)
    session = TestSession()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def test_user(db_session):
    """Create a test account."""
    user = User(
        id=uuid.uuid4(),
        name="Test User",
        email="test@example.com",
        password_hash=hash_password("secret123"),
        avatar="https://www.gravatar.com/avatar/test",
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def other_user(db_session):
    user = User(
        id=uuid.uuid4(),
        name="Other User",
        email="other@example.com",
        password_hash="$2b$12$fakehash",
        avatar="",
    )
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def test_profile(db_session, test_user):
    """Create a profile with one experience and one education entry."""
    profile = Profile(
        id=uuid.uuid4(),
        user_id=test_user.id,
        company="Acme",
        status="Developer",
        skills=["python", "sql"],
        social={},
        experience=[
            {"id": "exp-1", "title": "Engineer", "company": "Acme", "location": "", "from": "2020-01-01",
             "to": None, "current": True, "description": ""},
        ],
        education=[
            {"id": "edu-1", "school": "MIT", "degree": "BSc", "fieldofstudy": "CS", "from": "2015-09-01",
             "to": "2019-06-30", "current": False, "description": ""},
        ],
        date=datetime(2026, 1, 1, tzinfo=UTC),
    )
    db_session.add(profile)
    db_session.commit()
    return profile


@pytest.fixture
def auth_headers(test_user):
    return {"Authorization": f"Bearer {create_access_token(test_user.id)}"}


@pytest.fixture
def client(db_session):
    """TestClient bound to the in-memory database, with lifespan and rate limiting disabled."""
    from devconnector.database import get_db
    from devconnector.integrations.cache import NullCacheService
    from devconnector.main import create_app
    from devconnector.rate_limit import limiter

    @asynccontextmanager
    async def _test_lifespan(app):
        app.state.cache = NullCacheService()
        yield

    def _test_db():
        yield db_session

    with patch("devconnector.main.lifespan", _test_lifespan):
        app = create_app()
    app.dependency_overrides[get_db] = _test_db

    limiter.enabled = False
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client
    finally:
        limiter.enabled = True
