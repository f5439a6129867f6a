"""Shared fixtures: in-memory SQLite database, seeding helpers, FastAPI test client.

Every test gets a fresh database; get_db is overridden so routes use it too.
"""

import os
from contextlib import contextmanager

# Must be set before importing the app so the engine never points at MySQL
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.models.base import Base
from app.models.user import User
from app.models.friendship import Friendship, FriendshipStatus
from app.storage.database import get_db
from app.storage.friend.SQLAlchemyFriendRepository import SQLAlchemyFriendRepository
from main import app


@contextmanager
def transaction(db):
    """Commit on success, roll back and re-raise on error."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise


@pytest.fixture
def test_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def test_session_factory(test_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def test_db(test_session_factory):
    db = test_session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def friend_repo(test_db):
    return SQLAlchemyFriendRepository(test_db)


@pytest.fixture
def client(test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    def override_get_db():
        db = test_session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_users(test_db):
    """Insert users with the given ids; names/phones derived from the id."""
    def _make(*ids: int):
        with transaction(test_db):
            for uid in ids:
                test_db.add(User(id=uid, full_name=f"User {uid}", phone_number=f"+1555000{uid:04d}"))
    return _make


@pytest.fixture
def add_edge(test_db):
    """Insert one directed friendship row."""
    def _add(user_id: int, friend_user_id: int, status: FriendshipStatus = FriendshipStatus.ACCEPTED):
        with transaction(test_db):
            test_db.add(Friendship(user_id=user_id, friend_user_id=friend_user_id, status=status.value))
    return _add


@pytest.fixture
def befriend(add_edge):
    """Accepted friendship stored in both directions."""
    def _befriend(a: int, b: int):
        add_edge(a, b)
        add_edge(b, a)
    return _befriend


@pytest.fixture
def scenario_graph(make_users, befriend):
    """Users 1..5; 1 <-> 2 and 1 <-> 3 accepted, nothing between 2 and 3."""
    make_users(1, 2, 3, 4, 5)
    befriend(1, 2)
    befriend(1, 3)
