"""Shared fixtures.

The environment is pinned before any ``app`` import so the global
settings and engine point at SQLite instead of PostgreSQL.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import datetime
import itertools

import pytest
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

import app.db.base  # noqa: F401,E402
from app.models.user import User

_counter = itertools.count(1)


@pytest.fixture
def engine():
    """In-memory SQLite shared by every connection of one test."""
    engine = create_engine("sqlite://", connect_args={ "check_same_thread": False }, poolclass=StaticPool)
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def file_engine(tmp_path):
    """File-backed SQLite, so that each thread gets its own connection."""
    engine = create_engine(f"sqlite:///{tmp_path / 'ledger.db'}", connect_args={ "check_same_thread": False,
                                                                                 "timeout": 30 })
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def db(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def today():
    return datetime.date.today()


def create_user(session: Session, **overrides) -> User:
    """Insert a user with zeroed counters unless overridden."""
    n = next(_counter)
    fields = { "email": f"user{n}@example.com", "username": f"user{n}", "hashed_password": "not-a-real-hash", }
    fields.update(overrides)
    user = User(**fields)
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture
def make_user(db):
    def _make(**overrides) -> User:
        return create_user(db, **overrides)

    return _make
