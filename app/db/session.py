"""
Database session management.

Provides SQLModel engine and session creation.
"""

from typing import Generator

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from app.core.config import settings


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create an engine for ``url``.

    SQLite connections are shared across the FastAPI threadpool, so
    ``check_same_thread`` is disabled for them; other backends get a
    pre-pinged connection pool.
    """
    if url.startswith("sqlite"):
        return create_engine(url, echo=echo, connect_args={ "check_same_thread": False })
    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,   # Verify connections before using
        pool_size=5,          # Connection pool size
        max_overflow=10       # Max connections beyond pool_size
    )


# Create database engine
engine = build_engine(settings.sqlalchemy_database_url, echo=settings.DEBUG)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session
