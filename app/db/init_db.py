"""
Database initialization.

Creates all tables known to ``SQLModel.metadata``.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

import app.db.base  # noqa: F401  (registers every table)
from app.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(engine: Optional[Engine] = None) -> None:
    """Create every table that does not exist yet."""
    target = engine or default_engine
    logger.info("Creating database tables on %s", target.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(target)
    logger.info("Database initialization complete")
