"""
Logging setup.

Every module logs through ``logging.getLogger(__name__)``; this module
only wires the root handler once at application start.
"""

import logging
from typing import Optional

from app.core.config import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger from ``settings.LOG_LEVEL``."""
    logging.basicConfig(level=(level or settings.LOG_LEVEL).upper(), format=LOG_FORMAT)

    # SQL echo is driven by the engine, keep the noisy pool logger quiet
    logging.getLogger("sqlalchemy.pool").setLevel(logging.WARNING)
