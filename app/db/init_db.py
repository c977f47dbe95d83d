"""
Database initialization.

Creates all tables registered on SQLModel.metadata.
"""

import logging

from sqlmodel import SQLModel

from app.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create the upstream cache table (and any other registered models)."""

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables on %s", engine.url)
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    init_db()
