"""
Database initialization.

Creates all tables for local development.  Production schemas are
managed by Alembic.
"""

import logging

from sqlmodel import SQLModel

from app.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create every booster table that does not exist yet."""

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Database initialization complete")


if __name__ == "__main__":
    from app.core.logging import configure_logging

    configure_logging()
    init_db()
