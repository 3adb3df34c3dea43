"""
Database bootstrapping.
Creates tables for local development; deployed databases are migrated separately.
"""

from pogoklink.db.base import Base
from pogoklink.db import session as db_session
from pogoklink.core.logging import get_logger

# Registers every model with Base.metadata
import pogoklink.models  # noqa: F401

logger = get_logger(__name__)


async def create_tables() -> None:
    """Create all database tables that do not exist yet."""
    if db_session.engine is None:
        db_session.create_engine()

    async with db_session.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database tables initialized", extra={"tables": len(Base.metadata.tables)})
