"""
Idempotent schema setup, run once before the server accepts connections.

Creates the configured database (on servers that have databases) and then
the ``products`` table. Both steps are no-ops when the objects exist.
"""

import logging

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from inventory.config import Settings
from inventory.database import Base, create_engine_from_settings
from inventory.exceptions import FatalBootstrapError
from inventory.models import product  # noqa: F401 - registers the products table

logger = logging.getLogger(__name__)


async def ensure_database(settings: Settings) -> None:
    """CREATE DATABASE IF NOT EXISTS through a server-level connection."""
    if settings.is_sqlite:
        # The database file is created on first connect
        return

    engine = create_engine_from_settings(settings, url=settings.server_url)
    try:
        async with engine.begin() as conn:
            quoted = conn.dialect.identifier_preparer.quote_identifier(settings.db_name)
            await conn.execute(text(f"CREATE DATABASE IF NOT EXISTS {quoted}"))
    finally:
        await engine.dispose()
    logger.info("Database %s ensured", settings.db_name)


async def ensure_tables(settings: Settings) -> None:
    """CREATE TABLE IF NOT EXISTS for every registered model."""
    engine = create_engine_from_settings(settings)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all, checkfirst=True)
    finally:
        await engine.dispose()
    logger.info("Tables ensured: %s", ", ".join(sorted(Base.metadata.tables)))


async def bootstrap_schema(settings: Settings) -> None:
    """Run both setup steps in order; any failure is fatal."""
    try:
        await ensure_database(settings)
        await ensure_tables(settings)
    except (SQLAlchemyError, OSError) as e:
        logger.error("Schema bootstrap failed: %s", e)
        raise FatalBootstrapError(str(e)) from e
