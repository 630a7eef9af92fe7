from typing import Optional
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import declarative_base

from inventory.config import Settings

# Base class for models
Base = declarative_base()


def create_engine_from_settings(settings: Settings, url: Optional[URL] = None) -> AsyncEngine:
    """
    Build the async engine whose pool serves every repository call.

    The pool holds at most ``db_pool_size`` connections, opened lazily.
    Callers beyond that wait up to ``db_pool_timeout`` seconds for one to be
    released instead of failing fast.
    """
    url = url if url is not None else settings.engine_url
    if settings.is_sqlite:
        # aiosqlite picks its own pool class, sizing options do not apply
        return create_async_engine(url, echo=False, future=True)

    return create_async_engine(
        url,
        echo=False,
        future=True,
        pool_pre_ping=True,
        pool_size=settings.db_pool_size,
        max_overflow=0,
        pool_timeout=settings.db_pool_timeout,
    )
