"""Product persistence: one parameterized statement per operation."""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, TypeVar

from sqlalchemy import delete, func, insert, select, text, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine

from inventory.exceptions import NotFoundError, PersistenceError
from inventory.models.product import products_table

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ProductRepository:
    """
    Runs product statements through the engine's connection pool.

    Every operation borrows a connection with ``engine.begin()``, so the
    connection goes back to the pool and the transaction is committed or
    rolled back on every exit path. Each operation is bounded by ``timeout``
    seconds, which includes the wait for a free pooled connection.
    """

    def __init__(self, engine: AsyncEngine, timeout: float = 10.0):
        self.engine = engine
        self.timeout = timeout

    async def _run(self, operation: str, work: Callable[[AsyncConnection], Awaitable[T]]) -> T:
        async def scoped() -> T:
            async with self.engine.begin() as conn:
                return await work(conn)

        try:
            return await asyncio.wait_for(scoped(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            logger.error("Product %s timed out after %.1fs", operation, self.timeout)
            raise PersistenceError() from e
        except SQLAlchemyError as e:
            logger.exception("Product %s failed: %s", operation, e)
            raise PersistenceError() from e

    async def create(self, name: str, price: float, quantity: int) -> int:
        """Insert a product and return the id assigned by the database."""
        stmt = insert(products_table).values(name=name, price=price, quantity=quantity)

        async def work(conn: AsyncConnection) -> int:
            result = await conn.execute(stmt)
            return result.inserted_primary_key[0]

        return await self._run("create", work)

    async def get_by_id(self, product_id: int) -> Dict[str, Any]:
        """Fetch one product row as a mapping, or raise NotFoundError."""
        stmt = select(products_table).where(products_table.c.id == product_id)

        async def work(conn: AsyncConnection):
            result = await conn.execute(stmt)
            return result.mappings().first()

        row = await self._run("read", work)
        if row is None:
            raise NotFoundError("Product not found in database")
        return dict(row)

    async def update(self, product_id: int, name: str, price: float, quantity: int) -> int:
        """Overwrite name, price and quantity; returns the affected-row count."""
        stmt = (
            update(products_table)
            .where(products_table.c.id == product_id)
            .values(name=name, price=price, quantity=quantity)
        )

        async def work(conn: AsyncConnection) -> int:
            result = await conn.execute(stmt)
            return result.rowcount

        return await self._run("update", work)

    async def delete(self, product_id: int) -> int:
        """Remove one product; returns the affected-row count."""
        stmt = delete(products_table).where(products_table.c.id == product_id)

        async def work(conn: AsyncConnection) -> int:
            result = await conn.execute(stmt)
            return result.rowcount

        return await self._run("delete", work)

    async def clear(self) -> None:
        """Remove every product and restart the id sequence."""

        async def work(conn: AsyncConnection) -> None:
            if conn.dialect.name == "mysql":
                await conn.execute(text(f"TRUNCATE TABLE {products_table.name}"))
            else:
                # SQLite reuses max(rowid) + 1, so an empty table restarts at 1
                await conn.execute(delete(products_table))

        await self._run("clear", work)

    async def count(self) -> int:
        stmt = select(func.count()).select_from(products_table)

        async def work(conn: AsyncConnection) -> int:
            result = await conn.execute(stmt)
            return result.scalar_one()

        return await self._run("count", work)
