"""Database engine and session management."""

from typing import Any, Callable

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from infrastructure.database.models import Base
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


class Database:
    """Process-wide store handle: one async engine plus its session factory.

    Opened once at application startup and disposed at shutdown.
    """

    def __init__(self, url: str, echo: bool = False) -> None:
        engine_kwargs: dict[str, Any] = {"echo": echo}
        if url.startswith("sqlite"):
            # An in-memory SQLite database only lives as long as its connection.
            if ":memory:" in url:
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs["pool_pre_ping"] = True

        self.url = url
        self.engine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def create_tables(self) -> None:
        """Create any missing tables."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def ping(self) -> None:
        """Round-trip a trivial query; raises if the store is unreachable."""
        async with self.session_factory() as session:
            await session.execute(text("SELECT 1"))

    def uow_factory(self) -> Callable[[], SQLAlchemyUnitOfWork]:
        """Factory for creating Unit of Work instances bound to this database."""

        def factory() -> SQLAlchemyUnitOfWork:
            return SQLAlchemyUnitOfWork(self.session_factory)

        return factory

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()
