from __future__ import annotations

from collections.abc import Callable

from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.application.errors import StorageTransient
from src.application.interfaces.unit_of_work import UnitOfWork


def create_engine(database_url: str) -> AsyncEngine:
    return create_async_engine(database_url, echo=False, future=True)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


def is_transient(exc: BaseException | None) -> bool:
    if isinstance(exc, OperationalError):
        return True
    return isinstance(exc, DBAPIError) and exc.connection_invalidated


class SQLAlchemyUnitOfWork(UnitOfWork):
    """One session and one transaction per unit of work.

    Operational driver errors escaping the block (write conflicts, serialization
    failures, dropped connections) are re-raised as ``StorageTransient``. Other
    driver errors are bugs and propagate unchanged.
    """

    def __init__(self, session_factory: Callable[[], AsyncSession]) -> None:
        self._session_factory = session_factory
        self.session: AsyncSession | None = None
        self.herds = None

    async def __aenter__(self) -> UnitOfWork:
        self.session = self._session_factory()
        from src.infrastructure.repos.herds_sqlalchemy import HerdsSQLAlchemyRepository

        self.herds = HerdsSQLAlchemyRepository(self.session)
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self.session:
            return
        try:
            if exc:
                await self.session.rollback()
        finally:
            await self.session.close()
            self.session = None
            self.herds = None
        if is_transient(exc):
            raise StorageTransient("Storage transaction could not be completed") from exc

    async def commit(self) -> None:
        if not self.session:
            return
        await self.session.commit()
