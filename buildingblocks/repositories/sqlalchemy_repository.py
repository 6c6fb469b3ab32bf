"""
SQLAlchemy Adapter

IRepository / IUnitOfWork over an SQLAlchemy AsyncSession, plus a session
manager that builds the async engine from DatabaseSettings.

Invariants:
    - Repositories only stage changes; nothing is durable before commit()
    - Every failed commit rolls back and surfaces as DatabaseError
    - When a current-user service is supplied, new entities are stamped
      with set_created and modified ones with set_modified during flush
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator, Optional, Type
from uuid import UUID

from sqlalchemy import event, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import Session

from ..config.settings import DatabaseSettings
from ..domain.entities.base_entity import BaseEntity
from ..exceptions import DatabaseError
from ..guard import Guard
from ..services.interfaces import IAppLogger, ICurrentUserService
from ..utils.logging_utils import get_logger, log_operation
from .base_repository import IRepository, Predicate, T
from .specifications import Specification
from .unit_of_work import IUnitOfWork

# Session.info key holding the unit of work whose listeners are attached
_UNIT_OF_WORK_KEY = "buildingblocks.unit_of_work"


class DatabaseSessionManager:
    """Owns the async engine and hands out sessions with automatic rollback."""

    def __init__(self, settings: Optional[DatabaseSettings] = None):
        settings = settings or DatabaseSettings.from_env()
        self.engine = create_async_engine(settings.url, echo=settings.echo)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self._logger = get_logger(DatabaseSessionManager)

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide a session that rolls back on exception."""
        session = self.session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            self._logger.error(e, "Database session failed")
            raise DatabaseError("session", "Database operation failed") from e
        except BaseException:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def dispose(self) -> None:
        """Close all pooled connections."""
        await self.engine.dispose()


class SqlAlchemyRepository(IRepository[T]):
    """
    Repository for a mapped BaseEntity subclass.

    Example:
        repo = SqlAlchemyRepository(session, Order)
        await repo.add(order)
    """

    def __init__(self, session: AsyncSession, model: Type[T]):
        """
        Initialize the repository.

        Args:
            session: SQLAlchemy async session (shared with the unit of work)
            model: Mapped entity class
        """
        self.session = Guard.not_null(session, "session")
        self.model = Guard.not_null(model, "model")

    async def get_by_id(self, id: UUID) -> Optional[T]:
        return await self.session.get(self.model, id)

    async def add(self, entity: T) -> None:
        self.session.add(Guard.not_null(entity, "entity"))

    async def update(self, entity: T) -> None:
        Guard.not_null(entity, "entity")
        # Attached instances are tracked already; detached ones are merged in
        if entity not in self.session:
            await self.session.merge(entity)

    async def delete(self, entity: T) -> None:
        await self.session.delete(Guard.not_null(entity, "entity"))

    async def query(self, predicate: Optional[Predicate] = None) -> AsyncIterator[T]:
        """
        Lazily iterate matching entities.

        SQL-capable specifications become a WHERE clause; anything else is
        applied in memory while iterating.
        """
        statement = select(self.model)
        in_memory = None
        if isinstance(predicate, Specification) and predicate.supports_sql:
            statement = statement.where(predicate.to_sql_filter(self.model))
        elif predicate is not None:
            in_memory = predicate

        result = await self.session.scalars(statement)
        for entity in result:
            if in_memory is None or in_memory(entity):
                yield entity


class SqlAlchemyUnitOfWork(IUnitOfWork):
    """
    Unit of work over a single AsyncSession.

    Affected records are counted from every flush since the last commit or
    rollback, so autoflushes triggered by queries are included.

    A session is bound to at most one unit of work. close() (or leaving the
    async with block) detaches the flush listeners and frees the session.
    """

    def __init__(
        self,
        session: AsyncSession,
        current_user: Optional[ICurrentUserService] = None,
        logger: Optional[IAppLogger] = None,
    ):
        """
        Args:
            session: SQLAlchemy async session shared with the repositories
            current_user: Identity used to stamp audit fields (optional)
            logger: Logger (defaults to one named after this class)
        """
        self.session = Guard.not_null(session, "session")
        self.current_user = current_user
        self._logger = logger or get_logger(SqlAlchemyUnitOfWork)
        self._affected = 0
        self._attach()

    def _attach(self) -> None:
        sync_session = self.session.sync_session
        bound = sync_session.info.get(_UNIT_OF_WORK_KEY)
        Guard.that(
            bound is None or bound is self,
            "Session is already bound to another unit of work; close it first.",
            "session",
        )
        sync_session.info[_UNIT_OF_WORK_KEY] = self
        event.listen(sync_session, "before_flush", self._stamp_audit_fields)
        event.listen(sync_session, "after_flush", self._count_flushed)

    def close(self) -> None:
        """Detach the flush listeners so the session can serve another unit of work."""
        sync_session = self.session.sync_session
        if sync_session.info.get(_UNIT_OF_WORK_KEY) is not self:
            return
        event.remove(sync_session, "before_flush", self._stamp_audit_fields)
        event.remove(sync_session, "after_flush", self._count_flushed)
        del sync_session.info[_UNIT_OF_WORK_KEY]

    async def __aexit__(self, exc_type, exc, tb) -> None:
        try:
            await super().__aexit__(exc_type, exc, tb)
        finally:
            self.close()

    def _stamp_audit_fields(self, session: Session, flush_context, instances) -> None:
        if self.current_user is None:
            return
        user_id = self.current_user.user_id if self.current_user.is_authenticated else None
        for obj in session.new:
            if isinstance(obj, BaseEntity) and user_id is not None:
                obj.set_created(user_id)
        for obj in session.dirty:
            if isinstance(obj, BaseEntity) and session.is_modified(obj):
                obj.set_modified(user_id)

    def _count_flushed(self, session: Session, flush_context) -> None:
        # new/dirty/deleted still hold the pre-flush state here
        modified = [obj for obj in session.dirty if session.is_modified(obj)]
        self._affected += len(session.new) + len(modified) + len(session.deleted)

    @log_operation("commit")
    async def commit(self) -> int:
        """
        Flush and commit all staged changes.

        Returns:
            Number of inserted, updated and deleted records

        Raises:
            DatabaseError: If the flush or commit fails (after rollback)
        """
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.rollback()
            raise DatabaseError("commit", "Integrity constraint violated") from e
        except SQLAlchemyError as e:
            await self.rollback()
            raise DatabaseError("commit", "Database operation failed") from e

        affected, self._affected = self._affected, 0
        self._logger.info("Committed %d record(s)", affected)
        return affected

    async def rollback(self) -> None:
        await self.session.rollback()
        self._affected = 0
        self._logger.trace("Rolled back pending changes")
