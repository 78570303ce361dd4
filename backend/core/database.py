"""Database Module with Monadic Error Handling

Async session management and small query helpers that return Result
values instead of raising SQLAlchemy exceptions.
"""
from typing import AsyncIterator, TypeVar
from uuid import UUID as PyUUID

from sqlalchemy import Update, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator, CHAR
from sqlalchemy.dialects.postgresql import UUID as PG_UUID

from core.config import settings
from core.errors import AppError, Ok, Err, Result, not_found, DatabaseErrorMapper
from core.logging import db_logger

T = TypeVar("T")


class GUID(TypeDecorator):
    """Platform-agnostic GUID type.

    Uses PostgreSQL's UUID type when available, otherwise stores as CHAR(32).
    """
    impl = CHAR
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == "postgresql":
            return dialect.type_descriptor(PG_UUID(as_uuid=True))
        return dialect.type_descriptor(CHAR(32))

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if dialect.name == "postgresql":
            return value
        if isinstance(value, PyUUID):
            return value.hex
        return PyUUID(value).hex

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if isinstance(value, PyUUID):
            return value
        return PyUUID(value)


engine_kwargs = {
    "echo": settings.LOG_SQL,
}

if "sqlite" not in settings.DATABASE_URL:
    engine_kwargs.update({
        "pool_pre_ping": True,
        "pool_size": 5,
        "max_overflow": 10,
    })

engine = create_async_engine(settings.DATABASE_URL, **engine_kwargs)

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)

Base = declarative_base()

_db_mapper = DatabaseErrorMapper("database")

log = db_logger()


async def get_db() -> AsyncIterator[AsyncSession]:
    """Dependency that yields database session."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()


async def _failed(
    session: AsyncSession,
    exc: SQLAlchemyError,
    operation: str,
    rollback: bool = True,
) -> Err[AppError]:
    """Roll back, log and map a failed operation to an AppError."""
    if rollback:
        await session.rollback()
    error = _db_mapper.map_exception(exc)
    log.warning("db_operation_failed", operation=operation, error_code=error.code.name, error=error.message)
    return Err(error)


async def fetch_one(
    session: AsyncSession,
    model: type[T],
    id: PyUUID | str,
    entity_name: str | None = None,
) -> Result[T, AppError]:
    """Fetch single entity by primary key.

    Returns:
        Ok(entity) if found
        Err(not_found) if not found
        Err(db_error) on database failure
    """
    name = entity_name or model.__name__
    try:
        result = await session.execute(select(model).where(model.id == id))
        entity = result.scalar_one_or_none()
        if entity is None:
            return not_found(name, id, origin="database.fetch_one")
        return Ok(entity)
    except SQLAlchemyError as e:
        return await _failed(session, e, "fetch_one", rollback=False)


async def create_entity(session: AsyncSession, entity: T) -> Result[T, AppError]:
    """Add and commit a single entity."""
    try:
        session.add(entity)
        await session.commit()
        await session.refresh(entity)
        return Ok(entity)
    except SQLAlchemyError as e:
        return await _failed(session, e, "create_entity")


async def create_entities(session: AsyncSession, entities: list[T]) -> Result[list[T], AppError]:
    """Add and commit a batch of entities in one transaction."""
    try:
        session.add_all(entities)
        await session.commit()
        return Ok(entities)
    except SQLAlchemyError as e:
        return await _failed(session, e, "create_entities")


async def execute_update(session: AsyncSession, statement: Update) -> Result[int, AppError]:
    """Run and commit an UPDATE statement; returns the matched row count."""
    try:
        result = await session.execute(statement)
        await session.commit()
        return Ok(result.rowcount)
    except SQLAlchemyError as e:
        return await _failed(session, e, "execute_update")
