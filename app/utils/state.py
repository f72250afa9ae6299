from typing import TypedDict

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.utils.config import Settings
from app.types.sqlalchemy import SessionLocalType


class LifespanState(TypedDict):
    """
    The LifespanState is yielded by the application lifespan.
    Starlette copies it in the state of each request. Use dependencies to access it
    """

    # Database engine
    engine: AsyncEngine
    # Database session creator
    SessionLocal: SessionLocalType


class RuntimeLifespanState(LifespanState):
    """
    Requests contains an extended version of the LifespanState for each request.
    """

    request_id: str


def get_database_url(settings: Settings) -> str:
    if settings.SQLITE_DB:
        return f"sqlite+aiosqlite:///./{settings.SQLITE_DB}"
    return f"postgresql+asyncpg://{settings.POSTGRES_USER}:{settings.POSTGRES_PASSWORD}@{settings.POSTGRES_HOST}/{settings.POSTGRES_DB}"


def init_engine(settings: Settings) -> AsyncEngine:
    """
    Return the (asynchronous) database engine, based on the settings
    """

    return create_async_engine(
        get_database_url(settings),
        echo=settings.DATABASE_DEBUG,
    )


def init_SessionLocal(engine: AsyncEngine) -> SessionLocalType:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def disconnect_engine(engine: AsyncEngine) -> None:
    await engine.dispose()
