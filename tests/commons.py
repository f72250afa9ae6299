import logging
from collections.abc import Callable
from functools import lru_cache

from fastapi import FastAPI
from sqlalchemy import NullPool
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from app.core.utils.config import Settings
from app.types.sqlalchemy import Base, SessionLocalType
from app.utils.state import LifespanState, get_database_url


class FailedToAddObjectToDB(Exception):
    """Exception raised when an object cannot be added to the database."""


def override_get_settings(**kwargs) -> Callable[[], Settings]:
    """
    Return a `get_settings` replacement using the test configuration.

    `kwargs` take precedence over the values of `tests/config.test.yaml`.
    """

    @lru_cache
    def get_test_settings() -> Settings:
        return Settings(
            _env_file="./tests/.env.test",
            _yaml_file="./tests/config.test.yaml",
            **kwargs,
        )

    return get_test_settings


settings = override_get_settings()()


engine = create_async_engine(
    get_database_url(settings),
    echo=settings.DATABASE_DEBUG,
    # Each TestClient runs the application in its own event loop,
    # connections must not be shared between them
    # See https://docs.sqlalchemy.org/en/20/orm/extensions/asyncio.html#using-multiple-asyncio-event-loops
    poolclass=NullPool,
)

TestingSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


def init_test_engine() -> AsyncEngine:
    return engine


def init_test_SessionLocal() -> SessionLocalType:
    return TestingSessionLocal


async def override_init_app_state(
    app: FastAPI,
    settings: Settings,
    filmes_error_logger: logging.Logger,
) -> LifespanState:
    """
    Initialize the state of the application with the test engine.
    """
    return LifespanState(
        engine=init_test_engine(),
        SessionLocal=init_test_SessionLocal(),
    )


async def override_disconnect_state(
    state: LifespanState,
    filmes_error_logger: logging.Logger,
) -> None:
    """
    The test engine is shared by every test application and must stay usable after a TestClient is closed.
    """


async def add_object_to_db(db_object: Base) -> None:
    """
    Add an object to the database
    """
    async with TestingSessionLocal() as db:
        try:
            db.add(db_object)
            await db.commit()
        except Exception as error:
            await db.rollback()
            raise FailedToAddObjectToDB from error
        finally:
            await db.close()
