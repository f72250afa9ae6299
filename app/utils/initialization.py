import logging

from sqlalchemy import Connection, MetaData
from sqlalchemy.engine import Engine, create_engine
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.utils.config import Settings
from app.types.factory import Factory
from app.types.sqlalchemy import Base

# These utils are used at startup to run database initializations & migrations


def get_sync_db_engine(settings: Settings) -> Engine:
    """
    Create a synchronous database engine
    """
    if settings.SQLITE_DB:
        SQLALCHEMY_DATABASE_URL = f"sqlite:///./{settings.SQLITE_DB}"
    else:
        SQLALCHEMY_DATABASE_URL = f"postgresql+psycopg://{settings.POSTGRES_USER}:{settings.POSTGRES_PASSWORD}@{settings.POSTGRES_HOST}/{settings.POSTGRES_DB}"

    return create_engine(SQLALCHEMY_DATABASE_URL, echo=settings.DATABASE_DEBUG)


def drop_db_sync(conn: Connection):
    """
    Drop all tables in the database
    """
    # All tables should be dropped, including the alembic_version table
    # or alembic will think that the database is up to date and will not initialize it
    # when running tests a second time.

    # `Base.metadata.drop_all(conn)` is only able to drop tables that are defined in models
    # This means that if a model is deleted, its table will never be dropped by `Base.metadata.drop_all(conn)`

    # Thus we construct a metadata object that reflects the database instead of only using models
    my_metadata: MetaData = MetaData(schema=Base.metadata.schema)
    my_metadata.reflect(bind=conn, resolve_fks=False)
    my_metadata.drop_all(bind=conn)


def sort_factories(factories: list[type[Factory]]) -> list[type[Factory]]:
    """
    Order the factories so that each one comes after the factories it depends on
    """
    ordered: list[type[Factory]] = []

    def visit(factory: type[Factory], path: list[type[Factory]]) -> None:
        if factory in ordered:
            return
        if factory in path:
            raise ValueError(  # noqa: TRY003
                f"Circular dependency between factories {[f.__name__ for f in path]}",
            )
        for dependency in factory.depends_on:
            visit(dependency, [*path, factory])
        ordered.append(factory)

    for factory in factories:
        visit(factory, [])
    return ordered


async def run_factories(
    db: AsyncSession,
    factories: list[type[Factory]],
    settings: Settings,
    filmes_error_logger: logging.Logger,
) -> None:
    """
    Run every factory which should run, respecting their `depends_on` order.
    """
    for factory in sort_factories(factories):
        if not await factory.should_run(db):
            filmes_error_logger.info(
                f"Startup: Factory {factory.__name__} already ran, skipping",
            )
            continue
        filmes_error_logger.info(f"Startup: Running factory {factory.__name__}")
        await factory.run(db, settings)
        await db.flush()
