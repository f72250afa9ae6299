import asyncio
from logging.config import fileConfig
from pathlib import Path

from alembic import context
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncConnection

from app.dependencies import get_settings
from app.types.sqlalchemy import Base
from app.utils.state import get_database_url, init_engine

config = context.config

if config.config_file_name is not None:
    # Loggers configured by the application must stay enabled when migrations are run on startup
    fileConfig(config.config_file_name, disable_existing_loggers=False)

target_metadata = Base.metadata

# Import every model so that they are registered in the metadata, for autogenerate support
for models_file in Path().glob("app/modules/*/models_*.py"):
    __import__(".".join(models_file.with_suffix("").parts))


def run_migrations_offline() -> None:
    """
    Emit the migrations as SQL on the standard output, using the url of the configured database.
    """
    context.configure(
        url=get_database_url(get_settings()),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )

    with context.begin_transaction():
        context.run_migrations()


def do_run_migrations(connection: Connection) -> None:
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        # SQLite needs to recreate tables to alter them
        render_as_batch=connection.dialect.name == "sqlite",
    )

    with context.begin_transaction():
        context.run_migrations()


async def run_async_migrations(connection: AsyncConnection) -> None:
    # Alembic inspects the database, which is not supported on an AsyncConnection
    await connection.run_sync(do_run_migrations)


async def run_cli_migrations() -> None:
    """
    Alembic was invoked from the command line: migrate the database configured in the production settings.
    """
    engine = init_engine(get_settings())

    async with engine.connect() as connection:
        await run_async_migrations(connection)
    await engine.dispose()


def run_migrations_online() -> None:
    """
    When Alembic is invoked programmatically, the caller provides a connection in `config.attributes["connection"]`.
    See https://alembic.sqlalchemy.org/en/latest/cookbook.html#connection-sharing
    """
    connection: None | Connection | AsyncConnection = config.attributes.get(
        "connection",
        None,
    )

    if connection is None:
        asyncio.run(run_cli_migrations())
    elif isinstance(connection, AsyncConnection):
        asyncio.run(run_async_migrations(connection))
    elif isinstance(connection, Connection):
        do_run_migrations(connection)
    else:
        raise TypeError(  # noqa: TRY003
            f"Unsupported connection object {connection}, expected a Connection or an AsyncConnection",
        )


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
