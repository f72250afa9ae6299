from collections.abc import Sequence

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.filme import models_filme, schemas_filme, utils_filme
from app.types.sqlalchemy import SQL_BIGINT_MAX, SQL_INTEGER_MAX, SQL_INTEGER_MIN


async def get_filmes(
    db: AsyncSession,
    skip: int = 0,
    take: int = 50,
    cinema_id: int | None = None,
) -> Sequence[models_filme.Filme]:
    query = select(models_filme.Filme)
    if cinema_id is not None:
        if not SQL_INTEGER_MIN <= cinema_id <= SQL_INTEGER_MAX:
            return []
        query = query.where(models_filme.Filme.cinema_id == cinema_id)
    result = await db.execute(
        query.order_by(models_filme.Filme.id)
        .offset(min(skip, SQL_BIGINT_MAX))
        .limit(min(take, SQL_BIGINT_MAX)),
    )
    return result.scalars().all()


async def count_filmes(db: AsyncSession) -> int:
    result = await db.execute(select(func.count(models_filme.Filme.id)))
    return result.scalar_one()


async def get_filme_by_id(
    filme_id: int,
    db: AsyncSession,
) -> models_filme.Filme | None:
    if not SQL_INTEGER_MIN <= filme_id <= SQL_INTEGER_MAX:
        return None
    result = await db.execute(
        select(models_filme.Filme).where(models_filme.Filme.id == filme_id),
    )
    return result.scalars().first()


async def create_filme(
    filme: models_filme.Filme,
    db: AsyncSession,
) -> None:
    db.add(filme)
    await db.flush()


async def update_filme(
    filme_id: int,
    filme_update: schemas_filme.FilmeUpdate,
    db: AsyncSession,
) -> None:
    await db.execute(
        update(models_filme.Filme)
        .where(models_filme.Filme.id == filme_id)
        .values(**utils_filme.filme_update_schema_to_values(filme_update)),
    )
    await db.flush()


async def unlink_filmes_from_cinema(cinema_id: int, db: AsyncSession) -> None:
    await db.execute(
        update(models_filme.Filme)
        .where(models_filme.Filme.cinema_id == cinema_id)
        .values(cinema_id=None),
    )
    await db.flush()


async def delete_filme(filme_id: int, db: AsyncSession) -> None:
    await db.execute(
        delete(models_filme.Filme).where(models_filme.Filme.id == filme_id),
    )
    await db.flush()
