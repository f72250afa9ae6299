from collections.abc import Sequence

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.cinema import models_cinema, schemas_cinema, utils_cinema
from app.types.sqlalchemy import SQL_BIGINT_MAX, SQL_INTEGER_MAX, SQL_INTEGER_MIN


async def get_cinemas(
    db: AsyncSession,
    skip: int = 0,
    take: int = 50,
) -> Sequence[models_cinema.Cinema]:
    result = await db.execute(
        select(models_cinema.Cinema)
        .order_by(models_cinema.Cinema.id)
        .offset(min(skip, SQL_BIGINT_MAX))
        .limit(min(take, SQL_BIGINT_MAX)),
    )
    return result.scalars().all()


async def count_cinemas(db: AsyncSession) -> int:
    result = await db.execute(select(func.count(models_cinema.Cinema.id)))
    return result.scalar_one()


async def get_cinema_by_id(
    cinema_id: int,
    db: AsyncSession,
) -> models_cinema.Cinema | None:
    # Such an id can not be stored, and the driver would refuse it
    if not SQL_INTEGER_MIN <= cinema_id <= SQL_INTEGER_MAX:
        return None
    result = await db.execute(
        select(models_cinema.Cinema).where(models_cinema.Cinema.id == cinema_id),
    )
    return result.scalars().first()


async def create_cinema(
    cinema: models_cinema.Cinema,
    db: AsyncSession,
) -> None:
    db.add(cinema)
    # Flushing assigns the id of the cinema
    await db.flush()


async def update_cinema(
    cinema_id: int,
    cinema_update: schemas_cinema.CinemaUpdate,
    db: AsyncSession,
) -> None:
    await db.execute(
        update(models_cinema.Cinema)
        .where(models_cinema.Cinema.id == cinema_id)
        .values(**utils_cinema.cinema_update_schema_to_values(cinema_update)),
    )
    await db.flush()


async def delete_cinema(cinema_id: int, db: AsyncSession) -> None:
    await db.execute(
        delete(models_cinema.Cinema).where(models_cinema.Cinema.id == cinema_id),
    )
    await db.flush()
