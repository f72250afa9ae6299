from sqlalchemy.ext.asyncio import AsyncSession

from app.core.utils.config import Settings
from app.modules.cinema import cruds_cinema, models_cinema
from app.types.factory import Factory


class CinemaFactory(Factory):
    depends_on = []

    cinemas = [
        "Cine Belas Artes",
        "Cinesystem Morumbi",
        "Espaço Itaú Augusta",
    ]

    @classmethod
    async def create_cinemas(cls, db: AsyncSession):
        for name in cls.cinemas:
            await cruds_cinema.create_cinema(
                cinema=models_cinema.Cinema(name=name),
                db=db,
            )

    @classmethod
    async def run(cls, db: AsyncSession, settings: Settings) -> None:
        await cls.create_cinemas(db)

    @classmethod
    async def should_run(cls, db: AsyncSession):
        return await cruds_cinema.count_cinemas(db=db) == 0
