from sqlalchemy.ext.asyncio import AsyncSession

from app.core.utils.config import Settings
from app.modules.cinema import cruds_cinema
from app.modules.cinema.factory_cinema import CinemaFactory
from app.modules.filme import cruds_filme, models_filme
from app.types.factory import Factory


class FilmeFactory(Factory):
    depends_on = [CinemaFactory]

    # title, genre, duration
    filmes = [
        ("Duna", "Ficção", 155),
        ("Central do Brasil", "Drama", 113),
        ("Cidade de Deus", "Crime", 130),
        ("O Auto da Compadecida", "Comédia", 104),
    ]

    @classmethod
    async def create_filmes(cls, db: AsyncSession):
        cinemas = await cruds_cinema.get_cinemas(db=db)
        for i, (title, genre, duration) in enumerate(cls.filmes):
            # Movies without a matching cinema are not shown anywhere
            cinema_id = cinemas[i].id if i < len(cinemas) else None
            await cruds_filme.create_filme(
                filme=models_filme.Filme(
                    title=title,
                    genre=genre,
                    duration=duration,
                    cinema_id=cinema_id,
                ),
                db=db,
            )

    @classmethod
    async def run(cls, db: AsyncSession, settings: Settings) -> None:
        await cls.create_filmes(db)

    @classmethod
    async def should_run(cls, db: AsyncSession):
        return await cruds_filme.count_filmes(db=db) == 0
