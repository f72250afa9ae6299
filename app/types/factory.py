from abc import ABC, abstractmethod

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.utils.config import Settings


class Factory(ABC):
    """
    A factory adds demo data to the database on startup when `USE_FACTORIES` is enabled.

    Each module may declare one factory in its `Module`. Factories listed in `depends_on`
    are run first, which lets a factory reference the objects they created:
    ```python
    class FilmeFactory(Factory):
        depends_on = [CinemaFactory]

        @classmethod
        async def run(cls, db: AsyncSession, settings: Settings) -> None:
            cinemas = await cruds_cinema.get_cinemas(db=db)
            ...

        @classmethod
        async def should_run(cls, db: AsyncSession):
            return await cruds_filme.count_filmes(db=db) == 0
    ```
    """

    depends_on: list[type["Factory"]]

    @classmethod
    @abstractmethod
    async def should_run(cls, db: AsyncSession) -> bool:
        """
        Return False if the data was already added, so that restarting the application does not duplicate it.
        """

    @classmethod
    @abstractmethod
    async def run(cls, db: AsyncSession, settings: Settings) -> None:
        """
        Add the demo data. Objects should be flushed, not committed.
        """
