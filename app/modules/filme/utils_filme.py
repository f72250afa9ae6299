from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app.modules.cinema import cruds_cinema
from app.modules.filme import models_filme, schemas_filme
from app.types.exceptions import ValidationHTTPException


def filme_schema_to_model(
    filme: schemas_filme.FilmeBase,
) -> models_filme.Filme:
    return models_filme.Filme(
        title=filme.title,
        genre=filme.genre,
        duration=filme.duration,
        cinema_id=filme.cinema_id,
    )


def filme_model_to_schema(
    filme: models_filme.Filme,
) -> schemas_filme.FilmeComplete:
    return schemas_filme.FilmeComplete(
        id=filme.id,
        title=filme.title,
        genre=filme.genre,
        duration=filme.duration,
        cinema_id=filme.cinema_id,
    )


def filme_model_to_update_schema(
    filme: models_filme.Filme,
) -> schemas_filme.FilmeUpdate:
    return schemas_filme.FilmeUpdate(
        title=filme.title,
        genre=filme.genre,
        duration=filme.duration,
        cinema_id=filme.cinema_id,
    )


def filme_update_schema_to_values(
    filme_update: schemas_filme.FilmeUpdate,
) -> dict[str, Any]:
    return {
        "title": filme_update.title,
        "genre": filme_update.genre,
        "duration": filme_update.duration,
        "cinema_id": filme_update.cinema_id,
    }


async def check_cinema_exists(
    cinema_id: int | None,
    db: AsyncSession,
) -> None:
    """
    Raise a 400 error if `cinema_id` does not reference an existing cinema.

    SQLite does not enforce foreign keys, the check is done here for every backend.
    """
    if cinema_id is None:
        return
    cinema = await cruds_cinema.get_cinema_by_id(cinema_id=cinema_id, db=db)
    if cinema is None:
        raise ValidationHTTPException(
            [
                {
                    "loc": ["body", "cinema_id"],
                    "msg": f"Cinema {cinema_id} does not exist",
                    "type": "value_error",
                    "input": cinema_id,
                },
            ],
        )
