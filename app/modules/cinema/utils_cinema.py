"""
Conversions between cinema models and schemas.

The id is never copied from a schema to a model: it is assigned by the database on insertion.
"""

from typing import Any

from app.modules.cinema import models_cinema, schemas_cinema


def cinema_schema_to_model(
    cinema: schemas_cinema.CinemaBase,
) -> models_cinema.Cinema:
    return models_cinema.Cinema(
        name=cinema.name,
    )


def cinema_model_to_schema(
    cinema: models_cinema.Cinema,
) -> schemas_cinema.CinemaComplete:
    return schemas_cinema.CinemaComplete(
        id=cinema.id,
        name=cinema.name,
    )


def cinema_model_to_update_schema(
    cinema: models_cinema.Cinema,
) -> schemas_cinema.CinemaUpdate:
    return schemas_cinema.CinemaUpdate(
        name=cinema.name,
    )


def cinema_update_schema_to_values(
    cinema_update: schemas_cinema.CinemaUpdate,
) -> dict[str, Any]:
    return {
        "name": cinema_update.name,
    }
