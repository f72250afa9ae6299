from fastapi import Body, Depends, HTTPException, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.dependencies import get_db
from app.modules.cinema import cruds_cinema, schemas_cinema, utils_cinema
from app.modules.cinema.factory_cinema import CinemaFactory
from app.modules.filme import cruds_filme
from app.types.json_patch import PatchOperation
from app.types.module import Module
from app.utils.json_patch import patch_schema

module = Module(
    root="cinema",
    tag="Cinema",
    factory=CinemaFactory,
)


@module.router.post(
    "/cinema",
    response_model=schemas_cinema.CinemaComplete,
    status_code=201,
)
async def create_cinema(
    cinema: schemas_cinema.CinemaBase,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """
    Add a cinema.

    The `Location` header of the response contains the url of the created cinema.
    """
    db_cinema = utils_cinema.cinema_schema_to_model(cinema)
    await cruds_cinema.create_cinema(cinema=db_cinema, db=db)

    response.headers["Location"] = str(
        request.url_for("get_cinema_by_id", cinema_id=db_cinema.id),
    )
    return utils_cinema.cinema_model_to_schema(db_cinema)


@module.router.get(
    "/cinema",
    response_model=list[schemas_cinema.CinemaComplete],
    status_code=200,
)
async def get_cinemas(
    skip: int = Query(0, ge=0, description="Number of cinemas to skip"),
    take: int = Query(50, ge=0, description="Maximum number of cinemas to return"),
    db: AsyncSession = Depends(get_db),
):
    """
    Return a page of cinemas, ordered by id.
    """
    cinemas = await cruds_cinema.get_cinemas(db=db, skip=skip, take=take)
    return [utils_cinema.cinema_model_to_schema(cinema) for cinema in cinemas]


@module.router.get(
    "/cinema/{cinema_id}",
    response_model=schemas_cinema.CinemaComplete,
    status_code=200,
)
async def get_cinema_by_id(
    cinema_id: int,
    db: AsyncSession = Depends(get_db),
):
    cinema = await cruds_cinema.get_cinema_by_id(cinema_id=cinema_id, db=db)
    if cinema is None:
        raise HTTPException(status_code=404, detail="Cinema not found")

    return utils_cinema.cinema_model_to_schema(cinema)


@module.router.put(
    "/cinema/{cinema_id}",
    status_code=204,
)
async def update_cinema(
    cinema_id: int,
    cinema_update: schemas_cinema.CinemaUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Replace every field of the cinema.
    """
    cinema = await cruds_cinema.get_cinema_by_id(cinema_id=cinema_id, db=db)
    if cinema is None:
        raise HTTPException(status_code=404, detail="Cinema not found")

    await cruds_cinema.update_cinema(
        cinema_id=cinema_id,
        cinema_update=cinema_update,
        db=db,
    )


@module.router.patch(
    "/cinema/{cinema_id}",
    status_code=204,
)
async def patch_cinema(
    cinema_id: int,
    operations: list[PatchOperation] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """
    Partially update the cinema using a [JSON Patch](https://datatracker.ietf.org/doc/html/rfc6902) document.

    The patch is applied to the editable fields of the cinema, the result is validated as a full update would be.
    If an operation fails or the result is invalid, nothing is modified and a 400 error listing the problems is returned.
    """
    cinema = await cruds_cinema.get_cinema_by_id(cinema_id=cinema_id, db=db)
    if cinema is None:
        raise HTTPException(status_code=404, detail="Cinema not found")

    cinema_update = patch_schema(
        utils_cinema.cinema_model_to_update_schema(cinema),
        operations,
    )

    await cruds_cinema.update_cinema(
        cinema_id=cinema_id,
        cinema_update=cinema_update,
        db=db,
    )


@module.router.delete(
    "/cinema/{cinema_id}",
    status_code=204,
)
async def delete_cinema(
    cinema_id: int,
    db: AsyncSession = Depends(get_db),
):
    """
    Delete the cinema. Its movies are kept, without cinema.
    """
    cinema = await cruds_cinema.get_cinema_by_id(cinema_id=cinema_id, db=db)
    if cinema is None:
        raise HTTPException(status_code=404, detail="Cinema not found")

    await cruds_filme.unlink_filmes_from_cinema(cinema_id=cinema_id, db=db)
    await cruds_cinema.delete_cinema(cinema_id=cinema_id, db=db)
