from fastapi import Body, Depends, HTTPException, Query, Request, Response
from sqlalchemy.ext.asyncio import AsyncSession

from app.dependencies import get_db
from app.modules.filme import cruds_filme, schemas_filme, utils_filme
from app.modules.filme.factory_filme import FilmeFactory
from app.types.json_patch import PatchOperation
from app.types.module import Module
from app.utils.json_patch import patch_schema

module = Module(
    root="filme",
    tag="Filme",
    factory=FilmeFactory,
)


@module.router.post(
    "/filme",
    response_model=schemas_filme.FilmeComplete,
    status_code=201,
)
async def create_filme(
    filme: schemas_filme.FilmeBase,
    request: Request,
    response: Response,
    db: AsyncSession = Depends(get_db),
):
    """
    Add a movie.

    If `cinema_id` is given, it must reference an existing cinema.
    The `Location` header of the response contains the url of the created movie.
    """
    await utils_filme.check_cinema_exists(cinema_id=filme.cinema_id, db=db)

    db_filme = utils_filme.filme_schema_to_model(filme)
    await cruds_filme.create_filme(filme=db_filme, db=db)

    response.headers["Location"] = str(
        request.url_for("get_filme_by_id", filme_id=db_filme.id),
    )
    return utils_filme.filme_model_to_schema(db_filme)


@module.router.get(
    "/filme",
    response_model=list[schemas_filme.FilmeComplete],
    status_code=200,
)
async def get_filmes(
    skip: int = Query(0, ge=0, description="Number of movies to skip"),
    take: int = Query(50, ge=0, description="Maximum number of movies to return"),
    cinema_id: int | None = Query(
        None,
        description="Only return the movies shown in this cinema",
    ),
    db: AsyncSession = Depends(get_db),
):
    """
    Return a page of movies, ordered by id.
    """
    filmes = await cruds_filme.get_filmes(
        db=db,
        skip=skip,
        take=take,
        cinema_id=cinema_id,
    )
    return [utils_filme.filme_model_to_schema(filme) for filme in filmes]


@module.router.get(
    "/filme/{filme_id}",
    response_model=schemas_filme.FilmeComplete,
    status_code=200,
)
async def get_filme_by_id(
    filme_id: int,
    db: AsyncSession = Depends(get_db),
):
    filme = await cruds_filme.get_filme_by_id(filme_id=filme_id, db=db)
    if filme is None:
        raise HTTPException(status_code=404, detail="Filme not found")

    return utils_filme.filme_model_to_schema(filme)


@module.router.put(
    "/filme/{filme_id}",
    status_code=204,
)
async def update_filme(
    filme_id: int,
    filme_update: schemas_filme.FilmeUpdate,
    db: AsyncSession = Depends(get_db),
):
    """
    Replace every field of the movie. An omitted `cinema_id` removes the movie from its cinema.
    """
    filme = await cruds_filme.get_filme_by_id(filme_id=filme_id, db=db)
    if filme is None:
        raise HTTPException(status_code=404, detail="Filme not found")

    await utils_filme.check_cinema_exists(cinema_id=filme_update.cinema_id, db=db)

    await cruds_filme.update_filme(
        filme_id=filme_id,
        filme_update=filme_update,
        db=db,
    )


@module.router.patch(
    "/filme/{filme_id}",
    status_code=204,
)
async def patch_filme(
    filme_id: int,
    operations: list[PatchOperation] = Body(...),
    db: AsyncSession = Depends(get_db),
):
    """
    Partially update the movie using a [JSON Patch](https://datatracker.ietf.org/doc/html/rfc6902) document.

    Paths name a field of the movie: `/title`, `/genre`, `/duration` or `/cinema_id`.
    If an operation fails or the patched movie is invalid, nothing is modified and a 400 error is returned.
    """
    filme = await cruds_filme.get_filme_by_id(filme_id=filme_id, db=db)
    if filme is None:
        raise HTTPException(status_code=404, detail="Filme not found")

    filme_update = patch_schema(
        utils_filme.filme_model_to_update_schema(filme),
        operations,
    )
    await utils_filme.check_cinema_exists(cinema_id=filme_update.cinema_id, db=db)

    await cruds_filme.update_filme(
        filme_id=filme_id,
        filme_update=filme_update,
        db=db,
    )


@module.router.delete(
    "/filme/{filme_id}",
    status_code=204,
)
async def delete_filme(
    filme_id: int,
    db: AsyncSession = Depends(get_db),
):
    filme = await cruds_filme.get_filme_by_id(filme_id=filme_id, db=db)
    if filme is None:
        raise HTTPException(status_code=404, detail="Filme not found")

    await cruds_filme.delete_filme(filme_id=filme_id, db=db)
