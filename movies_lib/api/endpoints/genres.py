# movies_lib/api/endpoints/genres.py

from typing import List

from fastapi import APIRouter, Depends, Path, status

from movies_lib.api.deps import get_genre_service
from movies_lib.models.genre import GenreCreate, GenreRead
from movies_lib.services.genre_service import GenreService

router = APIRouter()


@router.get(
    "",  # GET /genres
    response_model=List[GenreRead],
    summary="Get a list of all genres",
    description="Retrieve a list of all genres from the database.",
)
async def list_genres(genre_service: GenreService = Depends(get_genre_service)):
    return await genre_service.list_genres()


@router.get(
    "/{name}",  # GET /genres/{name}
    response_model=GenreRead,
    summary="Get a genre by name",
    responses={404: {"description": "Genre was not found."}},
)
async def get_genre(
    name: str = Path(..., description="The name of the genre."),
    genre_service: GenreService = Depends(get_genre_service),
):
    return await genre_service.get_genre_by_name(name)


@router.post(
    "",  # POST /genres
    response_model=List[GenreRead],
    status_code=status.HTTP_201_CREATED,
    summary="Add a new genre",
    description="Add a new genre to the database. Responds with the full genre collection.",
    responses={400: {"description": "Name missing or not 3-30 characters long."}},
)
async def create_genre(
    genre: GenreCreate,
    genre_service: GenreService = Depends(get_genre_service),
):
    return await genre_service.create_genre(genre)


@router.put(
    "/{name}",  # PUT /genres/{name}
    response_model=List[GenreRead],
    summary="Update a genre by name",
    description=(
        "Renames the genre by appending a random number (0-999) to its name. "
        "Any request body is ignored. Responds with the full genre collection."
    ),
    responses={404: {"description": "Genre was not found."}},
)
async def update_genre(
    name: str = Path(..., description="The name of the genre to update."),
    genre_service: GenreService = Depends(get_genre_service),
):
    return await genre_service.update_genre(name)


@router.delete(
    "/{genre_id}",  # DELETE /genres/{genre_id}
    response_model=List[GenreRead],
    summary="Delete a genre by ID",
    responses={
        400: {"description": "Id not provided."},
        404: {"description": "Genre was not deleted."},
    },
)
async def delete_genre(
    genre_id: str = Path(..., description="The ObjectId of the genre to delete."),
    genre_service: GenreService = Depends(get_genre_service),
):
    return await genre_service.delete_genre(genre_id)
