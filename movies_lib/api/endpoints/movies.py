# movies_lib/api/endpoints/movies.py

from typing import List

from fastapi import APIRouter, Depends, Path, status

from movies_lib.api.deps import get_movie_service
from movies_lib.models.movie import MovieCreate, MovieRead
from movies_lib.services.movie_service import MovieService

router = APIRouter()


@router.get(
    "",  # GET /movies
    response_model=List[MovieRead],
    summary="Get a list of all movies",
    description="Retrieve a list of all movies from the database.",
)
async def list_movies(movie_service: MovieService = Depends(get_movie_service)):
    return await movie_service.list_movies()


@router.get(
    "/genres/{name}",  # GET /movies/genres/{name}
    response_model=List[MovieRead],
    summary="Get a list of movies by genre",
    description="Retrieve the movies tagged with a specific genre.",
    responses={404: {"description": "No movies with this genre were found."}},
)
async def list_movies_by_genre(
    name: str = Path(..., description="The name of the genre to filter movies by."),
    movie_service: MovieService = Depends(get_movie_service),
):
    return await movie_service.list_movies_by_genre(name)


@router.get(
    "/{title}",  # GET /movies/{title}
    response_model=MovieRead,
    summary="Get a movie by title",
    responses={404: {"description": "Movie with this title was not found."}},
)
async def get_movie(
    title: str = Path(..., description="The title of the movie."),
    movie_service: MovieService = Depends(get_movie_service),
):
    return await movie_service.get_movie_by_title(title)


@router.post(
    "",  # POST /movies
    response_model=List[MovieRead],
    status_code=status.HTTP_201_CREATED,
    summary="Add a new movie",
    description="Add a new movie to the database. Responds with the full movie collection.",
    responses={400: {"description": "A required field is missing or invalid."}},
)
async def create_movie(
    movie: MovieCreate,
    movie_service: MovieService = Depends(get_movie_service),
):
    return await movie_service.create_movie(movie)


@router.put(
    "/{title}",  # PUT /movies/{title}
    response_model=List[MovieRead],
    summary="Update a movie by title",
    description=(
        "Renames the movie by appending \"1\" to its title. Any request body is ignored. "
        "Responds with the full movie collection."
    ),
    responses={404: {"description": "No movies with this title were found."}},
)
async def update_movie(
    title: str = Path(..., description="The title of the movie to update."),
    movie_service: MovieService = Depends(get_movie_service),
):
    return await movie_service.update_movie(title)


@router.delete(
    "/{movie_id}",  # DELETE /movies/{movie_id}
    response_model=List[MovieRead],
    summary="Delete a movie by ID",
    description="Delete a movie by its database ID. Responds with the remaining movies.",
    responses={
        400: {"description": "Id not provided."},
        404: {"description": "No movie was deleted."},
    },
)
async def delete_movie(
    movie_id: str = Path(..., description="The ObjectId of the movie to delete."),
    movie_service: MovieService = Depends(get_movie_service),
):
    return await movie_service.delete_movie(movie_id)
