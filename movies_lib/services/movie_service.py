# movies_lib/services/movie_service.py

import logging
from typing import List

from movies_lib.core.errors import BadRequestError, NotFoundError
from movies_lib.data_access.mongo_client import MovieRepository
from movies_lib.models.movie import MovieCreate, MovieRead
from movies_lib.utils.helpers import is_blank

logger = logging.getLogger(__name__)

# Suffix appended to a title on update
TITLE_UPDATE_SUFFIX = "1"


class MovieService:
    def __init__(self, repository: MovieRepository):
        """
        Initializes the Movie Service.

        Args:
            repository: Data access for the 'movies' collection.
        """
        self.repository = repository

    async def list_movies(self) -> List[MovieRead]:
        """
        Returns every stored movie.

        Raises:
            PyMongoError: If a database error occurs.
        """
        docs = await self.repository.find_all()
        logger.info(f"Fetched {len(docs)} movies")
        return [MovieRead.from_document(doc) for doc in docs]

    async def list_movies_by_genre(self, genre: str) -> List[MovieRead]:
        """
        Returns the movies tagged with the given genre.

        Raises:
            NotFoundError: If no movie carries the genre.
            PyMongoError: If a database error occurs.
        """
        docs = await self.repository.find_by_genre(genre)
        if not docs:
            logger.warning(f"No movies found for genre '{genre}'")
            raise NotFoundError(f"No movies with genre '{genre}' were found.")
        return [MovieRead.from_document(doc) for doc in docs]

    async def get_movie_by_title(self, title: str) -> MovieRead:
        """
        Raises:
            NotFoundError: If no movie has this title.
        """
        doc = await self.repository.find_by_title(title)
        if doc is None:
            logger.warning(f"Movie not found attempt: title '{title}'")
            raise NotFoundError(f"Movie with title '{title}' was not found.")
        return MovieRead.from_document(doc)

    async def create_movie(self, movie: MovieCreate) -> List[MovieRead]:
        """
        Inserts a movie and returns the whole collection afterwards.

        Raises:
            BadRequestError: If the title is blank.
            PyMongoError: If a database error occurs.
        """
        if is_blank(movie.title):
            raise BadRequestError("Title was not provided.")
        new_id = await self.repository.insert_one(movie)
        logger.info(f"Inserted movie '{movie.title}' with ID {new_id}")
        return await self.list_movies()

    async def update_movie(self, title: str) -> List[MovieRead]:
        """
        Renames the movie with the given title by appending "1" to it.

        The other fields are written back unchanged; request payloads are not
        consulted.

        Returns:
            The whole collection after the update.

        Raises:
            BadRequestError: If the title is blank.
            NotFoundError: If no movie has this title, or the write matched nothing.
        """
        if is_blank(title):
            raise BadRequestError("Title was not provided.")

        existing = await self.repository.find_by_title(title)
        if existing is None:
            logger.warning(f"Update requested for unknown movie '{title}'")
            raise NotFoundError(f"No movies with title '{title}' were found.")

        edited = {
            "title": title + TITLE_UPDATE_SUFFIX,
            "genre": existing.get("genre"),
            "releaseDate": existing.get("releaseDate"),
            "description": existing.get("description"),
        }
        if not await self.repository.update_by_title(title, edited):
            raise NotFoundError(f"Movie '{title}' was not updated.")
        logger.info(f"Renamed movie '{title}' to '{edited['title']}'")
        return await self.list_movies()

    async def delete_movie(self, movie_id: str) -> List[MovieRead]:
        """
        Deletes a movie by its database ID.

        Returns:
            The remaining collection.

        Raises:
            BadRequestError: If the ID is blank.
            NotFoundError: If nothing was deleted (malformed or unknown ID).
        """
        if is_blank(movie_id):
            raise BadRequestError("Id not provided.")

        deleted = await self.repository.delete_by_id(movie_id)
        if deleted == 0:
            logger.warning(f"Delete requested for unknown movie ID {movie_id}")
            raise NotFoundError(f"Movie with ID '{movie_id}' was not deleted.")
        logger.info(f"Deleted movie with ID {movie_id}")
        return await self.list_movies()
