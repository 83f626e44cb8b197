# movies_lib/services/genre_service.py

import logging
import random
from typing import List, Optional

from movies_lib.core.errors import BadRequestError, NotFoundError
from movies_lib.data_access.mongo_client import GenreRepository
from movies_lib.models.genre import GenreCreate, GenreRead
from movies_lib.utils.helpers import append_random_suffix, is_blank

logger = logging.getLogger(__name__)


class GenreService:
    def __init__(self, repository: GenreRepository, rng: Optional[random.Random] = None):
        """
        Initializes the Genre Service.

        Args:
            repository: Data access for the 'genres' collection.
            rng: Random generator used for the rename suffix on update.
        """
        self.repository = repository
        self.rng = rng

    async def list_genres(self) -> List[GenreRead]:
        docs = await self.repository.find_all()
        logger.info(f"Fetched {len(docs)} genres")
        return [GenreRead.from_document(doc) for doc in docs]

    async def get_genre_by_name(self, name: str) -> GenreRead:
        doc = await self.repository.find_by_name(name)
        if doc is None:
            logger.warning(f"Genre not found attempt: '{name}'")
            raise NotFoundError(f"Genre '{name}' was not found.")
        return GenreRead.from_document(doc)

    async def create_genre(self, genre: GenreCreate) -> List[GenreRead]:
        """
        Inserts a validated genre and returns the whole collection afterwards.
        """
        new_id = await self.repository.insert_one(genre)
        logger.info(f"Inserted genre '{genre.name}' with ID {new_id}")
        return await self.list_genres()

    async def update_genre(self, name: str) -> List[GenreRead]:
        """
        Renames the genre to "<name> <random 0-999>".

        Returns:
            The whole collection after the update.

        Raises:
            BadRequestError: If the name is blank.
            NotFoundError: If the genre does not exist or the write matched nothing.
        """
        if is_blank(name):
            raise BadRequestError("Name was not provided.")

        if await self.repository.find_by_name(name) is None:
            logger.warning(f"Update requested for unknown genre '{name}'")
            raise NotFoundError(f"Genre '{name}' was not found.")

        edited = {"name": append_random_suffix(name, self.rng)}
        if not await self.repository.update_by_name(name, edited):
            raise NotFoundError(f"Genre '{name}' was not updated.")
        logger.info(f"Renamed genre '{name}' to '{edited['name']}'")
        return await self.list_genres()

    async def delete_genre(self, genre_id: str) -> List[GenreRead]:
        """
        Deletes a genre by its database ID and returns the remaining collection.

        Raises:
            BadRequestError: If the ID is blank.
            NotFoundError: If nothing was deleted.
        """
        if is_blank(genre_id):
            raise BadRequestError("Id not provided.")

        deleted = await self.repository.delete_by_id(genre_id)
        if deleted == 0:
            logger.warning(f"Delete requested for unknown genre ID {genre_id}")
            raise NotFoundError(f"Genre with ID '{genre_id}' was not deleted.")
        logger.info(f"Deleted genre with ID {genre_id}")
        return await self.list_genres()
