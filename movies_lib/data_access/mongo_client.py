# MongoDB repository logic
# movies_lib/data_access/mongo_client.py

import logging
from datetime import datetime, time
from typing import List, Optional, Dict, Any

from motor.motor_asyncio import AsyncIOMotorDatabase, AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError
from bson import ObjectId

from movies_lib.models.genre import GenreCreate
from movies_lib.models.movie import MovieCreate

logger = logging.getLogger(__name__)

MOVIES_COLLECTION = "movies"
GENRES_COLLECTION = "genres"


# --- Base Repository ---
class BaseRepository:
    """Common access logic for a single collection."""
    def __init__(self, db: AsyncIOMotorDatabase, collection_name: str):
        self.db = db
        self.collection: AsyncIOMotorCollection = db[collection_name]
        self.collection_name = collection_name
        logger.debug(f"Initialized repository for collection: {collection_name}")

    def _validate_object_id(self, id_str: str) -> Optional[ObjectId]:
        """Validates a string as a MongoDB ObjectId."""
        if ObjectId.is_valid(id_str):
            return ObjectId(id_str)
        logger.warning(f"Invalid ObjectId format: {id_str}")
        return None

    async def find_all(self) -> List[Dict[str, Any]]:
        """Returns every document in the collection, in natural order."""
        try:
            cursor = self.collection.find({})
            docs = await cursor.to_list(length=None)
            logger.debug(f"Fetched {len(docs)} documents from '{self.collection_name}'")
            return docs
        except PyMongoError as e:
            logger.error(f"DB error listing '{self.collection_name}': {e}", exc_info=True)
            raise

    async def delete_by_id(self, doc_id: str) -> int:
        """
        Deletes the document whose _id matches.

        Returns:
            The number of deleted documents (0 for a malformed or unknown id).
        """
        obj_id = self._validate_object_id(doc_id)
        if not obj_id:
            return 0
        try:
            result = await self.collection.delete_one({"_id": obj_id})
            return result.deleted_count
        except PyMongoError as e:
            logger.error(f"DB error deleting {doc_id} from '{self.collection_name}': {e}", exc_info=True)
            raise

    async def _insert(self, doc: Dict[str, Any]) -> str:
        try:
            result = await self.collection.insert_one(doc)
            return str(result.inserted_id)
        except PyMongoError as e:
            logger.error(f"DB error inserting into '{self.collection_name}': {e}", exc_info=True)
            raise

    async def _update_one(self, query: Dict[str, Any], fields: Dict[str, Any]) -> bool:
        """Applies $set to the first document matching query; False if nothing matched."""
        try:
            updated = await self.collection.find_one_and_update(
                query, {"$set": fields}, return_document=ReturnDocument.AFTER
            )
            return updated is not None
        except PyMongoError as e:
            logger.error(f"DB error updating {query} in '{self.collection_name}': {e}", exc_info=True)
            raise


# --- Movie Repository ---
class MovieRepository(BaseRepository):
    def __init__(self, db: AsyncIOMotorDatabase):
        super().__init__(db, collection_name=MOVIES_COLLECTION)

    async def find_by_title(self, title: str) -> Optional[Dict[str, Any]]:
        try:
            return await self.collection.find_one({"title": title})
        except PyMongoError as e:
            logger.error(f"DB error finding movie by title '{title}': {e}", exc_info=True)
            raise

    async def find_by_genre(self, genre: str) -> List[Dict[str, Any]]:
        """Finds movies whose genre array contains exactly the given name."""
        try:
            cursor = self.collection.find({"genre": genre})
            return await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error(f"DB error finding movies by genre '{genre}': {e}", exc_info=True)
            raise

    async def insert_one(self, movie: MovieCreate) -> str:
        doc = movie.model_dump()
        # BSON stores datetimes only
        doc["releaseDate"] = datetime.combine(movie.releaseDate, time.min)
        return await self._insert(doc)

    async def update_by_title(self, title: str, fields: Dict[str, Any]) -> bool:
        return await self._update_one({"title": title}, fields)


# --- Genre Repository ---
class GenreRepository(BaseRepository):
    def __init__(self, db: AsyncIOMotorDatabase):
        super().__init__(db, collection_name=GENRES_COLLECTION)

    async def find_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        try:
            return await self.collection.find_one({"name": name})
        except PyMongoError as e:
            logger.error(f"DB error finding genre by name '{name}': {e}", exc_info=True)
            raise

    async def insert_one(self, genre: GenreCreate) -> str:
        return await self._insert(genre.model_dump())

    async def update_by_name(self, name: str, fields: Dict[str, Any]) -> bool:
        return await self._update_one({"name": name}, fields)
