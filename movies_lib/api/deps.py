# FastAPI dependencies (database handle, repositories, services)
# movies_lib/api/deps.py

import logging

from fastapi import Depends, FastAPI, Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import ConfigurationError, PyMongoError

from movies_lib.core.config import Settings
from movies_lib.core.errors import ServiceUnavailableError
from movies_lib.data_access.mongo_client import GenreRepository, MovieRepository
from movies_lib.services.genre_service import GenreService
from movies_lib.services.movie_service import MovieService

logger = logging.getLogger(__name__)

FALLBACK_DB_NAME = "movies-lib"


async def initialize_connections(app: FastAPI, settings: Settings) -> None:
    """
    Creates the MongoDB client and stores client and database on app.state.
    Call this during FastAPI startup using lifespan events.

    A failed connection is logged and leaves app.state.db set to None; requests
    needing the database then fail with 503.
    """
    app.state.mongo_client = None
    app.state.db = None

    uri = settings.MONGODB_URI.get_secret_value()
    logger.info(f"Attempting to connect to MongoDB: {uri[:15]}...")
    client = None
    try:
        client = AsyncIOMotorClient(
            uri,
            serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
            timeoutMS=settings.MONGODB_TIMEOUT_MS,
        )
        await client.admin.command('ping')
    except PyMongoError as e:
        logger.error(f"MongoDB connection failed during initialization: {e}", exc_info=True)
        if client is not None:
            client.close()
        return

    if settings.MONGODB_DB_NAME:
        db_name = settings.MONGODB_DB_NAME
    else:
        try:
            db_name = client.get_default_database().name
        except ConfigurationError:
            logger.warning(f"No database name in MONGODB_URI, using fallback: {FALLBACK_DB_NAME}")
            db_name = FALLBACK_DB_NAME

    app.state.mongo_client = client
    app.state.db = client[db_name]
    logger.info(f"MongoDB client initialized successfully. Using database: '{db_name}'")


async def close_connections(app: FastAPI) -> None:
    """Closes the MongoDB client created at startup."""
    client = getattr(app.state, "mongo_client", None)
    if client is not None:
        client.close()
        logger.info("MongoDB client closed.")
    app.state.mongo_client = None
    app.state.db = None


# --- Database Dependency ---

def get_db(request: Request) -> AsyncIOMotorDatabase:
    """
    Returns the database handle created at startup.

    Raises:
        ServiceUnavailableError: If the database instance is not available.
    """
    db = getattr(request.app.state, "db", None)
    if db is None:
        logger.critical("MongoDB database instance is not available. Check initialization.")
        raise ServiceUnavailableError("Database service not available.")
    return db


# --- Repository Dependencies ---

def get_movie_repository(db: AsyncIOMotorDatabase = Depends(get_db)) -> MovieRepository:
    return MovieRepository(db)


def get_genre_repository(db: AsyncIOMotorDatabase = Depends(get_db)) -> GenreRepository:
    return GenreRepository(db)


# --- Service Dependencies ---

def get_movie_service(repository: MovieRepository = Depends(get_movie_repository)) -> MovieService:
    return MovieService(repository=repository)


def get_genre_service(repository: GenreRepository = Depends(get_genre_repository)) -> GenreService:
    return GenreService(repository=repository)
