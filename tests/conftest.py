"""
Test configuration and fixtures for the Movies Library API.

The API tests swap the MongoDB repositories for in-memory ones through
FastAPI dependency overrides, so no database server is needed. The
lifespan handler (which would connect to MongoDB) is not run because the
TestClient is never entered as a context manager.
"""

import os

os.environ.update({
    "MONGODB_URI": "mongodb://localhost:27017/movies-lib-test",
    "LOG_LEVEL": "WARNING",
})

import copy
from datetime import datetime, time
from typing import Any, Dict, List, Optional

import pytest
from bson import ObjectId
from fastapi import FastAPI
from fastapi.testclient import TestClient

from movies_lib.api.deps import get_genre_repository, get_movie_repository
from movies_lib.core.config import Settings
from movies_lib.models.genre import GenreCreate
from movies_lib.models.movie import MovieCreate
from movies_lib.server import create_app


class InMemoryRepository:
    """Keeps documents in a list, with the same coroutine interface as the Mongo repositories."""

    def __init__(self, key_field: str):
        self.key_field = key_field
        self.docs: List[Dict[str, Any]] = []

    async def find_all(self) -> List[Dict[str, Any]]:
        return copy.deepcopy(self.docs)

    async def delete_by_id(self, doc_id: str) -> int:
        if not ObjectId.is_valid(doc_id):
            return 0
        before = len(self.docs)
        self.docs = [doc for doc in self.docs if doc["_id"] != ObjectId(doc_id)]
        return before - len(self.docs)

    async def _find_by_key(self, value: str) -> Optional[Dict[str, Any]]:
        for doc in self.docs:
            if doc[self.key_field] == value:
                return copy.deepcopy(doc)
        return None

    async def _update_by_key(self, value: str, fields: Dict[str, Any]) -> bool:
        for doc in self.docs:
            if doc[self.key_field] == value:
                doc.update(fields)
                return True
        return False

    def _insert(self, doc: Dict[str, Any]) -> str:
        doc["_id"] = ObjectId()
        self.docs.append(doc)
        return str(doc["_id"])


class InMemoryMovieRepository(InMemoryRepository):
    def __init__(self):
        super().__init__(key_field="title")

    async def find_by_title(self, title: str) -> Optional[Dict[str, Any]]:
        return await self._find_by_key(title)

    async def find_by_genre(self, genre: str) -> List[Dict[str, Any]]:
        return [copy.deepcopy(doc) for doc in self.docs if genre in doc["genre"]]

    async def insert_one(self, movie: MovieCreate) -> str:
        doc = movie.model_dump()
        doc["releaseDate"] = datetime.combine(movie.releaseDate, time.min)
        return self._insert(doc)

    async def update_by_title(self, title: str, fields: Dict[str, Any]) -> bool:
        return await self._update_by_key(title, fields)


class InMemoryGenreRepository(InMemoryRepository):
    def __init__(self):
        super().__init__(key_field="name")

    async def find_by_name(self, name: str) -> Optional[Dict[str, Any]]:
        return await self._find_by_key(name)

    async def insert_one(self, genre: GenreCreate) -> str:
        return self._insert(genre.model_dump())

    async def update_by_name(self, name: str, fields: Dict[str, Any]) -> bool:
        return await self._update_by_key(name, fields)


@pytest.fixture
def settings() -> Settings:
    return Settings(MONGODB_URI="mongodb://localhost:27017/movies-lib-test", LOG_LEVEL="WARNING")


@pytest.fixture
def movie_repository() -> InMemoryMovieRepository:
    return InMemoryMovieRepository()


@pytest.fixture
def genre_repository() -> InMemoryGenreRepository:
    return InMemoryGenreRepository()


@pytest.fixture
def app(settings, movie_repository, genre_repository) -> FastAPI:
    """A fresh application per test, wired to the in-memory repositories."""
    application = create_app(settings)
    application.dependency_overrides[get_movie_repository] = lambda: movie_repository
    application.dependency_overrides[get_genre_repository] = lambda: genre_repository
    return application


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def sample_movie() -> Dict[str, Any]:
    return {
        "title": "The Matrix",
        "genre": ["Action", "Science Fiction"],
        "releaseDate": "1999-03-31",
        "description": "A classic sci-fi movie.",
    }
