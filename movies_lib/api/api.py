"""
API Router Module - Aggregates all endpoint routers
"""
from fastapi import APIRouter

from movies_lib.api.endpoints import genres, health, movies

api_router = APIRouter()

api_router.include_router(health.router, tags=["Info"])
api_router.include_router(movies.router, prefix="/movies", tags=["Movies"])
api_router.include_router(genres.router, prefix="/genres", tags=["Genres"])
