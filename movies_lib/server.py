"""
Primary FastAPI application entry point
"""
import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from movies_lib.api.api import api_router
from movies_lib.api.deps import close_connections, initialize_connections
from movies_lib.core.config import Settings, get_settings
from movies_lib.core.errors import register_error_handlers

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout,
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Application factory.

    Args:
        settings: Configuration to use; defaults to the cached environment settings.

    Returns:
        The configured FastAPI application. The database connection is opened
        by the lifespan handler, not here.
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application startup: Initializing connections...")
        await initialize_connections(app, settings)
        yield
        logger.info("Application shutdown: Closing connections...")
        await close_connections(app)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=settings.DOCS_URL,
        redoc_url=None,
        openapi_url=f"{settings.DOCS_URL}/openapi.json",
        redirect_slashes=False,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(api_router)

    logger.info(f"{settings.PROJECT_NAME} created with {len(app.routes)} routes")
    return app


# For `uvicorn movies_lib.server:app`
configure_logging(get_settings().LOG_LEVEL)
app = create_app()


def main() -> None:
    import uvicorn

    settings = app.state.settings
    logger.info(f"Starting server on {settings.API_HOST}:{settings.PORT}")
    uvicorn.run(
        app,
        host=settings.API_HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
