# Settings management (reads env vars/.env)
# movies_lib/core/config.py

import json
import logging
from functools import lru_cache
from typing import Annotated, List, Optional, Union

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application configuration settings loaded from environment variables or .env file.
    """
    # --- Project Info ---
    PROJECT_NAME: str = Field("Movies Library API", validation_alias="PROJECT_NAME")
    VERSION: str = Field("1.0.0", validation_alias="APP_VERSION")
    DOCS_URL: str = Field("/api-docs", validation_alias="DOCS_URL")

    # --- Logging ---
    LOG_LEVEL: str = Field("INFO", validation_alias="LOG_LEVEL")

    # --- Database (MongoDB) ---
    # SecretStr keeps credentials embedded in the URI out of logs
    MONGODB_URI: SecretStr = Field(
        SecretStr("mongodb://127.0.0.1:27017/movies-lib"),
        validation_alias="MONGODB_URI"
    )
    MONGODB_DB_NAME: Optional[str] = Field(
        None,
        validation_alias="MONGODB_DB_NAME",
        description="Overrides the database named in MONGODB_URI."
    )
    MONGODB_TIMEOUT_MS: int = Field(
        default=5000,
        gt=0,
        validation_alias="MONGODB_TIMEOUT_MS",
        description="Server selection and per-operation timeout for MongoDB calls."
    )

    # --- Server ---
    API_HOST: str = Field("0.0.0.0", validation_alias="API_HOST")
    PORT: int = Field(3000, validation_alias="PORT")

    # --- CORS ---
    # Comma-separated string in env var, e.g. "http://localhost:3000,https://example.com"
    BACKEND_CORS_ORIGINS: Annotated[List[str], NoDecode] = Field(
        default=["*"],
        validation_alias="BACKEND_CORS_ORIGINS"
    )

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown LOG_LEVEL: {v}")
        return level

    @field_validator("BACKEND_CORS_ORIGINS", mode='before')
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str) and v.strip().startswith("["):
            return json.loads(v)
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, list):
            return v
        raise ValueError(f"Invalid BACKEND_CORS_ORIGINS format: {v}")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore'
    )


@lru_cache()
def get_settings() -> Settings:
    """Returns the application settings instance."""
    logger.info("Attempting to load application settings...")
    try:
        settings_instance = Settings()
        logger.info(f"Settings loaded successfully for Project: {settings_instance.PROJECT_NAME}")
        logger.info(f"Log Level: {settings_instance.LOG_LEVEL}")
        logger.info(f"CORS Origins: {settings_instance.BACKEND_CORS_ORIGINS}")
        logger.info(f"MongoDB timeout: {settings_instance.MONGODB_TIMEOUT_MS} ms")
        return settings_instance
    except Exception as e:
        logger.critical(f"CRITICAL ERROR: Failed to load application settings: {e}", exc_info=True)
        raise RuntimeError(f"Could not load settings: {e}") from e
