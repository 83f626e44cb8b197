# movies_lib/models/movie.py

from datetime import date, datetime
from typing import Annotated, Any, List

from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Base Model ---
class MovieBase(BaseModel):
    """Common attributes of a movie record."""
    title: str = Field(..., min_length=1, description="Movie title, also used as its lookup key.")
    genre: List[Annotated[str, Field(min_length=1)]] = Field(
        ..., min_length=1, description="Free-text genre names, not linked to the genres collection."
    )
    releaseDate: date = Field(..., description="Release date (YYYY-MM-DD).")
    description: str = Field(..., min_length=1, description="Short synopsis of the movie.")

    @field_validator("releaseDate", mode="before")
    @classmethod
    def coerce_release_date(cls, v: Any) -> Any:
        # BSON has no date type, the store hands back midnight datetimes
        if isinstance(v, datetime):
            return v.date()
        return v


# --- Model for Creating Movies (API Request Body) ---
class MovieCreate(MovieBase):
    """Request body for POST /movies."""
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "The Matrix",
                "genre": ["Action", "Adventure", "Science Fiction"],
                "releaseDate": "1999-03-31",
                "description": "A classic sci-fi movie.",
            }
        }
    )

    @field_validator("releaseDate", mode="before")
    @classmethod
    def accept_datetime_strings(cls, v: Any) -> Any:
        # "1999-03-31T00:00:00Z" is accepted as well as a bare date
        if isinstance(v, str) and "T" in v:
            return datetime.fromisoformat(v.replace("Z", "+00:00")).date()
        return v


# --- Model for API Responses ---
class MovieRead(MovieBase):
    """A stored movie as returned by the API."""
    id: str = Field(..., description="Internal database ID (MongoDB ObjectId as string).")

    @classmethod
    def from_document(cls, doc: dict) -> "MovieRead":
        """Builds the response model from a raw store document, mapping _id to id."""
        return cls(id=str(doc["_id"]), **{k: v for k, v in doc.items() if k != "_id"})
