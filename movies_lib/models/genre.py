# movies_lib/models/genre.py

from pydantic import BaseModel, ConfigDict, Field

GENRE_NAME_MIN_LENGTH = 3
GENRE_NAME_MAX_LENGTH = 30


class GenreBase(BaseModel):
    name: str = Field(..., description="Genre name.")


class GenreCreate(GenreBase):
    """Request body for POST /genres; the name must be 3 to 30 characters long."""
    name: str = Field(
        ...,
        min_length=GENRE_NAME_MIN_LENGTH,
        max_length=GENRE_NAME_MAX_LENGTH,
        description="Genre name (3-30 characters).",
    )

    model_config = ConfigDict(json_schema_extra={"example": {"name": "Action"}})


class GenreRead(GenreBase):
    """A stored genre as returned by the API."""
    id: str = Field(..., description="Internal database ID (MongoDB ObjectId as string).")

    @classmethod
    def from_document(cls, doc: dict) -> "GenreRead":
        return cls(id=str(doc["_id"]), name=doc["name"])
