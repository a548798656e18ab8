"""
Pydantic schema definitions for the movies module.

JSON bodies use camelCase keys (``releaseYear``, ``averageRating``) while
the Python attributes are snake_case; every model accepts either form on
input and FastAPI serialises responses by alias.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CreateMovieRequest(BaseModel):
    """Candidate fields for a new movie.

    Every field is optional at the schema level so that a missing field
    reaches the store and is reported as "Missing required fields"
    rather than as a generic body error.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    title: Optional[str] = None
    director: Optional[str] = None
    release_year: Optional[int] = Field(default=None, alias="releaseYear")
    genre: Optional[str] = None


class MovieUpdate(BaseModel):
    """Partial update of a movie.

    Only the descriptive fields can change. ``id`` and ``ratings`` are
    not part of the model, so they are dropped if a client sends them.
    A field sent as ``null`` is treated the same as an absent field.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    director: Optional[str] = None
    release_year: Optional[int] = Field(default=None, alias="releaseYear")
    genre: Optional[str] = None

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True, exclude_none=True)


class Movie(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    director: str
    release_year: int = Field(alias="releaseYear")
    genre: str
    # Submission order is kept; only used for averaging.
    ratings: List[int] = Field(default_factory=list)

    @property
    def average_rating(self) -> Optional[float]:
        if not self.ratings:
            return None
        return sum(self.ratings) / len(self.ratings)


class RatingRequest(BaseModel):
    # Strict so that JSON booleans are not taken as 0 or 1.
    rating: int = Field(strict=True)


class AverageRating(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    average_rating: float = Field(alias="averageRating")


class Message(BaseModel):
    message: str


class ErrorMessage(BaseModel):
    error: str
