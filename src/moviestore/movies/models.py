"""Movie record models.

This module defines the stored movie record and the payload models accepted
when creating and updating movies. All three allow arbitrary extra attributes
so callers can attach whatever metadata they track alongside the well-known
title, year and genres.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _reject_id(data: Any) -> Any:
    if isinstance(data, dict) and "id" in data:
        raise ValueError("id is assigned by the store and cannot be supplied")
    return data


class Movie(BaseModel):
    """A movie record held by the store.

    Attributes:
        id: Store-assigned identifier, unique among live records
        title: Movie title
        year: Release year
        genres: Genre names
    """

    model_config = ConfigDict(extra="allow")

    id: int = Field(..., ge=1)
    title: Optional[str] = None
    year: Optional[int] = None
    genres: Optional[list[str]] = None

    def fields(self) -> dict[str, Any]:
        """Return the attributes that were actually supplied, without the id.

        Returns:
            Dictionary of explicitly set fields, extra attributes included
        """
        return self.model_dump(exclude={"id"}, exclude_unset=True)


class CreateMovie(BaseModel):
    """Payload for creating a movie.

    Only ``title`` is required. Unset optional fields are not stored.
    """

    model_config = ConfigDict(extra="allow")

    title: str = Field(..., min_length=1)
    year: Optional[int] = None
    genres: Optional[list[str]] = None

    @model_validator(mode="before")
    @classmethod
    def validate_no_id(cls, data: Any) -> Any:
        """Reject payloads that try to pick their own id."""
        return _reject_id(data)


class UpdateMovie(BaseModel):
    """Partial payload for updating a movie.

    Every field is optional; only the fields present in the payload are
    merged over the stored record.
    """

    model_config = ConfigDict(extra="allow")

    title: Optional[str] = Field(default=None, min_length=1)
    year: Optional[int] = None
    genres: Optional[list[str]] = None

    @model_validator(mode="before")
    @classmethod
    def validate_no_id(cls, data: Any) -> Any:
        """Reject payloads that try to change the id."""
        return _reject_id(data)

    def changes(self) -> dict[str, Any]:
        """Return only the fields present in the payload."""
        return self.model_dump(exclude_unset=True)
