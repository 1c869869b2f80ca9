"""In-memory movie store.

This module provides the list-backed store that owns every movie record of
the process. It is synchronous and holds no locks: callers sharing a store
between threads must serialize access themselves.
"""

from collections.abc import Mapping
from typing import Any, Optional, Union

from pydantic import BaseModel, ValidationError

from moviestore.movies.config import (
    IdStrategy,
    MovieStoreConfig,
    UpdateMode,
    get_default_config,
    get_legacy_config,
)
from moviestore.movies.errors import MovieNotFoundError, MovieValidationError
from moviestore.movies.models import CreateMovie, Movie, UpdateMovie
from moviestore.observability.logging import get_logger

CreatePayload = Union[CreateMovie, Mapping[str, Any]]
UpdatePayload = Union[UpdateMovie, Mapping[str, Any]]


def _validate_payload(data: Any, model: type[BaseModel]) -> BaseModel:
    """Coerce a mapping or another model into the given payload model.

    Raises:
        MovieValidationError: If the payload does not validate
    """
    if isinstance(data, model):
        return data
    if isinstance(data, BaseModel):
        data = data.model_dump(exclude_unset=True)
    try:
        return model.model_validate(dict(data))
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        raise MovieValidationError(
            message=first["msg"],
            field=field,
            details={"errors": e.errors(include_url=False)},
        ) from e
    except (TypeError, ValueError) as e:
        raise MovieValidationError(
            message=f"expected a mapping of movie attributes, got {type(data).__name__}"
        ) from e


class MovieStore:
    """In-memory store of movie records.

    Records are kept in a list in insertion order. Lookups are linear scans,
    which keeps the store faithful to its ordering guarantees without an
    auxiliary index to maintain.

    Attributes:
        config: Store configuration (id strategy and update mode)
        _movies: Ordered list of stored Movie records
        _last_id: Highest id handed out by the sequence strategy
    """

    def __init__(self, config: Optional[MovieStoreConfig] = None) -> None:
        """Initialize an empty store.

        Args:
            config: Store configuration, defaults to get_default_config()
        """
        self.config = config or get_default_config()
        self._movies: list[Movie] = []
        self._last_id = 0
        self._logger = get_logger(__name__)

    @classmethod
    def legacy(cls) -> "MovieStore":
        """Create a store with length-derived ids and reinsert-on-update."""
        return cls(config=get_legacy_config())

    def __len__(self) -> int:
        return len(self._movies)

    @property
    def count(self) -> int:
        """Number of live records."""
        return len(self._movies)

    def get_all(self) -> list[Movie]:
        """Return every stored movie in store order.

        Returns:
            List of copies of the stored records
        """
        return [movie.model_copy(deep=True) for movie in self._movies]

    def get_one(self, movie_id: int) -> Movie:
        """Retrieve the first movie with the given id.

        Args:
            movie_id: Id of the movie to look up

        Returns:
            Copy of the stored record

        Raises:
            MovieNotFoundError: If no movie has that id
        """
        return self._find(movie_id).model_copy(deep=True)

    def create(self, data: CreatePayload) -> int:
        """Store a new movie.

        Args:
            data: CreateMovie payload or a mapping of movie attributes

        Returns:
            The total number of records after the insert (not the new id)

        Raises:
            MovieValidationError: If the payload is invalid or carries an id
        """
        payload = _validate_payload(data, CreateMovie)
        movie_id = self._next_id()
        if self.config.id_strategy == IdStrategy.LENGTH and self._contains(movie_id):
            self._logger.warning("duplicate_movie_id", movie_id=movie_id)

        self._movies.append(Movie(id=movie_id, **payload.model_dump(exclude_unset=True)))
        self._logger.info("movie_created", movie_id=movie_id, count=len(self._movies))
        return len(self._movies)

    def delete_one(self, movie_id: int) -> dict[str, int]:
        """Delete every movie with the given id.

        Ids are unique under the sequence strategy, so this removes a single
        record there. Survivors keep their relative order.

        Args:
            movie_id: Id of the movie to delete

        Returns:
            Dictionary echoing the deleted id

        Raises:
            MovieNotFoundError: If no movie has that id
        """
        self.get_one(movie_id)
        before = len(self._movies)
        self._movies = [movie for movie in self._movies if movie.id != movie_id]
        removed = before - len(self._movies)
        self._logger.info("movie_deleted", movie_id=movie_id, removed=removed)
        return {"id": movie_id}

    def update(self, movie_id: int, data: UpdatePayload) -> None:
        """Merge new field values over an existing movie.

        Fields absent from the payload keep their stored values and the id is
        always preserved. In REINSERT mode the merged record moves to the end
        of the store.

        Args:
            movie_id: Id of the movie to update
            data: UpdateMovie payload or a mapping of changed attributes

        Raises:
            MovieNotFoundError: If no movie has that id
            MovieValidationError: If the payload is invalid or carries an id
        """
        existing = self.get_one(movie_id)
        changes = _validate_payload(data, UpdateMovie).changes()
        merged = Movie(id=existing.id, **{**existing.fields(), **changes})

        if self.config.update_mode == UpdateMode.REINSERT:
            self.delete_one(movie_id)
            self._movies.append(merged)
        else:
            position = next(i for i, movie in enumerate(self._movies) if movie.id == movie_id)
            self._movies[position] = merged

        self._logger.info("movie_updated", movie_id=movie_id, fields=sorted(changes))

    def clear(self) -> None:
        """Drop every record and restart the id sequence."""
        self._movies = []
        self._last_id = 0

    def _find(self, movie_id: int) -> Movie:
        for movie in self._movies:
            if movie.id == movie_id:
                return movie
        self._logger.debug("movie_not_found", movie_id=movie_id)
        raise MovieNotFoundError(movie_id)

    def _contains(self, movie_id: int) -> bool:
        return any(movie.id == movie_id for movie in self._movies)

    def _next_id(self) -> int:
        if self.config.id_strategy == IdStrategy.LENGTH:
            return len(self._movies) + 1
        self._last_id += 1
        return self._last_id
