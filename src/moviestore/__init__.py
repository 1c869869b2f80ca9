"""moviestore - in-memory CRUD store for movie records."""

from moviestore.movies import (
    CreateMovie,
    Movie,
    MovieError,
    MovieNotFoundError,
    MovieStore,
    MovieStoreConfig,
    MovieValidationError,
    UpdateMovie,
)

__version__ = "0.1.0"

__all__ = [
    "CreateMovie",
    "Movie",
    "MovieError",
    "MovieNotFoundError",
    "MovieStore",
    "MovieStoreConfig",
    "MovieValidationError",
    "UpdateMovie",
]
