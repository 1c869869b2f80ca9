"""Movie records and the in-memory store that owns them.

This package provides the movie models, the error hierarchy, store
configuration and the MovieStore itself.
"""

from moviestore.movies.config import (
    IdStrategy,
    MovieStoreConfig,
    UpdateMode,
    configure_logging,
    get_default_config,
    get_legacy_config,
    load_config_from_env,
)
from moviestore.movies.errors import (
    ConfigurationError,
    MovieError,
    MovieNotFoundError,
    MovieValidationError,
)
from moviestore.movies.models import CreateMovie, Movie, UpdateMovie
from moviestore.movies.store import MovieStore

__all__ = [
    "ConfigurationError",
    "CreateMovie",
    "IdStrategy",
    "Movie",
    "MovieError",
    "MovieNotFoundError",
    "MovieStore",
    "MovieStoreConfig",
    "MovieValidationError",
    "UpdateMode",
    "UpdateMovie",
    "configure_logging",
    "get_default_config",
    "get_legacy_config",
    "load_config_from_env",
]
