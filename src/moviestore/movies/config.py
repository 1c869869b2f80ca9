"""Movie store configuration models and utilities.

This module controls how the store assigns ids and applies updates, and how
it logs. The defaults avoid id reuse and keep records in place on update;
the legacy settings reproduce the historical behavior where ids were derived
from the record count and updated records moved to the end of the list.
"""

import logging
import os
from enum import Enum

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from moviestore.movies.errors import ConfigurationError
from moviestore.observability.logging import setup_logging

_TRUE_VALUES = ("true", "1", "yes")
_FALSE_VALUES = ("false", "0", "no")


class IdStrategy(str, Enum):
    """How the store picks the id of a newly created movie.

    SEQUENCE: monotonically increasing counter, ids are never reused
    LENGTH: number of records plus one, ids collide after deletions
    """

    SEQUENCE = "sequence"
    LENGTH = "length"


class UpdateMode(str, Enum):
    """How the store applies an update to an existing movie.

    IN_PLACE: merged record keeps its position
    REINSERT: record is deleted and the merged record appended at the end
    """

    IN_PLACE = "in_place"
    REINSERT = "reinsert"


class MovieStoreConfig(BaseModel):
    """Configuration for a MovieStore instance.

    Attributes:
        id_strategy: Id assignment strategy for created movies
        update_mode: How updates are applied to stored records
        log_level: Logging level name applied by configure_logging
        json_logs: Whether configure_logging renders JSON or console logs

    Example:
        >>> config = MovieStoreConfig(id_strategy=IdStrategy.LENGTH)
        >>> config.update_mode
        <UpdateMode.IN_PLACE: 'in_place'>
    """

    id_strategy: IdStrategy = Field(
        default=IdStrategy.SEQUENCE, description="Id assignment strategy"
    )
    update_mode: UpdateMode = Field(
        default=UpdateMode.IN_PLACE, description="Update application mode"
    )
    log_level: str = Field(default="INFO", description="Logging level name")
    json_logs: bool = Field(default=True, description="Render logs as JSON")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate and normalize the log level name.

        Args:
            value: The log level name to validate

        Returns:
            The upper-cased level name

        Raises:
            ValueError: If the name is not a standard logging level
        """
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level '{value}'")
        return level

    class Config:
        """Pydantic config."""

        frozen = True


def get_default_config() -> MovieStoreConfig:
    """Get the default store configuration.

    Returns:
        MovieStoreConfig with sequence ids and in-place updates
    """
    return MovieStoreConfig()


def get_legacy_config() -> MovieStoreConfig:
    """Get the configuration reproducing the historical store behavior.

    Returns:
        MovieStoreConfig with length-derived ids and reinsert-on-update
    """
    return MovieStoreConfig(id_strategy=IdStrategy.LENGTH, update_mode=UpdateMode.REINSERT)


def load_config_from_env() -> MovieStoreConfig:
    """Load store configuration from environment variables.

    Automatically loads variables from a .env file if present.

    Reads the following variables:
    - MOVIESTORE_ID_STRATEGY: sequence | length
    - MOVIESTORE_UPDATE_MODE: in_place | reinsert
    - MOVIESTORE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL
    - MOVIESTORE_JSON_LOGS: Render JSON logs (true/1/yes or false/0/no)

    Returns:
        MovieStoreConfig loaded from environment

    Raises:
        ConfigurationError: If a variable holds an unsupported value

    Example:
        >>> import os
        >>> os.environ["MOVIESTORE_ID_STRATEGY"] = "length"
        >>> load_config_from_env().id_strategy
        <IdStrategy.LENGTH: 'length'>
    """
    load_dotenv()

    id_strategy_str = os.getenv("MOVIESTORE_ID_STRATEGY", IdStrategy.SEQUENCE.value).lower()
    try:
        id_strategy = IdStrategy(id_strategy_str)
    except ValueError:
        raise ConfigurationError("MOVIESTORE_ID_STRATEGY", id_strategy_str) from None

    update_mode_str = os.getenv("MOVIESTORE_UPDATE_MODE", UpdateMode.IN_PLACE.value).lower()
    try:
        update_mode = UpdateMode(update_mode_str)
    except ValueError:
        raise ConfigurationError("MOVIESTORE_UPDATE_MODE", update_mode_str) from None

    log_level = os.getenv("MOVIESTORE_LOG_LEVEL", "INFO")
    if not isinstance(logging.getLevelName(log_level.upper()), int):
        raise ConfigurationError("MOVIESTORE_LOG_LEVEL", log_level)

    json_logs_str = os.getenv("MOVIESTORE_JSON_LOGS", "true").lower()
    if json_logs_str in _TRUE_VALUES:
        json_logs = True
    elif json_logs_str in _FALSE_VALUES:
        json_logs = False
    else:
        raise ConfigurationError("MOVIESTORE_JSON_LOGS", json_logs_str)

    return MovieStoreConfig(
        id_strategy=id_strategy,
        update_mode=update_mode,
        log_level=log_level,
        json_logs=json_logs,
    )


def configure_logging(config: MovieStoreConfig) -> None:
    """Configure structured logging from a store configuration.

    Args:
        config: Configuration whose log_level and json_logs are applied

    Example:
        >>> configure_logging(load_config_from_env())
    """
    setup_logging(log_level=config.log_level, json_logs=config.json_logs)
