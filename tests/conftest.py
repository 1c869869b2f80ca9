"""Pytest configuration and shared fixtures for the test suite."""

import pytest

from moviestore.movies.store import MovieStore


@pytest.fixture
def store() -> MovieStore:
    """Create a store with the default configuration.

    Returns:
        Empty MovieStore using sequence ids and in-place updates
    """
    return MovieStore()


@pytest.fixture
def legacy_store() -> MovieStore:
    """Create a store reproducing the historical behavior.

    Returns:
        Empty MovieStore using length-derived ids and reinsert updates
    """
    return MovieStore.legacy()
