"""Tests for movie record and payload models."""

import pytest
from pydantic import ValidationError

from moviestore.movies.models import CreateMovie, Movie, UpdateMovie


class TestMovie:
    """Tests for the Movie record."""

    def test_fields_excludes_id_and_unset(self) -> None:
        """fields() should return only the supplied attributes."""
        movie = Movie(id=3, title="Solaris", studio="Mosfilm")

        assert movie.fields() == {"title": "Solaris", "studio": "Mosfilm"}

    def test_id_must_be_positive(self) -> None:
        """Ids start at 1."""
        with pytest.raises(ValidationError):
            Movie(id=0, title="Zero")


class TestCreateMovie:
    """Tests for the CreateMovie payload."""

    def test_title_required(self) -> None:
        """A create payload needs a non-empty title."""
        with pytest.raises(ValidationError):
            CreateMovie(year=1968)
        with pytest.raises(ValidationError):
            CreateMovie(title="")

    def test_id_rejected(self) -> None:
        """A create payload cannot carry an id."""
        with pytest.raises(ValidationError):
            CreateMovie(id=1, title="A")

    def test_extra_attributes_allowed(self) -> None:
        """Unknown attributes should be kept."""
        payload = CreateMovie(title="A", language="fr")

        assert payload.model_dump(exclude_unset=True) == {"title": "A", "language": "fr"}


class TestUpdateMovie:
    """Tests for the UpdateMovie payload."""

    def test_empty_update(self) -> None:
        """An empty payload has no changes."""
        assert UpdateMovie().changes() == {}

    def test_changes_only_include_supplied_fields(self) -> None:
        """changes() should skip fields that were not supplied."""
        payload = UpdateMovie(genres=["western"])

        assert payload.changes() == {"genres": ["western"]}

    def test_explicit_none_is_a_change(self) -> None:
        """Explicitly clearing a field should count as a change."""
        assert UpdateMovie(year=None).changes() == {"year": None}

    def test_id_rejected(self) -> None:
        """An update payload cannot carry an id."""
        with pytest.raises(ValidationError):
            UpdateMovie.model_validate({"id": 2})
