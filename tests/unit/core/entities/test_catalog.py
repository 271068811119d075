"""
Tests pour les entites du catalogue.
"""

import pytest

from cinelib.core.entities.catalog import ExtractedMetadata, FilterCriteria, Movie


class TestMovie:
    def test_defaults(self) -> None:
        movie = Movie(title="Heat", file_link="/films/heat.mkv")
        assert movie.id is None
        assert movie.imdb_rating == 0.0
        assert movie.personal_rating == 0
        assert movie.last_view is None
        assert movie.categories == []

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"title": "Heat", "file_link": ""},
            {"title": "", "file_link": "/films/heat.mkv"},
            {"title": "  ", "file_link": "/films/heat.mkv"},
            {"title": "Heat", "file_link": "/f.mkv", "imdb_rating": 10.5},
            {"title": "Heat", "file_link": "/f.mkv", "personal_rating": -1},
        ],
    )
    def test_invalid_movie(self, kwargs) -> None:
        with pytest.raises(ValueError):
            Movie(**kwargs)


class TestValueDefaults:
    def test_extracted_metadata_defaults(self) -> None:
        metadata = ExtractedMetadata()
        assert metadata.title == "Unknown"
        assert metadata.rating == 0.0
        assert metadata.genres == ()

    def test_filter_criteria_defaults(self) -> None:
        criteria = FilterCriteria()
        assert criteria.search_text == ""
        assert criteria.min_rating == 0.0
        assert criteria.selected_categories == frozenset()
