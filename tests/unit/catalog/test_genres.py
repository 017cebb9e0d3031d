"""Tests for genre reference data loading."""

from pathlib import Path

import pytest
import yaml

from podexplorer.catalog.genres import DEFAULT_GENRES, load_genres
from podexplorer.utils.errors import GenreDataError


class TestLoadGenres:
    """Tests for load_genres."""

    def test_builtin_list(self) -> None:
        genres = load_genres()
        assert [g.id for g in genres] == list(range(1, 10))
        assert genres[3].title == "Comedy"

    def test_builtin_list_is_a_copy(self) -> None:
        genres = load_genres()
        genres.clear()
        assert len(load_genres()) == len(DEFAULT_GENRES)

    def test_yaml_list(self, tmp_path: Path) -> None:
        path = tmp_path / "genres.yaml"
        path.write_text(yaml.safe_dump([{"id": 10, "title": "Sports"}]))

        genres = load_genres(path)

        assert len(genres) == 1
        assert genres[0].title == "Sports"

    def test_yaml_mapping_with_genres_key(self, tmp_path: Path) -> None:
        path = tmp_path / "genres.yaml"
        path.write_text(yaml.safe_dump({"genres": [{"id": 1, "title": "Talk"}]}))

        assert load_genres(path)[0].title == "Talk"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(GenreDataError, match="Cannot read genres"):
            load_genres(tmp_path / "missing.yaml")

    def test_invalid_entries(self, tmp_path: Path) -> None:
        path = tmp_path / "genres.yaml"
        path.write_text(yaml.safe_dump([{"id": "not-a-number", "title": "Bad"}]))

        with pytest.raises(GenreDataError, match="Invalid genre data"):
            load_genres(path)
