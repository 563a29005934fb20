"""Tests for request schema parsing and tag normalization."""
import pytest
from pydantic import ValidationError

from cinefeel.shared.schemas.bookmark import BookmarkCreate, BookmarkUpdate, normalize_tags


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (["#Action", "  comedy ", "#", ""], ["Action", "comedy"]),
        (["##double"], ["#double"]),
        (["  #spaced  "], ["spaced"]),
        (["Drama", "drama"], ["Drama", "drama"]),
        ([], []),
    ],
)
def test_normalize_tags(raw: list[str], expected: list[str]) -> None:
    assert normalize_tags(raw) == expected


class TestBookmarkUpdate:
    def test_only_sent_fields_change(self) -> None:
        update = BookmarkUpdate.model_validate({"tags": ["x"]})
        assert update.scalar_changes() == {}
        assert update.tag_names() == ["x"]

    def test_absent_tags_means_no_tag_change(self) -> None:
        update = BookmarkUpdate.model_validate({"note": "hello"})
        assert update.scalar_changes() == {"note": "hello"}
        assert update.tag_names() is None

    def test_explicit_null_note_clears(self) -> None:
        update = BookmarkUpdate.model_validate({"note": None})
        assert update.scalar_changes() == {"note": None}

    def test_null_visibility_is_ignored(self) -> None:
        update = BookmarkUpdate.model_validate({"isPublic": None})
        assert update.scalar_changes() == {}

    def test_camel_case_visibility(self) -> None:
        update = BookmarkUpdate.model_validate({"isPublic": False})
        assert update.scalar_changes() == {"is_public": False}

    @pytest.mark.parametrize("value", ["true", 1, "yes"])
    def test_visibility_must_be_boolean(self, value: object) -> None:
        with pytest.raises(ValidationError):
            BookmarkUpdate.model_validate({"isPublic": value})

    def test_empty_tag_list_clears_tags(self) -> None:
        assert BookmarkUpdate.model_validate({"tags": []}).tag_names() == []

    def test_tags_deduplicated_in_order(self) -> None:
        update = BookmarkUpdate.model_validate({"tags": ["b", "#a", "b", "a "]})
        assert update.tag_names() == ["b", "a"]

    def test_tag_longer_than_column_rejected(self) -> None:
        with pytest.raises(ValidationError):
            BookmarkUpdate.model_validate({"tags": ["a" * 101]})

    def test_tag_length_counted_after_normalizing(self) -> None:
        update = BookmarkUpdate.model_validate({"tags": ["  #" + "a" * 100 + " "]})
        assert update.tag_names() == ["a" * 100]


def test_bookmark_create_requires_positive_id() -> None:
    with pytest.raises(ValidationError):
        BookmarkCreate.model_validate({"tmdbId": -1, "title": "Bad"})


def test_bookmark_create_rejects_id_beyond_integer_column() -> None:
    with pytest.raises(ValidationError):
        BookmarkCreate.model_validate({"tmdbId": 2**31, "title": "Too big"})

    assert BookmarkCreate.model_validate({"tmdbId": 2**31 - 1, "title": "Max"}).tmdb_id == 2**31 - 1


def test_bookmark_create_accepts_camel_case() -> None:
    bookmark = BookmarkCreate.model_validate(
        {"tmdbId": 603, "title": "The Matrix", "posterPath": "/m.jpg"},
    )
    assert bookmark.tmdb_id == 603
    assert bookmark.poster_path == "/m.jpg"
