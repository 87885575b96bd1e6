"""Tests for the Movie value object."""

import dataclasses

import pytest

from movieBrowser.metadata.core.models import Movie
from movieBrowser.utils import poster_url


class TestMovie:
    def test_equality_is_by_id(self) -> None:
        assert Movie(1, "A", "x", "/a.jpg") == Movie(1, "B", "y", "/b.jpg")
        assert Movie(1, "A") != Movie(2, "A")

    def test_hash_follows_id(self) -> None:
        assert len({Movie(1, "A"), Movie(1, "A again"), Movie(2, "B")}) == 2

    def test_is_immutable(self) -> None:
        movie = Movie(1, "A")
        with pytest.raises(dataclasses.FrozenInstanceError):
            movie.title = "changed"  # type: ignore[misc]

    def test_poster_url_joins_base(self) -> None:
        movie = Movie(1, "A", poster_path="/kqjL17yufvn9OVLyXYpvtyrFfak.jpg")
        assert movie.poster_url == "https://image.tmdb.org/t/p/w500/kqjL17yufvn9OVLyXYpvtyrFfak.jpg"

    def test_poster_url_none_without_path(self) -> None:
        assert Movie(1, "A").poster_url is None


def test_poster_url_handles_slashes() -> None:
    assert poster_url("x.jpg", base="https://img/") == "https://img/x.jpg"
    assert poster_url("/x.jpg", base="https://img") == "https://img/x.jpg"
    assert poster_url(None) is None
