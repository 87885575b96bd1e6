"""
Pytest configuration and shared fixtures for Movie Browser tests.

Environment variables are set BEFORE any movieBrowser import so settings
pick them up (no secret.env needed in CI).
"""

from __future__ import annotations

import os
import tempfile
import threading
from collections.abc import Generator
from pathlib import Path

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ["TMDB_MIN_DELAY"] = "0"
os.environ.setdefault("TMDB_API_KEY", "test_api_key_for_ci_testing_only")  # pragma: allowlist secret
os.environ.setdefault(
    "MOVIE_BROWSER_LOG", str(Path(tempfile.gettempdir()) / "movie_browser_tests.log")
)

from movieBrowser.errors import NetworkError, NotFoundError  # noqa: E402
from movieBrowser.metadata.core.cache import MovieCache  # noqa: E402
from movieBrowser.metadata.core.models import Movie  # noqa: E402
from movieBrowser.metadata.movie_cache_db import MovieCacheDB  # noqa: E402


DUNE   = Movie(693134, "Dune: Part Two", "Paul Atreides unites with Chani.", "/1pdfLvkbY9ohJlCjQH2CZjjYVvJ.jpg")
ALIEN  = Movie(945961, "Alien: Romulus", "Space colonizers face a terrifying life form.", "/b33nnKl1GSFbao4l3fZDDqsMx0F.jpg")
FORTY2 = Movie(42, "The Answer", "A film about everything.", "/answer.jpg")


class FakeRemote:
    """Stands in for TMDBClient; counts calls and can be told to fail."""

    def __init__(self, popular=None, movies=None):
        self.popular = list(popular or [])
        self.movies  = {m.id: m for m in (movies or [])}
        self.error: Exception | None = None
        self.popular_calls = 0
        self.movie_calls   = 0

    def popular_movies(self):
        self.popular_calls += 1
        if self.error:
            raise self.error
        return list(self.popular)

    def movie(self, movie_id):
        self.movie_calls += 1
        if self.error:
            raise self.error
        try:
            return self.movies[movie_id]
        except KeyError:
            raise NotFoundError(movie_id) from None


class FakeRepository:
    """Stands in for MovieRepository in controller / window tests."""

    def __init__(self, popular=None, movies=None, error: Exception | None = None):
        self.popular = list(popular or [])
        self.movies  = {m.id: m for m in (movies or [])}
        self.error   = error
        self.released: list[str] = []

    def release_thread(self):
        self.released.append(threading.current_thread().name)

    def get_popular_movies(self, force_refresh=False):
        if self.error:
            raise self.error
        return list(self.popular)

    def get_movie(self, movie_id, force_refresh=False):
        if self.error:
            raise self.error
        if movie_id not in self.movies:
            raise NotFoundError(movie_id)
        return self.movies[movie_id]


class Clock:
    """Manually advanced replacement for time.time."""

    def __init__(self, start: float = 1_700_000_000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for cache files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def cache_db(temp_dir: Path) -> Generator[MovieCacheDB, None, None]:
    db = MovieCacheDB(temp_dir / "movies_db.sqlite")
    yield db
    db.close()


@pytest.fixture
def clock() -> Clock:
    return Clock()


@pytest.fixture
def cache(cache_db: MovieCacheDB, clock: Clock) -> MovieCache:
    return MovieCache(cache_db, clock=clock)


@pytest.fixture
def remote() -> FakeRemote:
    return FakeRemote(popular=[DUNE, ALIEN], movies=[DUNE, ALIEN, FORTY2])


@pytest.fixture
def network_down() -> NetworkError:
    return NetworkError("Could not reach TMDb: connection refused")
