"""metadata.core.repo
Repository that reconciles the TMDb client with the local cache.

Read path: fresh cache → remote (written through) → stale cache → error.
"""

from __future__ import annotations
import time
from typing import List

from movieBrowser.errors import (
    CacheError,
    DataUnavailableError,
    MovieDataError,
    NotFoundError,
)
from movieBrowser.metadata.api_clients.tmdb_client import TMDBClient
from movieBrowser.metadata.core.cache import MovieCache
from movieBrowser.metadata.core.models import Movie
from movieBrowser.settings import CACHE_MAX_AGE
from movieBrowser.utils import log_debug


class MovieRepository:
    """Serve popular-list and detail queries from cache or TMDb."""

    def __init__(
        self,
        remote: TMDBClient,
        cache: MovieCache,
        max_age: float = CACHE_MAX_AGE,
        clock=time.time,
    ) -> None:
        self.remote  = remote
        self.cache   = cache
        self.max_age = max_age
        self._clock  = clock

    def _is_fresh(self, stamp: float | None) -> bool:
        return stamp is not None and (self._clock() - stamp) < self.max_age

    # ───────────────────────────── list ──────────────────────────────
    def get_popular_movies(self, force_refresh: bool = False) -> List[Movie]:
        """
        Popular movies in TMDb rank order.

        Raises
        ------
        DataUnavailableError
            Remote failed and nothing was ever cached.
        """
        cached: List[Movie] = []
        stamp = None
        try:
            stamp  = self.cache.popular_fetched_at()
            cached = self.cache.popular()
        except CacheError as e:
            log_debug(f"popular: cache read failed: {e}")
            stamp, cached = None, []

        if not force_refresh and self._is_fresh(stamp):
            log_debug(f"popular: {len(cached)} movies from cache")
            return cached

        try:
            movies = self.remote.popular_movies()
        except MovieDataError as e:
            if stamp is not None:
                log_debug(f"popular: remote failed ({e}); serving stale cache")
                return cached
            raise DataUnavailableError(f"Popular movies unavailable: {e}") from e

        try:
            self.cache.replace_popular(movies)
        except CacheError as e:
            log_debug(f"popular: write-through failed: {e}")
        return movies

    # ───────────────────────────── detail ────────────────────────────
    def get_movie(self, movie_id: int, force_refresh: bool = False) -> Movie:
        """
        A single movie by TMDb id.

        Raises
        ------
        NotFoundError
            TMDb has no such id and it was never cached.
        DataUnavailableError
            Remote failed for any other reason and nothing was cached.
        """
        cached = None
        stamp  = None
        try:
            cached = self.cache.by_id(movie_id)
            stamp  = self.cache.fetched_at(movie_id) if cached else None
        except CacheError as e:
            log_debug(f"movie {movie_id}: cache read failed: {e}")
            cached, stamp = None, None

        if cached and not force_refresh and self._is_fresh(stamp):
            return cached

        try:
            movie = self.remote.movie(movie_id)
        except NotFoundError:
            if cached:
                log_debug(f"movie {movie_id}: gone upstream; serving cached row")
                return cached
            raise
        except MovieDataError as e:
            if cached:
                log_debug(f"movie {movie_id}: remote failed ({e}); serving stale cache")
                return cached
            raise DataUnavailableError(f"Movie {movie_id} unavailable: {e}") from e

        try:
            self.cache.upsert_movie(movie)
        except CacheError as e:
            log_debug(f"movie {movie_id}: write-through failed: {e}")
        return movie

    # ───────────────────────────── maintenance ───────────────────────
    def reset_cache(self) -> None:
        """Drop and recreate the local store."""
        self.cache.reset()

    def release_thread(self) -> None:
        """Close whatever the calling worker thread opened on the cache."""
        try:
            self.cache.release_thread()
        except CacheError as e:
            log_debug(f"release_thread: {e}")
