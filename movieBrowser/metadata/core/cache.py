"""metadata.core.cache
Local movie cache.

All SQL lives here; the repository talks to this class instead of touching
`sqlite3` directly. Any `sqlite3.Error` leaves as `CacheError`.
"""

from __future__ import annotations
import functools
import sqlite3
import time
from typing import Iterable, List, Optional

from movieBrowser.errors import CacheError
from movieBrowser.metadata.core.models import Movie
from movieBrowser.metadata.movie_cache_db import MovieCacheDB

_POPULAR_KEY = "popular_fetched_at"


def _guard(fn):
    """Re-raise sqlite failures as CacheError."""
    @functools.wraps(fn)
    def inner(*a, **kw):
        try:
            return fn(*a, **kw)
        except sqlite3.Error as e:
            raise CacheError(f"Cache {fn.__name__} failed: {e}") from e
    return inner


def _row_to_movie(row: sqlite3.Row) -> Movie:
    return Movie(
        id=row["id"],
        title=row["title"],
        description=row["description"],
        poster_path=row["poster_path"],
    )


class MovieCache:
    """CRUD helpers for cached Movie rows."""

    def __init__(self, db: MovieCacheDB, clock=time.time) -> None:
        self.db = db
        self._clock = clock

    # ───────────────────────────── writers ──────────────────────────
    @_guard
    def upsert_movie(self, movie: Movie) -> None:
        """Insert *movie* or overwrite the row with the same id.

        An existing `popular_rank` is left untouched.
        """
        with self.db.transaction():
            self._upsert(movie, self._clock())

    @_guard
    def upsert_movies(self, movies: Iterable[Movie]) -> None:
        now = self._clock()
        with self.db.transaction():
            for movie in movies:
                self._upsert(movie, now)

    @_guard
    def replace_popular(self, movies: List[Movie]) -> None:
        """Store *movies* as the popular list, rank = list position.

        Rows that drop off the list keep their data but lose their rank.
        The list timestamp is written even when *movies* is empty.
        """
        now = self._clock()
        with self.db.transaction():
            self.db.execute("UPDATE movies SET popular_rank=NULL WHERE popular_rank IS NOT NULL")
            for rank, movie in enumerate(movies):
                self._upsert(movie, now)
                self.db.execute(
                    "UPDATE movies SET popular_rank=? WHERE id=?", (rank, movie.id)
                )
            self._set_kv(_POPULAR_KEY, repr(now))

    def _upsert(self, movie: Movie, fetched_at: float) -> None:
        self.db.execute(
            "INSERT INTO movies (id, title, description, poster_path, fetched_at)"
            " VALUES (?,?,?,?,?)"
            " ON CONFLICT(id) DO UPDATE SET"
            "   title=excluded.title,"
            "   description=excluded.description,"
            "   poster_path=excluded.poster_path,"
            "   fetched_at=excluded.fetched_at",
            (*movie.as_row(), fetched_at),
        )

    @_guard
    def reset(self) -> None:
        self.db.reset()

    @_guard
    def release_thread(self) -> None:
        self.db.detach_thread()

    # ───────────────────────────── look-ups ──────────────────────────
    @_guard
    def by_id(self, movie_id: int) -> Optional[Movie]:
        """Return the cached `Movie` for *movie_id* or **None** if not found."""
        row = self.db.execute("SELECT * FROM movies WHERE id=?", (movie_id,)).fetchone()
        return _row_to_movie(row) if row else None

    @_guard
    def popular(self) -> List[Movie]:
        """Cached popular list, in rank order."""
        rows = self.db.execute(
            "SELECT * FROM movies WHERE popular_rank IS NOT NULL ORDER BY popular_rank"
        ).fetchall()
        return [_row_to_movie(r) for r in rows]

    @_guard
    def all_movies(self) -> List[Movie]:
        rows = self.db.execute("SELECT * FROM movies ORDER BY id").fetchall()
        return [_row_to_movie(r) for r in rows]

    @_guard
    def fetched_at(self, movie_id: int) -> Optional[float]:
        row = self.db.execute(
            "SELECT fetched_at FROM movies WHERE id=?", (movie_id,)
        ).fetchone()
        return row["fetched_at"] if row else None

    def popular_fetched_at(self) -> Optional[float]:
        """When the popular list was last stored, or None if never."""
        value = self.get_kv(_POPULAR_KEY)
        return float(value) if value is not None else None

    @_guard
    def count(self) -> int:
        return self.db.execute("SELECT COUNT(*) AS n FROM movies").fetchone()["n"]

    # ───────────────────────── kv  (list timestamps etc.) ───────────────
    @_guard
    def get_kv(self, key: str) -> str | None:
        row = self.db.execute("SELECT value FROM kv_store WHERE key=?", (key,)).fetchone()
        return row["value"] if row else None

    @_guard
    def set_kv(self, key: str, value: str) -> None:
        with self.db.transaction():
            self._set_kv(key, value)

    def _set_kv(self, key: str, value: str) -> None:
        self.db.execute(
            "INSERT OR REPLACE INTO kv_store(key, value) VALUES(?,?)",
            (key, value)
        )
