from __future__ import annotations

from typing import Any, List

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from movieBrowser.errors import DeserializationError, NetworkError, NotFoundError
from movieBrowser.metadata.core.models import Movie
from movieBrowser.settings import (
    TMDB_API_KEY,
    TMDB_BASE_URL,
    TMDB_LANGUAGE,
    TMDB_MIN_DELAY,
    POPULAR_PAGES,
    REQUEST_RETRIES,
    REQUEST_TIMEOUT,
)
from movieBrowser.utils import log_debug, throttle


def _build_session(retries: int) -> requests.Session:
    """requests.Session that retries throttled / flaky TMDb answers."""
    session = requests.Session()
    retry_strategy = Retry(
        total=retries,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=["GET"],
        backoff_factor=0.5,               # 0.5s, 1s, 2s …
        respect_retry_after_header=True,
        raise_on_status=False,            # hand the last response back to us
    )
    adapter = HTTPAdapter(max_retries=retry_strategy)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    session.headers["Accept"] = "application/json"
    return session


def _parse_movie(item: Any) -> Movie:
    """Turn one TMDb movie JSON object into a `Movie`."""
    if not isinstance(item, dict):
        raise DeserializationError(f"Expected a movie object, got {type(item).__name__}")
    try:
        movie_id = item["id"]
        title    = item["title"]
    except KeyError as e:
        raise DeserializationError(f"Movie payload missing field {e}") from e
    if not isinstance(movie_id, int) or isinstance(movie_id, bool):
        raise DeserializationError(f"Movie id must be an integer, got {movie_id!r}")
    if not isinstance(title, str):
        raise DeserializationError(f"Movie {movie_id} has no usable title")
    return Movie(
        id=movie_id,
        title=title,
        description=item.get("overview") or "",
        poster_path=item.get("poster_path") or "",
    )


class TMDBClient:
    """Thin wrapper around The Movie Database (TMDb) popular / detail endpoints."""

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    def __init__(
        self,
        api_key: str | None = TMDB_API_KEY,
        session: requests.Session | None = None,
        base_url: str = TMDB_BASE_URL,
        language: str = TMDB_LANGUAGE,
        timeout: float = REQUEST_TIMEOUT,
        retries: int = REQUEST_RETRIES,
    ):
        self.api_key = api_key
        if not self.api_key:
            raise RuntimeError("No TMDB api key passed (set TMDB_API_KEY in secret.env)")
        self.base_url = base_url.rstrip("/")
        self.language = language
        self.timeout  = timeout
        self.session  = session or _build_session(retries)

    @throttle(min_delay=TMDB_MIN_DELAY)
    def _get(self, path: str, **params) -> Any:
        """GET *path* and return decoded JSON, mapping failures to our errors."""
        params["api_key"] = self.api_key
        params.setdefault("language", self.language)
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            log_debug(f"TMDb {path} unreachable: {e}")
            raise NetworkError(f"Could not reach TMDb: {e}") from e

        if resp.status_code == 404:
            raise NotFoundError(path.rsplit("/", 1)[-1])
        if not resp.ok:
            log_debug(f"TMDb {path} → HTTP {resp.status_code}")
            raise NetworkError(f"TMDb answered HTTP {resp.status_code} for {path}")

        try:
            return resp.json()
        except ValueError as e:
            raise DeserializationError(f"TMDb sent invalid JSON for {path}") from e

    # ------------------------------------------------------------------
    # Public
    # ------------------------------------------------------------------
    def popular_movies(self, pages: int = POPULAR_PAGES) -> List[Movie]:
        """
        Return TMDb's popular list, pages 1‥*pages*, in the order TMDb ranks
        them. A film repeated on a later page keeps its first position.
        """
        movies: List[Movie] = []
        seen: set[int] = set()
        for page in range(1, max(pages, 1) + 1):
            payload = self._get("/movie/popular", page=page)
            if not isinstance(payload, dict) or not isinstance(payload.get("results"), list):
                raise DeserializationError("Popular list payload has no 'results' array")
            for item in payload["results"]:
                movie = _parse_movie(item)
                if movie.id not in seen:
                    seen.add(movie.id)
                    movies.append(movie)
            total = payload.get("total_pages", 1)
            if isinstance(total, bool) or not isinstance(total, int):
                raise DeserializationError(f"Popular list payload has a bad 'total_pages': {total!r}")
            if page >= total:
                break
        log_debug(f"TMDb → {len(movies)} popular movies")
        return movies

    def movie(self, movie_id: int) -> Movie:
        """Fetch a single movie; `NotFoundError` if TMDb has no such id."""
        try:
            payload = self._get(f"/movie/{movie_id}")
        except NotFoundError:
            raise NotFoundError(movie_id) from None
        movie = _parse_movie(payload)
        log_debug(f"TMDb → matched ID={movie.id} “{movie.title}”")
        return movie
