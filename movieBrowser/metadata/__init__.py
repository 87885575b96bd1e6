"""
metadata
~~~~~~~~
Top-level package that bundles:

* core        – Movie dataclass, cache helpers, repository
* api_clients – TMDb client
* movie_cache_db – per-thread SQLite connections
"""

# ── core objects ──────────────────────────────────────────────────────────
from movieBrowser.metadata.core.models import Movie
from movieBrowser.metadata.core.cache  import MovieCache
from movieBrowser.metadata.core.repo   import MovieRepository

# ── storage + remote ─────────────────────────────────────────────────────
from movieBrowser.metadata.movie_cache_db          import MovieCacheDB
from movieBrowser.metadata.api_clients.tmdb_client import TMDBClient

__all__ = [
    "Movie",
    "MovieCache",
    "MovieRepository",
    "MovieCacheDB",
    "TMDBClient",
]
