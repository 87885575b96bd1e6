"""
metadata.core
~~~~~~~~~~~~~
Domain layer – Movie dataclass, SQLite cache and repository.
"""

from .models import Movie
from .cache  import MovieCache
from .repo   import MovieRepository

__all__ = ["Movie", "MovieCache", "MovieRepository"]
