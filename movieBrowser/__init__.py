"""
movieBrowser
~~~~~~~~~~~~

Top-level package for the Movie Browser application.

Exports:
  - TMDB_API_KEY, DATABASE_PATH
  - Utility functions: log_debug, poster_url, apply_dark_palette
  - Data layer: Movie, MovieRepository
"""

# settings
from movieBrowser.settings import TMDB_API_KEY, DATABASE_PATH

# utils
from movieBrowser.utils import (
    log_debug,
    poster_url,
    apply_dark_palette,
)

# data layer
from movieBrowser.metadata import Movie, MovieRepository

__all__ = [
    # settings
    "TMDB_API_KEY",
    "DATABASE_PATH",
    # utils
    "log_debug",
    "poster_url",
    "apply_dark_palette",
    # data layer
    "Movie",
    "MovieRepository",
]
