from pathlib import Path
import os
from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

# Load environment variables
load_dotenv(BASE_DIR / "secret.env")

TMDB_API_KEY     = os.getenv("TMDB_API_KEY")
TMDB_BASE_URL    = os.getenv("TMDB_BASE_URL", "https://api.themoviedb.org/3")
TMDB_LANGUAGE    = os.getenv("TMDB_LANGUAGE", "en-US")
IMAGE_BASE_URL   = os.getenv("IMAGE_BASE_URL", "https://image.tmdb.org/t/p/w500")

# HTTP policy – every fetch is bounded by timeout × retries
REQUEST_TIMEOUT  = float(os.getenv("REQUEST_TIMEOUT", "10"))
REQUEST_RETRIES  = int(os.getenv("REQUEST_RETRIES", "3"))
TMDB_MIN_DELAY   = float(os.getenv("TMDB_MIN_DELAY", "0.25"))   # ≈ 4 req/sec
POPULAR_PAGES    = int(os.getenv("POPULAR_PAGES", "1"))

# Cache entries younger than this (seconds) are served without a network hit
CACHE_MAX_AGE    = float(os.getenv("CACHE_MAX_AGE", "3600"))

# File / folder paths
DATABASE_PATH    = Path(os.getenv("MOVIE_BROWSER_DB", BASE_DIR / "movies_db.sqlite"))
SCHEMA_PATH      = BASE_DIR / "metadata" / "movie_cache_schema.sql"
LOG_PATH         = Path(os.getenv("MOVIE_BROWSER_LOG", BASE_DIR / "movie_browser.log"))

# UI constants
ACCENT_COLOR     = "#3b82f6"
WINDOW_TITLE     = "Movie Browser"
