import argparse
import sys

from PySide6.QtWidgets import QApplication, QMessageBox

from movieBrowser.settings import DATABASE_PATH, TMDB_API_KEY
from movieBrowser.errors   import CacheError
from movieBrowser.utils    import apply_dark_palette, log_debug
from movieBrowser.metadata import MovieCache, MovieCacheDB, MovieRepository, TMDBClient
from movieBrowser.gui      import MainWindow, MovieDetailController, MovieListController, Router


def build_repository(api_key: str | None = TMDB_API_KEY, db_path=DATABASE_PATH) -> MovieRepository:
    """Wire client + cache into a repository; no globals, no singletons."""
    client = TMDBClient(api_key=api_key)
    cache  = MovieCache(MovieCacheDB(db_path))
    return MovieRepository(client, cache)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Browse TMDb's popular movies.")
    parser.add_argument(
        "--reset-cache", action="store_true",
        help="Drop and recreate the local movie cache before starting.",
    )
    parser.add_argument(
        "--db", default=str(DATABASE_PATH),
        help=f"SQLite cache file (default: {DATABASE_PATH}).",
    )
    return parser.parse_args(argv)


# ────────────────────────────────────────────────────────────────────────────
# Application entry
# ────────────────────────────────────────────────────────────────────────────
def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    app = QApplication(sys.argv[:1])
    apply_dark_palette(app)

    try:
        repository = build_repository(db_path=args.db)
    except RuntimeError as e:
        QMessageBox.critical(None, "Movie Browser", str(e))
        sys.exit(1)

    if args.reset_cache:
        try:
            repository.reset_cache()
        except CacheError as e:
            QMessageBox.warning(None, "Movie Browser", f"Could not reset cache: {e}")

    router = Router()
    window = MainWindow(
        MovieListController(repository),
        MovieDetailController(repository),
        router,
    )
    window.show()
    window.start()
    log_debug("Movie Browser started")

    # -------- run the event-loop -------------------------------------
    sys.exit(app.exec())


# Python entry-point guard
if __name__ == "__main__":
    main()
