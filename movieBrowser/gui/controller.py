from __future__ import annotations
from typing import Any, Callable, Dict, Tuple

from PySide6.QtCore import QObject, QThread, Slot

from movieBrowser.gui.state   import Error, Loading, RequestState, StateStore
from movieBrowser.gui.workers import _FetchWorker
from movieBrowser.metadata.core.repo import MovieRepository
from movieBrowser.utils import log_debug


class _StateController(QObject):
    """
    Owns one `StateStore` and feeds it from background fetches.

    Each request takes a new token. A newer request supersedes every older
    one still in flight: the old worker is asked to stop and whatever it
    reports afterwards is dropped, so subscribers only ever see
    Loading → terminal for the latest request.
    """

    def __init__(self, repository: MovieRepository, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.repository = repository
        self._store  = StateStore(Loading(), self)
        self._token  = 0
        self._threads: Dict[int, Tuple[QThread, _FetchWorker]] = {}

    @property
    def state(self) -> StateStore:
        """Read-only handle; subscribe to it, never publish."""
        return self._store

    @property
    def is_busy(self) -> bool:
        return bool(self._threads)

    # ------------------------------------------------------------------
    def _next_token(self) -> int:
        self._token += 1
        for thr, _worker in self._threads.values():
            thr.requestInterruption()
        return self._token

    def _request(self, job: Callable[[], Any], label: str) -> None:
        token = self._next_token()
        self._store.publish(Loading())
        self._start_worker(_FetchWorker(token, job, label, self.repository.release_thread))

    def _fail(self, message: str) -> None:
        """Loading → Error without touching the network."""
        self._next_token()
        self._store.publish(Loading())
        self._store.publish(Error(message))

    def _start_worker(self, worker: _FetchWorker) -> None:
        thr = QThread()
        worker.moveToThread(thr)

        worker.finished.connect(self._on_finished)
        worker.finished.connect(thr.quit)
        thr.finished.connect(self._reap_threads)

        thr.started.connect(worker.run)
        self._threads[worker.token] = (thr, worker)
        thr.start()

    @Slot(int, object)
    def _on_finished(self, token: int, state: RequestState) -> None:
        if token != self._token:
            log_debug(f"{self.__class__.__name__}: dropped result of superseded request #{token}")
            return
        self._store.publish(state)

    @Slot()
    def _reap_threads(self) -> None:
        for token, (thr, worker) in list(self._threads.items()):
            if thr.isFinished():
                del self._threads[token]
                worker.deleteLater()
                thr.deleteLater()

    def shutdown(self, timeout_ms: int = 5000) -> None:
        """Stop accepting results and join every worker thread."""
        self._token += 1
        for thr, _worker in list(self._threads.values()):
            thr.requestInterruption()
            thr.quit()
            if not thr.wait(timeout_ms):
                log_debug(f"{self.__class__.__name__}: worker did not stop in {timeout_ms} ms")
        self._reap_threads()


# ───────────────────────── Controllers exposed to UI ───────────────────────
class MovieListController(_StateController):
    """Popular-movies list; payload is a tuple of Movie in rank order."""

    def load_list(self, force_refresh: bool = False) -> None:
        self._request(
            lambda: tuple(self.repository.get_popular_movies(force_refresh=force_refresh)),
            "load_list",
        )


class MovieDetailController(_StateController):
    """Single movie detail; payload is the Movie for `movie_id`."""

    def __init__(self, repository: MovieRepository, parent: QObject | None = None) -> None:
        super().__init__(repository, parent)
        self.movie_id: int | None = None

    def find_movie(self, movie_id: str, force_refresh: bool = False) -> None:
        """Parse *movie_id* (route arguments are strings) and fetch it."""
        try:
            mid = int(str(movie_id).strip())
            if mid <= 0:
                raise ValueError(movie_id)
        except ValueError:
            self.movie_id = None
            self._fail(f"Invalid movie id '{movie_id}'")
            return

        self.movie_id = mid
        self._request(
            lambda: self.repository.get_movie(mid, force_refresh=force_refresh),
            f"find_movie({mid})",
        )
