from __future__ import annotations
from typing import Any, Callable

from PySide6.QtCore import QObject, Signal, Slot

from movieBrowser.errors import MovieDataError
from movieBrowser.gui.state import Error, RequestState, Successful
from movieBrowser.utils import log_debug


# ───────────────────────── Worker skeleton ────────────────────────────────
class _FetchWorker(QObject):
    """
    Runs one repository call on its QThread and reports a terminal state.

    `finished` carries the request token so the controller can drop answers
    to requests that were superseded while this one was in flight.
    """
    finished = Signal(int, object)     # token, RequestState

    def __init__(self, token: int, job: Callable[[], Any], label: str,
                 cleanup: Callable[[], None] | None = None):
        super().__init__()
        self.token   = token
        self.job     = job
        self.label   = label
        self.cleanup = cleanup

    @Slot()
    def run(self):
        try:
            state = self._run()
        finally:
            if self.cleanup is not None:
                self.cleanup()
        self.finished.emit(self.token, state)

    def _run(self) -> RequestState:
        try:
            return Successful(self.job())
        except MovieDataError as e:
            log_debug(f"{self.label} #{self.token} failed: {e}")
            return Error(str(e) or e.__class__.__name__)
        except Exception as e:
            log_debug(f"{self.label} #{self.token} worker error: {e!r}")
            return Error(f"Unexpected error: {str(e) or e.__class__.__name__}")
