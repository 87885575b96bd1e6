# gui/main_window.py
from __future__ import annotations

from PySide6.QtCore    import Slot
from PySide6.QtGui     import QAction
from PySide6.QtWidgets import QMainWindow, QStackedWidget

from movieBrowser.settings           import WINDOW_TITLE
from movieBrowser.gui.controller     import MovieDetailController, MovieListController
from movieBrowser.gui.detail_page    import MovieDetailPage
from movieBrowser.gui.movies_page    import MoviesPage
from movieBrowser.gui.router         import Router, Screens
from movieBrowser.gui.state          import Error, RequestState

TOAST_MS = 3000


class MainWindow(QMainWindow):
    def __init__(
        self,
        list_controller: MovieListController,
        detail_controller: MovieDetailController,
        router: Router | None = None,
    ):
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(720, 900)

        self.list_controller   = list_controller
        self.detail_controller = detail_controller
        self.router            = router or Router(self)

        # ── pages ────────────────────────────────────────────────────────
        self.movies_page = MoviesPage(list_controller.state)
        self.detail_page = MovieDetailPage(detail_controller.state)

        self.pages = QStackedWidget()
        self.pages.addWidget(self.movies_page)
        self.pages.addWidget(self.detail_page)
        self.setCentralWidget(self.pages)

        # ── toolbar ─────────────────────────────────────────────────────
        tb = self.addToolBar("Main")
        act = QAction("Refresh", self)
        act.setShortcut("Ctrl+R")
        act.triggered.connect(self._on_refresh)
        tb.addAction(act)

        # ── navigation wiring ───────────────────────────────────────────
        self.movies_page.movie_selected.connect(self._on_movie_selected)
        self.detail_page.back_requested.connect(self.router.back)
        self.router.route_changed.connect(self._on_route_changed)

        # transient error notifications
        self._unsubscribers = [
            list_controller.state.subscribe(self._toast_error),
            detail_controller.state.subscribe(self._toast_error),
        ]

    def start(self) -> None:
        """Kick off the first popular-list load."""
        self.list_controller.load_list()

    # ───────────────────────────────────────────────────────────────────
    @Slot(str)
    def _on_movie_selected(self, movie_id: str) -> None:
        self.router.navigate(Router.detail_path(movie_id))

    @Slot(str, dict)
    def _on_route_changed(self, route: str, args: dict) -> None:
        if route == Screens.MOVIE_DETAIL:
            self.detail_page.clear()
            self.pages.setCurrentWidget(self.detail_page)
            self.detail_controller.find_movie(args.get("movieId", ""))
        else:
            self.pages.setCurrentWidget(self.movies_page)

    @Slot()
    def _on_refresh(self) -> None:
        route, args = self.router.current
        if route == Screens.MOVIE_DETAIL:
            self.detail_controller.find_movie(args["movieId"], force_refresh=True)
        else:
            self.list_controller.load_list(force_refresh=True)

    @Slot(object)
    def _toast_error(self, state: RequestState) -> None:
        if isinstance(state, Error):
            self.statusBar().showMessage(f"Error {state.message}", TOAST_MS)

    def closeEvent(self, event):
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self.movies_page.detach()
        self.detail_page.detach()
        self.list_controller.shutdown()
        self.detail_controller.shutdown()
        super().closeEvent(event)
