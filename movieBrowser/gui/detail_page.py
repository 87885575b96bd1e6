from __future__ import annotations
from PySide6.QtCore    import Qt, Signal, Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QProgressBar, QToolButton
)

from movieBrowser.gui.state import Error, Loading, RequestState, StateStore, Successful
from movieBrowser.metadata.core.models import Movie


class MovieDetailPage(QWidget):
    """Poster, title and overview of one movie, plus a back button."""
    back_requested = Signal()

    def __init__(self, state: StateStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.movie: Movie | None = None
        self._build_ui()
        self._unsubscribe = state.subscribe(self.render)

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setAlignment(Qt.AlignTop)

        # ── top bar ──────────────────────────────────────────────────────
        bar = QHBoxLayout()
        self.back_btn = QToolButton()
        self.back_btn.setArrowType(Qt.LeftArrow)
        self.back_btn.setToolTip("Back")
        self.back_btn.clicked.connect(self.back_requested)
        bar.addWidget(self.back_btn)
        bar.addWidget(QLabel("Movie Details"))
        bar.addStretch()
        root.addLayout(bar)

        self.busy = QProgressBar()
        self.busy.setRange(0, 0)
        self.busy.setTextVisible(False)
        root.addWidget(self.busy)

        self.poster = QLabel("", alignment=Qt.AlignCenter)
        self.poster.setTextFormat(Qt.RichText)
        self.poster.setOpenExternalLinks(True)
        self.poster.setMinimumHeight(200)
        root.addWidget(self.poster)

        self.title_lbl = QLabel("")
        self.title_lbl.setStyleSheet("font-size:18px; font-weight:bold;")
        root.addWidget(self.title_lbl)

        self.description = QLabel("")
        self.description.setWordWrap(True)
        root.addWidget(self.description)

        self.status = QLabel("")
        self.status.setWordWrap(True)
        self.status.hide()
        root.addWidget(self.status)

    # ------------------------------------------------------------------
    @Slot(object)
    def render(self, state: RequestState) -> None:
        match state:
            case Loading():
                self.busy.show()
                self.status.hide()
            case Successful(payload=movie):
                self.busy.hide()
                self.status.hide()
                self.show_movie(movie)
            case Error(message=message):
                self.busy.hide()
                self.status.setText(f"Error {message}")
                self.status.show()

    def show_movie(self, movie: Movie) -> None:
        self.movie = movie
        url = movie.poster_url
        self.poster.setText(f'<a href="{url}">{movie.title} Poster</a>' if url else "No poster")
        self.title_lbl.setText(movie.title)
        self.description.setText(movie.description)

    def clear(self) -> None:
        """Blank the page before a different movie loads."""
        self.movie = None
        for lbl in (self.poster, self.title_lbl, self.description, self.status):
            lbl.setText("")
        self.status.hide()

    def detach(self) -> None:
        self._unsubscribe()
