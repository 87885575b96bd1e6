from __future__ import annotations
from PySide6.QtCore    import Qt, Signal, Slot # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QWidget, QVBoxLayout, QGridLayout, QLabel, QProgressBar, QScrollArea
)

from movieBrowser.gui.movie_card import MovieCard
from movieBrowser.gui.state import Error, Loading, RequestState, StateStore, Successful

COLUMNS = 2


class MoviesPage(QWidget):
    """Popular-movies grid bound to a list controller's StateStore."""
    movie_selected = Signal(str)          # movie id, as a route argument

    def __init__(self, state: StateStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._cards: list[MovieCard] = []
        self._build_ui()
        self._unsubscribe = state.subscribe(self.render)

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)

        self.header = QLabel("Popular Movies")
        self.header.setStyleSheet("font-size:18px; font-weight:bold;")
        root.addWidget(self.header)

        self.busy = QProgressBar()
        self.busy.setRange(0, 0)              # indeterminate spinner
        self.busy.setTextVisible(False)
        root.addWidget(self.busy)

        self.status = QLabel("", alignment=Qt.AlignCenter)
        self.status.setWordWrap(True)
        self.status.hide()
        root.addWidget(self.status)

        self._grid_host = QWidget()
        self.grid = QGridLayout(self._grid_host)
        self.grid.setSpacing(16)
        self.grid.setAlignment(Qt.AlignTop)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(self._grid_host)
        root.addWidget(scroll, 1)

    # ------------------------------------------------------------------
    @Slot(object)
    def render(self, state: RequestState) -> None:
        match state:
            case Loading():
                self.busy.show()
                self.status.hide()
            case Successful(payload=movies):
                self.busy.hide()
                self.status.setVisible(not movies)
                self.status.setText("No popular movies right now.")
                self.display_movies(movies)
            case Error(message=message):
                # keep whatever grid we had; just surface the failure
                self.busy.hide()
                self.status.setText(f"Error {message}")
                self.status.show()

    def display_movies(self, movies) -> None:
        for card in self._cards:
            self.grid.removeWidget(card)
            card.deleteLater()
        self._cards = []

        for i, movie in enumerate(movies):
            card = MovieCard(movie)
            card.clicked.connect(self.movie_selected)
            self.grid.addWidget(card, i // COLUMNS, i % COLUMNS)
            self._cards.append(card)

    def detach(self) -> None:
        """Stop following the list state."""
        self._unsubscribe()

    @property
    def cards(self) -> list[MovieCard]:
        return list(self._cards)
