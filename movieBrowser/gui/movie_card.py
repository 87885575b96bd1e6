from __future__ import annotations
from PySide6.QtCore    import Qt, QPropertyAnimation, Signal # type: ignore
from PySide6.QtWidgets import ( # type: ignore
    QFrame, QLabel, QVBoxLayout, QGraphicsDropShadowEffect
)

from movieBrowser.metadata.core.models import Movie
from movieBrowser.settings import ACCENT_COLOR


class MovieCard(QFrame):
    """Grid tile: poster link + centred title. Click → `clicked(movie id)`."""
    clicked = Signal(str)

    def __init__(self, movie: Movie, parent=None):
        super().__init__(parent)
        self.movie = movie
        self.setObjectName("MovieCardItem")
        self.setFrameShape(QFrame.StyledPanel)
        self.setCursor(Qt.PointingHandCursor)
        self.setStyleSheet(
            f"#MovieCardItem {{ border:1px solid {ACCENT_COLOR}; border-radius:8px; }}"
        )

        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)

        # ── poster (link text until images are rendered) ─────────────────
        url = movie.poster_url
        self.poster = QLabel(
            f'<a href="{url}">{movie.title} Poster</a>' if url else "No poster",
            alignment=Qt.AlignCenter,
        )
        self.poster.setTextFormat(Qt.RichText)
        self.poster.setOpenExternalLinks(True)
        self.poster.setMinimumHeight(120)
        root.addWidget(self.poster)

        self.title_lbl = QLabel(movie.title, alignment=Qt.AlignCenter)
        self.title_lbl.setWordWrap(True)
        self.title_lbl.setStyleSheet("font-weight:bold;")
        root.addWidget(self.title_lbl)
        root.addStretch()

        # ── hover shadow effect ──────────────────────────────────────────
        self._shadow = QGraphicsDropShadowEffect(self)
        self._shadow.setBlurRadius(4)
        self._shadow.setOffset(0, 0)
        self.setGraphicsEffect(self._shadow)

    def mouseReleaseEvent(self, event):
        super().mouseReleaseEvent(event)
        if event.button() == Qt.LeftButton:
            self.clicked.emit(str(self.movie.id))

    # ------------------------------------------------------------------
    # hover animation
    def enterEvent(self, event):
        super().enterEvent(event)
        self._animate_shadow(16)

    def leaveEvent(self, event):
        super().leaveEvent(event)
        self._animate_shadow(4)

    def _animate_shadow(self, radius: int) -> None:
        anim = QPropertyAnimation(self._shadow, b"blurRadius", self)
        anim.setDuration(200)
        anim.setEndValue(radius)
        anim.start(QPropertyAnimation.DeleteWhenStopped)
