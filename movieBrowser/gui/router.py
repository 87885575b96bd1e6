"""
gui.router
~~~~~~~~~~
Two-route navigation table with a back stack.

    movies                 – popular list (start destination)
    moviedetail/{movieId}  – detail page, movieId kept as a string
"""

from __future__ import annotations
from typing import Dict, List, Tuple

from PySide6.QtCore import QObject, Signal


class Screens:
    MOVIES       = "movies"
    MOVIE_DETAIL = "moviedetail"


Route = Tuple[str, Dict[str, str]]


class Router(QObject):
    route_changed = Signal(str, dict)     # route name, arguments

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._stack: List[Route] = [(Screens.MOVIES, {})]

    @staticmethod
    def detail_path(movie_id: int | str) -> str:
        return f"{Screens.MOVIE_DETAIL}/{movie_id}"

    @staticmethod
    def parse(path: str) -> Route:
        """Match *path* against the route table.

        Raises
        ------
        ValueError
            Unknown route or a detail path without exactly one id segment.
        """
        parts = path.strip().strip("/").split("/")
        if parts == [Screens.MOVIES]:
            return Screens.MOVIES, {}
        if parts[0] == Screens.MOVIE_DETAIL and len(parts) == 2 and parts[1]:
            return Screens.MOVIE_DETAIL, {"movieId": parts[1]}
        raise ValueError(f"Unknown route: {path!r}")

    @property
    def current(self) -> Route:
        route, args = self._stack[-1]
        return route, dict(args)

    def can_go_back(self) -> bool:
        return len(self._stack) > 1

    def navigate(self, path: str) -> None:
        route, args = self.parse(path)
        self._stack.append((route, args))
        self.route_changed.emit(route, dict(args))

    def back(self) -> bool:
        """Pop to the previous route; False when already at the start."""
        if not self.can_go_back():
            return False
        self._stack.pop()
        route, args = self._stack[-1]
        self.route_changed.emit(route, dict(args))
        return True
