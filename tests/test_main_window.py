"""Integration tests: window + router + controllers over a fake repository."""

from __future__ import annotations

import pytest
from PySide6.QtCore import Qt
from pytestqt.qtbot import QtBot

from movieBrowser.errors import NetworkError
from movieBrowser.gui.controller import MovieDetailController, MovieListController
from movieBrowser.gui.main_window import MainWindow
from movieBrowser.gui.router import Screens
from tests.conftest import ALIEN, DUNE, FORTY2, FakeRepository

WAIT_MS = 5000


@pytest.fixture
def repository() -> FakeRepository:
    return FakeRepository(popular=[DUNE, ALIEN], movies=[DUNE, ALIEN, FORTY2])


@pytest.fixture
def window(qtbot: QtBot, repository) -> MainWindow:
    win = MainWindow(MovieListController(repository), MovieDetailController(repository))
    qtbot.addWidget(win)
    with qtbot.waitExposed(win):
        win.show()
    return win


def test_start_fills_the_grid(qtbot: QtBot, window: MainWindow) -> None:
    window.start()

    qtbot.waitUntil(lambda: len(window.movies_page.cards) == 2, timeout=WAIT_MS)
    titles = [card.movie.title for card in window.movies_page.cards]
    assert titles == [DUNE.title, ALIEN.title]
    assert window.movies_page.busy.isHidden()


def test_clicking_a_card_opens_detail_and_back_returns(qtbot: QtBot, window: MainWindow) -> None:
    window.start()
    qtbot.waitUntil(lambda: len(window.movies_page.cards) == 2, timeout=WAIT_MS)

    qtbot.mouseClick(window.movies_page.cards[1], Qt.LeftButton)

    assert window.router.current == (Screens.MOVIE_DETAIL, {"movieId": str(ALIEN.id)})
    assert window.pages.currentWidget() is window.detail_page
    qtbot.waitUntil(lambda: window.detail_page.movie == ALIEN, timeout=WAIT_MS)
    assert window.detail_page.title_lbl.text() == ALIEN.title
    assert window.detail_page.description.text() == ALIEN.description

    window.detail_page.back_btn.click()

    assert window.router.current == (Screens.MOVIES, {})
    assert window.pages.currentWidget() is window.movies_page


def test_unknown_movie_shows_error(qtbot: QtBot, window: MainWindow) -> None:
    window.router.navigate("moviedetail/999")

    qtbot.waitUntil(lambda: not window.detail_page.status.isHidden(), timeout=WAIT_MS)
    assert "not found" in window.detail_page.status.text()
    assert window.detail_page.movie is None


def test_list_failure_surfaces_message(qtbot: QtBot, window: MainWindow, repository) -> None:
    repository.error = NetworkError("Could not reach TMDb: timed out")

    window.start()

    qtbot.waitUntil(lambda: not window.movies_page.status.isHidden(), timeout=WAIT_MS)
    assert "timed out" in window.movies_page.status.text()
    assert "timed out" in window.statusBar().currentMessage()
    assert window.movies_page.cards == []


def test_clearing_detail_hides_stale_status(qtbot: QtBot, window: MainWindow) -> None:
    window.router.navigate("moviedetail/999")
    qtbot.waitUntil(lambda: not window.detail_page.status.isHidden(), timeout=WAIT_MS)

    window.detail_page.clear()

    assert window.detail_page.status.isHidden()
    assert window.detail_page.status.text() == ""
