"""
gui
~~~
All Qt widgets, pages and controllers.

•  No direct SQL or HTTP here – everything goes through `MovieRepository`.
•  Re-export the high-level symbols so the app can simply:

    from movieBrowser.gui import MainWindow, MovieListController
"""

from movieBrowser.gui.state       import Loading, Successful, Error, RequestState, StateStore
from movieBrowser.gui.controller  import MovieListController, MovieDetailController
from movieBrowser.gui.router      import Router, Screens
from movieBrowser.gui.main_window import MainWindow
from movieBrowser.gui.movies_page import MoviesPage
from movieBrowser.gui.detail_page import MovieDetailPage
from movieBrowser.gui.movie_card  import MovieCard

__all__ = [
    "Loading", "Successful", "Error", "RequestState", "StateStore",
    "MovieListController", "MovieDetailController",
    "Router", "Screens",
    "MainWindow", "MoviesPage", "MovieDetailPage", "MovieCard",
]
