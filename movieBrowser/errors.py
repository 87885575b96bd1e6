"""
errors
~~~~~~
Failure taxonomy for the data layer.

Everything raised by the TMDb client, the SQLite cache and the repository
derives from `MovieDataError`; the GUI controllers turn any of them into an
`Error` state instead of letting them reach a widget.
"""


class MovieDataError(Exception):
    """Base class for every data-layer failure."""


class NetworkError(MovieDataError):
    """Remote unreachable or answered with a non-2xx status."""


class DeserializationError(MovieDataError):
    """Payload was not JSON or lacked the fields a Movie needs."""


class CacheError(MovieDataError):
    """Local SQLite store failed to read or write."""


class DataUnavailableError(MovieDataError):
    """Neither the remote nor the cache could satisfy the request."""


class NotFoundError(DataUnavailableError):
    """Requested movie id is absent from both sources."""

    def __init__(self, movie_id: int | str):
        self.movie_id = movie_id
        super().__init__(f"Movie {movie_id} not found")
