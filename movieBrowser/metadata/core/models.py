# Movie dataclass (+ any simple DTOs)
from __future__ import annotations
from dataclasses import dataclass

from movieBrowser.utils import poster_url


@dataclass(frozen=True, slots=True, eq=False)
class Movie:
    id: int
    title: str
    description: str = ""
    poster_path: str = ""

    # two Movie objects are the same film when their TMDb id matches
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Movie):
            return NotImplemented
        return self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)

    @property
    def poster_url(self) -> str | None:
        return poster_url(self.poster_path)

    def as_row(self) -> tuple[int, str, str, str]:
        """Column order used by the cache's `movies` table."""
        return (self.id, self.title, self.description, self.poster_path)
