"""Tests for application wiring and command-line flags."""

import pytest

from movieBrowser.main import build_repository, parse_args
from movieBrowser.metadata import MovieRepository, TMDBClient
from tests.conftest import DUNE


def test_build_repository_wires_client_and_cache(temp_dir) -> None:
    repo = build_repository(api_key="k3y", db_path=temp_dir / "app.sqlite")
    try:
        assert isinstance(repo, MovieRepository)
        assert isinstance(repo.remote, TMDBClient)
        repo.cache.upsert_movie(DUNE)
        assert (temp_dir / "app.sqlite").exists()
    finally:
        repo.cache.db.close()


def test_build_repository_needs_api_key(temp_dir) -> None:
    with pytest.raises(RuntimeError):
        build_repository(api_key=None, db_path=temp_dir / "app.sqlite")


def test_parse_args_defaults() -> None:
    args = parse_args([])
    assert args.reset_cache is False


def test_parse_args_reset_flag(temp_dir) -> None:
    args = parse_args(["--reset-cache", "--db", str(temp_dir / "x.sqlite")])
    assert args.reset_cache is True
    assert args.db.endswith("x.sqlite")
