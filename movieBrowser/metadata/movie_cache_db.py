# movie_cache_db.py
from __future__ import annotations
import sqlite3, threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from movieBrowser.settings import SCHEMA_PATH as _SCHEMA_PATH
from movieBrowser.utils import log_debug

_TABLES = ("movies", "kv_store")


class MovieCacheDB:
    """
    SQLite file shared by the GUI thread and the fetch workers.

    Every thread gets its OWN sqlite3.Connection on first use; the schema
    script runs once per instance, guarded by `_init_lock`.
    """

    def __init__(self, path: Path | str, schema_path: Path = _SCHEMA_PATH) -> None:
        self.path         = Path(path)
        self._schema_sql  = schema_path.read_text(encoding="utf-8")
        self._local       = threading.local()     # holds .conn per thread
        self._init_lock   = threading.Lock()      # serialize first-time schema init
        self._conns: list[sqlite3.Connection] = []
        self._schema_done = False

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.connection()                         # bootstrap + schema now

    # ─── internal helpers ────────────────────────────────────────────────
    def _new_connection(self) -> sqlite3.Connection:
        conn = sqlite3.connect(
            self.path,
            check_same_thread=False,    # only close() crosses threads
            isolation_level="DEFERRED",
        )
        conn.row_factory = sqlite3.Row

        with self._init_lock:
            if not self._schema_done:
                conn.executescript(self._schema_sql)
                conn.commit()
                self._schema_done = True
            self._conns.append(conn)
        return conn

    # ─── public helpers ──────────────────────────────────────────────────
    def connection(self) -> sqlite3.Connection:
        """Return this thread's connection, creating it on first use."""
        conn = getattr(self._local, "conn", None)
        if conn is None:
            conn = self._local.conn = self._new_connection()
        return conn

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        return self.connection().execute(sql, params)

    def executemany(self, sql: str, seq: list[tuple]) -> sqlite3.Cursor:
        return self.connection().executemany(sql, seq)

    def commit(self) -> None:
        """Commit the current thread's Connection."""
        self.connection().commit()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Commit on success, roll back and re-raise on any error."""
        conn = self.connection()
        try:
            yield conn
            conn.commit()
        except BaseException:
            conn.rollback()
            raise

    def reset(self) -> None:
        """Drop every table and recreate the schema (the "delete movies store" action)."""
        conn = self.connection()
        with self.transaction():
            for table in _TABLES:
                conn.execute(f"DROP TABLE IF EXISTS {table}")
        conn.executescript(self._schema_sql)
        conn.commit()
        log_debug(f"Cache reset: {self.path}")

    def detach_thread(self) -> None:
        """Close the calling thread's connection; the next use opens a fresh one."""
        conn = getattr(self._local, "conn", None)
        if conn is None:
            return
        del self._local.conn
        with self._init_lock:
            if conn in self._conns:
                self._conns.remove(conn)
        conn.close()

    @property
    def open_connections(self) -> int:
        with self._init_lock:
            return len(self._conns)

    def close(self) -> None:
        """Close every connection handed out by this instance."""
        with self._init_lock:
            conns, self._conns = self._conns, []
        for conn in conns:
            conn.close()
        self._local = threading.local()
