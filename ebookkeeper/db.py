"""SQLite-backed index of e-book files keyed by their content hash."""

from __future__ import annotations

import os
import sqlite3
from collections.abc import Iterable

_CREATE_TABLE = (
    "CREATE TABLE IF NOT EXISTS EBOOK ("
    "ID INTEGER PRIMARY KEY AUTOINCREMENT,"
    "NAME           VCHAR(1024)    NOT NULL,"
    "HASH           VCHAR(1024)    NOT NULL);"
)
_SELECT_ALL = "SELECT NAME, HASH FROM EBOOK ORDER BY ID;"
_INSERT = "INSERT INTO EBOOK (NAME, HASH) VALUES (?, ?);"
_SELECT_BY_HASH = "SELECT NAME, HASH FROM EBOOK WHERE HASH = ? ORDER BY ID;"


class EbookDB:
    """A table of (name, hash) rows with an in-memory hash-to-path index.

    The index keeps the first path recorded for each hash.
    """

    def __init__(self) -> None:
        self._conn: sqlite3.Connection | None = None
        self._books: dict[str, str] = {}

    def open(self, dbname: str | os.PathLike[str]) -> None:
        """Open (creating if needed) the database and load its rows into the index."""
        if not str(dbname):
            raise ValueError("database name must not be empty")
        self.close()
        conn = sqlite3.connect(dbname)
        try:
            with conn:
                conn.execute(_CREATE_TABLE)
            for name, hash_ in conn.execute(_SELECT_ALL):
                self._books.setdefault(hash_, name)
        except sqlite3.Error:
            conn.close()
            raise
        self._conn = conn

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise RuntimeError("database is not open")
        return self._conn

    def insert(self, name: str, hash_: str) -> None:
        """Store one row and record it in the index."""
        conn = self._connection()
        with conn:
            conn.execute(_INSERT, (name, hash_))
        self._books.setdefault(hash_, name)

    def insert_many(self, data: Iterable[tuple[str, str]]) -> None:
        """Store many (name, hash) rows in one transaction; all or none are kept."""
        conn = self._connection()
        rows = list(data)
        with conn:
            conn.executemany(_INSERT, rows)
        for name, hash_ in rows:
            self._books.setdefault(hash_, name)

    def is_saved(self, hash_: str) -> bool:
        """Tell whether a file with this hash is already recorded."""
        return hash_ in self._books

    def get_path(self, hash_: str) -> str:
        """Return the recorded path for a hash, or "" if there is none."""
        return self._books.get(hash_, "")

    def query_by_hash(self, hash_: str) -> list[tuple[str, str]]:
        """Return every stored (name, hash) row with the given hash."""
        conn = self._connection()
        return [(name, h) for name, h in conn.execute(_SELECT_BY_HASH, (hash_,))]

    def close(self) -> None:
        """Close the connection if one is open."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> EbookDB:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()