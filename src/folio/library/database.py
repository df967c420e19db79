"""SQLite store for recently opened files and their reading progress."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path
from typing import Optional

from folio.reader.models import ReadingMode

from .models import RecentEntry

log = logging.getLogger(__name__)

DEFAULT_MAX_ENTRIES = 10

_SCHEMA = """
CREATE TABLE IF NOT EXISTS recent_files (
    key TEXT PRIMARY KEY,
    display_name TEXT NOT NULL,
    last_opened REAL NOT NULL,
    current_page INTEGER DEFAULT 1,
    total_pages INTEGER DEFAULT 0,
    reading_mode TEXT DEFAULT 'single'
);
"""


class Database:
    def __init__(self, db_path: Path, max_entries: int = DEFAULT_MAX_ENTRIES) -> None:
        self._db_path = db_path
        self._max_entries = max_entries
        self._conn = sqlite3.connect(str(db_path), check_same_thread=False)
        self._conn.row_factory = sqlite3.Row
        self._conn.execute("PRAGMA journal_mode=WAL")
        self._init_schema()

    def _init_schema(self) -> None:
        self._conn.executescript(_SCHEMA)
        self._conn.commit()

    def close(self) -> None:
        self._conn.close()

    # ── Recent Files ───────────────────────────────────────

    def get(self, key: str) -> Optional[RecentEntry]:
        row = self._conn.execute(
            "SELECT * FROM recent_files WHERE key = ?", (key,)
        ).fetchone()
        return self._row_to_entry(row) if row else None

    def upsert(self, entry: RecentEntry) -> None:
        self._conn.execute(
            """INSERT OR REPLACE INTO recent_files
               (key, display_name, last_opened, current_page, total_pages, reading_mode)
               VALUES (?, ?, ?, ?, ?, ?)""",
            (
                entry.key,
                entry.display_name,
                entry.last_opened,
                entry.current_page,
                entry.total_pages,
                entry.mode.value,
            ),
        )
        evicted = self._conn.execute(
            """DELETE FROM recent_files WHERE key NOT IN
               (SELECT key FROM recent_files ORDER BY last_opened DESC LIMIT ?)""",
            (self._max_entries,),
        ).rowcount
        if evicted:
            log.debug("Evicted %d old recent file(s)", evicted)
        self._conn.commit()

    def remove(self, key: str) -> None:
        self._conn.execute("DELETE FROM recent_files WHERE key = ?", (key,))
        self._conn.commit()

    def list(self) -> list[RecentEntry]:
        rows = self._conn.execute(
            "SELECT * FROM recent_files ORDER BY last_opened DESC LIMIT ?",
            (self._max_entries,),
        ).fetchall()
        return [self._row_to_entry(r) for r in rows]

    def clear(self) -> None:
        self._conn.execute("DELETE FROM recent_files")
        self._conn.commit()

    @staticmethod
    def _row_to_entry(row: sqlite3.Row) -> RecentEntry:
        try:
            mode = ReadingMode(row["reading_mode"])
        except ValueError:
            mode = ReadingMode.SINGLE_PAGE
        return RecentEntry(
            key=row["key"],
            display_name=row["display_name"],
            last_opened=row["last_opened"],
            current_page=row["current_page"],
            total_pages=row["total_pages"],
            mode=mode,
        )
