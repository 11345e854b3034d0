"""SQLite implementation of the document store."""

from typing import List, Optional, Tuple
import os
import sqlite3
import threading
from datetime import datetime

from ...domain.entities import MAX_DOCUMENT_ID, Document, PostStatus, ScanWindow
from ...domain.repositories import DocumentRepository
from ...config import DB_PATH
from ...error_handler import store_operation
from ...logging_config import get_logger

logger = get_logger(__name__)

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

POSTS_TABLE_SQL = """
CREATE TABLE IF NOT EXISTS posts (
  id INTEGER PRIMARY KEY,
  title TEXT NOT NULL DEFAULT '',
  content TEXT NOT NULL DEFAULT '',
  status TEXT NOT NULL,
  published_at TEXT NOT NULL
);
"""

POSTS_INDEX_SQL = """
CREATE INDEX IF NOT EXISTS idx_posts_status_published
  ON posts (status, published_at);
"""

_COLUMNS = "id, title, content, status, published_at"


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


def _to_document(row: sqlite3.Row) -> Document:
    return Document(
        id=row["id"],
        title=row["title"],
        content=row["content"],
        status=PostStatus.from_value(row["status"]),
        published_at=datetime.strptime(row["published_at"], TIMESTAMP_FORMAT),
    )


class SqliteDocumentStore(DocumentRepository):
    """SQLite-backed DocumentRepository.

    One connection shared across threads, serialised by a re-entrant lock.
    Timestamps are stored as sortable ``YYYY-MM-DD HH:MM:SS`` text.
    """

    def __init__(self, db_path: str = None):
        self.db_path = db_path or DB_PATH
        self._lock = threading.RLock()
        self.conn = self._connect()
        self._ensure_schema()

    @store_operation
    def _connect(self) -> sqlite3.Connection:
        if self.db_path != ":memory:":
            os.makedirs(os.path.dirname(os.path.abspath(self.db_path)), exist_ok=True)
        conn = sqlite3.connect(self.db_path, check_same_thread=False)
        conn.row_factory = sqlite3.Row
        return conn

    @store_operation
    def _ensure_schema(self) -> None:
        with self._lock:
            cur = self.conn.cursor()
            cur.execute(POSTS_TABLE_SQL)
            cur.execute(POSTS_INDEX_SQL)
            self.conn.commit()

    @store_operation
    def get_document(self, document_id: int) -> Optional[Document]:
        if not 0 < document_id <= MAX_DOCUMENT_ID:
            return None
        with self._lock:
            row = self.conn.execute(
                f"SELECT {_COLUMNS} FROM posts WHERE id = ?", (document_id,)
            ).fetchone()
        return _to_document(row) if row else None

    @store_operation
    def search_published(self, term: str, limit: int, offset: int) -> Tuple[List[Document], int]:
        where = ["status = ?"]
        params: list = [PostStatus.PUBLISHED.value]
        for word in term.split():
            pattern = f"%{_escape_like(word)}%"
            where.append("(title LIKE ? ESCAPE '\\' OR content LIKE ? ESCAPE '\\')")
            params.extend([pattern, pattern])
        clause = " AND ".join(where)

        with self._lock:
            total = self.conn.execute(
                f"SELECT COUNT(*) FROM posts WHERE {clause}", params
            ).fetchone()[0]
            rows = self.conn.execute(
                f"SELECT {_COLUMNS} FROM posts WHERE {clause} "
                "ORDER BY published_at DESC, id DESC LIMIT ? OFFSET ?",
                [*params, limit, offset],
            ).fetchall()

        logger.debug(f"search_published term={term!r} offset={offset} -> {len(rows)}/{total}")
        return [_to_document(row) for row in rows], total

    @store_operation
    def find_published_ids_containing(self, window: ScanWindow, needle: str) -> List[int]:
        # instr() is a case-sensitive literal test, unlike LIKE
        with self._lock:
            rows = self.conn.execute(
                "SELECT id FROM posts WHERE status = ? "
                "AND published_at >= ? AND published_at < ? "
                "AND instr(content, ?) > 0 ORDER BY id ASC",
                (
                    PostStatus.PUBLISHED.value,
                    window.start.strftime(TIMESTAMP_FORMAT),
                    window.end.strftime(TIMESTAMP_FORMAT),
                    needle,
                ),
            ).fetchall()
        return [row["id"] for row in rows]

    @store_operation
    def list_published_in_window(self, window: ScanWindow, limit: int, after_id: int = 0) -> List[Document]:
        with self._lock:
            rows = self.conn.execute(
                f"SELECT {_COLUMNS} FROM posts WHERE status = ? "
                "AND published_at >= ? AND published_at < ? AND id > ? "
                "ORDER BY id ASC LIMIT ?",
                (
                    PostStatus.PUBLISHED.value,
                    window.start.strftime(TIMESTAMP_FORMAT),
                    window.end.strftime(TIMESTAMP_FORMAT),
                    after_id,
                    limit,
                ),
            ).fetchall()
        return [_to_document(row) for row in rows]

    @store_operation
    def save_document(self, document: Document) -> int:
        with self._lock:
            self.conn.execute(
                f"INSERT OR REPLACE INTO posts ({_COLUMNS}) VALUES (?, ?, ?, ?, ?)",
                (
                    document.id,
                    document.title,
                    document.content,
                    document.status.value,
                    document.published_at.strftime(TIMESTAMP_FORMAT),
                ),
            )
            self.conn.commit()
        return document.id

    @store_operation
    def count(self) -> int:
        with self._lock:
            return self.conn.execute("SELECT COUNT(*) FROM posts").fetchone()[0]

    @store_operation
    def reset(self) -> None:
        with self._lock:
            self.conn.execute("DELETE FROM posts")
            self.conn.commit()
        logger.info("Document store reset")

    def close(self) -> None:
        with self._lock:
            self.conn.close()
