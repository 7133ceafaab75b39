# src/tasklist/tasks/task_store.py

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterator
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from ..core.errors import StoreError
from .task_models import Task, parse_timestamp

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value; larger ids cannot exist in the table.
MAX_ROW_ID = 2**63 - 1


class TaskStore:
    """
    SQLite task store.

    One table, created if missing:
      tasks(id, title, completed, created_at)

    Thread-safety:
    - each method opens its own SQLite connection

    Every sqlite3.Error is logged here once and re-raised as StoreError,
    so callers see a single infrastructure error type.
    """

    def __init__(self, db_path: str | Path = "tasks.sqlite3") -> None:
        self._db_path = Path(db_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        self._ensure_schema()
        try:
            total = self.count_tasks()
        except StoreError:
            total = -1
        logger.info("TaskStore ready db=%s total=%s", self._db_path, total)

    @property
    def db_path(self) -> Path:
        return self._db_path

    def close(self) -> None:
        """Shutdown hook (no persistent connections to close)."""
        logger.debug("TaskStore closed db=%s", self._db_path)

    # ---- low-level helpers ----

    def _get_conn(self) -> sqlite3.Connection:
        conn = sqlite3.connect(str(self._db_path), timeout=30.0)
        conn.row_factory = sqlite3.Row
        self._configure_conn(conn)
        return conn

    @staticmethod
    def _configure_conn(conn: sqlite3.Connection) -> None:
        with contextlib.suppress(sqlite3.Error):
            conn.execute("PRAGMA journal_mode=WAL")

    @contextlib.contextmanager
    def _session(self, op: str) -> Iterator[sqlite3.Connection]:
        """
        Open a connection for one store call.

        Commits on success, rolls back on failure. A write either fully
        commits or leaves the table untouched.
        """
        try:
            conn = self._get_conn()
        except sqlite3.Error as exc:
            logger.exception("TaskStore connect failed op=%s db=%s", op, self._db_path)
            raise StoreError(f"Task store unavailable: {exc}") from exc

        try:
            yield conn
            conn.commit()
        except sqlite3.Error as exc:
            with contextlib.suppress(sqlite3.Error):
                conn.rollback()
            logger.exception("TaskStore query failed op=%s", op)
            raise StoreError(f"Task store error: {exc}") from exc
        finally:
            conn.close()

    def _ensure_schema(self) -> None:
        with self._session("ensure_schema") as conn:
            conn.execute(
                """
                CREATE TABLE IF NOT EXISTS tasks (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT NOT NULL,
                    completed INTEGER NOT NULL DEFAULT 0,
                    created_at TEXT NOT NULL
                )
                """
            )

    @staticmethod
    def _row_to_task(row: sqlite3.Row) -> Task:
        return Task(
            id=int(row["id"]),
            title=str(row["title"]),
            completed=bool(row["completed"]),
            created_at=parse_timestamp(row["created_at"]),
        )

    @staticmethod
    def _select_by_id(conn: sqlite3.Connection, task_id: int) -> sqlite3.Row | None:
        cur = conn.execute("SELECT * FROM tasks WHERE id = ?", (int(task_id),))
        return cur.fetchone()

    # ---- public API ----

    def count_tasks(self) -> int:
        with self._session("count_tasks") as conn:
            (n,) = conn.execute("SELECT COUNT(*) FROM tasks").fetchone()
            return int(n)

    def list_all(self) -> list[Task]:
        with self._session("list_all") as conn:
            rows = conn.execute("SELECT * FROM tasks ORDER BY id ASC").fetchall()
            return [self._row_to_task(r) for r in rows]

    def insert(self, *, title: str, completed: bool = False) -> Task:
        """Insert a row; the store assigns id and created_at."""
        created_at = datetime.now(UTC).isoformat()

        with self._session("insert") as conn:
            cur = conn.execute(
                "INSERT INTO tasks(title, completed, created_at) VALUES (?, ?, ?)",
                (title, int(bool(completed)), created_at),
            )
            rowid = cur.lastrowid
            if rowid is None:
                raise StoreError("SQLite did not return lastrowid for tasks insert")
            row = self._select_by_id(conn, rowid)
            if row is None:
                raise StoreError(f"Inserted task id={rowid} could not be read back")
            task = self._row_to_task(row)

        logger.debug("Task inserted id=%s completed=%s", task.id, task.completed)
        return task

    def find_by_id(self, task_id: int) -> Task | None:
        if int(task_id) > MAX_ROW_ID:
            return None
        with self._session("find_by_id") as conn:
            row = self._select_by_id(conn, task_id)
            return self._row_to_task(row) if row else None

    def update_by_id(self, task_id: int, *, completed: bool | None = None) -> Task | None:
        """
        Update the given fields and return the updated row.

        Returns None if no row has this id. With no fields given,
        behaves like find_by_id.
        """
        fields: list[str] = []
        params: list[Any] = []

        if completed is not None:
            fields.append("completed = ?")
            params.append(int(bool(completed)))

        if not fields:
            return self.find_by_id(task_id)
        if int(task_id) > MAX_ROW_ID:
            return None

        params.append(int(task_id))
        sql = f"UPDATE tasks SET {', '.join(fields)} WHERE id = ?"

        with self._session("update_by_id") as conn:
            cur = conn.execute(sql, params)
            if cur.rowcount != 1:
                return None
            row = self._select_by_id(conn, task_id)
            return self._row_to_task(row) if row else None

    def delete_all(self) -> int:
        """Remove every row (seed/reset tooling only). Returns rows deleted."""
        with self._session("delete_all") as conn:
            cur = conn.execute("DELETE FROM tasks")
            deleted = cur.rowcount
        logger.info("TaskStore reset: deleted %s rows", deleted)
        return int(deleted)
