"""
Database connection management for notelink
"""

import logging
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional, Union

from ..config.settings import get_db_path
from ..exceptions import DatabaseConnectionError
from . import migrations

logger = logging.getLogger(__name__)


class DatabaseConnection:
    """SQLite database connection manager for notelink.

    Plain ``get_connection()`` blocks open a short-lived connection that is
    committed on success and rolled back on error. Inside ``transaction()``
    every ``get_connection()`` on the same thread reuses the transaction's
    connection, so several store calls commit or roll back together.
    """

    def __init__(self, db_path: Optional[Union[str, Path]] = None):
        self.db_path = Path(db_path) if db_path is not None else get_db_path()
        self._local = threading.local()

    def _connect(self) -> sqlite3.Connection:
        try:
            conn = sqlite3.connect(
                self.db_path,
                timeout=30.0,
                detect_types=sqlite3.PARSE_DECLTYPES | sqlite3.PARSE_COLNAMES,
            )
        except sqlite3.Error as e:
            raise DatabaseConnectionError(path=str(self.db_path), reason=str(e)) from e

        conn.row_factory = sqlite3.Row  # Enable column access by name

        # Register datetime adapter
        sqlite3.register_adapter(datetime, lambda dt: dt.isoformat(sep=" "))
        sqlite3.register_converter("timestamp", lambda b: datetime.fromisoformat(b.decode()))

        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    @property
    def in_transaction(self) -> bool:
        return getattr(self._local, "conn", None) is not None

    @contextmanager
    def get_connection(self) -> Iterator[sqlite3.Connection]:
        """Get a database connection with context manager"""
        active = getattr(self._local, "conn", None)
        if active is not None:
            yield active
            return

        conn = self._connect()
        try:
            yield conn
            conn.commit()
        except BaseException:
            conn.rollback()
            raise
        finally:
            conn.close()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Run the enclosed block in one ``BEGIN IMMEDIATE`` transaction.

        IMMEDIATE takes SQLite's write lock up front, so two writers in
        different processes cannot interleave their reads and writes. Nested
        calls join the outer transaction.
        """
        active = getattr(self._local, "conn", None)
        if active is not None:
            yield active
            return

        conn = self._connect()
        conn.isolation_level = None
        conn.execute("BEGIN IMMEDIATE")
        self._local.conn = conn
        try:
            yield conn
            conn.execute("COMMIT")
        except BaseException:
            conn.execute("ROLLBACK")
            logger.debug("Rolled back transaction on %s", self.db_path)
            raise
        finally:
            self._local.conn = None
            conn.close()

    def ensure_schema(self) -> int:
        """Apply pending migrations. Returns the resulting schema version."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self.get_connection() as conn:
            return migrations.run_migrations(conn)
