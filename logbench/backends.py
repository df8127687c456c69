"""
Storage backends under test.

Each backend owns its transient storage (a file or a table), resets it in
setup() and writes exactly one log record per insert() call.
"""

import logging
import os
import sqlite3
import time

import psycopg

from logbench.config import (
    BACKEND_FILE,
    BACKEND_RDBMS,
    BACKEND_RDBMS_NO_ID,
    BACKEND_SQLITE,
    LOG_MESSAGE,
)
from logbench.exceptions import BackendError

logger = logging.getLogger(__name__)


class FileLogBackend:
    """Append one line per record to a flat file, reopening it every time."""

    name = BACKEND_FILE

    def __init__(self, path: str, strict: bool = True):
        self.path = path
        # strict=False keeps the old behaviour of logging a failed write and moving on
        self.strict = strict

    def setup(self):
        """Create the log file or truncate it if it already exists"""
        try:
            with open(self.path, "w", encoding="utf-8"):
                pass
        except OSError as e:
            raise BackendError(f"Log file {self.path} could not be opened, cancelling test: {e}") from e
        print(f"Log file open. Testing log file {self.path}")

    def insert(self):
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(f"{LOG_MESSAGE}|{time.time_ns()}\n")
        except OSError as e:
            if self.strict:
                raise BackendError(f"Could not append to {self.path}: {e}") from e
            logger.warning("Dropped log line for %s: %s", self.path, e)

    def row_count(self) -> int:
        if not os.path.exists(self.path):
            return 0
        with open(self.path, encoding="utf-8") as f:
            return sum(1 for _ in f)

    def close(self):
        pass


class PostgresLogBackend:
    """Insert log rows into PostgreSQL, with or without a SERIAL id column."""

    INSERT_SQL = (
        "INSERT INTO {table} (text, time) VALUES "
        "(%s, EXTRACT(EPOCH FROM (CURRENT_TIMESTAMP AT TIME ZONE 'UTC')))"
    )

    def __init__(self, dsn: str, with_id: bool = True):
        self.dsn = dsn
        self.with_id = with_id
        self.name = BACKEND_RDBMS if with_id else BACKEND_RDBMS_NO_ID
        self.table = "log_table" if with_id else "log_table_no_id"
        self.conn = None
        self._insert_sql = self.INSERT_SQL.format(table=self.table)

    def _create_table_sql(self) -> str:
        if self.with_id:
            return f"""
                CREATE TABLE IF NOT EXISTS {self.table} (
                    id      SERIAL PRIMARY KEY,
                    text    TEXT NOT NULL,
                    time    INTEGER
                )
            """
        return f"""
            CREATE TABLE IF NOT EXISTS {self.table} (
                text    TEXT NOT NULL,
                time    INTEGER
            )
        """

    def setup(self):
        """Connect, create the table if needed and delete every existing row"""
        try:
            self.conn = psycopg.connect(self.dsn, autocommit=True)
            self.conn.execute(self._create_table_sql())
            self.conn.execute(f"DELETE FROM {self.table}")
        except psycopg.Error as e:
            raise BackendError(f"PostgreSQL setup failed for {self.table}: {e}") from e
        logger.debug("Reset table %s on %s", self.table, self.dsn)

    def insert(self):
        try:
            self.conn.execute(self._insert_sql, (LOG_MESSAGE,))
        except psycopg.Error as e:
            raise BackendError(f"INSERT into {self.table} failed: {e}") from e

    def row_count(self) -> int:
        try:
            return self.conn.execute(f"SELECT COUNT(*) FROM {self.table}").fetchone()[0]
        except psycopg.Error as e:
            raise BackendError(f"Could not count rows in {self.table}: {e}") from e

    def close(self):
        if self.conn is not None:
            self.conn.close()
            self.conn = None


class SqliteLogBackend:
    """Insert log rows into an SQLite file with synchronous writes turned off."""

    def __init__(self, path: str):
        self.path = path
        self.name = BACKEND_SQLITE
        self.conn = None

    def setup(self):
        try:
            # isolation_level=None: every INSERT commits on its own
            self.conn = sqlite3.connect(self.path, isolation_level=None)
            self.conn.execute("PRAGMA synchronous = OFF")
            self.conn.execute("""
                CREATE TABLE IF NOT EXISTS log_table (
                    text    TEXT NOT NULL,
                    time    INTEGER
                )
            """)
            self.conn.execute("DELETE FROM log_table")
        except sqlite3.Error as e:
            raise BackendError(f"SQLite setup failed for {self.path}: {e}") from e

    def insert(self):
        try:
            self.conn.execute(
                "INSERT INTO log_table (text, time) VALUES (?, ?)",
                (LOG_MESSAGE, int(time.time())),
            )
        except sqlite3.Error as e:
            raise BackendError(f"INSERT into {self.path} failed: {e}") from e

    def row_count(self) -> int:
        try:
            return self.conn.execute("SELECT COUNT(*) FROM log_table").fetchone()[0]
        except sqlite3.Error as e:
            raise BackendError(f"Could not count rows in {self.path}: {e}") from e

    def close(self):
        if self.conn is not None:
            self.conn.close()
            self.conn = None


def build_backends(names, dsn: str, log_file: str, sqlite_file: str) -> list:
    """Instantiate the named backends, keeping the order of ``names``"""
    factories = {
        BACKEND_RDBMS_NO_ID: lambda: PostgresLogBackend(dsn, with_id=False),
        BACKEND_RDBMS: lambda: PostgresLogBackend(dsn, with_id=True),
        BACKEND_FILE: lambda: FileLogBackend(log_file),
        BACKEND_SQLITE: lambda: SqliteLogBackend(sqlite_file),
    }
    unknown = [name for name in names if name not in factories]
    if unknown:
        raise BackendError(f"Unknown backend(s): {', '.join(unknown)}")
    return [factories[name]() for name in names]
