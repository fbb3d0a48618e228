"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool so one handle can be shared by
repositories running on several threads.
"""

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN, DB_STATEMENT_TIMEOUT_MS
from utils.logger import get_logger

logger = get_logger(__name__)


class Database:
    """
    Database handle over a thread-safe psycopg2 connection pool.

    Repositories receive an instance of this class and borrow connections
    with `get_connection()` / `release_connection()`. The handle owns the
    pool; whoever constructs it is responsible for calling `close()`.
    """

    def __init__(
        self,
        dsn: str = DATABASE_URL,
        min_conn: int = DB_POOL_MIN,
        max_conn: int = DB_POOL_MAX,
        statement_timeout_ms: int = DB_STATEMENT_TIMEOUT_MS,
    ):
        """
        Open the pool.

        Args:
            dsn: libpq connection string or URL.
            min_conn: Minimum number of connections to keep open.
            max_conn: Maximum number of connections allowed.
            statement_timeout_ms: Server-side statement timeout, 0 to disable.

        Raises:
            psycopg2.OperationalError: If the database is unreachable.
        """
        kwargs = {}
        if statement_timeout_ms > 0:
            kwargs["options"] = f"-c statement_timeout={statement_timeout_ms}"
        self._pool = pool.ThreadedConnectionPool(min_conn, max_conn, dsn, **kwargs)

    def get_connection(self):
        """
        Get a connection from the pool.

        Raises:
            RuntimeError: If the pool has already been closed.
        """
        if self._pool.closed:
            raise RuntimeError("Database pool is closed.")
        return self._pool.getconn()

    def release_connection(self, conn) -> None:
        """Return a connection back to the pool."""
        if not self._pool.closed:
            self._pool.putconn(conn)

    def close(self) -> None:
        """Close all connections in the pool."""
        if not self._pool.closed:
            self._pool.closeall()


_db: Database | None = None


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX) -> Database:
    """
    Initialize the shared application database handle.
    Calling it again returns the handle that already exists.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _db
    if _db is not None:
        return _db
    try:
        _db = Database(DATABASE_URL, min_conn, max_conn)
        logger.info("Database connection pool initialized successfully.")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise
    return _db


def get_database() -> Database:
    """
    Return the shared database handle.

    Raises:
        RuntimeError: If the pool has not been initialized.
    """
    if _db is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _db


def close_pool() -> None:
    """Close all connections in the shared pool."""
    global _db
    if _db is not None:
        _db.close()
        _db = None
        logger.info("Database connection pool closed.")
