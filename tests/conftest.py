import sqlite3
import sys
import threading
from pathlib import Path

import psycopg2
import psycopg2.pool
import pytest

# Ensure project root on sys.path
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))

from db.init_db import create_tables  # noqa: E402
from repositories.course_repo import CourseRepository  # noqa: E402


class SQLiteCursor:
    """psycopg2-style cursor over sqlite3: %s placeholders, psycopg2 errors."""

    def __init__(self, raw: sqlite3.Connection, fail_with=None):
        self._cur = raw.cursor()
        self._fail_with = fail_with
        self.closed = False

    def execute(self, sql, params=()):
        if self._fail_with is not None:
            raise self._fail_with
        try:
            if sql.count(";") > 1:
                self._cur.executescript(sql)
            else:
                self._cur.execute(sql.replace("%s", "?"), params)
        except sqlite3.IntegrityError as e:
            raise psycopg2.IntegrityError(str(e)) from e
        except sqlite3.Error as e:
            raise psycopg2.DatabaseError(str(e)) from e

    def fetchall(self):
        return self._cur.fetchall()

    def close(self):
        self._cur.close()
        self.closed = True

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()
        return False


class SQLiteConnection:
    def __init__(self, raw: sqlite3.Connection, fail_with=None, cursor_error=None, rollback_error=None):
        self._raw = raw
        self._fail_with = fail_with
        self._cursor_error = cursor_error
        self._rollback_error = rollback_error
        self.cursors: list[SQLiteCursor] = []
        self.commits = 0
        self.rollbacks = 0

    def cursor(self):
        if self._cursor_error is not None:
            raise self._cursor_error
        cur = SQLiteCursor(self._raw, self._fail_with)
        self.cursors.append(cur)
        return cur

    def commit(self):
        self.commits += 1
        self._raw.commit()

    def rollback(self):
        self.rollbacks += 1
        if self._rollback_error is not None:
            raise self._rollback_error
        self._raw.rollback()


class SQLiteDatabase:
    """
    In-memory stand-in for db.connection.Database that tracks borrows.
    Behaves like a pool of one: a borrowed connection must be released
    before the next borrow succeeds.
    """

    def __init__(self):
        self.raw = sqlite3.connect(":memory:", check_same_thread=False)
        self.fail_with = None
        self.connect_error = None
        self.cursor_error = None
        self.rollback_error = None
        self.borrowed: list[SQLiteConnection] = []
        self.released: list[SQLiteConnection] = []
        self._lock = threading.Lock()

    def get_connection(self):
        if self.connect_error is not None:
            raise self.connect_error
        if not self._lock.acquire(timeout=5):
            raise psycopg2.pool.PoolError("connection pool exhausted")
        conn = SQLiteConnection(self.raw, self.fail_with, self.cursor_error, self.rollback_error)
        self.borrowed.append(conn)
        return conn

    def release_connection(self, conn):
        self.released.append(conn)
        self._lock.release()

    def close(self):
        self.raw.close()


@pytest.fixture()
def db():
    database = SQLiteDatabase()
    create_tables(database)
    database.borrowed.clear()
    database.released.clear()
    yield database
    database.close()


@pytest.fixture()
def repo(db):
    return CourseRepository(db)
