"""
repositories/course_repo.py
---------------------------
Data access layer for catalog courses.
All SQL queries related to the `courses` table live here.
"""

from typing import Callable, Optional

import psycopg2

from models.course import Course
from repositories.errors import DecodeError, StatementError
from utils.ids import new_id
from utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = ("id", "name", "description", "category_id")


class CourseRepository:
    """
    Repository for create/read operations on the courses table.

    Holds only a reference to the shared database handle, so a single
    instance may be used from several threads at once.
    """

    def __init__(self, db, id_factory: Callable[[], str] = new_id):
        """
        Args:
            db: Database handle providing get_connection/release_connection.
            id_factory: Zero-argument callable returning a new unique id.
        """
        self.db = db
        self._new_id = id_factory

    # ── CREATE ────────────────────────────────────────────

    def create(self, name: str, description: Optional[str], category_id: str) -> Course:
        """
        Insert a new course.

        Args:
            name: Course title.
            description: Free text; None is stored as ''.
            category_id: Identifier of the owning category.

        Returns:
            The persisted Course, carrying the id that was written.

        Raises:
            StatementError: If the INSERT fails.
        """
        course = Course(
            id=self._new_id(),
            name=name,
            description=description or "",
            category_id=category_id,
        )
        sql = """
            INSERT INTO courses (id, name, description, category_id)
            VALUES (%s, %s, %s, %s);
        """
        conn = None
        try:
            conn = self.db.get_connection()
            with conn.cursor() as cur:
                cur.execute(sql, (course.id, course.name, course.description, course.category_id))
            conn.commit()
        except psycopg2.Error as e:
            logger.error(f"Failed to create course '{name}': {e}")
            if conn is not None:
                self._rollback(conn)
            raise StatementError(f"Failed to create course: {e}") from e
        finally:
            if conn is not None:
                self.db.release_connection(conn)
        logger.info(f"Created course {course.id} in category {course.category_id}")
        return course

    # ── READ ──────────────────────────────────────────────

    def find_all(self) -> list[Course]:
        """
        Fetch every course, in the store's natural order.

        Raises:
            StatementError: If the SELECT fails.
            DecodeError: If a row does not have the expected shape.
        """
        sql = "SELECT id, name, description, category_id FROM courses;"
        return self._query(sql, ())

    def find_by_category(self, category_id: str) -> list[Course]:
        """
        Fetch the courses belonging to one category (exact match).

        Returns:
            List of Course objects, empty when the category has none.
        """
        sql = """
            SELECT id, name, description, category_id FROM courses
            WHERE category_id = %s;
        """
        return self._query(sql, (category_id,))

    # ── HELPERS ───────────────────────────────────────────

    def _query(self, sql: str, params: tuple) -> list[Course]:
        """Run a SELECT and decode every row; all-or-nothing."""
        conn = None
        try:
            conn = self.db.get_connection()
            with conn.cursor() as cur:
                cur.execute(sql, params)
                rows = cur.fetchall()
                courses = [self._row_to_course(r) for r in rows]
        except psycopg2.Error as e:
            logger.error(f"Course query failed: {e}")
            raise StatementError(f"Course query failed: {e}") from e
        finally:
            if conn is not None:
                self.db.release_connection(conn)
        logger.debug(f"Fetched {len(courses)} course(s)")
        return courses

    @staticmethod
    def _rollback(conn) -> None:
        """Roll back, logging instead of raising when the connection is already gone."""
        try:
            conn.rollback()
        except psycopg2.Error as e:
            logger.error(f"Rollback failed: {e}")

    @staticmethod
    def _row_to_course(row) -> Course:
        """Convert a (id, name, description, category_id) row to a Course."""
        if row is None or len(row) != len(_COLUMNS):
            size = "no" if row is None else len(row)
            logger.error(f"Course row has {size} columns, expected {len(_COLUMNS)}")
            raise DecodeError(f"Expected {len(_COLUMNS)} columns, got {size}")
        for column, value in zip(_COLUMNS, row):
            if not isinstance(value, str):
                logger.error(f"Course column '{column}' has type {type(value).__name__}")
                raise DecodeError(
                    f"Column '{column}' must be text, got {type(value).__name__}"
                )
        return Course(id=row[0], name=row[1], description=row[2], category_id=row[3])
