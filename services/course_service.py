"""
services/course_service.py
--------------------------
Course operations in the shape the API layer serves them.
"""

from typing import Optional

from repositories.course_repo import CourseRepository


class CourseService:
    """Thin façade over CourseRepository returning API payload dicts."""

    def __init__(self, repo: CourseRepository):
        self.repo = repo

    def create_course(
        self, name: str, category_id: str, description: Optional[str] = None
    ) -> dict:
        """Create a course and return its payload."""
        return self.repo.create(name, description, category_id).to_payload()

    def list_courses(self, category_id: Optional[str] = None) -> list[dict]:
        """List every course, or only those of `category_id` when given."""
        if category_id is None:
            courses = self.repo.find_all()
        else:
            courses = self.repo.find_by_category(category_id)
        return [c.to_payload() for c in courses]
