"""
models/course.py
----------------
Domain model for catalog courses.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Course:
    """
    Represents a single catalog course.

    Attributes:
        id: Unique identifier, generated when the course is created.
        name: Human-readable course title.
        description: Free-text description ('' when none was given).
        category_id: Identifier of the owning category.
    """
    id: str
    name: str
    description: str
    category_id: str

    def to_payload(self) -> dict:
        """
        Project the course to the shape exposed by the API layer.
        An empty description is reported as absent.
        """
        description: Optional[str] = self.description or None
        return {"id": self.id, "name": self.name, "description": description}
