"""
Task and Category Repositories

Provides database operations for the task manager.
"""

from cinedex.core.query import QueryBuilder
from cinedex.models.orm.task import Category, Task
from cinedex.repositories.base import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    """Repository for Category model operations."""

    model = Category


class TaskRepository(BaseRepository[Task]):
    """Repository for Task model operations."""

    model = Task

    SORT_FIELDS = {
        "title": "title",
        "createdAt": "created_at",
        "updatedAt": "updated_at",
    }

    def list_query(self) -> QueryBuilder[Task]:
        """Tasks with their category loaded from the same query."""
        return self.query().join(Task.category)
