"""
Task manager ORM models.
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from cinedex.models.orm.base import Base, TimestampMixin


class Category(TimestampMixin, Base):
    """Task category database table."""

    __tablename__ = "categories"

    name: Mapped[str] = mapped_column(String(255))

    tasks: Mapped[list["Task"]] = relationship(back_populates="category")


class Task(TimestampMixin, Base):
    """Task database table."""

    __tablename__ = "tasks"

    title: Mapped[str] = mapped_column(String(500))
    description: Mapped[str] = mapped_column(Text, default="", server_default="")
    category_id: Mapped[UUID] = mapped_column(
        ForeignKey("categories.id", ondelete="RESTRICT", name="fk_tasks_category_id")
    )

    category: Mapped["Category"] = relationship(back_populates="tasks")

    __table_args__ = (Index("ix_tasks_category_id", "category_id"),)
