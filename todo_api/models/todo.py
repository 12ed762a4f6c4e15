"""
Todo database model
SQLAlchemy model for the todos table
Reference: https://docs.sqlalchemy.org/en/20/orm/declarative_styles.html
"""
from datetime import datetime
from sqlalchemy import Boolean, DateTime, Index, Integer, String, false, func
from sqlalchemy.orm import Mapped, mapped_column

from todo_api.models.base import Base


class Todo(Base):
    """
    Todo model representing a single task in the database

    Attributes:
        id: Primary key, assigned by the database on insert
        task: Task text (required, at most 255 characters)
        completed: Whether the task is completed (default: False)
        created_at: Timestamp set by the database on insert, never exposed over HTTP

    Rows are only ever inserted; nothing in the service updates or deletes them.
    """
    __tablename__ = "todos"
    __table_args__ = (
        # Supports filtering by completion status
        Index("idx_todos_completed", "completed"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    task: Mapped[str] = mapped_column(String(255), nullable=False)
    completed: Mapped[bool | None] = mapped_column(
        Boolean,
        default=False,
        server_default=false(),
    )

    # Set by PostgreSQL on INSERT
    # Reference: https://docs.sqlalchemy.org/en/20/core/defaults.html#server-side-defaults
    created_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        server_default=func.current_timestamp(),
    )

    def __repr__(self) -> str:
        """String representation of Todo"""
        return f"<Todo(id={self.id}, task='{self.task}', completed={self.completed})>"
