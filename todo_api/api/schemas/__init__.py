"""
Pydantic schemas for API request/response models
"""

from todo_api.api.schemas.todo import TodoCreate, TodoListAdapter, TodoResponse

__all__ = ["TodoCreate", "TodoListAdapter", "TodoResponse"]
