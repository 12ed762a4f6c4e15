"""
Database models
All SQLAlchemy models should be defined here or imported here
"""
from todo_api.models.base import Base
from todo_api.models.todo import Todo

__all__ = ["Base", "Todo"]
