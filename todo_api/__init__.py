"""
Todo API: a task-list service over HTTP/JSON backed by PostgreSQL
"""

__version__ = "0.1.0"
