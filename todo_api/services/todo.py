"""
Todo repository
Data access for the todos table
Reference: https://docs.sqlalchemy.org/en/20/orm/queryguide/select.html
"""
import logging
from typing import List

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from todo_api.core.database import Database
from todo_api.core.exceptions import TodoCreationError, TodoRetrievalError
from todo_api.models.todo import Todo

logger = logging.getLogger(__name__)

# Appended to every task text written by create(); the HTTP response still
# echoes the text the client sent
STORED_TASK_SUFFIX = " (intercepted locally)"


class TodoRepository:
    """
    Narrow data-access layer over the todos table

    Every call opens its own session from the shared pool and closes it
    before returning, whether or not the call succeeded.
    """

    def __init__(self, database: Database):
        self.database = database

    async def list(self) -> List[Todo]:
        """
        Retrieve every todo

        Order is whatever the database returns for an unqualified scan.

        Returns:
            List of Todo objects, detached from their session

        Raises:
            TodoRetrievalError: the query or reading its rows failed
        """
        try:
            async with self.database.session() as session:
                result = await session.execute(select(Todo))
                return list(result.scalars().all())
        except (SQLAlchemyError, OSError) as e:
            logger.error(f"Error querying todos: {e}")
            raise TodoRetrievalError() from e

    async def create(self, task: str, completed: bool = False) -> int:
        """
        Insert a todo

        Args:
            task: Task text as sent by the client
            completed: Completion flag

        Returns:
            ID assigned by the database

        Raises:
            TodoCreationError: the insert failed
        """
        todo = Todo(task=task + STORED_TASK_SUFFIX, completed=completed)
        try:
            async with self.database.session() as session, session.begin():
                session.add(todo)
                # Flush sends the INSERT and reads back the generated id
                await session.flush()
        except (SQLAlchemyError, OSError, UnicodeError) as e:
            logger.error(f"Error inserting todo: {e}")
            raise TodoCreationError() from e
        return todo.id
