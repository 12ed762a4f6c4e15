"""
Request-scoped dependencies and helpers
Reference: https://fastapi.tiangolo.com/tutorial/dependencies/
"""
import asyncio
import logging
from typing import Awaitable, TypeVar

from fastapi import Request

from todo_api.core.config import Settings
from todo_api.core.database import Database
from todo_api.core.exceptions import ClientDisconnectedError, RequestBodyTooLargeError
from todo_api.services.todo import TodoRepository

logger = logging.getLogger(__name__)

T = TypeVar("T")

# How often in-flight store work checks whether the client is still there
DISCONNECT_POLL_INTERVAL = 0.1


def get_database(request: Request) -> Database:
    """The Database the application was created with"""
    return request.app.state.database


def get_settings(request: Request) -> Settings:
    """The Settings the application was created with"""
    return request.app.state.settings


def get_todo_repository(request: Request) -> TodoRepository:
    """
    Dependency providing a TodoRepository bound to the shared pool

    Usage:
        @router.get("")
        async def handler(repository: TodoRepository = Depends(get_todo_repository)):
            ...
    """
    return TodoRepository(get_database(request))


async def read_body(request: Request, limit: int) -> bytes:
    """
    Read the whole request body, refusing anything over limit bytes

    Args:
        request: Incoming request
        limit: Maximum body size in bytes, 0 for no limit

    Raises:
        RequestBodyTooLargeError: body is larger than limit
    """
    body = bytearray()
    async for chunk in request.stream():
        body.extend(chunk)
        if limit and len(body) > limit:
            logger.warning(f"Rejected request body larger than {limit} bytes")
            raise RequestBodyTooLargeError()
    return bytes(body)


async def until_disconnected(
    request: Request,
    work: Awaitable[T],
    poll_interval: float = DISCONNECT_POLL_INTERVAL,
) -> T:
    """
    Await work, cancelling it if the client disconnects first

    The cancelled work is awaited before returning so its database
    connection is back in the pool when the request ends.

    Raises:
        ClientDisconnectedError: the client went away before work finished
    """
    task = asyncio.ensure_future(work)
    try:
        while True:
            done, _ = await asyncio.wait({task}, timeout=poll_interval)
            if done:
                return task.result()
            if await request.is_disconnected():
                logger.info(f"Client disconnected, cancelling {request.method} {request.url.path}")
                raise ClientDisconnectedError()
    finally:
        if not task.done():
            task.cancel()
            await asyncio.gather(task, return_exceptions=True)
