"""
FastAPI application factory
Reference: https://fastapi.tiangolo.com/tutorial/bigger-applications/
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from todo_api.api.api import api_router
from todo_api.core.config import Settings
from todo_api.core.database import Database
from todo_api.core.exceptions import TodoServiceError

logger = logging.getLogger(__name__)


def create_app(database: Database, settings: Settings) -> FastAPI:
    """
    Build the application around an already initialized Database

    The same app instance is served by every listener, so the database is
    not opened or closed here; whoever created it owns its lifetime.

    Args:
        database: Shared connection pool, stored on app.state
        settings: Application settings, stored on app.state

    Returns:
        Configured FastAPI application
    """
    # Reference: https://fastapi.tiangolo.com/reference/fastapi/
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description="Task list service backed by PostgreSQL",
        # Only /todos and /health are served
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.database = database
    app.state.settings = settings

    @app.exception_handler(TodoServiceError)
    async def todo_service_error_handler(request: Request, exc: TodoServiceError) -> PlainTextResponse:
        """Short plain-text message; details were logged where the error was raised"""
        return PlainTextResponse(exc.message, status_code=exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed_handler(request: Request, exc: StarletteHTTPException):
        """Plain-text 405; every other HTTP error keeps FastAPI's default body"""
        if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
            return PlainTextResponse(
                "Method not allowed",
                status_code=exc.status_code,
                headers=exc.headers,
            )
        return await http_exception_handler(request, exc)

    app.include_router(api_router)
    return app
