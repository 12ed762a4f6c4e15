"""
Todo API routes
List and create endpoints on /todos
Reference: https://fastapi.tiangolo.com/tutorial/bigger-applications/
"""
import logging

from fastapi import APIRouter, Depends, Request, Response, status
from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from todo_api.api.dependencies import get_settings, get_todo_repository, read_body, until_disconnected
from todo_api.api.schemas.todo import TodoCreate, TodoListAdapter, TodoResponse
from todo_api.core.config import Settings
from todo_api.core.exceptions import InvalidRequestBodyError, TodoEncodingError
from todo_api.services.todo import TodoRepository

logger = logging.getLogger(__name__)

# Other methods on /todos are answered 405 by the framework
router = APIRouter(
    prefix="/todos",
    tags=["todos"],
    responses={
        405: {"description": "Method not allowed"},
        500: {"description": "Internal server error"},
    },
)


@router.get(
    "",
    summary="List todos",
    description="Retrieve every todo; an empty table yields null",
    status_code=status.HTTP_200_OK,
)
async def list_todos(
    request: Request,
    repository: TodoRepository = Depends(get_todo_repository),
) -> Response:
    """
    Get all todos

    Returns:
        JSON array of {id, task, completed}, or null when there are none

    Raises:
        TodoRetrievalError: the store query failed (500)
        TodoEncodingError: the result could not be serialized (500)
    """
    todos = await until_disconnected(request, repository.list())

    try:
        payload = [TodoResponse.model_validate(todo) for todo in todos] or None
        body = TodoListAdapter.dump_json(payload)
    except (ValidationError, PydanticSerializationError) as e:
        logger.error(f"Error encoding todos: {e}")
        raise TodoEncodingError() from e

    return Response(content=body, media_type="application/json")


@router.post(
    "",
    summary="Create todo",
    description="Create a todo from {task, completed}",
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid request body"},
        413: {"description": "Request body too large"},
    },
)
async def create_todo(
    request: Request,
    repository: TodoRepository = Depends(get_todo_repository),
    settings: Settings = Depends(get_settings),
) -> Response:
    """
    Create a todo

    The body is parsed by hand so malformed input gets a plain-text 400
    instead of FastAPI's validation payload.

    Returns:
        The created todo; task is the text the client sent

    Raises:
        InvalidRequestBodyError: body is not JSON of the expected shape (400)
        RequestBodyTooLargeError: body exceeds MAX_BODY_BYTES (413)
        TodoCreationError: the insert failed (500)
    """
    raw = await read_body(request, settings.MAX_BODY_BYTES)
    try:
        # pydantic-core's parser bounds nesting depth and refuses lone surrogates
        new_todo = TodoCreate.model_validate_json(raw)
    except ValidationError as e:
        logger.error(f"Error decoding request body: {e}")
        raise InvalidRequestBodyError() from e

    todo_id = await until_disconnected(
        request,
        repository.create(new_todo.task, new_todo.completed),
    )
    todo = TodoResponse(id=todo_id, task=new_todo.task, completed=new_todo.completed)

    try:
        body = todo.model_dump_json()
    except PydanticSerializationError as e:
        logger.error(f"Error encoding created todo: {e}")
        raise TodoEncodingError("Failed to encode created todo") from e

    logger.info(f"Created todo: {todo!r}")
    return Response(content=body, status_code=status.HTTP_201_CREATED, media_type="application/json")
