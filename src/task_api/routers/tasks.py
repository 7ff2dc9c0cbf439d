from __future__ import annotations

import re
from typing import Any, Dict, List, Type, TypeVar

from fastapi import APIRouter, Depends, Request, status
from pydantic import BaseModel, ValidationError

from ..errors import INVALID_TASK_ID, INVALID_TASK_INPUT, InvalidInputError
from ..repositories import TaskRepository
from ..schemas import TaskCreate, TaskOut, TaskUpdate

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
)

_ID_TOKEN = re.compile(r"\+?[0-9]+")
# Largest id a signed 64-bit integer can hold
MAX_TASK_ID = 2**63 - 1

_ERROR_RESPONSES = {
    400: {"description": "Invalid task ID or malformed body", "content": {"text/plain": {}}},
    404: {"description": "Task not found", "content": {"text/plain": {}}},
}

BodyModel = TypeVar("BodyModel", bound=BaseModel)


def get_task_store(request: Request) -> TaskRepository:
    """
    Dependency returning the store owned by the running application.
    """
    return request.app.state.task_store


# PUBLIC_INTERFACE
def parse_task_id(task_id: str) -> int:
    """
    Convert the '{task_id}' path segment into a positive integer.

    The segment may be empty or contain slashes ('/tasks/', '/tasks/1/2');
    both are rejected here rather than by the router.

    Raises:
        InvalidInputError('Invalid task ID') for anything but an optionally
        '+'-prefixed run of ASCII digits with a value in 1..2**63-1.
    """
    if not _ID_TOKEN.fullmatch(task_id):
        raise InvalidInputError(INVALID_TASK_ID)
    value = int(task_id)
    if not (0 < value <= MAX_TASK_ID):
        raise InvalidInputError(INVALID_TASK_ID)
    return value


def _json_request_body(model: Type[BaseModel]) -> Dict[str, Any]:
    """OpenAPI requestBody for a route that decodes its body by hand."""
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": model.model_json_schema()}},
        }
    }


async def _decode_body(request: Request, model: Type[BodyModel]) -> BodyModel:
    """
    Decode the raw request body as JSON into model, whatever the Content-Type says.
    """
    raw = await request.body()
    try:
        return model.model_validate_json(raw)
    except ValidationError as exc:
        raise InvalidInputError(INVALID_TASK_INPUT) from exc


async def task_create_body(request: Request) -> TaskCreate:
    return await _decode_body(request, TaskCreate)


async def task_update_body(request: Request) -> TaskUpdate:
    return await _decode_body(request, TaskUpdate)


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TaskOut,
    summary="Create Task",
    description="Create a new task. The status is always 'pending', whatever the body says.",
    responses={400: _ERROR_RESPONSES[400]},
    openapi_extra=_json_request_body(TaskCreate),
)
def create_task(
    payload: TaskCreate = Depends(task_create_body),
    store: TaskRepository = Depends(get_task_store),
) -> TaskOut:
    """
    Create a new task.
    """
    created = store.create(payload)
    return TaskOut(**created)


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TaskOut],
    summary="List Tasks",
    description="List every task in creation order.",
)
def list_tasks(store: TaskRepository = Depends(get_task_store)) -> List[TaskOut]:
    return [TaskOut(**t) for t in store.list()]


# PUBLIC_INTERFACE
@router.get(
    "/{task_id:path}",
    response_model=TaskOut,
    summary="Get Task",
    description="Get a single task by ID.",
    responses=_ERROR_RESPONSES,
)
def get_task(
    task_id: int = Depends(parse_task_id),
    store: TaskRepository = Depends(get_task_store),
) -> TaskOut:
    """
    Retrieve a single task by its ID.
    """
    return TaskOut(**store.get(task_id))


# PUBLIC_INTERFACE
@router.put(
    "/{task_id:path}",
    response_model=TaskOut,
    summary="Update Task",
    description=(
        "Partially update a task. Empty title or description keep the current value; "
        "a status other than 'pending' or 'completed' is ignored."
    ),
    responses=_ERROR_RESPONSES,
    openapi_extra=_json_request_body(TaskUpdate),
)
def update_task(
    # The id is checked before the body is read
    task_id: int = Depends(parse_task_id),
    payload: TaskUpdate = Depends(task_update_body),
    store: TaskRepository = Depends(get_task_store),
) -> TaskOut:
    return TaskOut(**store.update(task_id, payload))


# PUBLIC_INTERFACE
@router.delete(
    "/{task_id:path}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Task",
    description="Delete a task by ID. The ID is never reused.",
    responses=_ERROR_RESPONSES,
)
def delete_task(
    task_id: int = Depends(parse_task_id),
    store: TaskRepository = Depends(get_task_store),
) -> None:
    """
    Delete a task. Returns 204 on success, 404 if not found.
    """
    store.delete(task_id)
    return None
