from __future__ import annotations

import re
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from ..repositories import TaskStore
from ..schemas import TaskCreate, TaskOut

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
)

_TASK_ID_RE = re.compile(r"[+-]?\d+")


# PUBLIC_INTERFACE
def get_store(request: Request) -> TaskStore:
    """
    Dependency returning the store the application was built with.
    """
    return request.app.state.store


# PUBLIC_INTERFACE
async def decode_task_payload(request: Request) -> TaskCreate:
    """
    Decode the request body as a task payload whatever its Content-Type.

    Raises:
        RequestValidationError if the body is not a JSON task object.
    """
    body = (await request.body()).decode("utf-8", errors="replace")
    try:
        return TaskCreate.model_validate_json(body)
    except ValidationError as e:
        errors = [
            {**err, "loc": ("body", *err["loc"])}
            for err in e.errors(include_url=False)
        ]
        raise RequestValidationError(errors, body=body) from e


# PUBLIC_INTERFACE
def parse_task_id(task_id: str) -> int:
    """
    Parse the path segment after /tasks/ as a plain decimal integer.

    The whole remainder of the path is the segment, so an empty id or an
    extra segment is rejected like any other non-integer.
    """
    if not _TASK_ID_RE.fullmatch(task_id):
        raise RequestValidationError(
            [
                {
                    "type": "int_parsing",
                    "loc": ("path", "task_id"),
                    "msg": "Input should be a valid integer",
                    "input": task_id,
                }
            ]
        )
    return int(task_id)


# PUBLIC_INTERFACE
@router.get(
    "",
    response_model=List[TaskOut],
    summary="List Tasks",
    description="Return every task in insertion order. An empty array when there are none.",
    responses={
        200: {"description": "List retrieved successfully"},
    },
)
def list_tasks(store: TaskStore = Depends(get_store)) -> List[TaskOut]:
    """
    List all tasks.
    """
    return [TaskOut(**t) for t in store.list_tasks()]


# PUBLIC_INTERFACE
@router.post(
    "",
    response_model=TaskOut,
    status_code=status.HTTP_201_CREATED,
    summary="Create Task",
    description="Create a new task. Any id in the payload is ignored; the server assigns one.",
    responses={
        201: {"description": "Task created successfully"},
        400: {"description": "Request body could not be decoded as a task"},
    },
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": TaskCreate.model_json_schema()}},
        }
    },
)
def create_task(
    payload: TaskCreate = Depends(decode_task_payload),
    store: TaskStore = Depends(get_store),
) -> TaskOut:
    """
    Create a new task and return it with its assigned id.
    """
    created = store.insert(payload.title, payload.done)
    return TaskOut(**created)


# PUBLIC_INTERFACE
@router.get(
    "/{task_id:path}",
    response_model=TaskOut,
    summary="Get Task",
    description="Get a single task by id.",
    responses={
        200: {"description": "Task found"},
        400: {"description": "Invalid task id"},
        404: {"description": "Task not found"},
    },
)
def get_task(task_id: int = Depends(parse_task_id), store: TaskStore = Depends(get_store)) -> TaskOut:
    """
    Retrieve a single task by its id.
    """
    item = store.find_by_id(task_id)
    if item is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return TaskOut(**item)


# PUBLIC_INTERFACE
@router.delete(
    "/{task_id:path}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete Task",
    description="Delete a task by id.",
    responses={
        204: {"description": "Task deleted"},
        400: {"description": "Invalid task id"},
        404: {"description": "Task not found"},
    },
)
def delete_task(task_id: int = Depends(parse_task_id), store: TaskStore = Depends(get_store)) -> None:
    """
    Delete a task. Returns 204 on success, 404 if not found.
    """
    if not store.delete_by_id(task_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Task not found")
    return None


@router.api_route(
    "/{task_id:path}",
    methods=["POST", "PUT", "PATCH"],
    include_in_schema=False,
)
def item_method_not_allowed(task_id: int = Depends(parse_task_id)) -> None:
    """
    The id is parsed before the method is rejected, so a bad id still gets 400.
    """
    raise HTTPException(
        status_code=status.HTTP_405_METHOD_NOT_ALLOWED,
        detail="Method Not Allowed",
        headers={"Allow": "GET, DELETE"},
    )
