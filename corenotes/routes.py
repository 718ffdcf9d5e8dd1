"""
HTTP routes for the task API.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from fastapi import APIRouter, Depends, Path, Query, Response
from fastapi.responses import JSONResponse

from corenotes.auth import require_user
from corenotes.constants import pick_task_color
from corenotes.db import TaskRecord, TaskStore
from corenotes.dependencies import get_rng, get_task_store
from corenotes.ids import TASK_ID_PATTERN, new_task_id
from corenotes.schemas import (
    CreateTaskRequest,
    CreateTaskResponse,
    EditTaskRequest,
    ListTasksResponse,
    TaskItem,
    TaskNotFoundResponse,
    UnauthorizedResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["tasks"])

TASK_NOT_FOUND_RESPONSES = {
    404: {"model": TaskNotFoundResponse, "description": "404 Response"},
}


def _task_not_found() -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": "task_not_found"})


@router.get(
    "/tasks",
    response_model=ListTasksResponse,
    summary="List tasks",
    operation_id="list_tasks",
)
def list_tasks(
    search: Optional[str] = Query(None),
    user: str = Depends(require_user),
    store: TaskStore = Depends(get_task_store),
):
    tasks = store.list_tasks(user, search=search)
    return ListTasksResponse(
        tasks=[TaskItem(**task.as_dict()) for task in tasks]
    )


@router.post(
    "/tasks",
    response_model=CreateTaskResponse,
    status_code=201,
    summary="Create task",
    operation_id="create_task",
    responses={401: {"model": UnauthorizedResponse, "description": "401 Response"}},
)
def create_task(
    payload: CreateTaskRequest,
    user: str = Depends(require_user),
    store: TaskStore = Depends(get_task_store),
    rng: random.Random = Depends(get_rng),
):
    if not user:
        return JSONResponse(status_code=401, content={"error": "unauthorized"})

    record = store.create_task(
        TaskRecord(
            id=new_task_id(),
            user_id=user,
            title=payload.title,
            description=payload.description,
            color=pick_task_color(rng),
            favorite=payload.favorite,
        )
    )
    logger.info("Created task %s for user %s", record.id, user)
    return CreateTaskResponse(id=record.id, color=record.color)


@router.patch(
    "/tasks/{task_id}",
    status_code=204,
    response_class=Response,
    summary="Edit task",
    operation_id="edit_task",
    responses=TASK_NOT_FOUND_RESPONSES,
)
def edit_task(
    payload: EditTaskRequest,
    task_id: str = Path(..., pattern=TASK_ID_PATTERN),
    user: str = Depends(require_user),
    store: TaskStore = Depends(get_task_store),
):
    if not store.update_task(task_id, user, payload.changes()):
        logger.info("Edit of unknown task %s by user %s", task_id, user)
        return _task_not_found()
    return Response(status_code=204)


@router.delete(
    "/tasks/{task_id}",
    status_code=204,
    response_class=Response,
    summary="Delete task",
    operation_id="delete_task",
    responses=TASK_NOT_FOUND_RESPONSES,
)
def delete_task(
    task_id: str = Path(..., pattern=TASK_ID_PATTERN),
    user: str = Depends(require_user),
    store: TaskStore = Depends(get_task_store),
):
    if not store.delete_task(task_id, user):
        logger.info("Delete of unknown task %s by user %s", task_id, user)
        return _task_not_found()
    logger.info("Deleted task %s for user %s", task_id, user)
    return Response(status_code=204)
