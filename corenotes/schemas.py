"""
Pydantic schemas for the Corenotes API.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from corenotes.constants import TaskColor
from corenotes.ids import TASK_ID_PATTERN


class TaskItem(BaseModel):
    id: str
    title: str
    description: str
    color: TaskColor
    favorite: bool


class ListTasksResponse(BaseModel):
    tasks: list[TaskItem]


class CreateTaskRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    title: str
    description: str
    favorite: bool


class CreateTaskResponse(BaseModel):
    id: str = Field(..., pattern=TASK_ID_PATTERN)
    color: TaskColor


class EditTaskRequest(BaseModel):
    """Partial edit; fields left out are not touched, unknown keys are ignored."""

    model_config = ConfigDict(strict=True)

    # Defaults are never validated, so an explicit null is still rejected.
    title: str = Field(default=None)
    description: str = Field(default=None)
    color: TaskColor = Field(default=None)
    favorite: bool = Field(default=None)

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)


class TaskNotFoundResponse(BaseModel):
    error: Literal["task_not_found"]


class UnauthorizedResponse(BaseModel):
    error: Literal["unauthorized"]
