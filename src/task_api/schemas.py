from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .models import TaskStatus


def _none_to_empty(value: Any) -> Any:
    """A JSON null is treated like an absent field: the empty string."""
    return "" if value is None else value


# PUBLIC_INTERFACE
class TaskCreate(BaseModel):
    """
    Schema for creating a new task.

    Any 'status' or 'id' sent by the client is ignored; the store assigns both.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries",
                "description": "Milk, eggs, bread",
            }
        }
    )

    title: str = Field(default="", description="Short title for the task")
    description: str = Field(default="", description="Detailed description")

    @field_validator("title", "description", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return _none_to_empty(v)


# PUBLIC_INTERFACE
class TaskUpdate(BaseModel):
    """
    Schema for updating an existing task.

    Every field is optional. Empty strings mean "leave unchanged", and a status
    other than 'pending' or 'completed' is ignored rather than rejected.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "title": "Buy groceries and supplies",
                "description": "",
                "status": "completed",
            }
        }
    )

    title: str = Field(default="", description="New title; empty keeps the current one")
    description: str = Field(default="", description="New description; empty keeps the current one")
    status: str = Field(default="", description="'pending' or 'completed'; anything else is ignored")

    @field_validator("title", "description", "status", mode="before")
    @classmethod
    def null_as_empty(cls, v: Any) -> Any:
        return _none_to_empty(v)


# PUBLIC_INTERFACE
class TaskOut(BaseModel):
    """
    Schema returned by the API for a task.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": 1,
                "title": "Buy groceries",
                "description": "Milk, eggs, bread",
                "status": "pending",
            }
        }
    )

    id: int = Field(..., description="Unique identifier of the task")
    title: str = Field(..., description="Short title for the task")
    description: str = Field(..., description="Detailed description")
    status: TaskStatus = Field(..., description="Either 'pending' or 'completed'")
