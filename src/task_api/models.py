from __future__ import annotations

from enum import Enum
from typing import TypedDict


# PUBLIC_INTERFACE
class TaskStatus(str, Enum):
    """Lifecycle marker of a task."""

    PENDING = "pending"
    COMPLETED = "completed"

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Return True only for the exact wire value of a known status."""
        return value in {status.value for status in cls}


# PUBLIC_INTERFACE
class TaskEntity(TypedDict):
    """
    A task record as held by the in-memory store.

    Fields:
    - id: Unique integer identifier, assigned by the store, never reused
    - title: Short title
    - description: Free-form description
    - status: One of the TaskStatus values ('pending' or 'completed')
    """

    id: int
    title: str
    description: str
    status: str
