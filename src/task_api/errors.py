from __future__ import annotations

from typing import Optional

INVALID_TASK_ID = "Invalid task ID"
INVALID_TASK_INPUT = "Invalid task input"
TASK_NOT_FOUND = "Task not found"


class TaskServiceError(Exception):
    """
    Base class for failures that end a request with a plain-text message.

    Subclasses fix the HTTP status code; the message is what the client sees.
    """

    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


# PUBLIC_INTERFACE
class InvalidInputError(TaskServiceError):
    """Malformed request body or an id token that is not a positive integer."""

    status_code = 400
    default_message = INVALID_TASK_INPUT


# PUBLIC_INTERFACE
class TaskNotFoundError(TaskServiceError):
    """No task with the requested id is stored."""

    status_code = 404
    default_message = TASK_NOT_FOUND

    def __init__(self, task_id: Optional[int] = None, message: Optional[str] = None) -> None:
        self.task_id = task_id
        super().__init__(message)
