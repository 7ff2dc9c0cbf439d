from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from threading import RLock
from typing import Dict, List

from .errors import TaskNotFoundError
from .models import TaskEntity, TaskStatus
from .schemas import TaskCreate, TaskUpdate

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class TaskRepository(ABC):
    """Abstract repository contract for task storage."""

    @abstractmethod
    def create(self, data: TaskCreate) -> TaskEntity:
        """Create and return a new pending TaskEntity with a freshly assigned id."""

    @abstractmethod
    def get(self, task_id: int) -> TaskEntity:
        """Return a TaskEntity by id. Raise TaskNotFoundError if absent."""

    @abstractmethod
    def update(self, task_id: int, data: TaskUpdate) -> TaskEntity:
        """Apply a partial update and return the updated entity. Raise TaskNotFoundError if absent."""

    @abstractmethod
    def delete(self, task_id: int) -> None:
        """Remove a TaskEntity by id. Raise TaskNotFoundError if absent."""

    @abstractmethod
    def list(self) -> List[TaskEntity]:
        """Return every TaskEntity in creation order."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored tasks."""


class InMemoryTaskRepository(TaskRepository):
    """
    Thread-safe in-memory task store.

    A single lock guards both the records and the id counter, so every
    operation is serialized with respect to every other one. Ids start at 1
    and are never handed out twice, even after a delete.
    """

    def __init__(self) -> None:
        self._lock = RLock()
        # dicts keep insertion order, and deleting a key keeps the order of the rest
        self._items: Dict[int, TaskEntity] = {}
        self._last_id = 0

    def _require(self, task_id: int) -> TaskEntity:
        item = self._items.get(task_id)
        if item is None:
            raise TaskNotFoundError(task_id)
        return item

    def create(self, data: TaskCreate) -> TaskEntity:
        with self._lock:
            self._last_id += 1
            entity: TaskEntity = {
                "id": self._last_id,
                "title": data.title,
                "description": data.description,
                "status": TaskStatus.PENDING.value,
            }
            self._items[entity["id"]] = entity
            logger.debug("Created task %d", entity["id"])
            return entity.copy()

    def get(self, task_id: int) -> TaskEntity:
        with self._lock:
            return self._require(task_id).copy()

    def update(self, task_id: int, data: TaskUpdate) -> TaskEntity:
        with self._lock:
            updated = self._require(task_id).copy()

            # Empty strings leave the stored value untouched
            if data.title:
                updated["title"] = data.title
            if data.description:
                updated["description"] = data.description
            if TaskStatus.is_valid(data.status):
                updated["status"] = data.status

            self._items[task_id] = updated
            logger.debug("Updated task %d", task_id)
            return updated.copy()

    def delete(self, task_id: int) -> None:
        with self._lock:
            self._require(task_id)
            del self._items[task_id]
            logger.debug("Deleted task %d", task_id)

    def list(self) -> List[TaskEntity]:
        with self._lock:
            # Return copies to avoid external mutation
            return [t.copy() for t in self._items.values()]

    def count(self) -> int:
        with self._lock:
            return len(self._items)
