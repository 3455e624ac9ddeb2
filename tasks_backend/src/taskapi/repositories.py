from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from threading import Lock
from typing import List, Optional

from .models import TaskEntity

logger = logging.getLogger(__name__)


# PUBLIC_INTERFACE
class TaskStore(ABC):
    """Abstract contract for task storage backends."""

    @abstractmethod
    def list_tasks(self) -> List[TaskEntity]:
        """Return a snapshot of all tasks in insertion order."""

    @abstractmethod
    def insert(self, title: str, done: bool) -> TaskEntity:
        """Assign the next id to a new task, append it and return it."""

    @abstractmethod
    def find_by_id(self, task_id: int) -> Optional[TaskEntity]:
        """Return the task with the given id, or None if not found."""

    @abstractmethod
    def delete_by_id(self, task_id: int) -> bool:
        """Remove the task with the given id. Return True if removed, False if not found."""

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored tasks."""


class InMemoryTaskStore(TaskStore):
    """
    Thread-safe in-memory task store.

    The task list and the id counter are guarded together by one exclusive
    lock. Every operation holds it only for its own work and hands out copies,
    so callers serialize results after the lock is released.
    """

    def __init__(self) -> None:
        self._lock = Lock()
        self._items: List[TaskEntity] = []
        self._next_id = 1

    def list_tasks(self) -> List[TaskEntity]:
        with self._lock:
            return [t.copy() for t in self._items]

    def insert(self, title: str, done: bool) -> TaskEntity:
        with self._lock:
            entity: TaskEntity = {
                "id": self._next_id,
                "title": title,
                "done": done,
            }
            self._next_id += 1
            self._items.append(entity)
        logger.debug("Inserted task id=%s", entity["id"])
        return entity.copy()

    def find_by_id(self, task_id: int) -> Optional[TaskEntity]:
        with self._lock:
            for t in self._items:
                if t["id"] == task_id:
                    return t.copy()
            return None

    def delete_by_id(self, task_id: int) -> bool:
        with self._lock:
            for i, t in enumerate(self._items):
                if t["id"] == task_id:
                    del self._items[i]
                    break
            else:
                return False
        logger.debug("Deleted task id=%s", task_id)
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._items)
