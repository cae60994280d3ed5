"""Storage interface and an in-memory implementation."""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod

from taskman.entity import Task
from taskman.idgenerate import IdGenerator


class Storage(ABC):
    """Persistence for tasks."""

    @abstractmethod
    def get(self, task_id: int) -> Task:
        """Return the task with ``task_id``, or an empty task if there is none."""

    @abstractmethod
    def get_all(self) -> list[Task]:
        """Return every stored task."""

    @abstractmethod
    def put(self, title: str) -> Task:
        """Create, store and return a new task titled ``title``."""

    @abstractmethod
    def update(self, task: Task) -> None:
        """Replace the stored task that has the same id as ``task``."""


class MemStorage(Storage):
    """Keeps tasks in a dictionary; identifiers start at zero."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._ids = IdGenerator()
        self._tasks: dict[int, Task] = {}

    def get(self, task_id: int) -> Task:
        with self._lock:
            return self._tasks.get(task_id, Task())

    def get_all(self) -> list[Task]:
        with self._lock:
            return list(self._tasks.values())

    def put(self, title: str) -> Task:
        task = Task.new(title)
        task.id = self._ids.next_id()
        with self._lock:
            self._tasks[task.id] = task
        return task

    def update(self, task: Task) -> None:
        with self._lock:
            self._tasks[task.id] = task

    def delete(self, task_id: int) -> None:
        """Remove the task with ``task_id`` if it exists."""
        with self._lock:
            self._tasks.pop(task_id, None)