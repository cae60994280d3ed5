"""Task operations on top of a storage backend."""

from __future__ import annotations

from taskman.datetimes import now
from taskman.entity import Task, id_from_string
from taskman.storage import Storage


class TasksService:
    """Lists, creates and completes tasks kept in a :class:`Storage`."""

    def __init__(self, storage: Storage) -> None:
        self._storage = storage

    def get(self, task_id: int) -> Task:
        """Return the task with ``task_id``, or an empty task if there is none."""
        return self._storage.get(task_id)

    def get_all(self) -> list[Task]:
        """Return all tasks: open ones first, each part ordered by title."""
        return sorted(self._storage.get_all(), key=lambda task: (task.is_completed, task.text))

    def put(self, title: str) -> Task:
        """Create and store a new task titled ``title``."""
        return self._storage.put(title)

    def mark_task(self, task_id: str, is_completed: bool) -> Task:
        """Set the completion flag of the task whose id is given as text.

        Raises ValueError when ``task_id`` is not a valid identifier.
        """
        parsed = id_from_string(task_id)
        task = self._storage.get(parsed)
        task.is_completed = is_completed
        task.updated_at = now()
        self._storage.update(task)
        return task