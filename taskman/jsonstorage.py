"""Task storage backed by a JSON file."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

from taskman.datetimes import format_datetime, now, parse_datetime
from taskman.entity import Task
from taskman.storage import Storage


@dataclass
class MetaInfo:
    """Bookkeeping fields kept alongside the tasks."""

    items_count: int = 0
    last_updated: datetime = field(default=datetime.min)
    max_id: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "items_count": self.items_count,
            "last_updated": format_datetime(self.last_updated),
            "max_id": self.max_id,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MetaInfo:
        meta = cls()
        if "items_count" in data:
            meta.items_count = data["items_count"]
        if "last_updated" in data:
            meta.last_updated = parse_datetime(data["last_updated"])
        if "max_id" in data:
            meta.max_id = data["max_id"]
        return meta


@dataclass
class Database:
    """The whole content of the JSON database file."""

    meta_info: MetaInfo = field(default_factory=MetaInfo)
    tasks: list[Task] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "meta_info": self.meta_info.to_dict(),
            "tasks": [task.to_dict() for task in self.tasks],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Database:
        meta = data.get("meta_info") or {}
        tasks = data.get("tasks") or []
        return cls(
            meta_info=MetaInfo.from_dict(meta),
            tasks=[Task.from_dict(item) for item in tasks],
        )


class JsonStorage(Storage):
    """Stores tasks in a JSON file that must already exist."""

    def __init__(self, db_path: str | Path) -> None:
        self.db_path = Path(db_path)
        self._data = self.read_data()

    def get_all(self) -> list[Task]:
        return self.read_data().tasks

    def get(self, task_id: int) -> Task:
        for task in self.read_data().tasks:
            if task.id == task_id:
                return task
        return Task()

    def put(self, title: str) -> Task:
        task = Task.new(title)
        task.id = self.next_id()
        self._data.tasks.append(task)
        self.save_data()
        return task

    def update(self, task: Task) -> None:
        self._data.tasks = [task if stored.id == task.id else stored for stored in self._data.tasks]
        self.save_data()

    def read_data(self) -> Database:
        """Load the database file; raises OSError or ValueError on failure."""
        content = json.loads(self.db_path.read_text(encoding="utf-8"))
        if not isinstance(content, dict):
            raise ValueError(f"{self.db_path}: expected a JSON object")
        return Database.from_dict(content)

    def next_id(self) -> int:
        """Return the identifier the next new task will get."""
        return self.max_id() + 1

    def max_id(self) -> int:
        """Return the largest task id held in memory, never below zero."""
        return max([0, *(task.id for task in self._data.tasks)])

    def save_data(self) -> None:
        """Stamp the update time and write the database file."""
        self._data.meta_info.last_updated = now()
        text = json.dumps(self._data.to_dict(), indent=2, ensure_ascii=False)
        self.db_path.write_text(text, encoding="utf-8")