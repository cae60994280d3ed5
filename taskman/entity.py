"""The task entity and identifier parsing."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from taskman.datetimes import format_datetime, now, parse_datetime

_ID_PATTERN = re.compile(r"[+-]?\d+", re.ASCII)
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def id_from_string(text: str) -> int:
    """Parse a decimal task identifier; raises ValueError on bad input."""
    if not _ID_PATTERN.fullmatch(text):
        raise ValueError(f"invalid task id: {text!r}")
    value = int(text)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"task id out of range: {text!r}")
    return value


@dataclass
class Task:
    """A single to-do item."""

    id: int = 0
    text: str = ""
    is_completed: bool = False
    created_at: datetime = field(default=datetime.min)
    updated_at: datetime = field(default=datetime.min)

    @classmethod
    def new(cls, text: str) -> Task:
        """Create an uncompleted task stamped with the current time."""
        stamp = now()
        return cls(text=text, is_completed=False, created_at=stamp, updated_at=stamp)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-ready mapping of this task."""
        return {
            "id": self.id,
            "text": self.text,
            "is_completed": self.is_completed,
            "created_at": format_datetime(self.created_at),
            "updated_at": format_datetime(self.updated_at),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Task:
        """Build a task from a mapping; missing fields keep their defaults."""
        task = cls()
        if "id" in data:
            task.id = data["id"]
        if "text" in data:
            task.text = data["text"]
        if "is_completed" in data:
            task.is_completed = data["is_completed"]
        if "created_at" in data:
            task.created_at = parse_datetime(data["created_at"])
        if "updated_at" in data:
            task.updated_at = parse_datetime(data["updated_at"])
        return task

    def to_json(self) -> str:
        """Return the compact JSON text of this task."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)