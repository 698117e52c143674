"""A single tracked task."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Mapping

from tasktracker.status import TaskStatus


def _now_rfc3339() -> str:
    """Current local time as an RFC 3339 string with second precision."""
    stamp = datetime.now().astimezone().isoformat(timespec="seconds")
    if stamp.endswith("+00:00"):
        stamp = stamp[: -len("+00:00")] + "Z"
    return stamp


@dataclass
class Task:
    """A task with a description, a status and creation/update timestamps."""

    id: int
    description: str
    status: TaskStatus = TaskStatus.TODO
    created_at: str = ""
    updated_at: str = ""

    @classmethod
    def create(cls, id: int, description: str) -> "Task":
        """Make a new to-do task stamped with the current time."""
        now = _now_rfc3339()
        return cls(
            id=id,
            description=description,
            status=TaskStatus.TODO,
            created_at=now,
            updated_at=now,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "description": self.description,
            "status": int(self.status),
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Task":
        if not isinstance(data, Mapping):
            raise ValueError("task must be a JSON object")
        return cls(
            id=int(data.get("id", 0)),
            description=str(data.get("description", "")),
            status=TaskStatus(int(data.get("status", 0))),
            created_at=str(data.get("created_at", "")),
            updated_at=str(data.get("updated_at", "")),
        )

    def __str__(self) -> str:
        return (
            f"{{ID:{self.id} Description:{self.description} Status:{self.status} "
            f"CreatedAt:{self.created_at} UpdatedAt:{self.updated_at}}}\n"
        )