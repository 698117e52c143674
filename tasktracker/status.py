"""Task statuses and their text labels."""

from __future__ import annotations

from enum import IntEnum


class TaskStatus(IntEnum):
    """Lifecycle state of a task; stored as its integer value."""

    TODO = 0
    IN_PROGRESS = 1
    DONE = 2
    ARCHIVED = 3

    def __str__(self) -> str:
        return _LABELS[self]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_LABELS = {
    TaskStatus.TODO: "todo",
    TaskStatus.IN_PROGRESS: "in-progress",
    TaskStatus.DONE: "done",
    TaskStatus.ARCHIVED: "archived",
}

_BY_LABEL = {label: status for status, label in _LABELS.items()}


def parse_task_status(status: str) -> TaskStatus:
    """Return the status named by ``status``; raise ValueError if there is none."""
    try:
        return _BY_LABEL[status]
    except KeyError:
        raise ValueError(f"invalid task status: {status}") from None