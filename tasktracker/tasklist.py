"""An ordered collection of tasks with sequential ids."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from tasktracker.status import TaskStatus
from tasktracker.task import Task, _now_rfc3339


class TaskNotFoundError(LookupError):
    """No task has the requested id."""

    def __init__(self, task_id: int, context: str | None = None) -> None:
        self.task_id = task_id
        message = f"task with ID {task_id} not found"
        if context:
            message = f"{context}: {message}"
        super().__init__(message)


@dataclass
class TaskList:
    """Tasks in insertion order, plus the id the next added task will get."""

    tasks: list[Task] = field(default_factory=list)
    next_id: int = 1

    def add_task(self, description: str) -> Task:
        task = Task.create(self.next_id, description)
        self.tasks.append(task)
        self.next_id += 1
        return task

    def get_all_tasks(self) -> list[Task]:
        return list(self.tasks)

    def get_tasks_by_status(self, status: TaskStatus) -> list[Task]:
        return [task for task in self.tasks if task.status == status]

    def get_todo_tasks(self) -> list[Task]:
        return self.get_tasks_by_status(TaskStatus.TODO)

    def get_in_progress_tasks(self) -> list[Task]:
        return self.get_tasks_by_status(TaskStatus.IN_PROGRESS)

    def get_done_tasks(self) -> list[Task]:
        return self.get_tasks_by_status(TaskStatus.DONE)

    def get_task_by_id(self, id: int) -> Task:
        """Return the task with ``id``; raise TaskNotFoundError if absent."""
        task = next((task for task in self.tasks if task.id == id), None)
        if task is None:
            raise TaskNotFoundError(id)
        return task

    def delete_task(self, id: int) -> None:
        task = self.get_task_by_id(id)
        self.tasks.remove(task)

    def update_task(self, id: int, description: str) -> None:
        task = self._find(id, "error updating task")
        task.description = description
        task.updated_at = _now_rfc3339()

    def mark_task_as_done(self, id: int) -> None:
        self._set_status(id, TaskStatus.DONE)

    def mark_task_as_in_progress(self, id: int) -> None:
        self._set_status(id, TaskStatus.IN_PROGRESS)

    def mark_task_as_archived(self, id: int) -> None:
        self._set_status(id, TaskStatus.ARCHIVED)

    def to_dict(self) -> dict[str, Any]:
        return {
            "tasks": [task.to_dict() for task in self.tasks],
            "next_id": self.next_id,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "TaskList":
        if not isinstance(data, Mapping):
            raise ValueError("task list must be a JSON object")
        return cls(
            tasks=[Task.from_dict(item) for item in data.get("tasks") or []],
            next_id=int(data.get("next_id", 0)),
        )

    def _find(self, id: int, context: str) -> Task:
        try:
            return self.get_task_by_id(id)
        except TaskNotFoundError:
            raise TaskNotFoundError(id, context) from None

    def _set_status(self, id: int, status: TaskStatus) -> None:
        task = self._find(id, "error updating task status")
        task.status = status
        task.updated_at = _now_rfc3339()