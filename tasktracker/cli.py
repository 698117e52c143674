"""Command-line interface for managing tasks stored in a JSON file."""

from __future__ import annotations

import re
import sys
from typing import Callable, Iterable, Sequence

from tasktracker.status import TaskStatus
from tasktracker.storage import export_task_list_to_file, import_task_list_from_file
from tasktracker.task import Task
from tasktracker.tasklist import TaskList, TaskNotFoundError

OUTPUT_FILE = "output.json"

_TASK_ID = re.compile(r"[+-]?[0-9]+")

_LIST_FILTERS = {
    "done": TaskStatus.DONE,
    "todo": TaskStatus.TODO,
    "in-progress": TaskStatus.IN_PROGRESS,
    "archive": TaskStatus.ARCHIVED,
}

_PADDING = 2


class CommandError(Exception):
    """A command was given missing or malformed arguments."""


def _parse_task_id(arg: str) -> int:
    if not _TASK_ID.fullmatch(arg):
        raise CommandError(f'invalid task ID: "{arg}"')
    return int(arg)


def add_task(task_list: TaskList, args: Sequence[str]) -> Task:
    """Add a task described by ``args[0]`` and report its id."""
    if not args:
        raise CommandError("description is required to add a task")
    task = task_list.add_task(args[0])
    print(f"Task added successfully (ID: {task.id})")
    return task


def update_task(task_list: TaskList, args: Sequence[str]) -> None:
    """Replace the description of the task ``args[0]`` with ``args[1]``."""
    if len(args) < 2:
        raise CommandError("task ID and new description are required to update a task")
    task_id = _parse_task_id(args[0])
    try:
        task = task_list.get_task_by_id(task_id)
    except TaskNotFoundError:
        raise CommandError(f"task with ID {task_id} not found") from None
    task.description = args[1]
    print("Task updated task successfully", end="")


def delete_task(task_list: TaskList, args: Sequence[str]) -> None:
    """Remove the task ``args[0]``."""
    if not args:
        raise CommandError("delete command requires an taskID")
    task_id = _parse_task_id(args[0])
    task_list.delete_task(task_id)
    print(f"Task deleted task successfully (ID: {task_id})")


def _mark(operation: Callable[[int], None], args: Sequence[str]) -> None:
    if not args:
        raise CommandError("delete command requires an taskID")
    operation(_parse_task_id(args[0]))


def mark_task_as_done(task_list: TaskList, args: Sequence[str]) -> None:
    _mark(task_list.mark_task_as_done, args)


def mark_task_as_in_progress(task_list: TaskList, args: Sequence[str]) -> None:
    _mark(task_list.mark_task_as_in_progress, args)


def mark_task_as_archived(task_list: TaskList, args: Sequence[str]) -> None:
    _mark(task_list.mark_task_as_archived, args)


def format_tasks(tasks: Iterable[Task]) -> str:
    """Render tasks as an aligned table with ID, Status and Description columns."""
    rows = [("ID", "Status", "Description"), ("--", "------", "-----------")]
    rows.extend((str(task.id), str(task.status), task.description) for task in tasks)
    id_width = max(len(row[0]) for row in rows) + _PADDING
    status_width = max(len(row[1]) for row in rows) + _PADDING
    return "".join(
        f"{ident:<{id_width}}{status:<{status_width}}{description}\n"
        for ident, status, description in rows
    )


def list_tasks(task_list: TaskList, args: Sequence[str]) -> None:
    """Print all tasks, or those with the status named by ``args[0]``."""
    if not args:
        tasks = task_list.get_all_tasks()
    else:
        status = _LIST_FILTERS.get(args[0])
        if status is None:
            raise CommandError(f"there is no such list command as {args[0]}")
        tasks = task_list.get_tasks_by_status(status)
    print(format_tasks(tasks), end="")


_COMMANDS: dict[str, Callable[[TaskList, Sequence[str]], object]] = {
    "add": add_task,
    "update": update_task,
    "delete": delete_task,
    "mark-in-progress": mark_task_as_in_progress,
    "mark-done": mark_task_as_done,
    "list": list_tasks,
}


def handle_command(task_list: TaskList, argv: Sequence[str]) -> None:
    """Run the command ``argv[0]`` with the arguments that follow it."""
    if not argv:
        raise CommandError("a command is required")
    command = _COMMANDS.get(argv[0])
    if command is None:
        print("Error")
        return
    command(task_list, list(argv[1:]))


def main(argv: Sequence[str] | None = None) -> int:
    """Load the task file, run one command, and save the file if it succeeded."""
    if argv is None:
        argv = sys.argv[1:]
    task_list = import_task_list_from_file(OUTPUT_FILE)
    try:
        handle_command(task_list, argv)
    except (CommandError, TaskNotFoundError) as exc:
        message = exc.args[0] if isinstance(exc, TaskNotFoundError) else str(exc)
        print(f"Error: {message}")
        return 1
    export_task_list_to_file(OUTPUT_FILE, task_list)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())