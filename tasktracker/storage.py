"""Saving and loading a task list as a JSON file."""

from __future__ import annotations

import json
import os

from tasktracker.tasklist import TaskList

_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


def _escape(text: str) -> str:
    return "".join(_ESCAPES.get(ch, ch) for ch in text)


def export_task_list_to_file(filename: str | os.PathLike[str], task_list: TaskList) -> None:
    """Write ``task_list`` to ``filename`` as indented JSON, replacing the file."""
    text = json.dumps(task_list.to_dict(), indent=2, ensure_ascii=False)
    with open(filename, "w", encoding="utf-8") as handle:
        handle.write(_escape(text) + "\n")


def import_task_list_from_file(filename: str | os.PathLike[str]) -> TaskList:
    """Read a task list from ``filename``; a missing file gives an empty list."""
    try:
        with open(filename, encoding="utf-8") as handle:
            data = json.load(handle)
    except FileNotFoundError:
        return TaskList()
    return TaskList.from_dict(data)