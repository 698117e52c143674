# tasktracker

A small command-line task tracker. Tasks are kept in `output.json` in the
current directory. If the file does not exist, the task list starts out
empty. After a command succeeds, the list is written back to the file.

Each task has an ID, a description, a status, and two timestamps: one for
when the task was created and one for when it was last updated. The status
is one of `todo`, `in-progress`, `done` or `archived`. New tasks start as
`todo`. IDs are given out in sequence starting at 1, and an ID is not
reused after its task is deleted.

## Installation

```
pip install .
```

## Usage

Add a task:

```
task-tracker add "Buy groceries"
```

Change the description of a task:

```
task-tracker update 1 "Buy groceries and cook dinner"
```

Delete a task:

```
task-tracker delete 1
```

Change the status of a task:

```
task-tracker mark-in-progress 2
task-tracker mark-done 2
```

List every task, or only the tasks that have one status:

```
task-tracker list
task-tracker list todo
task-tracker list in-progress
task-tracker list done
task-tracker list archive
```

The list prints as aligned columns:

```
ID  Status  Description
--  ------  -----------
2   done    Write report
3   todo    Call the plumber
```

### Errors

A command can fail in several ways: required arguments are missing, a task
ID is not an integer, no task has the given ID, or the `list` filter is
unknown. In each case the program prints `Error: <message>` and exits with
status 1. The file is left unchanged.

An unknown command name prints `Error`, and the program exits with status 0.

### Limits of the command line

- No command sets a task to `archived`. `list archive` shows only tasks
  that were archived through the library.
- `update` changes the description but does not change the task's
  updated-at timestamp.

## Library use

```python
from tasktracker.tasklist import TaskList
from tasktracker.storage import export_task_list_to_file, import_task_list_from_file

tasks = TaskList()
task = tasks.add_task("Write report")
tasks.mark_task_as_in_progress(task.id)
export_task_list_to_file("tasks.json", tasks)

loaded = import_task_list_from_file("tasks.json")
print([t.description for t in loaded.get_in_progress_tasks()])
```

The modules:

- `tasktracker.status`
  - `TaskStatus`: an integer enum whose `str()` is the status label.
  - `parse_task_status`: turns a label into a status. It raises `ValueError`
    for an unknown label.
- `tasktracker.task`
  - `Task`: a dataclass. `Task.create` makes a new task stamped with the
    current time. `to_dict` and `from_dict` convert a task to and from its
    JSON form.
- `tasktracker.tasklist`
  - `TaskList` can:
    - add tasks;
    - look up tasks by ID or by status;
    - delete tasks;
    - update a task's description;
    - mark a task as done, in progress or archived.

    Updating a description or a status also refreshes the task's
    updated-at timestamp.
  - Looking up a missing ID raises `TaskNotFoundError`, which is a
    `LookupError`.
- `tasktracker.storage`
  - `export_task_list_to_file` writes indented JSON.
  - `import_task_list_from_file` reads the file back. A missing file gives
    an empty `TaskList`.
- `tasktracker.cli`
  - `main(argv=None)` is the entry point for the command line.
  - `handle_command` runs one command against a `TaskList`.
  - `format_tasks` renders the table shown above.
- `tasktracker.app`
  - `App`: a named application. `App.run` prints
    `Running application: <name>`.
- `tasktracker.utils`
  - `add`, `subtract`, `multiply` and `divide`: integer helpers. `divide`
    truncates toward zero and raises `ZeroDivisionError` when the divisor
    is 0.

## Running the tests

```
pip install .[test]
pytest
```