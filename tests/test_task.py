from datetime import datetime

import pytest

from tasktracker.status import TaskStatus
from tasktracker.task import Task


def _parse(stamp):
    return datetime.fromisoformat(stamp.replace("Z", "+00:00"))


def test_create_sets_fields():
    task = Task.create(5, "Design database schema")
    assert task.id == 5
    assert task.description == "Design database schema"
    assert task.status is TaskStatus.TODO
    assert task.created_at == task.updated_at


def test_create_timestamps_are_rfc3339_with_zone():
    task = Task.create(1, "x")
    parsed = _parse(task.created_at)
    assert parsed.tzinfo is not None
    assert parsed.microsecond == 0
    assert abs((datetime.now(parsed.tzinfo) - parsed).total_seconds()) < 60


def test_to_dict_uses_json_field_names():
    task = Task(3, "desc", TaskStatus.DONE, "c", "u")
    assert task.to_dict() == {
        "id": 3,
        "description": "desc",
        "status": int(TaskStatus.DONE),
        "created_at": "c",
        "updated_at": "u",
    }


@pytest.mark.parametrize("status", list(TaskStatus))
def test_dict_round_trip(status):
    task = Task(9, "Write unit tests", status, "c", "u")
    assert Task.from_dict(task.to_dict()) == task


def test_from_dict_missing_fields_default():
    task = Task.from_dict({"id": 2})
    assert task == Task(2, "", TaskStatus.TODO, "", "")


def test_from_dict_rejects_non_object():
    with pytest.raises(ValueError):
        Task.from_dict([1, 2])


def test_str_lists_fields_with_status_label():
    task = Task(7, "write", TaskStatus.DONE, "a", "b")
    assert str(task) == "{ID:7 Description:write Status:done CreatedAt:a UpdatedAt:b}\n"