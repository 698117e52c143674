import pytest

from tasktracker.status import TaskStatus, parse_task_status


@pytest.mark.parametrize(
    ("status", "label"),
    [
        (TaskStatus.TODO, "todo"),
        (TaskStatus.IN_PROGRESS, "in-progress"),
        (TaskStatus.DONE, "done"),
        (TaskStatus.ARCHIVED, "archived"),
    ],
)
def test_str_gives_label(status, label):
    assert str(status) == label


@pytest.mark.parametrize("status", list(TaskStatus))
def test_parse_round_trip(status):
    assert parse_task_status(str(status)) is status


@pytest.mark.parametrize("status", list(TaskStatus))
def test_format_uses_label(status):
    assert parse_task_status(f"{status}") is status


def test_values_follow_declaration_order():
    labels = ["todo", "in-progress", "done", "archived"]
    values = [int(parse_task_status(label)) for label in labels]
    assert values == [0, 1, 2, 3]


@pytest.mark.parametrize("text", ["", "Done", "archive", "unknown"])
def test_parse_invalid_raises(text):
    with pytest.raises(ValueError, match="invalid task status"):
        parse_task_status(text)