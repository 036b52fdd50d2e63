from __future__ import annotations

from datetime import datetime

import pytest

from task_tracker.common.validators import UNSET
from task_tracker.core.enums import TaskPriority, TaskStatus
from task_tracker.core.exceptions import ValidationError
from task_tracker.tasks.payloads import parse_new_task, parse_task_changes


def test_new_task_defaults():
    data = parse_new_task({"title": "Write report"})
    assert data.priority is TaskPriority.MEDIUM
    assert data.status is TaskStatus.PENDING
    assert data.employee_id is None
    assert data.due_date is None


def test_new_task_requires_title():
    with pytest.raises(ValidationError) as exc:
        parse_new_task({"title": "   ", "priority": "high"})
    assert exc.value.errors == {"title": "Required"}


@pytest.mark.parametrize("field, value", [("priority", "urgent"), ("status", "done"), ("employeeId", "abc")])
def test_new_task_rejects_bad_values(field, value):
    with pytest.raises(ValidationError) as exc:
        parse_new_task({"title": "t", field: value})
    assert field in exc.value.errors


def test_new_task_due_date_forms():
    assert parse_new_task({"title": "t", "dueDate": None}).due_date is None
    assert parse_new_task({"title": "t", "dueDate": "2025-06-01T12:00:00Z"}).due_date == datetime(2025, 6, 1, 12)
    assert parse_new_task({"title": "t", "dueDate": 0}).due_date == datetime(1970, 1, 1)


def test_new_task_invalid_due_date():
    with pytest.raises(ValidationError) as exc:
        parse_new_task({"title": "t", "dueDate": "someday"})
    assert exc.value.message == "Invalid dueDate"


def test_changes_without_due_date_leave_it_unset():
    changes = parse_task_changes({"title": "New"})
    assert changes.due_date is UNSET
    assert changes.provided() == {"title": "New"}


def test_changes_with_null_due_date_clear_it():
    assert parse_task_changes({"dueDate": None}).provided() == {"due_date": None}


def test_changes_with_unparseable_due_date_are_rejected():
    with pytest.raises(ValidationError) as exc:
        parse_task_changes({"dueDate": "next tuesday-ish"})
    assert exc.value.errors == {"dueDate": "Invalid dueDate"}


def test_changes_reject_null_status():
    with pytest.raises(ValidationError) as exc:
        parse_task_changes({"status": None})
    assert "status" in exc.value.errors


def test_changes_can_unassign():
    assert parse_task_changes({"employeeId": None}).provided() == {"employee_id": None}
