"""Validation of raw task payloads.

``dueDate`` handling distinguishes three cases:
- key absent: on create no due date, on update leave the stored value alone
- explicit null: no due date (clears it on update)
- any other value: must parse (see ``parse_datetime_value``) or the whole
  payload is rejected with "Invalid dueDate"
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_datetime_value
from ..common.validators import UNSET, ErrorCollector, optional_id, optional_text, require_enum, require_non_empty
from ..core.constants import DEFAULT_TASK_PRIORITY, DEFAULT_TASK_STATUS
from ..core.enums import TaskPriority, TaskStatus
from ..core.exceptions import ValidationError

INVALID_TASK_DATA = "Invalid task data"
INVALID_DUE_DATE = "Invalid dueDate"


@dataclass(frozen=True)
class NewTask:
    title: str
    employee_id: Optional[int] = None
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    priority: TaskPriority = DEFAULT_TASK_PRIORITY
    status: TaskStatus = DEFAULT_TASK_STATUS


@dataclass(frozen=True)
class TaskChanges:
    """Partial update; fields left as UNSET are not touched."""

    employee_id: Any = UNSET
    title: Any = UNSET
    description: Any = UNSET
    due_date: Any = UNSET
    priority: Any = UNSET
    status: Any = UNSET

    def provided(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not UNSET}


def _require_mapping(raw: Any) -> Mapping[str, Any]:
    if not isinstance(raw, Mapping):
        raise ValidationError(INVALID_TASK_DATA, {"payload": "Expected a JSON object"})
    return raw


def normalize_due_date(raw: Mapping[str, Any]) -> Any:
    """UNSET when the key is absent, None for null, else a parsed datetime."""
    if "dueDate" not in raw:
        return UNSET
    value = raw["dueDate"]
    if value is None:
        return None
    try:
        return parse_datetime_value(value)
    except ValueError:
        raise ValidationError(INVALID_DUE_DATE, {"dueDate": INVALID_DUE_DATE})


def parse_new_task(raw: Any) -> NewTask:
    raw = _require_mapping(raw)
    due_date = normalize_due_date(raw)

    errors = ErrorCollector(INVALID_TASK_DATA)
    title = errors.check(require_non_empty, raw.get("title"), "title")
    employee_id = errors.check(optional_id, raw.get("employeeId"), "employeeId")
    description = errors.check(optional_text, raw.get("description"), "description")

    priority = DEFAULT_TASK_PRIORITY
    if raw.get("priority") is not None:
        priority = errors.check(require_enum, raw["priority"], TaskPriority, "priority")
    status = DEFAULT_TASK_STATUS
    if raw.get("status") is not None:
        status = errors.check(require_enum, raw["status"], TaskStatus, "status")
    errors.raise_if_any()

    return NewTask(
        title=title,
        employee_id=employee_id,
        description=description,
        due_date=None if due_date is UNSET else due_date,
        priority=priority,
        status=status,
    )


def parse_task_changes(raw: Any) -> TaskChanges:
    raw = _require_mapping(raw)
    values: dict[str, Any] = {}

    due_date = normalize_due_date(raw)
    if due_date is not UNSET:
        values["due_date"] = due_date

    errors = ErrorCollector(INVALID_TASK_DATA)
    if "title" in raw:
        values["title"] = errors.check(require_non_empty, raw["title"], "title")
    if "employeeId" in raw:
        values["employee_id"] = errors.check(optional_id, raw["employeeId"], "employeeId")
    if "description" in raw:
        values["description"] = errors.check(optional_text, raw["description"], "description")
    # priority/status are NOT NULL columns: present means it must be a valid value.
    if "priority" in raw:
        values["priority"] = errors.check(require_enum, raw["priority"], TaskPriority, "priority")
    if "status" in raw:
        values["status"] = errors.check(require_enum, raw["status"], TaskStatus, "status")
    errors.raise_if_any()

    return TaskChanges(**values)
