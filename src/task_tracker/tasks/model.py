from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import format_datetime
from ..core.enums import TaskPriority, TaskStatus


@dataclass(frozen=True)
class Task:
    """Domain entity: Task. ``employee_id`` None means unassigned."""

    id: int
    employee_id: Optional[int]
    title: str
    description: Optional[str]
    due_date: Optional[datetime]
    priority: TaskPriority
    status: TaskStatus
    created_at: datetime
    updated_at: datetime

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "employeeId": self.employee_id,
            "title": self.title,
            "description": self.description,
            "dueDate": format_datetime(self.due_date),
            "priority": self.priority.value,
            "status": self.status.value,
            "createdAt": format_datetime(self.created_at),
            "updatedAt": format_datetime(self.updated_at),
        }
