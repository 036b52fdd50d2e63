from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PriorityBreakdown:
    high: int = 0
    medium: int = 0
    low: int = 0

    @property
    def total(self) -> int:
        return self.high + self.medium + self.low


@dataclass(frozen=True)
class EmployeeTaskCount:
    employee_id: int
    employee_name: str
    task_count: int


@dataclass(frozen=True)
class DashboardStats:
    """Derived snapshot of the task board; recomputed on every read, never stored."""

    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    in_progress_tasks: int
    completion_rate: int
    total_employees: int
    tasks_by_priority: PriorityBreakdown
    tasks_by_employee: tuple[EmployeeTaskCount, ...]

    def as_dict(self) -> dict[str, Any]:
        return {
            "totalTasks": self.total_tasks,
            "completedTasks": self.completed_tasks,
            "pendingTasks": self.pending_tasks,
            "inProgressTasks": self.in_progress_tasks,
            "completionRate": self.completion_rate,
            "totalEmployees": self.total_employees,
            "tasksByPriority": {
                "high": self.tasks_by_priority.high,
                "medium": self.tasks_by_priority.medium,
                "low": self.tasks_by_priority.low,
            },
            "tasksByEmployee": [
                {
                    "employeeId": e.employee_id,
                    "employeeName": e.employee_name,
                    "taskCount": e.task_count,
                }
                for e in self.tasks_by_employee
            ],
        }
