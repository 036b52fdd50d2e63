from __future__ import annotations

import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor
from typing import Sequence

from ..core.constants import DASHBOARD_READ_WORKERS
from ..core.enums import TaskPriority, TaskStatus
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..tasks.model import Task
from ..tasks.repository import TaskRepository
from .model import DashboardStats, EmployeeTaskCount, PriorityBreakdown

logger = logging.getLogger(__name__)


def completion_rate(completed: int, total: int) -> int:
    """Whole-number percentage, rounding halves up; 0 when there are no tasks."""
    if total <= 0:
        return 0
    return (2 * completed * 100 + total) // (2 * total)


def build_stats(tasks: Sequence[Task], employees: Sequence[Employee]) -> DashboardStats:
    by_status = Counter(t.status for t in tasks)
    by_priority = Counter(t.priority for t in tasks)
    # Unassigned tasks are not attributed to anyone.
    by_employee = Counter(t.employee_id for t in tasks if t.employee_id is not None)

    total = len(tasks)
    completed = by_status[TaskStatus.COMPLETED]

    return DashboardStats(
        total_tasks=total,
        completed_tasks=completed,
        pending_tasks=by_status[TaskStatus.PENDING],
        in_progress_tasks=by_status[TaskStatus.IN_PROGRESS],
        completion_rate=completion_rate(completed, total),
        total_employees=len(employees),
        tasks_by_priority=PriorityBreakdown(
            high=by_priority[TaskPriority.HIGH],
            medium=by_priority[TaskPriority.MEDIUM],
            low=by_priority[TaskPriority.LOW],
        ),
        tasks_by_employee=tuple(
            EmployeeTaskCount(employee_id=e.id, employee_name=e.name, task_count=by_employee[e.id])
            for e in employees
        ),
    )


class DashboardService:
    """Use case: dashboard statistics over the full task and employee collections."""

    def __init__(self, tasks: TaskRepository, employees: EmployeeRepository):
        self._tasks = tasks
        self._employees = employees

    def get_stats(self) -> DashboardStats:
        # Both reads are independent; if either fails the whole call fails.
        with ThreadPoolExecutor(max_workers=DASHBOARD_READ_WORKERS) as pool:
            tasks_future = pool.submit(self._tasks.list_all)
            employees_future = pool.submit(self._employees.list_all)
            tasks = tasks_future.result()
            employees = employees_future.result()

        stats = build_stats(tasks, employees)
        logger.debug(
            "Dashboard computed tasks=%s employees=%s completion=%s%%",
            stats.total_tasks,
            stats.total_employees,
            stats.completion_rate,
        )
        return stats
