from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.enums import TaskStatus
from ..core.exceptions import ConstraintViolationError
from ..employees.repository import EmployeeRepository
from .model import Task
from .payloads import NewTask, TaskChanges
from .repository import TaskRepository

logger = logging.getLogger(__name__)


class TaskService:
    """Use case: manage tasks and their assignment to employees."""

    def __init__(self, tasks: TaskRepository, employees: EmployeeRepository):
        self._tasks = tasks
        self._employees = employees

    def _ensure_employee_exists(self, employee_id: Optional[int]) -> None:
        # The FK constraint still guards against a concurrent delete.
        if employee_id is not None and self._employees.get_by_id(int(employee_id)) is None:
            raise ConstraintViolationError(f"Employee {employee_id} does not exist")

    def list_tasks(
        self,
        *,
        employee_id: Optional[int] = None,
        status: Optional[TaskStatus] = None,
    ) -> Sequence[Task]:
        return self._tasks.list_filtered(employee_id=employee_id, status=status)

    def get_task(self, task_id: int) -> Optional[Task]:
        return self._tasks.get_by_id(int(task_id))

    def create_task(self, data: NewTask) -> Task:
        self._ensure_employee_exists(data.employee_id)
        task = self._tasks.create(data)
        logger.info("Task created id=%s employee_id=%s", task.id, task.employee_id)
        return task

    def update_task(self, task_id: int, changes: TaskChanges) -> Optional[Task]:
        """Apply a partial update; returns None when the task does not exist."""
        values = changes.provided()
        if self._tasks.get_by_id(int(task_id)) is None:
            return None
        if "employee_id" in values:
            self._ensure_employee_exists(values["employee_id"])

        updated = self._tasks.update(int(task_id), values)
        if updated is not None:
            logger.info("Task updated id=%s fields=%s", updated.id, sorted(values))
        return updated

    def set_status(self, task_id: int, status: TaskStatus) -> Optional[Task]:
        return self.update_task(task_id, TaskChanges(status=status))

    def toggle_completed(self, task_id: int) -> Optional[Task]:
        """completed -> pending, anything else -> completed."""
        task = self._tasks.get_by_id(int(task_id))
        if task is None:
            return None
        new_status = TaskStatus.PENDING if task.status == TaskStatus.COMPLETED else TaskStatus.COMPLETED
        return self.set_status(task.id, new_status)

    def delete_task(self, task_id: int) -> bool:
        deleted = self._tasks.delete_by_id(int(task_id))
        if deleted:
            logger.info("Task deleted id=%s", task_id)
        return deleted
