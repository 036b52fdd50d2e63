from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..core.exceptions import ConstraintViolationError
from .model import Employee
from .payloads import EmployeeChanges, NewEmployee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage the employee roster."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_id: int) -> Optional[Employee]:
        return self._employees.get_by_id(int(employee_id))

    def _ensure_email_free(self, email: str, *, owner_id: Optional[int] = None) -> None:
        existing = self._employees.get_by_email(email)
        if existing and existing.id != owner_id:
            raise ConstraintViolationError("Email already in use")

    def create_employee(self, data: NewEmployee) -> Employee:
        self._ensure_email_free(data.email)
        employee = self._employees.create(data)
        logger.info("Employee created id=%s", employee.id)
        return employee

    def update_employee(self, employee_id: int, changes: EmployeeChanges) -> Optional[Employee]:
        """Apply a partial update; returns None when the employee does not exist."""
        current = self._employees.get_by_id(int(employee_id))
        if current is None:
            return None

        values = changes.provided()
        if "email" in values:
            self._ensure_email_free(values["email"], owner_id=current.id)

        updated = self._employees.update(current.id, values)
        if updated is not None:
            logger.info("Employee updated id=%s fields=%s", updated.id, sorted(values))
        return updated

    def delete_employee(self, employee_id: int) -> bool:
        deleted = self._employees.delete_by_id(int(employee_id))
        if deleted:
            logger.info("Employee deleted id=%s (assigned tasks removed)", employee_id)
        return deleted
