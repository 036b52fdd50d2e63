from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from .model import Employee
from .payloads import NewEmployee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    Missing ids are reported as None / False, never as exceptions.
    """

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Employee]:
        """All employees ordered by name."""
        raise NotImplementedError

    def create(self, data: NewEmployee) -> Employee:
        raise NotImplementedError

    def update(self, employee_id: int, changes: Mapping[str, Any]) -> Optional[Employee]:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        """Delete the employee and every task assigned to it, atomically."""
        raise NotImplementedError
