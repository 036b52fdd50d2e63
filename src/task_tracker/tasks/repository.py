from __future__ import annotations

from typing import Any, Mapping, Optional, Protocol, Sequence

from ..core.enums import TaskStatus
from .model import Task
from .payloads import NewTask


class TaskRepository(Protocol):
    """Repository interface for Task.

    Note (DIP): the service layer depends on this interface, not on a concrete DB.
    """

    def get_by_id(self, task_id: int) -> Optional[Task]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Task]:
        raise NotImplementedError

    def list_filtered(
        self,
        *,
        employee_id: Optional[int] = None,
        status: Optional[TaskStatus] = None,
    ) -> Sequence[Task]:
        """Tasks matching every given filter, oldest first."""
        raise NotImplementedError

    def create(self, data: NewTask) -> Task:
        raise NotImplementedError

    def update(self, task_id: int, changes: Mapping[str, Any]) -> Optional[Task]:
        raise NotImplementedError

    def delete_by_id(self, task_id: int) -> bool:
        raise NotImplementedError
