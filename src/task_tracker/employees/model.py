from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import format_datetime


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: Plain data object (no DB access code).
    """

    id: int
    name: str
    email: str
    department: Optional[str]
    position: Optional[str]
    created_at: datetime
    updated_at: datetime

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "department": self.department,
            "position": self.position,
            "createdAt": format_datetime(self.created_at),
            "updatedAt": format_datetime(self.updated_at),
        }
