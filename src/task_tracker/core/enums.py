from __future__ import annotations

from enum import Enum


class TaskPriority(str, Enum):
    """Task priority as stored in the database."""

    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class TaskStatus(str, Enum):
    """Task lifecycle status as stored in the database."""

    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
