"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from .enums import TaskPriority, TaskStatus

DEFAULT_TASK_PRIORITY = TaskPriority.MEDIUM
DEFAULT_TASK_STATUS = TaskStatus.PENDING

MAX_NAME_LENGTH = 255
MAX_EMAIL_LENGTH = 255
MAX_DEPARTMENT_LENGTH = 100
MAX_POSITION_LENGTH = 100

DASHBOARD_READ_WORKERS = 2
