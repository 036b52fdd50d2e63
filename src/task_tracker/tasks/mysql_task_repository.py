from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..core.enums import TaskPriority, TaskStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Task
from .payloads import NewTask
from .repository import TaskRepository

_COLUMNS = "id, employee_id, title, description, due_date, priority, status, created_at, updated_at"

# payload field -> column
_UPDATABLE = {
    "employee_id": "employee_id",
    "title": "title",
    "description": "description",
    "due_date": "due_date",
    "priority": "priority",
    "status": "status",
}


def _row_to_task(r: dict) -> Task:
    employee_id = r.get("employee_id")
    return Task(
        id=int(r["id"]),
        employee_id=int(employee_id) if employee_id is not None else None,
        title=r["title"],
        description=r.get("description"),
        due_date=r.get("due_date"),
        priority=TaskPriority(r["priority"]),
        status=TaskStatus(r["status"]),
        created_at=r["created_at"],
        updated_at=r["updated_at"],
    )


def _to_db(value: Any) -> Any:
    if isinstance(value, (TaskPriority, TaskStatus)):
        return value.value
    return value


class MySQLTaskRepository(TaskRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _select_by_id(cur, task_id: int) -> Optional[Task]:
        cur.execute(f"SELECT {_COLUMNS} FROM tasks WHERE id=%s", (int(task_id),))
        row = fetchone(cur)
        return _row_to_task(row) if row else None

    def get_by_id(self, task_id: int) -> Optional[Task]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select_by_id(cur, task_id)

    def list_all(self) -> Sequence[Task]:
        return self.list_filtered()

    def list_filtered(
        self,
        *,
        employee_id: Optional[int] = None,
        status: Optional[TaskStatus] = None,
    ) -> Sequence[Task]:
        clauses = ["1=1"]
        params: list[object] = []

        if employee_id is not None:
            clauses.append("employee_id=%s")
            params.append(int(employee_id))
        if status is not None:
            clauses.append("status=%s")
            params.append(status.value)

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM tasks WHERE {where} ORDER BY created_at, id",
                tuple(params),
            )
            return [_row_to_task(r) for r in fetchall(cur)]

    def create(self, data: NewTask) -> Task:
        now = now_utc()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO tasks(employee_id, title, description, due_date, priority, status, created_at, updated_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    data.employee_id,
                    data.title,
                    data.description,
                    data.due_date,
                    data.priority.value,
                    data.status.value,
                    now,
                    now,
                ),
            )
            created = self._select_by_id(cur, int(cur.lastrowid))
            if created is None:
                raise RuntimeError("Inserted task row could not be read back")
            return created

    def update(self, task_id: int, changes: Mapping[str, Any]) -> Optional[Task]:
        assignments: list[str] = []
        params: list[Any] = []
        for field, value in changes.items():
            column = _UPDATABLE.get(field)
            if column is None:
                raise ValueError(f"Unknown task field: {field}")
            assignments.append(f"{column}=%s")
            params.append(_to_db(value))

        assignments.append("updated_at=%s")
        params.append(now_utc())
        params.append(int(task_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE tasks SET {', '.join(assignments)} WHERE id=%s", tuple(params))
            return self._select_by_id(cur, task_id)

    def delete_by_id(self, task_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tasks WHERE id=%s", (int(task_id),))
            return cur.rowcount > 0
