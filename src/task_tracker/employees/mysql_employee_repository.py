from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from ..common.datetime_utils import now_utc
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .payloads import NewEmployee
from .repository import EmployeeRepository

_COLUMNS = "id, name, email, department, position, created_at, updated_at"

# payload field -> column
_UPDATABLE = {
    "name": "name",
    "email": "email",
    "department": "department",
    "position": "position",
}


def _row_to_employee(r: dict) -> Employee:
    return Employee(
        id=int(r["id"]),
        name=r["name"],
        email=r["email"],
        department=r.get("department"),
        position=r.get("position"),
        created_at=r["created_at"],
        updated_at=r["updated_at"],
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    @staticmethod
    def _select_by_id(cur, employee_id: int) -> Optional[Employee]:
        cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE id=%s", (int(employee_id),))
        row = fetchone(cur)
        return _row_to_employee(row) if row else None

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            return self._select_by_id(cur, employee_id)

    def get_by_email(self, email: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE email=%s", (email,))
            row = fetchone(cur)
            return _row_to_employee(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees ORDER BY name, id")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def create(self, data: NewEmployee) -> Employee:
        now = now_utc()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(name, email, department, position, created_at, updated_at)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (data.name, data.email, data.department, data.position, now, now),
            )
            created = self._select_by_id(cur, int(cur.lastrowid))
            if created is None:
                raise RuntimeError("Inserted employee row could not be read back")
            return created

    def update(self, employee_id: int, changes: Mapping[str, Any]) -> Optional[Employee]:
        assignments: list[str] = []
        params: list[Any] = []
        for field, value in changes.items():
            column = _UPDATABLE.get(field)
            if column is None:
                raise ValueError(f"Unknown employee field: {field}")
            assignments.append(f"{column}=%s")
            params.append(value)

        assignments.append("updated_at=%s")
        params.append(now_utc())
        params.append(int(employee_id))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"UPDATE employees SET {', '.join(assignments)} WHERE id=%s", tuple(params))
            # rowcount is 0 for unchanged rows in MySQL, so re-read instead.
            return self._select_by_id(cur, employee_id)

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM tasks WHERE employee_id=%s", (int(employee_id),))
            cur.execute("DELETE FROM employees WHERE id=%s", (int(employee_id),))
            return cur.rowcount > 0
