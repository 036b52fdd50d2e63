from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .dashboard.service import DashboardService
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .tasks.mysql_task_repository import MySQLTaskRepository
from .tasks.repository import TaskRepository
from .tasks.service import TaskService


@dataclass(frozen=True)
class Container:
    employee_service: EmployeeService
    task_service: TaskService
    dashboard_service: DashboardService


def wire(*, employees_repo: EmployeeRepository, tasks_repo: TaskRepository) -> Container:
    """Build services on top of the given repositories (tests pass in-memory ones)."""
    return Container(
        employee_service=EmployeeService(employees_repo),
        task_service=TaskService(tasks_repo, employees_repo),
        dashboard_service=DashboardService(tasks_repo, employees_repo),
    )


def build_container(*, db_config: Mapping[str, Any]) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))
    return wire(
        employees_repo=MySQLEmployeeRepository(conn),
        tasks_repo=MySQLTaskRepository(conn),
    )
