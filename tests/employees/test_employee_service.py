from __future__ import annotations

import pytest

from task_tracker.core.exceptions import ConstraintViolationError
from task_tracker.employees.payloads import EmployeeChanges, NewEmployee
from task_tracker.tasks.payloads import NewTask


def test_create_assigns_id_and_timestamps(container):
    employee = container.employee_service.create_employee(NewEmployee(name="Ann", email="a@x.com"))

    assert employee.id == 1
    assert employee.created_at == employee.updated_at


def test_duplicate_email_is_rejected(container):
    svc = container.employee_service
    svc.create_employee(NewEmployee(name="Ann", email="a@x.com"))

    with pytest.raises(ConstraintViolationError):
        svc.create_employee(NewEmployee(name="Other Ann", email="A@X.com"))

    assert len(svc.list_employees()) == 1


def test_list_is_ordered_by_name(container):
    svc = container.employee_service
    for name, email in [("Cleo", "c@x.com"), ("Ann", "a@x.com"), ("Bob", "b@x.com")]:
        svc.create_employee(NewEmployee(name=name, email=email))

    assert [e.name for e in svc.list_employees()] == ["Ann", "Bob", "Cleo"]


def test_partial_update_keeps_other_fields_and_refreshes_updated_at(container):
    svc = container.employee_service
    created = svc.create_employee(NewEmployee(name="Ann", email="a@x.com", department="IT", position="Dev"))

    updated = svc.update_employee(created.id, EmployeeChanges(position="Lead"))

    assert updated.position == "Lead"
    assert updated.department == "IT"
    assert updated.name == "Ann"
    assert updated.created_at == created.created_at
    assert updated.updated_at > created.updated_at


def test_update_missing_employee_returns_none(container):
    assert container.employee_service.update_employee(42, EmployeeChanges(name="X")) is None


def test_update_to_email_of_another_employee_is_rejected(container):
    svc = container.employee_service
    svc.create_employee(NewEmployee(name="Ann", email="a@x.com"))
    bob = svc.create_employee(NewEmployee(name="Bob", email="b@x.com"))

    with pytest.raises(ConstraintViolationError):
        svc.update_employee(bob.id, EmployeeChanges(email="a@x.com"))


def test_update_keeping_own_email_is_allowed(container):
    svc = container.employee_service
    ann = svc.create_employee(NewEmployee(name="Ann", email="a@x.com"))

    assert svc.update_employee(ann.id, EmployeeChanges(email="a@x.com", name="Anna")).name == "Anna"


def test_delete_cascades_to_assigned_tasks(container):
    ann = container.employee_service.create_employee(NewEmployee(name="Ann", email="a@x.com"))
    bob = container.employee_service.create_employee(NewEmployee(name="Bob", email="b@x.com"))
    for title in ("one", "two", "three"):
        container.task_service.create_task(NewTask(title=title, employee_id=ann.id))
    kept = container.task_service.create_task(NewTask(title="bob's", employee_id=bob.id))
    unassigned = container.task_service.create_task(NewTask(title="nobody's"))

    assert container.employee_service.delete_employee(ann.id) is True

    assert container.employee_service.get_employee(ann.id) is None
    assert [t.id for t in container.task_service.list_tasks()] == [kept.id, unassigned.id]


def test_delete_missing_employee_is_a_no_op(container):
    svc = container.employee_service
    ann = svc.create_employee(NewEmployee(name="Ann", email="a@x.com"))

    assert svc.delete_employee(ann.id) is True
    assert svc.delete_employee(ann.id) is False
