from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from task_tracker.common import datetime_utils
from task_tracker.container import Container, wire
from task_tracker.main import create_app

from .fakes import InMemoryDB, InMemoryEmployees, InMemoryTasks


class FakeClock:
    """Deterministic now_utc(): each call advances one second."""

    def __init__(self, start: datetime = datetime(2025, 1, 1, 9, 0, 0)):
        self.current = start

    def __call__(self) -> datetime:
        value = self.current
        self.current = self.current + timedelta(seconds=1)
        return value


@pytest.fixture()
def clock(monkeypatch) -> FakeClock:
    fake = FakeClock()
    monkeypatch.setattr(datetime_utils, "now_utc", fake)
    return fake


@pytest.fixture()
def db() -> InMemoryDB:
    return InMemoryDB()


@pytest.fixture()
def container(db: InMemoryDB, clock: FakeClock) -> Container:
    return wire(employees_repo=InMemoryEmployees(db), tasks_repo=InMemoryTasks(db))


@pytest.fixture()
def app(container: Container):
    return create_app(container, settings_module="config.testing")


@pytest.fixture()
def client(app):
    return app.test_client()
