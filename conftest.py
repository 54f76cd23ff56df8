from __future__ import annotations

from datetime import datetime

import pytest

from src.mess_attendance.mess_attendance.container import wire_services
from src.mess_attendance.mess_attendance.core.settings import KioskSettings
from src.mess_attendance.mess_attendance.main import create_app
from tests.fakes import InMemoryAttendance, InMemoryEmployees, InMemorySettings, make_employee


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 1, 8, 30, 0)


@pytest.fixture
def kiosk() -> KioskSettings:
    return KioskSettings(
        admin_email="admin@example.com",
        admin_password="Admin@123",
        authorized_devices=frozenset({"DEV-X"}),
        default_pin="1234",
    )


@pytest.fixture
def employees_repo() -> InMemoryEmployees:
    return InMemoryEmployees(make_employee("EMP001", name="Ravi"))


@pytest.fixture
def attendance_repo(employees_repo) -> InMemoryAttendance:
    return InMemoryAttendance(employees_repo)


@pytest.fixture
def settings_repo() -> InMemorySettings:
    return InMemorySettings()


@pytest.fixture
def container(kiosk, employees_repo, attendance_repo, settings_repo):
    return wire_services(
        kiosk=kiosk,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        settings_repo=settings_repo,
    )


@pytest.fixture
def client(monkeypatch, container):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()
