from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .analytics.service import AnalyticsService
from .attendance.factory import DevicePolicyFactory
from .attendance.geofence import GeofenceGuard
from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .core.settings import KioskSettings
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import RosterService
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import AdminAuthService, PinService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]
    kiosk: KioskSettings

    employees_repo: EmployeeRepository
    attendance_repo: AttendanceRepository
    settings_repo: SettingsRepository

    roster_service: RosterService
    attendance_service: AttendanceService
    analytics_service: AnalyticsService
    admin_auth_service: AdminAuthService
    pin_service: PinService
    geofence_guard: GeofenceGuard


def wire_services(
    *,
    kiosk: KioskSettings,
    employees_repo: EmployeeRepository,
    attendance_repo: AttendanceRepository,
    settings_repo: SettingsRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    device_policy = DevicePolicyFactory().for_mode(kiosk.device_policy, authorized_devices=kiosk.authorized_devices)

    return Container(
        conn=conn,
        kiosk=kiosk,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        settings_repo=settings_repo,
        roster_service=RosterService(employees_repo),
        attendance_service=AttendanceService(
            attendance_repo,
            employees_repo,
            device_policy=device_policy,
            timezone=kiosk.timezone,
        ),
        analytics_service=AnalyticsService(attendance_repo, employees_repo, timezone=kiosk.timezone),
        admin_auth_service=AdminAuthService(admin_email=kiosk.admin_email, admin_password=kiosk.admin_password),
        pin_service=PinService(settings_repo, default_pin=kiosk.default_pin),
        geofence_guard=GeofenceGuard(kiosk.geofence),
    )


def build_container(*, db_config: dict, kiosk: KioskSettings) -> Container:
    conn = DatabaseConnection(DBConfig.from_mapping(db_config))

    return wire_services(
        kiosk=kiosk,
        employees_repo=MySQLEmployeeRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        settings_repo=MySQLSettingsRepository(conn),
        conn=conn,
    )
