from __future__ import annotations

import csv
import io
from dataclasses import dataclass, replace
from datetime import date, datetime
from typing import Optional, Sequence

from ..attendance.model import AttendanceReportRow
from ..attendance.repository import AttendanceRepository
from ..common.datetime_utils import attach_zone, format_minutes, now_in_zone
from ..core.constants import DEFAULT_TIMEZONE
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository

CSV_HEADERS = ["Name", "Employee ID", "Date", "Punch In", "Punch Out", "Status"]


@dataclass(frozen=True)
class DashboardStats:
    total_employees: int
    present_today: int
    avg_work_hours: str

    def to_json(self) -> dict:
        return {
            "totalEmployees": self.total_employees,
            "presentToday": self.present_today,
            "avgWorkHours": self.avg_work_hours,
        }


@dataclass(frozen=True)
class DashboardData:
    rows: list[AttendanceReportRow]
    stats: DashboardStats

    def to_json(self) -> dict:
        return {
            "attendance": [r.to_json() for r in self.rows],
            "stats": self.stats.to_json(),
        }


def average_shift_minutes(shifts: Sequence[tuple[datetime, datetime]]) -> float:
    """Mean of (punch_out - punch_in) in minutes; 0 for no completed shifts."""
    if not shifts:
        return 0.0
    total = sum((out - in_).total_seconds() / 60 for in_, out in shifts)
    return total / len(shifts)


class AnalyticsService:
    """Admin dashboard: record list, headline stats and CSV export."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        timezone: str = DEFAULT_TIMEZONE,
    ):
        self._attendance = attendance
        self._employees = employees
        self._timezone = timezone

    def build_dashboard(
        self,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        employee_id: Optional[str] = None,
        today: Optional[date] = None,
    ) -> DashboardData:
        today = today or now_in_zone(self._timezone).date()
        rows = self.list_records(start=start, end=end, employee_id=employee_id)

        stats = DashboardStats(
            total_employees=self._employees.count(),
            present_today=self._attendance.count_present(today),
            avg_work_hours=format_minutes(average_shift_minutes(self._attendance.list_completed_shifts())),
        )
        return DashboardData(rows=list(rows), stats=stats)

    def list_records(
        self,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceReportRow]:
        if start and end and start > end:
            raise ValidationError("start must not be after end")
        rows = self._attendance.get_report_rows(start_date=start, end_date=end, employee_id=employee_id)
        return [
            replace(
                r,
                punch_in=attach_zone(r.punch_in, self._timezone),
                punch_out=attach_zone(r.punch_out, self._timezone),
            )
            for r in rows
        ]

    def export_csv(
        self,
        *,
        start: Optional[date] = None,
        end: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> str:
        out = io.StringIO()
        writer = csv.writer(out)
        writer.writerow(CSV_HEADERS)
        for r in self.list_records(start=start, end=end, employee_id=employee_id):
            writer.writerow(
                [
                    r.name,
                    r.employee_id,
                    r.work_date.strftime("%Y-%m-%d"),
                    r.punch_in.strftime("%H:%M:%S"),
                    r.punch_out.strftime("%H:%M:%S") if r.punch_out else "-",
                    "Completed" if r.punch_out else "On Shift",
                ]
            )
        return out.getvalue()

    def export_filename(self, *, today: Optional[date] = None) -> str:
        today = today or now_in_zone(self._timezone).date()
        return f"attendance_report_{today.strftime('%Y-%m-%d')}.csv"
