from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord, AttendanceReportRow


class AttendanceRepository(Protocol):
    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create_punch_in(self, *, employee_id: str, work_date: date, punch_in: datetime) -> int:
        """Insert the day's record; raises ConflictError if one already exists."""

        raise NotImplementedError

    def close_open_record(self, *, attendance_id: int, punch_out: datetime) -> bool:
        """Set punch_out only while it is still NULL. Returns False if nothing changed."""

        raise NotImplementedError

    def get_report_rows(
        self,
        *,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        employee_id: Optional[str] = None,
    ) -> Sequence[AttendanceReportRow]:
        raise NotImplementedError

    def count_present(self, work_date: date) -> int:
        raise NotImplementedError

    def list_completed_shifts(self) -> Sequence[tuple[datetime, datetime]]:
        raise NotImplementedError
