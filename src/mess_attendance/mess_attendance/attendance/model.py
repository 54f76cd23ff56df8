from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import PunchType


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's record for one calendar day."""

    attendance_id: int
    employee_id: str
    work_date: date
    punch_in: datetime
    punch_out: Optional[datetime]

    @property
    def is_open(self) -> bool:
        return self.punch_out is None


@dataclass(frozen=True)
class AttendanceReportRow:
    """Read-model for the admin list/export (record joined with the name)."""

    attendance_id: int
    employee_id: str
    name: str
    work_date: date
    punch_in: datetime
    punch_out: Optional[datetime]

    def to_json(self) -> dict:
        return {
            "id": self.attendance_id,
            "employee_id": self.employee_id,
            "name": self.name,
            "date": self.work_date.isoformat(),
            "punch_in": self.punch_in.isoformat(),
            "punch_out": self.punch_out.isoformat() if self.punch_out else None,
        }


@dataclass(frozen=True)
class PunchResult:
    type: PunchType
    punch_in: datetime
    punch_out: Optional[datetime]

    @property
    def message(self) -> str:
        return f"Successfully punched {self.type.value.upper()}"

    def to_json(self) -> dict:
        return {
            "message": self.message,
            "type": self.type.value,
            "punchIn": self.punch_in.isoformat(),
            "punchOut": self.punch_out.isoformat() if self.punch_out else None,
        }
