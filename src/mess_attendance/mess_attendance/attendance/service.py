from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Optional

from ..common.datetime_utils import attach_zone, now_in_zone, to_zone_naive
from ..common.validators import optional_str, require_non_empty
from ..core.constants import DEFAULT_TIMEZONE
from ..core.enums import PunchType
from ..core.exceptions import AlreadyCompletedError, AuthorizationError, ConflictError, NotFoundError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from .model import PunchResult
from .policies.allowlist_policy import AllowlistPolicy
from .policies.base import DeviceAuthorizationPolicy
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


class AttendanceService:
    """The attendance ledger: device check plus the daily in/out toggle.

    Per employee and day the record only moves forward:
    absent -> open (punch_in set) -> completed (punch_out set).
    Every failure path returns before any write.

    Timestamps are stored naive in the configured zone at whole seconds and
    handed back zone-aware.
    """

    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        device_policy: DeviceAuthorizationPolicy | None = None,
        timezone: str = DEFAULT_TIMEZONE,
    ):
        self._attendance = attendance
        self._employees = employees
        self._policy = device_policy or AllowlistPolicy(())
        self._timezone = timezone

    def now(self) -> datetime:
        return now_in_zone(self._timezone)

    def _authorize(self, employee_id: str, device_id: Optional[str], employee: Optional[Employee]) -> None:
        if not self._policy.check_device(employee=employee, device_id=device_id):
            logger.warning("Rejected punch for %s from unauthorized device %s", employee_id, device_id)
            raise AuthorizationError(
                "This device is not authorized for attendance. Please use the Incharge mobile. "
                f"(Device ID: {device_id})"
            )

    def _result(self, punch_type: PunchType, punch_in: datetime, punch_out: Optional[datetime]) -> PunchResult:
        return PunchResult(
            type=punch_type,
            punch_in=attach_zone(punch_in, self._timezone),
            punch_out=attach_zone(punch_out, self._timezone),
        )

    def record_punch(self, employee_id: Any, device_id: Any, *, now: datetime | None = None) -> PunchResult:
        employee_id = require_non_empty(employee_id, "employeeId")
        device_id = optional_str(device_id)

        # Device-only policies answer before the roster is consulted, so an
        # unauthorized device cannot tell known ids from unknown ones.
        if not self._policy.requires_employee:
            self._authorize(employee_id, device_id, None)

        employee = self._employees.get_by_employee_id(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")

        if self._policy.requires_employee:
            self._authorize(employee_id, device_id, employee)

        now = to_zone_naive(now, self._timezone) if now else self.now()
        today = now.date()

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        if record is None:
            try:
                self._attendance.create_punch_in(employee_id=employee_id, work_date=today, punch_in=now)
            except ConflictError as e:
                raise ConflictError("Another punch for this employee was recorded at the same time. Try again.") from e
            logger.info("Punch IN %s at %s", employee_id, now.isoformat())
            return self._result(PunchType.IN, now, None)

        if record.is_open:
            if not self._attendance.close_open_record(attendance_id=record.attendance_id, punch_out=now):
                raise ConflictError("Another punch for this employee was recorded at the same time. Try again.")
            logger.info("Punch OUT %s at %s", employee_id, now.isoformat())
            return self._result(PunchType.OUT, record.punch_in, now)

        raise AlreadyCompletedError("Attendance already completed for today.")
