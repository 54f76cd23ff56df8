from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from ..common.validators import optional_str, require_descriptor, require_non_empty
from ..core.exceptions import ConflictError, NotFoundError
from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class RosterService:
    """Use case: register employees and serve the roster to kiosks.

    Registration is insert-or-fail. An existing employee id is never
    overwritten, so a stored face descriptor or device binding cannot be
    replaced by a second registration.
    """

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def register(
        self,
        *,
        employee_id: Any,
        name: Any,
        face_descriptor: Any,
        device_id: Any = None,
    ) -> Employee:
        employee = Employee(
            employee_id=require_non_empty(employee_id, "employeeId"),
            name=require_non_empty(name, "name"),
            face_descriptor=tuple(require_descriptor(face_descriptor)),
            bound_device_id=optional_str(device_id),
        )

        if self._employees.get_by_employee_id(employee.employee_id):
            raise ConflictError(f"Employee {employee.employee_id} is already registered")

        # The unique key still catches a registration racing this one.
        self._employees.create(employee)
        logger.info("Registered employee %s (device=%s)", employee.employee_id, employee.bound_device_id)
        return employee

    def list_roster(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def find(self, employee_id: str) -> Optional[Employee]:
        return self._employees.get_by_employee_id(employee_id)

    def get(self, employee_id: str) -> Employee:
        employee = self.find(employee_id)
        if not employee:
            raise NotFoundError("Employee not found")
        return employee
