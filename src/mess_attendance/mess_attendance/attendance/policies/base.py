from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ...employees.model import Employee


class DeviceAuthorizationPolicy(ABC):
    """Strategy Pattern: decide whether a device may punch for an employee.

    Policies that never look at the employee set `requires_employee = False`;
    the ledger then checks the device before touching the roster.
    """

    requires_employee: bool = True

    @abstractmethod
    def check_device(self, *, employee: Optional[Employee], device_id: str | None) -> bool:
        raise NotImplementedError
