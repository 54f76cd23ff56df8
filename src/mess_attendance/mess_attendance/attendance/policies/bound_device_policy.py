from __future__ import annotations

from typing import Optional

from ...employees.model import Employee
from .base import DeviceAuthorizationPolicy


class BoundDevicePolicy(DeviceAuthorizationPolicy):
    """Employees registered with a device may only punch from that device."""

    def check_device(self, *, employee: Optional[Employee], device_id: str | None) -> bool:
        if employee is None or not employee.bound_device_id:
            return True
        return device_id == employee.bound_device_id
