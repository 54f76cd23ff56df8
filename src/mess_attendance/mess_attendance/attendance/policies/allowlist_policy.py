from __future__ import annotations

from typing import Iterable, Optional

from ...employees.model import Employee
from .base import DeviceAuthorizationPolicy


class AllowlistPolicy(DeviceAuthorizationPolicy):
    """Global allowlist. An empty allowlist lets every device through."""

    requires_employee = False

    def __init__(self, authorized_devices: Iterable[str]):
        self._devices = frozenset(d for d in authorized_devices if d)

    @property
    def devices(self) -> frozenset[str]:
        return self._devices

    def check_device(self, *, employee: Optional[Employee], device_id: str | None) -> bool:
        if not self._devices:
            return True
        return device_id in self._devices
