from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..core.enums import DevicePolicyMode
from .policies.allowlist_policy import AllowlistPolicy
from .policies.base import DeviceAuthorizationPolicy
from .policies.bound_device_policy import BoundDevicePolicy


@dataclass
class DevicePolicyFactory:
    """Factory Pattern: pick the device policy configured for this deployment."""

    def for_mode(self, mode: DevicePolicyMode | str, *, authorized_devices: Iterable[str] = ()) -> DeviceAuthorizationPolicy:
        mode = DevicePolicyMode(mode)
        if mode == DevicePolicyMode.BOUND_DEVICE:
            return BoundDevicePolicy()
        return AllowlistPolicy(authorized_devices)
