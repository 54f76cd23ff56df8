from __future__ import annotations

from enum import Enum


class PunchType(str, Enum):
    """Result of a punch: opening or closing the day's shift."""

    IN = "in"
    OUT = "out"


class DevicePolicyMode(str, Enum):
    """Which device authorization strategy the ledger enforces."""

    ALLOWLIST = "allowlist"
    BOUND_DEVICE = "bound_device"
