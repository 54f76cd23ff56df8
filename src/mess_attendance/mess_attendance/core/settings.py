from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional
from zoneinfo import ZoneInfo

from .constants import DEFAULT_KIOSK_PIN, DEFAULT_TIMEZONE
from .enums import DevicePolicyMode


def split_csv(value: str | Iterable[str] | None) -> tuple[str, ...]:
    """'A, B,,C' -> ('A', 'B', 'C')."""
    if not value:
        return ()
    items = value.split(",") if isinstance(value, str) else value
    return tuple(s.strip() for s in items if s and s.strip())


@dataclass(frozen=True)
class GeofenceSettings:
    latitude: float
    longitude: float
    radius_meters: float


@dataclass(frozen=True)
class KioskSettings:
    """Everything the services need from configuration, resolved once at startup."""

    admin_email: str
    admin_password: str
    device_policy: DevicePolicyMode = DevicePolicyMode.ALLOWLIST
    authorized_devices: frozenset[str] = field(default_factory=frozenset)
    default_pin: str = DEFAULT_KIOSK_PIN
    timezone: str = DEFAULT_TIMEZONE
    geofence: Optional[GeofenceSettings] = None

    def __post_init__(self):
        # Unknown zone names fail at startup, not on the first punch.
        ZoneInfo(self.timezone)

    @classmethod
    def from_settings_module(cls, settings: Any) -> "KioskSettings":
        geofence = None
        lat = getattr(settings, "GEOFENCE_LATITUDE", None)
        lon = getattr(settings, "GEOFENCE_LONGITUDE", None)
        radius = getattr(settings, "GEOFENCE_RADIUS_METERS", None)
        if lat is not None and lon is not None and radius is not None:
            geofence = GeofenceSettings(latitude=float(lat), longitude=float(lon), radius_meters=float(radius))

        return cls(
            admin_email=str(getattr(settings, "ADMIN_EMAIL")),
            admin_password=str(getattr(settings, "ADMIN_PASSWORD")),
            device_policy=DevicePolicyMode(getattr(settings, "DEVICE_POLICY", DevicePolicyMode.ALLOWLIST.value)),
            authorized_devices=frozenset(split_csv(getattr(settings, "AUTHORIZED_DEVICES", ()))),
            default_pin=str(getattr(settings, "KIOSK_DEFAULT_PIN", DEFAULT_KIOSK_PIN)),
            timezone=str(getattr(settings, "ATTENDANCE_TIMEZONE", DEFAULT_TIMEZONE)),
            geofence=geofence,
        )
