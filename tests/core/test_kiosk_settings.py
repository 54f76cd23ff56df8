from __future__ import annotations

import importlib
from types import SimpleNamespace
from zoneinfo import ZoneInfoNotFoundError

import pytest

from config import get_settings_module
from src.mess_attendance.mess_attendance.attendance.factory import DevicePolicyFactory
from src.mess_attendance.mess_attendance.attendance.policies.allowlist_policy import AllowlistPolicy
from src.mess_attendance.mess_attendance.attendance.policies.bound_device_policy import BoundDevicePolicy
from src.mess_attendance.mess_attendance.core.enums import DevicePolicyMode
from src.mess_attendance.mess_attendance.core.settings import GeofenceSettings, KioskSettings


def _settings(**overrides):
    values = {"ADMIN_EMAIL": "admin@example.com", "ADMIN_PASSWORD": "Admin@123"}
    values.update(overrides)
    return SimpleNamespace(**values)


def test_defaults_when_module_is_minimal():
    kiosk = KioskSettings.from_settings_module(_settings())

    assert kiosk.device_policy == DevicePolicyMode.ALLOWLIST
    assert kiosk.authorized_devices == frozenset()
    assert kiosk.default_pin == "1234"
    assert kiosk.timezone == "UTC"
    assert kiosk.geofence is None


def test_geofence_needs_all_three_values():
    partial = [
        {"GEOFENCE_LATITUDE": "17.385", "GEOFENCE_LONGITUDE": "78.4867"},
        {"GEOFENCE_LATITUDE": "17.385", "GEOFENCE_RADIUS_METERS": "200"},
        {"GEOFENCE_LONGITUDE": "78.4867", "GEOFENCE_RADIUS_METERS": "200", "GEOFENCE_LATITUDE": None},
    ]
    for values in partial:
        assert KioskSettings.from_settings_module(_settings(**values)).geofence is None

    full = KioskSettings.from_settings_module(
        _settings(GEOFENCE_LATITUDE="17.385", GEOFENCE_LONGITUDE="78.4867", GEOFENCE_RADIUS_METERS="200")
    )
    assert full.geofence == GeofenceSettings(latitude=17.385, longitude=78.4867, radius_meters=200.0)


def test_device_policy_mapping():
    bound = KioskSettings.from_settings_module(_settings(DEVICE_POLICY="bound_device"))
    allow = KioskSettings.from_settings_module(_settings(AUTHORIZED_DEVICES=" KIOSK-1, ,KIOSK-2 "))

    assert bound.device_policy == DevicePolicyMode.BOUND_DEVICE
    assert isinstance(DevicePolicyFactory().for_mode(bound.device_policy), BoundDevicePolicy)

    assert allow.authorized_devices == frozenset({"KIOSK-1", "KIOSK-2"})
    policy = DevicePolicyFactory().for_mode(allow.device_policy, authorized_devices=allow.authorized_devices)
    assert isinstance(policy, AllowlistPolicy)

    with pytest.raises(ValueError):
        KioskSettings.from_settings_module(_settings(DEVICE_POLICY="sometimes"))


def test_unknown_timezone_fails_at_construction():
    with pytest.raises(ZoneInfoNotFoundError):
        KioskSettings(admin_email="a", admin_password="b", timezone="Mars/Olympus_Mons")

    with pytest.raises(ZoneInfoNotFoundError):
        KioskSettings.from_settings_module(_settings(ATTENDANCE_TIMEZONE="Asia/Nowhere"))


def test_settings_module_follows_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "prod")
    assert get_settings_module() == "config.production"
    monkeypatch.setenv("APP_ENV", "Testing")
    assert get_settings_module() == "config.testing"
    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"


@pytest.fixture
def development_settings(monkeypatch):
    module = importlib.import_module("config.development")
    yield lambda: importlib.reload(module)
    monkeypatch.undo()
    importlib.reload(module)


def test_development_merges_master_devices(monkeypatch, development_settings):
    monkeypatch.setenv("AUTHORIZED_DEVICES", "TABLET-7")
    monkeypatch.setenv("ATTENDANCE_TIMEZONE", "Asia/Kolkata")

    kiosk = KioskSettings.from_settings_module(development_settings())

    assert kiosk.authorized_devices == frozenset({"TABLET-7", "MASTER-1", "MASTER-2"})
    assert kiosk.timezone == "Asia/Kolkata"


def test_development_masters_without_env_devices(monkeypatch, development_settings):
    monkeypatch.delenv("AUTHORIZED_DEVICES", raising=False)
    monkeypatch.delenv("GEOFENCE_LATITUDE", raising=False)

    kiosk = KioskSettings.from_settings_module(development_settings())

    assert kiosk.authorized_devices == frozenset({"MASTER-1", "MASTER-2"})
    assert kiosk.geofence is None
