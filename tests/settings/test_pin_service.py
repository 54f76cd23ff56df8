import pytest

from src.mess_attendance.mess_attendance.core.constants import KIOSK_PIN_SETTING
from src.mess_attendance.mess_attendance.core.exceptions import AuthenticationError, ValidationError
from src.mess_attendance.mess_attendance.settings.service import AdminAuthService, PinService
from tests.fakes import InMemorySettings


def test_default_pin_is_seeded_hashed():
    repo = InMemorySettings()
    svc = PinService(repo, default_pin="1234")

    assert svc.verify_pin("1234")
    assert not svc.verify_pin("0000")
    assert repo.values[KIOSK_PIN_SETTING] != "1234"


@pytest.mark.parametrize("bad", ["12", "12345", "12a4", "", None, 1234, "١٢٣٤"])
def test_update_pin_requires_four_digits(bad):
    svc = PinService(InMemorySettings())

    with pytest.raises(ValidationError):
        svc.update_pin(bad)
    assert svc.verify_pin("1234")


def test_update_pin_replaces_previous():
    svc = PinService(InMemorySettings(), default_pin="1234")

    svc.update_pin("9999")

    assert svc.verify_pin("9999")
    assert not svc.verify_pin("1234")


def test_invalid_default_pin_fails_fast():
    with pytest.raises(ValidationError):
        PinService(InMemorySettings(), default_pin="12")


def test_admin_login():
    auth = AdminAuthService(admin_email="admin@example.com", admin_password="Admin@123")

    auth.authenticate("admin@example.com", "Admin@123")
    with pytest.raises(AuthenticationError):
        auth.authenticate("admin@example.com", "wrong")
    with pytest.raises(AuthenticationError):
        auth.authenticate("someone@example.com", "Admin@123")
    with pytest.raises(ValidationError):
        auth.authenticate("", "Admin@123")
