from __future__ import annotations

import logging
from typing import Any

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.validators import require_non_empty, require_pin
from ..core.constants import DEFAULT_KIOSK_PIN, KIOSK_PIN_SETTING
from ..core.exceptions import AuthenticationError, ValidationError
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class AdminAuthService:
    """Use case: admin login against the single configured credential.

    No session or token is issued; the admin page keeps its own flag.
    """

    def __init__(self, *, admin_email: str, admin_password: str):
        self._email = admin_email
        self._password = admin_password

    def authenticate(self, email: Any, password: Any) -> None:
        email = require_non_empty(email, "email")
        if not isinstance(password, str) or not password:
            raise ValidationError("password is required")

        if email != self._email or password != self._password:
            logger.warning("Failed admin login for %s", email)
            raise AuthenticationError("Invalid admin credentials")


class PinService:
    """Use case: the global kiosk PIN guarding device-identity changes.

    Stored hashed. Until someone sets one, the configured default applies.
    """

    def __init__(self, settings: SettingsRepository, *, default_pin: str = DEFAULT_KIOSK_PIN):
        self._settings = settings
        self._default_pin = require_pin(default_pin)

    def _current_hash(self) -> str:
        stored = self._settings.get(KIOSK_PIN_SETTING)
        if stored:
            return stored
        seeded = generate_password_hash(self._default_pin)
        self._settings.put(KIOSK_PIN_SETTING, seeded)
        return seeded

    def verify_pin(self, pin: Any) -> bool:
        if not isinstance(pin, str) or not pin:
            return False
        return check_password_hash(self._current_hash(), pin)

    def update_pin(self, new_pin: Any) -> None:
        new_pin = require_pin(new_pin)
        self._settings.put(KIOSK_PIN_SETTING, generate_password_hash(new_pin))
        logger.info("Kiosk PIN updated")
