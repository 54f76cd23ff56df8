from __future__ import annotations

from typing import Optional, Protocol


class SettingsRepository(Protocol):
    """Key/value store for kiosk-wide settings."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def put(self, key: str, value: str) -> None:
        raise NotImplementedError
