from __future__ import annotations

from typing import Optional, Protocol


class SettingsRepository(Protocol):
    """Key/value store for configuration documents."""

    def get_value(self, key: str) -> Optional[dict]:
        raise NotImplementedError

    def save_value(self, key: str, value: dict) -> None:
        """Create or replace the document stored under ``key``."""

        raise NotImplementedError
