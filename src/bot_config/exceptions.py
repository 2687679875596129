"""Custom exceptions raised at the configuration boundary."""

from __future__ import annotations

from typing import Any


class BotConfigError(Exception):
    """Base error for bot configuration failures."""


class MalformedConfigError(BotConfigError):
    """Raised when an external payload violates the configuration schema."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class SlotAssignmentError(BotConfigError):
    """Raised when a slot cannot be placed at the requested position."""
