"""Validation of configuration payloads received from external sources."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from .enums import BotMode, SlotType
from .exceptions import MalformedConfigError
from .logging import get_logger
from .models import BotConfig, ModeConfig, config_model_for

logger = get_logger(__name__)

Payload = Mapping[str, Any] | str | bytes | bytearray
_ModelT = TypeVar("_ModelT", bound=BaseModel)


def _validate(model: type[_ModelT], payload: Payload) -> _ModelT:
    try:
        if isinstance(payload, (str, bytes, bytearray)):
            return model.model_validate_json(payload)
        return model.model_validate(payload)
    except ValidationError as exc:
        logger.warning(
            "config_rejected", model=model.__name__, error_count=exc.error_count()
        )
        raise MalformedConfigError(
            f"Malformed {model.__name__}: {exc.error_count()} validation error(s)",
            errors=exc.errors(include_url=False, include_context=False),
        ) from exc


def parse_bot_config(payload: Payload) -> BotConfig:
    """Validate a full bot configuration from a mapping or JSON document.

    Raises:
        MalformedConfigError: If the payload has unknown keys, slot bars of the
            wrong size, unknown slot types or slots blacklisted for a mode.
    """

    return _validate(BotConfig, payload)


def parse_mode_config(mode: BotMode, payload: Payload) -> ModeConfig:
    """Validate the record backing *mode*."""

    return _validate(config_model_for(mode), payload)


def parse_slot_type(code: str) -> SlotType:
    try:
        return SlotType.get_by_code(code)
    except ValueError as exc:
        raise MalformedConfigError(str(exc)) from exc
