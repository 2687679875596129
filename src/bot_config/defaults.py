"""Default values panels backfill into unset configuration fields."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, assert_never

from .constants import (
    COLOR_CHANNELS,
    DEFAULT_AGGRESSIVE_TOLERENCE,
    DEFAULT_CIRCLE_PATTERN_ROTATION_DURATION,
    DEFAULT_JUMP_COOLDOWN_MS,
    DEFAULT_MAX_MOBS_NAME_WIDTH,
    DEFAULT_MIN_HP_ATTACK,
    DEFAULT_MIN_MOBS_NAME_WIDTH,
    DEFAULT_OBSTACLE_AVOIDANCE_COOLDOWN_MS,
    DEFAULT_OBSTACLE_AVOIDANCE_MAX_TRY,
    DEFAULT_PASSIVE_TOLERENCE,
    DEFAULT_SHOUT_INTERVAL_MS,
)
from .enums import BotMode
from .models import FarmingConfig, ModeConfig, create_slot_bars


def farming_defaults() -> dict[str, Any]:
    return {
        "slot_bars": create_slot_bars(),
        "circle_pattern_rotation_duration": DEFAULT_CIRCLE_PATTERN_ROTATION_DURATION,
        "passive_mobs_colors": [None] * COLOR_CHANNELS,
        "passive_tolerence": DEFAULT_PASSIVE_TOLERENCE,
        "aggressive_mobs_colors": [None] * COLOR_CHANNELS,
        "aggressive_tolerence": DEFAULT_AGGRESSIVE_TOLERENCE,
        "is_stop_fighting": False,
        "prevent_already_attacked": False,
        "obstacle_avoidance_enabled": True,
        "obstacle_avoidance_cooldown": DEFAULT_OBSTACLE_AVOIDANCE_COOLDOWN_MS,
        "obstacle_avoidance_max_try": DEFAULT_OBSTACLE_AVOIDANCE_MAX_TRY,
        "obstacle_avoidance_only_passive": True,
        "min_mobs_name_width": DEFAULT_MIN_MOBS_NAME_WIDTH,
        "max_mobs_name_width": DEFAULT_MAX_MOBS_NAME_WIDTH,
        "min_hp_attack": DEFAULT_MIN_HP_ATTACK,
    }


def support_defaults() -> dict[str, Any]:
    return {
        "slot_bars": create_slot_bars(),
        "jump_cooldown": DEFAULT_JUMP_COOLDOWN_MS,
    }


def shout_defaults() -> dict[str, Any]:
    return {
        "shout_interval": DEFAULT_SHOUT_INTERVAL_MS,
        "shout_messages": [],
    }


def defaults_for(mode: BotMode) -> dict[str, Any]:
    """Return a freshly built defaults table for *mode*."""

    match mode:
        case BotMode.FARMING:
            return farming_defaults()
        case BotMode.SUPPORT:
            return support_defaults()
        case BotMode.AUTO_SHOUT:
            return shout_defaults()
        case _:
            assert_never(mode)


def compatible_defaults(
    record: ModeConfig, defaults: Mapping[str, Any]
) -> dict[str, Any]:
    """Drop defaults that would contradict values already stored in *record*.

    A stored name-width bound wins over the default for the opposite bound;
    the opposite bound then stays unset.
    """

    adjusted = dict(defaults)
    if not isinstance(record, FarmingConfig):
        return adjusted

    low, high = record.min_mobs_name_width, record.max_mobs_name_width
    default_low = adjusted.get("min_mobs_name_width")
    default_high = adjusted.get("max_mobs_name_width")
    if (
        low is not None
        and high is None
        and default_high is not None
        and low > default_high
    ):
        del adjusted["max_mobs_name_width"]
    if (
        high is not None
        and low is None
        and default_low is not None
        and default_low > high
    ):
        del adjusted["min_mobs_name_width"]
    return adjusted
