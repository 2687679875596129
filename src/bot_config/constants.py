"""Shared constants and slot policy tables."""

from __future__ import annotations

from typing import Final, assert_never

from .enums import BotMode, SlotType

SERVICE_NAME: Final[str] = "bot-config"

SLOT_SIZE_PX: Final[int] = 40

SLOT_BAR_SIZE: Final[int] = 10
SLOT_BAR_COUNT: Final[int] = 9

THRESHOLD_SLOT_TYPES: frozenset[SlotType] = frozenset(
    {
        SlotType.FOOD,
        SlotType.PILL,
        SlotType.HEAL_SKILL,
        SlotType.MP_RESTORER,
        SlotType.FP_RESTORER,
    }
)
COOLDOWN_SLOT_TYPES: frozenset[SlotType] = frozenset(
    {
        SlotType.FOOD,
        SlotType.PILL,
        SlotType.HEAL_SKILL,
        SlotType.ATTACK_SKILL,
        SlotType.BUFF_SKILL,
        SlotType.MP_RESTORER,
        SlotType.FP_RESTORER,
        SlotType.PICKUP_PET,
    }
)

FARMING_SLOTS_BLACKLIST: frozenset[SlotType] = frozenset(
    {SlotType.HEAL_SKILL, SlotType.FLYING}
)
SUPPORT_SLOTS_BLACKLIST: frozenset[SlotType] = frozenset(
    {SlotType.PICKUP_PET, SlotType.PICKUP_MOTION, SlotType.ATTACK_SKILL}
)

COLOR_CHANNELS: Final[int] = 3

# Fallbacks the engine applies to unset fields; panels backfill with the same values.
DEFAULT_CIRCLE_PATTERN_ROTATION_DURATION: Final[int] = 30
DEFAULT_PASSIVE_TOLERENCE: Final[int] = 5
DEFAULT_AGGRESSIVE_TOLERENCE: Final[int] = 10
DEFAULT_OBSTACLE_AVOIDANCE_COOLDOWN_MS: Final[int] = 5500
DEFAULT_OBSTACLE_AVOIDANCE_MAX_TRY: Final[int] = 3
DEFAULT_MIN_MOBS_NAME_WIDTH: Final[int] = 15
DEFAULT_MAX_MOBS_NAME_WIDTH: Final[int] = 180
DEFAULT_MIN_HP_ATTACK: Final[int] = 0
DEFAULT_JUMP_COOLDOWN_MS: Final[int] = 0
DEFAULT_SHOUT_INTERVAL_MS: Final[int] = 30_000


def blacklist_for(mode: BotMode) -> frozenset[SlotType]:
    """Return the slot types a mode's slot bars may not contain."""

    match mode:
        case BotMode.FARMING:
            return FARMING_SLOTS_BLACKLIST
        case BotMode.SUPPORT:
            return SUPPORT_SLOTS_BLACKLIST
        case BotMode.AUTO_SHOUT:
            return frozenset()
        case _:
            assert_never(mode)
