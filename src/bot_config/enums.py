from __future__ import annotations

from enum import StrEnum


class SlotType(StrEnum):
    """Kinds of action a slot can be bound to."""

    UNUSED = "Unused"
    FOOD = "Food"
    PILL = "Pill"
    HEAL_SKILL = "HealSkill"
    MP_RESTORER = "MpRestorer"
    FP_RESTORER = "FpRestorer"
    PICKUP_PET = "PickupPet"
    PICKUP_MOTION = "PickupMotion"
    ATTACK_SKILL = "AttackSkill"
    BUFF_SKILL = "BuffSkill"
    FLYING = "Flying"

    @classmethod
    def get_by_code(cls, code: str) -> SlotType:
        """Look up a slot type by its wire code.

        Matching ignores case and surrounding whitespace.

        Raises:
            ValueError: If the code is not a known slot type
        """
        if not isinstance(code, str):
            raise ValueError(f"code must be a string, got {type(code).__name__}")

        normalized = code.strip().lower()
        for member in cls:
            if member.value.lower() == normalized:
                return member

        valid_codes = ", ".join(member.value for member in cls)
        raise ValueError(
            f"invalid slot type '{code}', must be one of: {valid_codes}"
        )


class BotMode(StrEnum):
    """Operating profiles selecting which configuration record is active."""

    FARMING = "Farming"
    SUPPORT = "Support"
    AUTO_SHOUT = "AutoShout"

    @property
    def slug(self) -> str:
        return {
            BotMode.FARMING: "farming",
            BotMode.SUPPORT: "support",
            BotMode.AUTO_SHOUT: "auto_shout",
        }[self]


class ReconcilerState(StrEnum):
    """Lifecycle of a default-values reconciler."""

    PENDING = "pending"
    SETTLED = "settled"
