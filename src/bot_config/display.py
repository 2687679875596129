"""Glyphs and labels shown for each slot type."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import assert_never

from .enums import SlotType
from .settings import get_settings


@dataclass(frozen=True, slots=True)
class IconAsset:
    """Reference to an icon image shipped with the UI."""

    file_name: str

    def resolve(self, base_dir: Path | None = None) -> Path:
        root = base_dir if base_dir is not None else get_settings().icon_dir
        return root / self.file_name


HEAL_SPELL_ICON = IconAsset("heal_spell.png")
REFRESHER_ICON = IconAsset("icon_refresher.png")
VITAL_DRINK_ICON = IconAsset("icon_vitaldrink.png")
MOTION_PICKUP_ICON = IconAsset("icon_motion_pickup.png")


def display_glyph(slot_type: SlotType) -> str | IconAsset:
    """Return the emoji, text or icon drawn inside a slot of *slot_type*."""

    match slot_type:
        case SlotType.UNUSED:
            return ""
        case SlotType.FOOD:
            return "🍔"
        case SlotType.PILL:
            return "💊"
        case SlotType.HEAL_SKILL:
            return HEAL_SPELL_ICON
        case SlotType.MP_RESTORER:
            return REFRESHER_ICON
        case SlotType.FP_RESTORER:
            return VITAL_DRINK_ICON
        case SlotType.PICKUP_PET:
            return "🐶"
        case SlotType.PICKUP_MOTION:
            return MOTION_PICKUP_ICON
        case SlotType.ATTACK_SKILL:
            return "🗡️"
        case SlotType.BUFF_SKILL:
            return "🪄"
        case SlotType.FLYING:
            return "✈️"
        case _:
            assert_never(slot_type)


def display_label(
    slot_type: SlotType, unused_label: str | None = None
) -> tuple[str, str]:
    """Return ``(short, long)`` captions for *slot_type*.

    Unused slots show *unused_label* in both positions, falling back to the
    configured ``unused_slot_label``.
    """

    match slot_type:
        case SlotType.UNUSED:
            if unused_label is None:
                unused_label = get_settings().unused_slot_label
            return unused_label, unused_label
        case SlotType.FOOD:
            return "Food", "Food"
        case SlotType.PILL:
            return "Pill", "Pill"
        case SlotType.HEAL_SKILL:
            return "Heal", "Heal skill"
        case SlotType.MP_RESTORER:
            return "MP", "MP restorer"
        case SlotType.FP_RESTORER:
            return "FP", "FP restorer"
        case SlotType.PICKUP_PET:
            return "Pet", "Pickup pet"
        case SlotType.PICKUP_MOTION:
            return "Pickup", "Pickup motion"
        case SlotType.ATTACK_SKILL:
            return "Attack", "Attack skill"
        case SlotType.BUFF_SKILL:
            return "Buff", "Buff skill"
        case SlotType.FLYING:
            return "Board", "Board"
        case _:
            assert_never(slot_type)
