"""Data models describing the bot control-panel configuration."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Annotated, Any, assert_never

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .constants import (
    COLOR_CHANNELS,
    COOLDOWN_SLOT_TYPES,
    SLOT_BAR_COUNT,
    SLOT_BAR_SIZE,
    THRESHOLD_SLOT_TYPES,
    blacklist_for,
)
from .enums import BotMode, SlotType

ColorChannel = Annotated[int, Field(ge=0, le=255)]
MobColors = Annotated[
    list[ColorChannel | None],
    Field(min_length=COLOR_CHANNELS, max_length=COLOR_CHANNELS),
]
Tolerance = Annotated[int, Field(ge=0, le=255)]
NonNegativeInt = Annotated[int, Field(ge=0)]


class Slot(BaseModel):
    """A single assignable action inside a slot bar."""

    model_config = ConfigDict(extra="forbid")

    slot_type: SlotType
    slot_cooldown: NonNegativeInt | None = None
    slot_threshold: NonNegativeInt | None = None
    slot_enabled: bool

    @model_validator(mode="after")
    def _disable_unused(self) -> Slot:
        if self.slot_type is SlotType.UNUSED:
            self.slot_enabled = False
        return self

    @property
    def accepts_cooldown(self) -> bool:
        return self.slot_type in COOLDOWN_SLOT_TYPES

    @property
    def accepts_threshold(self) -> bool:
        return self.slot_type in THRESHOLD_SLOT_TYPES


SlotBank = Annotated[
    list[Slot], Field(min_length=SLOT_BAR_SIZE, max_length=SLOT_BAR_SIZE)
]


class SlotBar(BaseModel):
    """Holder for one fixed-size row of slots."""

    model_config = ConfigDict(extra="forbid")

    slots: SlotBank

    def get_slot_index(self, slot_type: SlotType) -> int | None:
        """Return the index of the first slot bound to *slot_type*."""

        for index, slot in enumerate(self.slots):
            if slot.slot_type is slot_type:
                return index
        return None


SlotBars = Annotated[
    list[SlotBar], Field(min_length=SLOT_BAR_COUNT, max_length=SLOT_BAR_COUNT)
]


def create_slot_bars() -> list[SlotBar]:
    """Build a fresh slot bar set with every slot unused and disabled."""

    return [
        SlotBar(
            slots=[
                Slot(slot_type=SlotType.UNUSED, slot_enabled=False)
                for _ in range(SLOT_BAR_SIZE)
            ]
        )
        for _ in range(SLOT_BAR_COUNT)
    ]


def iter_slots(slot_bars: Sequence[SlotBar]) -> Iterator[tuple[int, int, Slot]]:
    for bar_index, slot_bar in enumerate(slot_bars):
        for slot_index, slot in enumerate(slot_bar.slots):
            yield bar_index, slot_index, slot


def find_slot(
    slot_bars: Sequence[SlotBar], slot_type: SlotType
) -> tuple[int, int] | None:
    """Return ``(bar_index, slot_index)`` of the first slot bound to *slot_type*."""

    for bar_index, slot_bar in enumerate(slot_bars):
        slot_index = slot_bar.get_slot_index(slot_type)
        if slot_index is not None:
            return bar_index, slot_index
    return None


def _ensure_allowed(slot_bars: Sequence[SlotBar], mode: BotMode) -> None:
    blacklist = blacklist_for(mode)
    for bar_index, slot_index, slot in iter_slots(slot_bars):
        if slot.slot_type in blacklist:
            raise ValueError(
                f"slot type {slot.slot_type.value} is not allowed in {mode.value} "
                f"slot bars (bar {bar_index}, slot {slot_index})"
            )


class FarmingConfig(BaseModel):
    """Farming mode settings. Every field is optional; ``None`` means unset."""

    model_config = ConfigDict(extra="forbid")

    on_demand_pet: bool | None = None
    use_attack_skills: bool | None = None
    stay_in_area: bool | None = None
    farming_enabled: bool | None = None
    slot_bars: SlotBars | None = None
    circle_pattern_rotation_duration: NonNegativeInt | None = None

    passive_mobs_colors: MobColors | None = None
    passive_tolerence: Tolerance | None = None
    aggressive_mobs_colors: MobColors | None = None
    aggressive_tolerence: Tolerance | None = None

    is_stop_fighting: bool | None = None
    prevent_already_attacked: bool | None = None

    obstacle_avoidance_enabled: bool | None = None
    obstacle_avoidance_cooldown: NonNegativeInt | None = None
    obstacle_avoidance_max_try: NonNegativeInt | None = None
    obstacle_avoidance_only_passive: bool | None = None

    min_mobs_name_width: NonNegativeInt | None = None
    max_mobs_name_width: NonNegativeInt | None = None

    min_hp_attack: NonNegativeInt | None = None

    @model_validator(mode="after")
    def _check_consistency(self) -> FarmingConfig:
        if self.slot_bars is not None:
            _ensure_allowed(self.slot_bars, BotMode.FARMING)
        if (
            self.min_mobs_name_width is not None
            and self.max_mobs_name_width is not None
            and self.min_mobs_name_width > self.max_mobs_name_width
        ):
            raise ValueError(
                "min_mobs_name_width must not exceed max_mobs_name_width"
            )
        return self


class SupportConfig(BaseModel):
    """Support mode settings."""

    model_config = ConfigDict(extra="forbid")

    slot_bars: SlotBars | None = None
    jump_cooldown: NonNegativeInt | None = None

    @model_validator(mode="after")
    def _check_slot_bars(self) -> SupportConfig:
        if self.slot_bars is not None:
            _ensure_allowed(self.slot_bars, BotMode.SUPPORT)
        return self


class ShoutConfig(BaseModel):
    """Auto-shout mode settings."""

    model_config = ConfigDict(extra="forbid")

    shout_interval: NonNegativeInt | None = None
    shout_messages: list[str] | None = None


ModeConfig = FarmingConfig | SupportConfig | ShoutConfig


def config_model_for(mode: BotMode) -> type[ModeConfig]:
    match mode:
        case BotMode.FARMING:
            return FarmingConfig
        case BotMode.SUPPORT:
            return SupportConfig
        case BotMode.AUTO_SHOUT:
            return ShoutConfig
        case _:
            assert_never(mode)


def _config_field_for(mode: BotMode) -> str:
    match mode:
        case BotMode.FARMING:
            return "farming_config"
        case BotMode.SUPPORT:
            return "support_config"
        case BotMode.AUTO_SHOUT:
            return "shout_config"
        case _:
            assert_never(mode)


class BotConfig(BaseModel):
    """Top-level configuration exchanged with the automation engine.

    ``change_id`` is a monotonic version stamp; every accepted edit produces a
    copy with a higher value via :meth:`changed`. All three mode records are
    kept regardless of ``mode``.
    """

    model_config = ConfigDict(extra="forbid")

    change_id: NonNegativeInt = 0
    is_running: bool = False
    mode: BotMode | None = None
    farming_config: FarmingConfig = Field(default_factory=FarmingConfig)
    support_config: SupportConfig = Field(default_factory=SupportConfig)
    shout_config: ShoutConfig = Field(default_factory=ShoutConfig)

    def changed(self) -> BotConfig:
        return self.model_copy(update={"change_id": self.change_id + 1})

    def toggle_active(self) -> None:
        self.is_running = not self.is_running

    def config_for(self, mode: BotMode) -> ModeConfig:
        """Return the record backing *mode*."""

        return getattr(self, _config_field_for(mode))

    def with_config(self, mode: BotMode, record: ModeConfig) -> BotConfig:
        """Return a copy with *mode*'s record replaced by *record*."""

        expected = config_model_for(mode)
        if not isinstance(record, expected):
            raise TypeError(
                f"{mode.value} expects {expected.__name__}, got {type(record).__name__}"
            )
        return self.model_copy(update={_config_field_for(mode): record})

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json")
