from __future__ import annotations

import pytest

from bot_config.enums import BotMode, SlotType
from bot_config.exceptions import (
    BotConfigError,
    MalformedConfigError,
    SlotAssignmentError,
)
from bot_config.models import BotConfig, FarmingConfig, ShoutConfig, Slot
from bot_config.panel import ConfigPanel


class _Sink:
    def __init__(self) -> None:
        self.configs: list[BotConfig] = []

    def __call__(self, config: BotConfig) -> None:
        self.configs.append(config)


def test_mount_backfills_mode_defaults_once() -> None:
    sink = _Sink()
    panel = ConfigPanel(BotMode.FARMING, sink)
    config = BotConfig(
        change_id=3, farming_config=FarmingConfig(min_hp_attack=25)
    )

    assert panel.mount(config) is True
    assert panel.mount(config) is False

    (updated,) = sink.configs
    farming = updated.farming_config
    assert updated.change_id == 4
    assert farming.min_hp_attack == 25
    assert farming.circle_pattern_rotation_duration == 30
    assert farming.obstacle_avoidance_cooldown == 5500
    assert farming.max_mobs_name_width == 180
    assert farming.slot_bars is not None and len(farming.slot_bars) == 9
    assert farming.on_demand_pet is None
    assert panel.reconciler.is_settled


def test_mount_leaves_other_mode_records_alone() -> None:
    sink = _Sink()
    ConfigPanel(BotMode.AUTO_SHOUT, sink).mount(BotConfig())

    (updated,) = sink.configs
    assert updated.shout_config == ShoutConfig(shout_interval=30000, shout_messages=[])
    assert updated.farming_config == FarmingConfig()


def test_mount_with_custom_defaults() -> None:
    sink = _Sink()
    panel = ConfigPanel(BotMode.SUPPORT, sink, defaults={"jump_cooldown": 750})

    panel.mount(BotConfig())

    assert sink.configs[0].support_config.jump_cooldown == 750
    assert sink.configs[0].support_config.slot_bars is None


def test_each_panel_mounts_independently() -> None:
    sink = _Sink()
    config = BotConfig()

    ConfigPanel(BotMode.SUPPORT, sink).mount(config)
    ConfigPanel(BotMode.SUPPORT, sink).mount(config)

    assert len(sink.configs) == 2


def test_update_publishes_new_change_id() -> None:
    sink = _Sink()
    panel = ConfigPanel(BotMode.FARMING, sink)

    updated = panel.update(BotConfig(change_id=7), stay_in_area=True, min_hp_attack=60)

    assert updated.change_id == 8
    assert updated.farming_config.stay_in_area is True
    assert sink.configs == [updated]


def test_rejected_update_is_not_published() -> None:
    sink = _Sink()
    panel = ConfigPanel(BotMode.FARMING, sink)

    with pytest.raises(MalformedConfigError):
        panel.update(BotConfig(), min_mobs_name_width=300, max_mobs_name_width=10)

    assert sink.configs == []


def test_assign_slot_replaces_a_single_slot() -> None:
    sink = _Sink()
    panel = ConfigPanel(BotMode.SUPPORT, sink)
    panel.mount(BotConfig())
    mounted = sink.configs[-1]

    heal = Slot(slot_type=SlotType.HEAL_SKILL, slot_threshold=60, slot_enabled=True)
    updated = panel.assign_slot(mounted, 1, 2, heal)

    slot_bars = updated.support_config.slot_bars
    assert slot_bars is not None
    assert slot_bars[1].slots[2] == heal
    original_bars = mounted.support_config.slot_bars
    assert original_bars is not None
    assert original_bars[1].slots[2].slot_type is SlotType.UNUSED


def test_assign_slot_enforces_mode_blacklist() -> None:
    sink = _Sink()
    panel = ConfigPanel(BotMode.SUPPORT, sink)
    panel.mount(BotConfig())

    attack = Slot(slot_type=SlotType.ATTACK_SKILL, slot_enabled=True)
    with pytest.raises(MalformedConfigError):
        panel.assign_slot(sink.configs[-1], 0, 0, attack)

    assert len(sink.configs) == 1


def test_assign_slot_requires_slot_bars() -> None:
    panel = ConfigPanel(BotMode.AUTO_SHOUT, _Sink())
    with pytest.raises(SlotAssignmentError):
        panel.assign_slot(
            BotConfig(), 0, 0, Slot(slot_type=SlotType.FOOD, slot_enabled=True)
        )


@pytest.mark.parametrize(
    "bar_index,slot_index",
    [(-1, 0), (9, 0), (0, -1), (0, 10)],
)
def test_assign_slot_rejects_positions_outside_the_set(
    bar_index: int, slot_index: int
) -> None:
    sink = _Sink()
    panel = ConfigPanel(BotMode.FARMING, sink)
    panel.mount(BotConfig())
    mounted = sink.configs[-1]

    food = Slot(slot_type=SlotType.FOOD, slot_enabled=True)
    with pytest.raises(SlotAssignmentError) as exc:
        panel.assign_slot(mounted, bar_index, slot_index, food)

    assert isinstance(exc.value, BotConfigError)
    assert len(sink.configs) == 1


def test_mount_keeps_stored_min_name_width_above_default_max() -> None:
    sink = _Sink()
    panel = ConfigPanel(BotMode.FARMING, sink)

    assert panel.mount(
        BotConfig(farming_config=FarmingConfig(min_mobs_name_width=200))
    ) is True

    (updated,) = sink.configs
    assert updated.farming_config.min_mobs_name_width == 200
    assert updated.farming_config.max_mobs_name_width is None
    assert updated.farming_config.min_hp_attack == 0
    assert panel.reconciler.is_settled


def test_mount_keeps_stored_max_name_width_below_default_min() -> None:
    sink = _Sink()
    panel = ConfigPanel(BotMode.FARMING, sink)

    panel.mount(BotConfig(farming_config=FarmingConfig(max_mobs_name_width=10)))

    (updated,) = sink.configs
    assert updated.farming_config.min_mobs_name_width is None
    assert updated.farming_config.max_mobs_name_width == 10


def test_mount_fills_compatible_name_width_bound() -> None:
    sink = _Sink()
    panel = ConfigPanel(BotMode.FARMING, sink)

    panel.mount(BotConfig(farming_config=FarmingConfig(min_mobs_name_width=40)))

    (updated,) = sink.configs
    assert updated.farming_config.min_mobs_name_width == 40
    assert updated.farming_config.max_mobs_name_width == 180
