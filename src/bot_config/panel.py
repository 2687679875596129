"""Configuration panel session bound to one bot mode."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from .constants import SLOT_BAR_COUNT, SLOT_BAR_SIZE
from .defaults import compatible_defaults, defaults_for
from .enums import BotMode
from .exceptions import SlotAssignmentError
from .logging import configure_logging, get_logger
from .models import BotConfig, Slot
from .reconciler import DefaultValuesReconciler
from .settings import Settings
from .validators import parse_mode_config

logger = get_logger(__name__)

ChangeCallback = Callable[[BotConfig], None]


class ConfigPanel:
    """One mounted configuration panel.

    The panel owns its reconciler, so defaults are backfilled on the first
    :meth:`mount` of this instance only. Every accepted edit is handed to
    ``on_change`` as a new :class:`BotConfig` with a bumped ``change_id``.
    """

    def __init__(
        self,
        mode: BotMode,
        on_change: ChangeCallback,
        *,
        defaults: Mapping[str, Any] | None = None,
        settings: Settings | None = None,
    ) -> None:
        configure_logging(settings)
        self.mode = mode
        self._on_change = on_change
        self._defaults = defaults
        self._reconciler = DefaultValuesReconciler()

    @property
    def reconciler(self) -> DefaultValuesReconciler:
        return self._reconciler

    def mount(self, bot_config: BotConfig) -> bool:
        """Backfill unset fields of the mode's record; no-op after the first call."""

        if self._reconciler.is_settled:
            return False
        defaults = self._defaults
        if defaults is None:
            defaults = defaults_for(self.mode)
        record = bot_config.config_for(self.mode)
        return self._reconciler.reconcile(
            record,
            compatible_defaults(record, defaults),
            lambda merged: self._commit(bot_config, merged),
        )

    def update(self, bot_config: BotConfig, **fields: Any) -> BotConfig:
        """Apply edited *fields* to the mode's record and publish the result."""

        record = bot_config.config_for(self.mode)
        return self._commit(bot_config, {**dict(record), **fields})

    def assign_slot(
        self, bot_config: BotConfig, bar_index: int, slot_index: int, slot: Slot
    ) -> BotConfig:
        """Replace one slot of the mode's slot bars."""

        if not 0 <= bar_index < SLOT_BAR_COUNT:
            raise SlotAssignmentError(
                f"bar index {bar_index} outside 0..{SLOT_BAR_COUNT - 1}"
            )
        if not 0 <= slot_index < SLOT_BAR_SIZE:
            raise SlotAssignmentError(
                f"slot index {slot_index} outside 0..{SLOT_BAR_SIZE - 1}"
            )
        record = bot_config.config_for(self.mode)
        slot_bars = getattr(record, "slot_bars", None)
        if slot_bars is None:
            raise SlotAssignmentError(
                f"{self.mode.value} mode has no slot bars configured"
            )

        bars = [bar.model_copy(deep=True) for bar in slot_bars]
        bars[bar_index].slots[slot_index] = slot
        return self.update(bot_config, slot_bars=bars)

    def _commit(self, bot_config: BotConfig, merged: Mapping[str, Any]) -> BotConfig:
        record = parse_mode_config(self.mode, merged)
        updated = bot_config.with_config(self.mode, record).changed()
        logger.info(
            "config_changed", mode=self.mode.slug, change_id=updated.change_id
        )
        self._on_change(updated)
        return updated
