from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from bot_config.enums import SlotType
from bot_config.models import Slot, SlotBar, create_slot_bars
from bot_config.settings import get_settings


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def slot_bars_with() -> Callable[..., list[SlotBar]]:
    """Build a fresh slot bar set with one slot bound to the given type."""

    def _build(
        slot_type: SlotType, bar_index: int = 0, slot_index: int = 0
    ) -> list[SlotBar]:
        bars = create_slot_bars()
        bars[bar_index].slots[slot_index] = Slot(
            slot_type=slot_type, slot_enabled=True
        )
        return bars

    return _build
