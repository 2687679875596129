"""Configuration schema and default reconciliation for the bot control panel."""

from .constants import (
    COOLDOWN_SLOT_TYPES,
    FARMING_SLOTS_BLACKLIST,
    SLOT_BAR_COUNT,
    SLOT_BAR_SIZE,
    SLOT_SIZE_PX,
    SUPPORT_SLOTS_BLACKLIST,
    THRESHOLD_SLOT_TYPES,
    blacklist_for,
)
from .defaults import defaults_for
from .display import IconAsset, display_glyph, display_label
from .enums import BotMode, ReconcilerState, SlotType
from .exceptions import BotConfigError, MalformedConfigError, SlotAssignmentError
from .models import (
    BotConfig,
    FarmingConfig,
    ShoutConfig,
    Slot,
    SlotBar,
    SupportConfig,
    create_slot_bars,
    find_slot,
)
from .panel import ConfigPanel
from .reconciler import UNDEFINED, DefaultValuesReconciler, merge_null_defaults
from .validators import parse_bot_config, parse_mode_config, parse_slot_type

__all__ = (
    "BotConfig",
    "BotConfigError",
    "BotMode",
    "COOLDOWN_SLOT_TYPES",
    "ConfigPanel",
    "DefaultValuesReconciler",
    "FARMING_SLOTS_BLACKLIST",
    "FarmingConfig",
    "IconAsset",
    "MalformedConfigError",
    "ReconcilerState",
    "SLOT_BAR_COUNT",
    "SLOT_BAR_SIZE",
    "SLOT_SIZE_PX",
    "SUPPORT_SLOTS_BLACKLIST",
    "ShoutConfig",
    "SlotAssignmentError",
    "Slot",
    "SlotBar",
    "SlotType",
    "SupportConfig",
    "THRESHOLD_SLOT_TYPES",
    "UNDEFINED",
    "blacklist_for",
    "create_slot_bars",
    "defaults_for",
    "display_glyph",
    "display_label",
    "find_slot",
    "merge_null_defaults",
    "parse_bot_config",
    "parse_mode_config",
    "parse_slot_type",
)
