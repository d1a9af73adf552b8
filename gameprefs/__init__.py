"""gameprefs - Preset-profile settings store for a game client."""

__version__ = "0.1.0"

from .presets import (
    Profile, Setting, SettingKind, SETTINGS, SETTINGS_BY_NAME, CATEGORIES, SANITIZE_RANGES
)
from .store import ProfileConfigStore, UnknownSettingError, CONFIG_FILENAME
from .toggles import SettingToggles, TOGGLES
from .worlds import World, WorldList
from .extras import ClientExtras
from .utils import clamp, init_dirs, setup_logging, get_logger

__all__ = [
    "Profile", "Setting", "SettingKind", "SETTINGS", "SETTINGS_BY_NAME",
    "CATEGORIES", "SANITIZE_RANGES", "ProfileConfigStore", "UnknownSettingError",
    "CONFIG_FILENAME", "SettingToggles", "TOGGLES", "World", "WorldList",
    "ClientExtras", "clamp", "init_dirs", "setup_logging", "get_logger"
]
