"""Profile-aware settings store backed by config.ini.

Preset profiles are read-only tables built from ``presets.SETTINGS``. The
``custom`` profile is read from the properties file, falling back to the
``default`` preset for keys that are missing or malformed, and is the only
profile ever written back.
"""

import os
import threading
from typing import Any, Dict, List, Mapping, Optional, Tuple

from . import properties
from .extras import ClientExtras
from .presets import (
    Profile, Setting, SettingKind, SETTINGS, SETTINGS_BY_NAME, SANITIZE_RANGES,
    resolve_presets, settings_in,
)
from .utils import DEFAULT_BASE_DIR, Dirs, clamp, get_logger, init_dirs, log_exception
from .worlds import WorldList

logger = get_logger("gameprefs.store")

CONFIG_FILENAME = "config.ini"
CONFIG_COMMENT = "gameprefs settings"


class UnknownSettingError(KeyError):
    """Raised for a setting name that is not part of the schema."""

    def __str__(self):
        return f"Unknown setting: {self.args[0]}"


def format_value(setting: Setting, value: Any) -> str:
    if setting.kind is SettingKind.BOOL:
        return "true" if value else "false"
    if setting.kind is SettingKind.INT:
        return str(value)
    if setting.kind is SettingKind.LIST:
        return properties.join_list(value)
    return value


def check_value(setting: Setting, value: Any) -> Any:
    """Return ``value`` in the form stored for ``setting``, or raise TypeError."""
    kind = setting.kind
    if kind is SettingKind.BOOL and isinstance(value, bool):
        return value
    if kind is SettingKind.INT and isinstance(value, int) and not isinstance(value, bool):
        return value
    if kind is SettingKind.STR and isinstance(value, str):
        return value
    if kind is SettingKind.LIST and isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        return list(value)
    raise TypeError(f"{setting.name} expects a {kind.value} value, got {type(value).__name__}: {value!r}")


class ProfileConfigStore:
    """Single owner of every setting value.

    The store starts uninitialized: values resolve to their defaults but
    ``save`` is refused, so a half-loaded state can never overwrite the
    user's file. ``init`` loads everything and marks the store ready.
    """

    prop_str = staticmethod(properties.prop_str)
    prop_bool = staticmethod(properties.prop_bool)
    prop_int = staticmethod(properties.prop_int)
    prop_list = staticmethod(properties.prop_list)

    def __init__(self, base_dir: str = DEFAULT_BASE_DIR, worlds: Optional[WorldList] = None):
        self.base_dir = base_dir
        self.config_path = os.path.join(base_dir, CONFIG_FILENAME)
        self.worlds = worlds
        self.dirs: Optional[Dirs] = None
        self.extras = ClientExtras()
        self._lock = threading.RLock()
        self._presets: Dict[str, Dict[Profile, Any]] = {}
        self._custom: Dict[str, Any] = {}
        # Session-only values set on preset profiles; never persisted
        self._overrides: Dict[Tuple[str, Profile], Any] = {}
        self._active = Profile.CUSTOM
        self._ready = False
        self._load_ok = True
        self.define_schema({})

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def ready(self) -> bool:
        return self._ready

    def init(self) -> "ProfileConfigStore":
        """Create folders, read the world list and config.ini, then sanitize."""
        with self._lock:
            self.dirs = init_dirs(self.base_dir)
            self.worlds = WorldList(self.dirs.worlds).load()
            props = self.load()
            self._apply(props)
            self._ready = self._load_ok
            if self._ready:
                logger.info("Loaded settings")
                self.sanitize()
            else:
                logger.warning(f"{self.config_path} could not be read; settings will not be saved this session")
        return self

    def teardown(self):
        with self._lock:
            self._ready = False
            self._active = Profile.CUSTOM
            self._overrides.clear()
            self.extras = ClientExtras()
            self.worlds = None
            self.dirs = None

    def reload(self) -> Dict[str, str]:
        """Re-read config.ini, discarding unsaved changes, then sanitize."""
        with self._lock:
            props = self.load()
            self._apply(props)
            if self._ready and self._load_ok:
                self.sanitize()
            return props

    def _apply(self, props: Mapping[str, str]):
        self._active = self._parse_profile(props.get("current_profile"))
        self.define_schema(props)
        self.extras = ClientExtras.from_props(props)

    # ------------------------------------------------------------------
    # Schema and persistence
    # ------------------------------------------------------------------

    def define_schema(self, props: Mapping[str, str]):
        """(Re)build every profile table; custom values come from ``props``."""
        with self._lock:
            presets = resolve_presets()
            defaults = {name: values[Profile.DEFAULT] for name, values in presets.items()}
            custom = {}
            for setting in SETTINGS:
                fallback = setting.custom_default(defaults)
                custom[setting.name] = self._read_prop(props, setting, fallback)
            self._presets = presets
            self._custom = custom
            self._overrides.clear()

    def _read_prop(self, props: Mapping[str, str], setting: Setting, fallback: Any) -> Any:
        if setting.kind is SettingKind.BOOL:
            return self.prop_bool(props, setting.key, fallback)
        if setting.kind is SettingKind.INT:
            return self.prop_int(props, setting.key, fallback)
        if setting.kind is SettingKind.LIST:
            return self.prop_list(props, setting.key, fallback)
        return self.prop_str(props, setting.key, fallback)

    def load(self) -> Dict[str, str]:
        """Read config.ini into a dict, writing a default one on first run."""
        with self._lock:
            self._load_ok = True
            if not os.path.exists(self.config_path):
                logger.info(f"No {CONFIG_FILENAME} found, creating one with default settings")
                self.define_schema({})
                self._ready = True
                self.save(Profile.CUSTOM)
            try:
                return properties.load_file(self.config_path)
            except (OSError, ValueError) as e:
                log_exception(e, f"loading {self.config_path}", logger)
                self._load_ok = False
                return {}

    def to_props(self, profile=Profile.CUSTOM) -> List[Tuple[str, str]]:
        """Every persisted key under ``profile``, in file order."""
        profile = Profile.parse(profile)
        with self._lock:
            items = []
            for setting in SETTINGS:
                value = self.get(setting.name, profile)
                if setting.name == "FIRST_TIME":
                    # Any save means the first run is over
                    value = False
                items.append((setting.key, format_value(setting, value)))
            items.append(("current_profile", self._active.value))
            items.extend(self.extras.to_props().items())
            return items

    def save(self, profile=Profile.CUSTOM) -> bool:
        """Write all settings under ``profile`` to config.ini.

        Returns False when the store is not ready yet or the write failed; in
        both cases the in-memory values stay as they are.
        """
        profile = Profile.parse(profile)
        with self._lock:
            if not self._ready:
                logger.warning("Prevented save before settings finished loading")
                return False
            if profile is Profile.CUSTOM:
                self._custom["FIRST_TIME"] = False
            try:
                properties.save_file(self.config_path, self.to_props(profile), CONFIG_COMMENT)
            except OSError as e:
                log_exception(e, f"saving {self.config_path}", logger)
                return False
            logger.debug(f"Saved {profile.value} settings to {self.config_path}")
            return True

    def commit(self) -> bool:
        """Save only while the active profile is custom."""
        with self._lock:
            if self._active is not Profile.CUSTOM:
                return False
            return self.save(Profile.CUSTOM)

    def sanitize_ranges(self) -> Dict[str, Tuple[Optional[int], Optional[int]]]:
        ranges = dict(SANITIZE_RANGES)
        if self.worlds is not None:
            ranges["WORLD"] = (0, len(self.worlds))
        return ranges

    def sanitize(self, save: bool = True) -> List[str]:
        """Clamp out-of-range custom values and save once if any changed.

        With ``save=False`` the caller is responsible for persisting.
        """
        with self._lock:
            changed = []
            for name, (lo, hi) in self.sanitize_ranges().items():
                value = self._custom[name]
                clamped = clamp(value, lo, hi)
                if clamped != value:
                    logger.info(f"Clamped {name} from {value} to {clamped}")
                    self._custom[name] = clamped
                    changed.append(name)
            if changed and save:
                self.save(Profile.CUSTOM)
            return changed

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    def setting(self, name: str) -> Setting:
        try:
            return SETTINGS_BY_NAME[name]
        except KeyError:
            raise UnknownSettingError(name) from None

    def get(self, name: str, profile=None) -> Any:
        """Value of ``name`` under ``profile`` (the active profile when omitted)."""
        setting = self.setting(name)
        with self._lock:
            profile = self._active if profile is None else Profile.parse(profile)
            if profile is Profile.CUSTOM:
                value = self._custom[name]
            else:
                value = self._overrides.get((name, profile), self._presets[name][profile])
        return list(value) if setting.kind is SettingKind.LIST else value

    def set(self, name: str, profile, value: Any):
        """Change a value in memory. Call ``save`` to persist custom values."""
        setting = self.setting(name)
        profile = Profile.parse(profile)
        value = check_value(setting, value)
        with self._lock:
            if profile is Profile.CUSTOM:
                self._custom[name] = value
            else:
                self._overrides[(name, profile)] = value

    def settings(self, profile=None) -> Dict[str, Any]:
        with self._lock:
            return {s.name: self.get(s.name, profile) for s in SETTINGS}

    def toggle_extra(self, field: str) -> bool:
        """Flip one boolean of ``extras`` and return its new value."""
        with self._lock:
            value = not getattr(self.extras, field)
            setattr(self.extras, field, value)
            return value

    def restore_defaults(self, category: str) -> List[str]:
        """Copy the default preset of one settings tab into custom."""
        with self._lock:
            names = []
            for setting in settings_in(category):
                value = self._presets[setting.name][Profile.DEFAULT]
                self._custom[setting.name] = list(value) if setting.kind is SettingKind.LIST else value
                names.append(setting.name)
            return names

    # ------------------------------------------------------------------
    # Active profile
    # ------------------------------------------------------------------

    @property
    def active_profile(self) -> Profile:
        return self._active

    def set_active_profile(self, profile):
        with self._lock:
            self._active = Profile.parse(profile)
            logger.info(f"Active profile is now {self._active.value}")

    @staticmethod
    def _parse_profile(name: Optional[str]) -> Profile:
        if name is None:
            return Profile.CUSTOM
        try:
            return Profile.parse(name)
        except ValueError:
            logger.warning(f"Unknown profile {name!r} in {CONFIG_FILENAME}, using custom")
            return Profile.CUSTOM
