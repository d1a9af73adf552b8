"""Setting schema and preset profiles for gameprefs.

Every setting the client knows about is declared once in ``SETTINGS``:
its name, the key it is persisted under, its kind, the settings tab it
belongs to and one value per fixed preset. The ``custom`` profile is not
listed here; the store reads it from ``config.ini`` and falls back to the
``default`` preset value.
"""

import sys
import shutil
from enum import Enum
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple


class Profile(str, Enum):
    """Named bundles of setting values. Only ``custom`` is user editable."""
    ALL = "all"
    HEAVY = "heavy"
    DEFAULT = "default"
    LITE = "lite"
    VANILLA_RESIZABLE = "vanilla_resizable"
    VANILLA = "vanilla"
    CUSTOM = "custom"

    @classmethod
    def parse(cls, name) -> "Profile":
        if isinstance(name, cls):
            return name
        try:
            return cls(str(name).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown profile: {name!r}") from None

    @property
    def is_preset(self) -> bool:
        return self is not Profile.CUSTOM


# Column order of the preset values in the schema rows below
PRESET_ORDER = (
    Profile.VANILLA,
    Profile.VANILLA_RESIZABLE,
    Profile.LITE,
    Profile.DEFAULT,
    Profile.HEAVY,
    Profile.ALL,
)

# Order used when presenting profiles to the user, most features first
PROFILE_ORDER = (
    Profile.ALL,
    Profile.HEAVY,
    Profile.DEFAULT,
    Profile.LITE,
    Profile.VANILLA_RESIZABLE,
    Profile.VANILLA,
    Profile.CUSTOM,
)


class SettingKind(str, Enum):
    BOOL = "bool"
    INT = "int"
    STR = "str"
    LIST = "list"


# Settings tabs
GENERAL = "general"
MUSIC = "music"
OVERLAYS = "overlays"
BANK = "bank"
NOTIFICATIONS = "notifications"
STREAMING = "streaming"
REPLAY = "replay"
JOYSTICK = "joystick"
NO_GUI = "no_gui"  # persisted but not shown in any tab

CATEGORIES = (GENERAL, MUSIC, OVERLAYS, BANK, NOTIFICATIONS, STREAMING, REPLAY, JOYSTICK, NO_GUI)

# Combat styles
COMBAT_CONTROLLED = 0
COMBAT_AGGRESSIVE = 1
COMBAT_ACCURATE = 2
COMBAT_DEFENSIVE = 3

# Client log verbosity levels, least verbose first
LOG_ERROR = 0
LOG_WARN = 1
LOG_GAME = 2
LOG_INFO = 3
LOG_DEBUG = 4

# Clamp ranges applied to the custom profile after load; None means unbounded.
# The WORLD maximum is replaced by the number of configured worlds at runtime.
SANITIZE_RANGES: Dict[str, Tuple[Optional[int], Optional[int]]] = {
    "CUSTOM_CLIENT_SIZE_X": (512, None),
    "CUSTOM_CLIENT_SIZE_Y": (346, None),
    "WORLD": (0, None),
    "VIEW_DISTANCE": (2300, 20000),
    "COMBAT_STYLE": (COMBAT_CONTROLLED, COMBAT_DEFENSIVE),
    "NAME_PATCH_TYPE": (0, 3),
    "FATIGUE_FIGURES": (1, 7),
}


# Host probes used by dynamic preset values
def has_binary(name: str) -> bool:
    return shutil.which(name) is not None


def has_xdg_open() -> bool:
    return has_binary("xdg-open")


def recommends_system_notifications() -> bool:
    """Native notifications are recommended on Windows 8.1/10+ and wherever notify-send exists."""
    if sys.platform == "win32":
        version = sys.getwindowsversion()
        return (version.major, version.minor) >= (6, 3)
    return has_binary("notify-send")


def prefers_notification_sounds() -> bool:
    return not recommends_system_notifications()


@dataclass(frozen=True)
class Setting:
    """One named setting.

    ``presets`` holds a value per entry of ``PRESET_ORDER``; a callable entry
    is evaluated each time the schema is defined. ``custom`` overrides the
    fallback used for the custom profile: either a literal, or a callable that
    receives the resolved ``default`` preset values of every setting.
    """
    name: str
    key: str
    kind: SettingKind
    category: str
    presets: Tuple[Any, ...]
    custom: Any = None

    def preset_values(self) -> Dict[Profile, Any]:
        values = {}
        for profile, value in zip(PRESET_ORDER, self.presets):
            values[profile] = value() if callable(value) else value
        return values

    def custom_default(self, defaults: Dict[str, Any]) -> Any:
        if self.custom is None:
            return defaults[self.name]
        if callable(self.custom):
            return self.custom(defaults)
        return self.custom


def argb(value: int) -> int:
    """An 0xAARRGGBB colour as the signed 32-bit int the client stores."""
    return value - (1 << 32) if value & 0x80000000 else value


def _setting(kind: SettingKind, name: str, key: str, category: str, *values,
             custom: Any = None) -> Setting:
    if len(values) == 1:
        values = values * len(PRESET_ORDER)
    if len(values) != len(PRESET_ORDER):
        raise ValueError(f"{name}: expected 1 or {len(PRESET_ORDER)} preset values, got {len(values)}")
    return Setting(name, key, kind, category, tuple(values), custom)


def _bool(*args, **kwargs) -> Setting:
    return _setting(SettingKind.BOOL, *args, **kwargs)


def _int(*args, **kwargs) -> Setting:
    return _setting(SettingKind.INT, *args, **kwargs)


def _str(*args, **kwargs) -> Setting:
    return _setting(SettingKind.STR, *args, **kwargs)


def _list(*args, **kwargs) -> Setting:
    return _setting(SettingKind.LIST, *args, **kwargs)


def _quest_patch_default(defaults: Dict[str, Any]) -> bool:
    # Older configs stored all command patches in one "command_patch_type" level
    return bool(defaults["COMMAND_PATCH_QUEST"] or defaults["COMMAND_PATCH_LEGACY"] >= 2)


def _edible_rares_patch_default(defaults: Dict[str, Any]) -> bool:
    return bool(defaults["COMMAND_PATCH_EDIBLE_RARES"] or defaults["COMMAND_PATCH_LEGACY"] in (1, 3))


# Preset values per row: vanilla, vanilla_resizable, lite, default, heavy, all.
# A single value applies to every preset.
SETTINGS: Tuple[Setting, ...] = (
    _bool("CUSTOM_CLIENT_SIZE", "custom_client_size", GENERAL, True, False, False, False, False, False),
    _int("CUSTOM_CLIENT_SIZE_X", "custom_client_size_x", GENERAL, 512),
    _int("CUSTOM_CLIENT_SIZE_Y", "custom_client_size_y", GENERAL, 346),
    _bool("CHECK_UPDATES", "check_updates", GENERAL, True),
    _bool("SHOW_ACCOUNT_SECURITY_SETTINGS", "show_account_security_settings", GENERAL, False, False, True, True, True, True),
    _bool("CONFIRM_CANCEL_RECOVERY_CHANGE", "confirm_cancel_recovery_change", GENERAL, False, False, True, True, True, True),
    _bool("SHOW_SECURITY_TIP_DAY", "show_security_tip_day", GENERAL, False, False, True, True, True, True),
    _bool("REMIND_HOW_TO_OPEN_SETTINGS", "welcome_enabled", GENERAL, False, False, False, True, True, True),
    _bool("LOAD_CHAT_HISTORY", "load_chat_history", GENERAL, False, False, False, False, True, True),
    _bool("COMBAT_MENU_SHOWN", "combat_menu", GENERAL, False, False, False, False, True, True),
    _bool("COMBAT_MENU_HIDDEN", "combat_menu_hidden", GENERAL, False, False, False, False, False, True),
    _bool("SHOW_XPDROPS", "show_xpdrops", GENERAL, False, False, False, True, True, True),
    _bool("CENTER_XPDROPS", "center_xpdrops", GENERAL, False, False, False, False, True, True),
    _bool("SHOW_FATIGUEDROPS", "show_fatiguedrops", GENERAL, False, False, False, True, True, True),
    _int("FATIGUE_FIGURES", "fatigue_figures", GENERAL, 2),
    _bool("SHOW_FATIGUEUNITS", "show_fatigueunits", GENERAL, False, False, False, False, True, True),
    _bool("FATIGUE_ALERT", "fatigue_alert", GENERAL, False, False, True, True, True, True),
    _bool("INVENTORY_FULL_ALERT", "inventory_full_alert", GENERAL, False, False, False, False, False, True),
    _int("NAME_PATCH_TYPE", "name_patch_type", GENERAL, 0, 0, 1, 1, 3, 3),
    _int("COMMAND_PATCH_LEGACY", "command_patch_type", GENERAL, 0),
    _bool("COMMAND_PATCH_QUEST", "command_patch_quest", GENERAL, False, False, False, False, False, True, custom=_quest_patch_default),
    _bool("COMMAND_PATCH_EDIBLE_RARES", "command_patch_edible_rares", GENERAL, False, False, False, True, True, True, custom=_edible_rares_patch_default),
    _bool("COMMAND_PATCH_DISK", "command_patch_disk", GENERAL, False, False, False, False, False, True),
    _bool("ATTACK_ALWAYS_LEFT_CLICK", "bypass_attack", GENERAL, False, False, False, False, True, True),
    _bool("ENABLE_MOUSEWHEEL_SCROLLING", "enable_mousewheel_scrolling", GENERAL, False, False, True, True, True, True),
    _bool("KEEP_SCROLLBAR_POS_MAGIC_PRAYER", "keep_scrollbar_pos_magic_prayer", GENERAL, False, False, True, True, True, True),
    _bool("HIDE_ROOFS", "hide_roofs", GENERAL, False, False, False, True, True, True),
    _bool("DISABLE_UNDERGROUND_LIGHTING", "disable_underground_lighting", GENERAL, False, False, False, False, True, True),
    _bool("DISABLE_MINIMAP_ROTATION", "disable_minimap_rotation", GENERAL, False, False, True, True, True, True),
    _bool("CAMERA_ZOOMABLE", "camera_zoomable", GENERAL, False, False, True, True, True, True),
    _bool("CAMERA_ROTATABLE", "camera_rotatable", GENERAL, False, False, True, True, True, True),
    _bool("CAMERA_MOVABLE", "camera_movable", GENERAL, False, False, True, True, True, True),
    _bool("CAMERA_MOVABLE_RELATIVE", "camera_movable_relative", GENERAL, False),
    _bool("COLORIZE_CONSOLE_TEXT", "colorize", GENERAL, True),
    _int("FOV", "fov", GENERAL, 9),
    _bool("FPS_LIMIT_ENABLED", "fps_limit_enabled", GENERAL, False, False, False, False, False, True),
    _int("FPS_LIMIT", "fps_limit", GENERAL, 10),
    _bool("SOFTWARE_CURSOR", "software_cursor", GENERAL, False, False, False, False, False, True),
    _bool("DISABLE_RANDOM_CHAT_COLOUR", "disable_ran_chat_effect", GENERAL, False),
    _int("VIEW_DISTANCE", "view_distance", GENERAL, 2300, 3000, 10000, 10000, 20000, 20000),
    _bool("AUTO_SCREENSHOT", "auto_screenshot", GENERAL, True),
    _bool("RS2HD_SKY", "rs2hd_sky", GENERAL, False, False, False, False, True, True),
    _bool("CUSTOM_SKYBOX_OVERWORLD_ENABLED", "custom_skybox_overworld_enabled", GENERAL, False, False, False, False, True, True),
    _int("CUSTOM_SKYBOX_OVERWORLD_COLOUR", "custom_skybox_overworld_colour", GENERAL, 0, 0, 0, 0xBEEF, 0xBEEF, argb(0xFFB8D5FF)),
    _bool("CUSTOM_SKYBOX_UNDERGROUND_ENABLED", "custom_skybox_underground_enabled", GENERAL, False, False, False, False, True, True),
    _int("CUSTOM_SKYBOX_UNDERGROUND_COLOUR", "custom_skybox_underground_colour", GENERAL, 0, 0, 0, 0x101010, 0x101010, argb(0xFF1D150E)),
    _bool("PATCH_GENDER", "patch_gender", GENERAL, False, False, False, True, True, True),
    _bool("PATCH_WRENCH_MENU_SPACING", "patch_wrench_menu_spacing", GENERAL, False, False, True, True, True, True),
    _bool("PATCH_HBAR_512_LAST_PIXEL", "patch_hbar_512_last_pixel", GENERAL, False, False, False, False, True, True),
    _bool("USE_JAGEX_FONTS", "use_jagex_fonts", GENERAL, False, False, True, True, True, True),
    _int("LOG_VERBOSITY", "log_verbosity", GENERAL, LOG_GAME, LOG_GAME, LOG_WARN, LOG_INFO, LOG_INFO, LOG_DEBUG),
    _bool("LOG_SHOW_TIMESTAMPS", "log_show_timestamps", GENERAL, True),
    _bool("LOG_SHOW_LEVEL", "log_show_level", GENERAL, True),
    _bool("LOG_FORCE_TIMESTAMPS", "log_force_timestamps", GENERAL, False, False, False, False, False, True),
    _bool("LOG_FORCE_LEVEL", "log_force_level", GENERAL, False, False, False, False, False, True),
    _bool("PREFERS_XDG_OPEN", "prefers_xdg_open", GENERAL, False, False, False, has_xdg_open, True, True),
    _bool("CUSTOM_MUSIC", "custom_music", MUSIC, False, False, False, True, True, True),
    _str("CUSTOM_MUSIC_PATH", "custom_music_path", MUSIC, "mods/music.zip"),
    _bool("LOUDER_SOUND_EFFECTS", "louder_sound_effects", MUSIC, False, False, False, False, True, True),
    _bool("OVERRIDE_AUDIO_SETTING", "override_audio_setting", MUSIC, False, False, False, False, True, True),
    _bool("OVERRIDE_AUDIO_SETTING_SETTING_ON", "override_audio_setting_setting_on", MUSIC, False, False, False, False, False, True),
    _bool("SOUND_EFFECT_COMBAT1", "sound_effect_combat1", MUSIC, False, False, False, False, True, True),
    _bool("SOUND_EFFECT_ADVANCE", "sound_effect_advance", MUSIC, True),
    _bool("SOUND_EFFECT_ANVIL", "sound_effect_anvil", MUSIC, True),
    _bool("SOUND_EFFECT_CHISEL", "sound_effect_chisel", MUSIC, True),
    _bool("SOUND_EFFECT_CLICK", "sound_effect_click", MUSIC, True),
    _bool("SOUND_EFFECT_CLOSEDOOR", "sound_effect_closedoor", MUSIC, True),
    _bool("SOUND_EFFECT_COINS", "sound_effect_coins", MUSIC, True),
    _bool("SOUND_EFFECT_COMBAT1A", "sound_effect_combat1a", MUSIC, True),
    _bool("SOUND_EFFECT_COMBAT1B", "sound_effect_combat1b", MUSIC, True),
    _bool("SOUND_EFFECT_COMBAT2A", "sound_effect_combat2a", MUSIC, True),
    _bool("SOUND_EFFECT_COMBAT2B", "sound_effect_combat2b", MUSIC, True),
    _bool("SOUND_EFFECT_COMBAT3A", "sound_effect_combat3a", MUSIC, True),
    _bool("SOUND_EFFECT_COMBAT3B", "sound_effect_combat3b", MUSIC, True),
    _bool("SOUND_EFFECT_COOKING", "sound_effect_cooking", MUSIC, True),
    _bool("SOUND_EFFECT_DEATH", "sound_effect_death", MUSIC, True),
    _bool("SOUND_EFFECT_DROPOBJECT", "sound_effect_dropobject", MUSIC, True),
    _bool("SOUND_EFFECT_EAT", "sound_effect_eat", MUSIC, True),
    _bool("SOUND_EFFECT_FILLJUG", "sound_effect_filljug", MUSIC, True),
    _bool("SOUND_EFFECT_FISH", "sound_effect_fish", MUSIC, True),
    _bool("SOUND_EFFECT_FOUNDGEM", "sound_effect_foundgem", MUSIC, True),
    _bool("SOUND_EFFECT_MECHANICAL", "sound_effect_mechanical", MUSIC, True),
    _bool("SOUND_EFFECT_MINE", "sound_effect_mine", MUSIC, True),
    _bool("SOUND_EFFECT_MIX", "sound_effect_mix", MUSIC, True),
    _bool("SOUND_EFFECT_OPENDOOR", "sound_effect_opendoor", MUSIC, True),
    _bool("SOUND_EFFECT_OUTOFAMMO", "sound_effect_outofammo", MUSIC, True),
    _bool("SOUND_EFFECT_POTATO", "sound_effect_potato", MUSIC, True),
    _bool("SOUND_EFFECT_PRAYEROFF", "sound_effect_prayeroff", MUSIC, True),
    _bool("SOUND_EFFECT_PRAYERON", "sound_effect_prayeron", MUSIC, True),
    _bool("SOUND_EFFECT_PROSPECT", "sound_effect_prospect", MUSIC, True),
    _bool("SOUND_EFFECT_RECHARGE", "sound_effect_recharge", MUSIC, True),
    _bool("SOUND_EFFECT_RETREAT", "sound_effect_retreat", MUSIC, True),
    _bool("SOUND_EFFECT_SECRETDOOR", "sound_effect_secretdoor", MUSIC, True),
    _bool("SOUND_EFFECT_SHOOT", "sound_effect_shoot", MUSIC, True),
    _bool("SOUND_EFFECT_SPELLFAIL", "sound_effect_spellfail", MUSIC, True),
    _bool("SOUND_EFFECT_SPELLOK", "sound_effect_spellok", MUSIC, True),
    _bool("SOUND_EFFECT_TAKEOBJECT", "sound_effect_takeobject", MUSIC, True),
    _bool("SOUND_EFFECT_UNDERATTACK", "sound_effect_underattack", MUSIC, True),
    _bool("SOUND_EFFECT_VICTORY", "sound_effect_victory", MUSIC, True),
    _bool("SHOW_HP_PRAYER_FATIGUE_OVERLAY", "show_statusdisplay", OVERLAYS, False, False, True, True, True, True),
    _bool("SHOW_BUFFS", "show_buffs", OVERLAYS, False, False, True, True, True, True),
    _bool("SHOW_LAST_MENU_ACTION", "show_last_menu_action", OVERLAYS, False, False, False, False, True, True),
    _bool("SHOW_MOUSE_TOOLTIP", "show_mouse_tooltip", OVERLAYS, False, False, False, False, True, True),
    _bool("SHOW_EXTENDED_TOOLTIP", "show_extended_tooltip", OVERLAYS, False, False, False, True, True, True),
    _bool("SHOW_INVCOUNT", "show_invcount", OVERLAYS, False, False, True, True, True, True),
    _bool("SHOW_INVCOUNT_COLOURS", "show_invcount_colours", OVERLAYS, False, False, False, False, True, True),
    _bool("SHOW_RSCPLUS_BUTTONS", "show_rscplus_buttons", OVERLAYS, False, False, True, True, True, True),
    _bool("RSCPLUS_BUTTONS_FUNCTIONAL", "rscplus_buttons_functional", OVERLAYS, False, False, True, True, True, True),
    _bool("WIKI_LOOKUP_ON_MAGIC_BOOK", "wiki_lookup_on_magic_book", OVERLAYS, False, False, False, False, True, True),
    _bool("MOTIVATIONAL_QUOTES_BUTTON", "motivational_quotes_button", OVERLAYS, False, False, False, False, True, True),
    _bool("TOGGLE_XP_BAR_ON_STATS_BUTTON", "toggle_xp_bar_on_stats_button", OVERLAYS, False, False, False, True, True, True),
    _bool("HISCORES_LOOKUP_BUTTON", "hiscores_lookup_button", OVERLAYS, False, False, False, False, False, True),
    _bool("WIKI_LOOKUP_ON_HBAR", "wiki_lookup_on_hbar", OVERLAYS, False, False, False, True, True, True),
    _bool("REMOVE_REPORT_ABUSE_BUTTON_HBAR", "remove_report_abuse_button_hbar", OVERLAYS, False, False, False, False, False, True),
    _bool("SHOW_ITEM_GROUND_OVERLAY", "show_iteminfo", OVERLAYS, False, False, False, True, True, True),
    _bool("SHOW_PLAYER_NAME_OVERLAY", "show_playerinfo", OVERLAYS, False, False, False, False, False, True),
    _bool("SHOW_FRIEND_NAME_OVERLAY", "show_friendinfo", OVERLAYS, False, False, False, False, True, True),
    _bool("SHOW_NPC_NAME_OVERLAY", "show_npcinfo", OVERLAYS, False, False, False, False, False, True),
    _bool("EXTEND_IDS_OVERLAY", "extend_idsinfo", OVERLAYS, False, False, False, False, False, True),
    _bool("TRACE_OBJECT_INFO", "trace_objectinfo", OVERLAYS, False, False, False, False, False, True),
    _bool("SHOW_COMBAT_INFO", "show_combat_info", OVERLAYS, False, False, False, False, True, True),
    _bool("LAG_INDICATOR", "indicators", OVERLAYS, False, False, False, True, True, True),
    _bool("SHOW_PLAYER_POSITION", "show_player_position", OVERLAYS, False, False, False, False, True, True),
    _bool("SHOW_RETRO_FPS", "show_retro_fps", OVERLAYS, False, False, False, False, True, True),
    _bool("SHOW_XP_BAR", "show_xp_bar", OVERLAYS, False, False, False, True, True, True),
    _bool("NPC_HEALTH_SHOW_PERCENTAGE", "use_percentage", OVERLAYS, False, False, False, False, False, True),
    _bool("SHOW_HITBOX", "show_hitbox", OVERLAYS, False, False, False, False, False, True),
    _bool("SHOW_FOOD_HEAL_OVERLAY", "show_food_heal_overlay", OVERLAYS, False, False, False, False, True, True),
    _bool("SHOW_TIME_UNTIL_HP_REGEN", "show_time_until_hp_regen", OVERLAYS, False, False, False, False, True, True),
    _bool("DEBUG", "debug", OVERLAYS, False),
    _bool("EXCEPTION_HANDLER", "exception_handler", OVERLAYS, False),
    _list("HIGHLIGHTED_ITEMS", "highlighted_items", OVERLAYS, ()),
    _list("BLOCKED_ITEMS", "blocked_items", OVERLAYS, ()),
    _bool("START_REMEMBERED_FILTER_SORT", "start_searched_bank", BANK, False, False, False, True, True, True),
    _str("SEARCH_BANK_WORD", "search_bank_word", BANK, ""),
    _bool("SHOW_BANK_VALUE", "show_bank_value", BANK, False, False, False, True, True, True),
    _bool("SORT_FILTER_BANK", "sort_filter_bank", BANK, False, False, False, True, True, True),
    _str("SORT_BANK_REMEMBER", "sort_bank", BANK, "000000000000"),
    _bool("TRAY_NOTIFS", "tray_notifs", NOTIFICATIONS, False, False, True, True, True, True),
    _bool("TRAY_NOTIFS_ALWAYS", "tray_notifs_always", NOTIFICATIONS, False, False, False, False, False, True),
    _bool("NOTIFICATION_SOUNDS", "notification_sounds", NOTIFICATIONS, False, False, prefers_notification_sounds, prefers_notification_sounds, prefers_notification_sounds, True),
    _bool("SOUND_NOTIFS_ALWAYS", "sound_notifs_always", NOTIFICATIONS, False, False, False, False, False, True),
    _bool("USE_SYSTEM_NOTIFICATIONS", "use_system_notifications", NOTIFICATIONS, False, False, recommends_system_notifications, recommends_system_notifications, recommends_system_notifications, True),
    _bool("PM_NOTIFICATIONS", "pm_notifications", NOTIFICATIONS, False, False, False, True, True, True),
    _list("PM_DENYLIST", "pm_denylist", NOTIFICATIONS, ()),
    _bool("TRADE_NOTIFICATIONS", "trade_notifications", NOTIFICATIONS, False, False, False, True, True, True),
    _bool("DUEL_NOTIFICATIONS", "duel_notifications", NOTIFICATIONS, False, False, False, True, True, True),
    _bool("LOGOUT_NOTIFICATIONS", "logout_notifications", NOTIFICATIONS, False, False, False, True, True, True),
    _bool("LOW_HP_NOTIFICATIONS", "low_hp_notifications", NOTIFICATIONS, False, False, False, True, True, True),
    _int("LOW_HP_NOTIF_VALUE", "low_hp_notif_value", NOTIFICATIONS, 0, 0, 25, 25, 25, 30),
    _bool("FATIGUE_NOTIFICATIONS", "fatigue_notifications", NOTIFICATIONS, False, False, False, True, True, True),
    _int("FATIGUE_NOTIF_VALUE", "fatigue_notif_value", NOTIFICATIONS, 101, 101, 98, 98, 98, 80),
    _bool("HIGHLIGHTED_ITEM_NOTIFICATIONS", "highlighted_item_notifications", NOTIFICATIONS, False, False, False, True, True, True),
    _int("HIGHLIGHTED_ITEM_NOTIF_VALUE", "highlighted_item_notif_value", NOTIFICATIONS, 11000, 11000, 100, 100, 100, 0),
    _list("IMPORTANT_MESSAGES", "important_messages", NOTIFICATIONS, ()),
    _list("IMPORTANT_SAD_MESSAGES", "important_sad_messages", NOTIFICATIONS, ()),
    _bool("MUTE_IMPORTANT_MESSAGE_SOUNDS", "mute_important_message_sounds", NOTIFICATIONS, False, False, False, False, False, True),
    _bool("TWITCH_CHAT_ENABLED", "twitch_enabled", STREAMING, False, False, True, True, True, True),
    _bool("TWITCH_HIDE_CHAT", "twitch_hide", STREAMING, True, True, False, False, False, False),
    _str("TWITCH_CHANNEL", "twitch_channel", STREAMING, ""),
    _str("TWITCH_OAUTH", "twitch_oauth", STREAMING, ""),
    _str("TWITCH_USERNAME", "twitch_username", STREAMING, ""),
    _bool("SHOW_LOGIN_IP_ADDRESS", "show_logindetails", STREAMING, True, True, True, True, True, False),
    _bool("SAVE_LOGININFO", "save_logininfo", STREAMING, False, False, True, True, True, True),
    _bool("START_LOGINSCREEN", "start_loginscreen", STREAMING, False, False, True, True, True, True),
    _bool("SPEEDRUNNER_MODE_ACTIVE", "speedrun_active", STREAMING, False, False, False, False, False, True),
    _bool("RECORD_KB_MOUSE", "record_kb_mouse", REPLAY, False, False, False, False, True, True),
    _bool("PARSE_OPCODES", "parse_opcodes", REPLAY, True),
    _bool("FAST_DISCONNECT", "fast_disconnect", REPLAY, False, False, False, False, True, True),
    _bool("RECORD_AUTOMATICALLY", "record_automatically", REPLAY, False, False, False, False, True, True),
    _bool("HIDE_PRIVATE_MSGS_REPLAY", "hide_private_msgs_replay", REPLAY, False, False, False, False, False, True),
    _bool("SHOW_SEEK_BAR", "show_seek_bar", REPLAY, True),
    _bool("SHOW_PLAYER_CONTROLS", "show_player_controls", REPLAY, True),
    _bool("TRIGGER_ALERTS_REPLAY", "trigger_alerts_replay", REPLAY, False, False, False, False, True, True),
    _str("REPLAY_BASE_PATH", "replay_base_path", REPLAY, ""),
    _str("PREFERRED_DATE_FORMAT", "preferred_date_format", REPLAY, "dd MMMMMMMMM yyyy - HH:mm:ss", "dd MMMMMMMMM yyyy - HH:mm:ss", "dd MMMMMMMMM yyyy - HH:mm:ss", "yyyy-MM-dd HH:mm:ss", "MMMMMMMMM dd, yyyy, hh:mm:ss aa", "EEEEEEE, MMMMMMMMM dd, yyyy GG; hh:mm:ss aa"),
    _bool("SHOW_WORLD_COLUMN", "show_world_column", REPLAY, False, False, False, True, True, True),
    _bool("SHOW_CONVERSION_COLUMN", "show_conversion_column", REPLAY, False, False, False, False, True, True),
    _bool("SHOW_USERFIELD_COLUMN", "show_userfield_column", REPLAY, False, False, False, False, False, True),
    _bool("JOYSTICK_ENABLED", "joystick_enabled", JOYSTICK, False, False, False, False, False, True),
    _int("COMBAT_STYLE", "combat_style", NO_GUI, COMBAT_AGGRESSIVE),
    _int("WORLD", "world", NO_GUI, 1),
    _bool("FIRST_TIME", "first_time", NO_GUI, False, custom=True),
    _bool("UPDATE_CONFIRMATION", "update_confirmation", NO_GUI, False, custom=True),
    _bool("RECORD_AUTOMATICALLY_FIRST_TIME", "record_automatically_first_time", NO_GUI, False, custom=True),
    _bool("DISASSEMBLE", "disassemble", NO_GUI, False),
    _str("DISASSEMBLE_DIRECTORY", "disassemble_directory", NO_GUI, "dump"),
)

SETTINGS_BY_NAME: Dict[str, Setting] = {s.name: s for s in SETTINGS}
SETTINGS_BY_KEY: Dict[str, Setting] = {s.key: s for s in SETTINGS}


def settings_in(category: str) -> Tuple[Setting, ...]:
    if category not in CATEGORIES:
        raise ValueError(f"Unknown category: {category!r}")
    return tuple(s for s in SETTINGS if s.category == category)


def resolve_presets() -> Dict[str, Dict[Profile, Any]]:
    """Evaluate every preset value, host probes included."""
    return {s.name: s.preset_values() for s in SETTINGS}
