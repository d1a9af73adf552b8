"""Toggle commands that flip a setting, tell the user and write through."""

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .presets import Profile
from .store import ProfileConfigStore
from .utils import get_logger

logger = get_logger("gameprefs.toggles")

FOV_DEFAULT = 9
FOV_HINT = f"This is fun, but if you want to go back to normal, use ::fov {FOV_DEFAULT}"
FOV_USAGE = f"Please use an integer between 7 and 16 (default = {FOV_DEFAULT})"


@dataclass(frozen=True)
class Toggle:
    setting: str
    on_message: str   # shown when the setting becomes true
    off_message: str


# Keyed by the client's command names
TOGGLES: Dict[str, Toggle] = {
    "toggle_bypass_attack": Toggle("ATTACK_ALWAYS_LEFT_CLICK",
                                   "You are now able to left click attack all monsters",
                                   "You are no longer able to left click attack all monsters"),
    "toggle_roof_hiding": Toggle("HIDE_ROOFS", "Roofs are now hidden", "Roofs are now shown"),
    "toggle_combat_xp_menu": Toggle("COMBAT_MENU_SHOWN", "Combat style is now shown", "Combat style is now hidden"),
    "toggle_friend_name_overlay": Toggle("SHOW_FRIEND_NAME_OVERLAY",
                                         "Friend Names overlay now shown", "Friend Names overlay now hidden"),
    "toggle_player_name_overlay": Toggle("SHOW_PLAYER_NAME_OVERLAY",
                                         "Player names are now shown", "Player names are now hidden"),
    "toggle_npc_name_overlay": Toggle("SHOW_NPC_NAME_OVERLAY", "NPC names are now shown", "NPC names are now hidden"),
    "toggle_position_overlay": Toggle("SHOW_PLAYER_POSITION",
                                      "Global Position is now shown", "Global Position is now hidden"),
    "toggle_retro_fps_overlay": Toggle("SHOW_RETRO_FPS", "Retro FPS is now shown", "Retro FPS is now hidden"),
    "toggle_xp_bar": Toggle("SHOW_XP_BAR", "XP Bar is now shown", "XP Bar is now hidden"),
    "show_seek_bar": Toggle("SHOW_SEEK_BAR", "Seek bar is now shown", "Seek bar is now hidden"),
    "show_player_controls": Toggle("SHOW_PLAYER_CONTROLS",
                                   "Player controls are now shown", "Player controls are now hidden"),
    "toggle_inven_count_overlay": Toggle("SHOW_INVCOUNT",
                                         "Inventory count is now shown", "Inventory count is now hidden"),
    "toggle_inven_count_colours": Toggle("SHOW_INVCOUNT_COLOURS",
                                         "Additional inventory count colours are now shown",
                                         "Additional inventory count colours are now hidden"),
    "toggle_buffs_display": Toggle("SHOW_BUFFS", "Combat (de)buffs and cooldowns are now shown",
                                   "Combat (de)buffs and cooldowns are now hidden"),
    "toggle_hpprayerfatigue_display": Toggle("SHOW_HP_PRAYER_FATIGUE_OVERLAY",
                                             "HP/Prayer/Fatigue are now shown", "HP/Prayer/Fatigue are now hidden"),
    "toggle_hitboxes": Toggle("SHOW_HITBOX", "Hitboxes are now shown", "Hitboxes are now hidden"),
    "toggle_item_overlay": Toggle("SHOW_ITEM_GROUND_OVERLAY",
                                  "Ground item names are now shown", "Ground item names are now hidden"),
    "toggle_ids_overlay": Toggle("EXTEND_IDS_OVERLAY", "IDs are now shown", "IDs are now hidden"),
    "toggle_trace_object_info": Toggle("TRACE_OBJECT_INFO", "Object info now shown", "Object info now hidden"),
    "toggle_ipdns": Toggle("SHOW_LOGIN_IP_ADDRESS",
                           "IP address will appear next login", "IP address will not appear next login"),
    "toggle_debug": Toggle("DEBUG", "Debug mode is on", "Debug mode is off"),
    "toggle_fatigue_alert": Toggle("FATIGUE_ALERT", "Fatigue alert is now on", "Fatigue alert is now off"),
    "toggle_inventory_full_alert": Toggle("INVENTORY_FULL_ALERT",
                                          "Inventory full alert is now on", "Inventory full alert is now off"),
    "toggle_twitch_chat": Toggle("TWITCH_HIDE_CHAT", "Twitch chat is now hidden", "Twitch chat is now shown"),
    "toggle_xp_drops": Toggle("SHOW_XPDROPS", "XP drops are now shown", "XP drops are now hidden"),
    "toggle_fatigue_drops": Toggle("SHOW_FATIGUEDROPS", "Fatigue drops are now shown", "Fatigue drops are now hidden"),
    "toggle_colorize": Toggle("COLORIZE_CONSOLE_TEXT",
                              "Colors are now shown in terminal", "Colors are now ignored in terminal"),
    "toggle_indicators": Toggle("LAG_INDICATOR",
                                "Connection indicators are now shown", "Connection indicators are now ignored"),
    "toggle_food_heal_overlay": Toggle("SHOW_FOOD_HEAL_OVERLAY",
                                       "Food heal overlay is now shown", "Food heal overlay is now hidden"),
    "toggle_save_login_info": Toggle("SAVE_LOGININFO", "Saving login info enabled.", "Saving login info disabled."),
    "toggle_health_regen_timer": Toggle("SHOW_TIME_UNTIL_HP_REGEN",
                                        "HP regen timer is now shown", "HP regen timer is now hidden"),
    "toggle_wiki_hbar_button": Toggle("WIKI_LOOKUP_ON_HBAR",
                                      "Wiki button in Hbar now shown", "Wiki button in Hbar now hidden"),
    # The setting removes the button, so true means hidden
    "toggle_report_abuse_button": Toggle("REMOVE_REPORT_ABUSE_BUTTON_HBAR",
                                         "Report Abuse button is now hidden", "Report Abuse button is now shown"),
}


class SettingToggles:
    """Toggle helpers bound to one store and one message sink.

    ``display`` receives every user-facing message; it defaults to the
    module logger. Changes go through ``store.commit()``, so they are only
    written to disk while the custom profile is active.
    """

    def __init__(self, store: ProfileConfigStore, display: Optional[Callable[[str], None]] = None):
        self.store = store
        self.display = display or logger.info
        self._specials: Dict[str, Callable[[], None]] = {
            "toggle_xp_bar_pin": self.toggle_xp_bar_pin,
            "toggle_action_count": self.toggle_action_count,
            "toggle_time_count": self.toggle_time_count,
            "toggle_start_searched_bank": self.toggle_start_searched_bank,
        }

    def commands(self):
        return sorted(list(TOGGLES) + list(self._specials))

    def run(self, command: str) -> bool:
        """Run a toggle by command name. Returns False for unknown commands."""
        if command in TOGGLES:
            self.toggle(TOGGLES[command])
            return True
        if command in self._specials:
            self._specials[command]()
            return True
        logger.debug(f"Unknown toggle command: {command}")
        return False

    def toggle(self, toggle: Toggle) -> bool:
        profile = self.store.active_profile
        value = not self.store.get(toggle.setting, profile)
        self.store.set(toggle.setting, profile, value)
        self.display(toggle.on_message if value else toggle.off_message)
        self.store.commit()
        return value

    def toggle_xp_bar_pin(self):
        self.store.set("SHOW_XP_BAR", self.store.active_profile, True)
        pinned = self.store.toggle_extra("pin_xp_bar")
        self.display("XP Bar is now pinned" if pinned else "XP Bar is now unpinned")
        self.store.commit()

    def toggle_action_count(self):
        self.store.toggle_extra("show_action_count")
        self.store.commit()

    def toggle_time_count(self):
        self.store.toggle_extra("show_time_count")
        self.store.commit()

    def toggle_start_searched_bank(self, search_word: str = "", replace_saved_word: bool = False):
        """Start the bank pre-searched with the saved keyword.

        With no saved keyword and no ``search_word`` the option can only be
        switched off. The keyword is stored lower-cased in the custom profile,
        which is saved even when a preset is active.
        """
        store = self.store
        profile = store.active_profile
        saved_word = store.get("SEARCH_BANK_WORD", Profile.CUSTOM)
        word = search_word.strip()
        enabled = store.get("START_REMEMBERED_FILTER_SORT", profile)

        if not saved_word.strip() and not word:
            if enabled:
                store.set("START_REMEMBERED_FILTER_SORT", profile, False)
        else:
            store.set("START_REMEMBERED_FILTER_SORT", profile, not enabled)
            if replace_saved_word and word and word.lower() != saved_word:
                saved_word = word.lower()
                store.set("SEARCH_BANK_WORD", Profile.CUSTOM, saved_word)
            if not enabled:
                self.display(f"Your bank will start searched with keyword '{saved_word}' next time")
            else:
                self.display("Your bank will start as normal next time")
        store.save(Profile.CUSTOM)

    def set_client_fov(self, text: str) -> Optional[int]:
        """Set the field of view from user input; returns the new value or None."""
        profile = self.store.active_profile
        try:
            fov = int(text.strip())
        except ValueError:
            self.display(FOV_USAGE)
            fov = None
        else:
            self.store.set("FOV", profile, fov)
            if fov > 10 or fov < 8:
                self.display(FOV_HINT)
        self.store.commit()
        return fov
