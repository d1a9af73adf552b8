"""Tests for the setting schema and preset tables."""

import pytest
from unittest.mock import patch

from gameprefs import presets
from gameprefs.presets import (
    Profile, SettingKind, SETTINGS, SETTINGS_BY_NAME, SETTINGS_BY_KEY, PRESET_ORDER,
    CATEGORIES, SANITIZE_RANGES, resolve_presets, settings_in,
    COMBAT_AGGRESSIVE, LOG_GAME, LOG_DEBUG
)


def preset(name, profile):
    return resolve_presets()[name][profile]


class TestProfile:
    """Test the profile enumeration."""

    def test_parse(self):
        assert Profile.parse("heavy") is Profile.HEAVY
        assert Profile.parse(" Vanilla_Resizable ") is Profile.VANILLA_RESIZABLE
        assert Profile.parse(Profile.CUSTOM) is Profile.CUSTOM

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            Profile.parse("ultra")

    def test_only_custom_is_editable(self):
        assert not Profile.CUSTOM.is_preset
        assert all(p.is_preset for p in PRESET_ORDER)
        assert Profile.CUSTOM not in PRESET_ORDER


class TestSchema:
    """Test the declarative settings table."""

    def test_names_and_keys_unique(self):
        assert len(SETTINGS_BY_NAME) == len(SETTINGS)
        assert len(SETTINGS_BY_KEY) == len(SETTINGS)

    def test_setting_count(self):
        assert len(SETTINGS) == 187

    def test_every_setting_has_all_presets(self):
        for setting in SETTINGS:
            assert len(setting.presets) == len(PRESET_ORDER), setting.name
            assert setting.category in CATEGORIES, setting.name

    def test_preset_values_match_kind(self):
        types = {
            SettingKind.BOOL: bool,
            SettingKind.INT: int,
            SettingKind.STR: str,
            SettingKind.LIST: tuple,
        }
        for name, values in resolve_presets().items():
            kind = SETTINGS_BY_NAME[name].kind
            for profile, value in values.items():
                assert isinstance(value, types[kind]), (name, profile)

    def test_persisted_keys(self):
        assert SETTINGS_BY_NAME["VIEW_DISTANCE"].key == "view_distance"
        assert SETTINGS_BY_NAME["ATTACK_ALWAYS_LEFT_CLICK"].key == "bypass_attack"
        assert SETTINGS_BY_NAME["COMMAND_PATCH_LEGACY"].key == "command_patch_type"
        assert SETTINGS_BY_NAME["SHOW_ITEM_GROUND_OVERLAY"].key == "show_iteminfo"

    def test_sanitized_settings_exist(self):
        for name in SANITIZE_RANGES:
            assert SETTINGS_BY_NAME[name].kind is SettingKind.INT

    def test_settings_in_category(self):
        bank = settings_in(presets.BANK)
        assert [s.name for s in bank] == [
            "START_REMEMBERED_FILTER_SORT", "SEARCH_BANK_WORD", "SHOW_BANK_VALUE",
            "SORT_FILTER_BANK", "SORT_BANK_REMEMBER",
        ]
        with pytest.raises(ValueError):
            settings_in("graphics")


class TestPresetValues:
    """Test literal preset values."""

    def test_view_distance(self):
        expected = {
            Profile.VANILLA: 2300,
            Profile.VANILLA_RESIZABLE: 3000,
            Profile.LITE: 10000,
            Profile.DEFAULT: 10000,
            Profile.HEAVY: 20000,
            Profile.ALL: 20000,
        }
        assert resolve_presets()["VIEW_DISTANCE"] == expected

    def test_single_value_rows(self):
        assert all(preset("FATIGUE_FIGURES", p) == 2 for p in PRESET_ORDER)
        assert all(preset("COMBAT_STYLE", p) == COMBAT_AGGRESSIVE for p in PRESET_ORDER)
        assert all(preset("HIGHLIGHTED_ITEMS", p) == () for p in PRESET_ORDER)

    def test_vanilla_uses_fixed_client_size(self):
        assert preset("CUSTOM_CLIENT_SIZE", Profile.VANILLA) is True
        assert preset("CUSTOM_CLIENT_SIZE", Profile.VANILLA_RESIZABLE) is False
        assert preset("CUSTOM_CLIENT_SIZE_X", Profile.ALL) == 512
        assert preset("CUSTOM_CLIENT_SIZE_Y", Profile.ALL) == 346

    def test_log_verbosity(self):
        assert preset("LOG_VERBOSITY", Profile.VANILLA) == LOG_GAME
        assert preset("LOG_VERBOSITY", Profile.ALL) == LOG_DEBUG

    def test_skybox_colours(self):
        assert preset("CUSTOM_SKYBOX_OVERWORLD_COLOUR", Profile.DEFAULT) == 0xBEEF
        assert preset("CUSTOM_SKYBOX_OVERWORLD_COLOUR", Profile.ALL) == -0x472A01
        assert preset("CUSTOM_SKYBOX_UNDERGROUND_COLOUR", Profile.HEAVY) == 0x101010

    def test_colours_are_signed_32_bit(self):
        assert presets.argb(0xFFB8D5FF) == -4663809
        assert presets.argb(0xFF1D150E) == -0xE2EAF2
        assert presets.argb(0x7FFFFFFF) == 0x7FFFFFFF
        assert preset("CUSTOM_SKYBOX_UNDERGROUND_COLOUR", Profile.ALL) == -0xE2EAF2


class TestDynamicValues:
    """Test preset values that depend on the host."""

    def test_xdg_open_probe(self):
        with patch("gameprefs.presets.shutil.which", return_value="/usr/bin/xdg-open"):
            assert preset("PREFERS_XDG_OPEN", Profile.DEFAULT) is True
        with patch("gameprefs.presets.shutil.which", return_value=None):
            assert preset("PREFERS_XDG_OPEN", Profile.DEFAULT) is False
            assert preset("PREFERS_XDG_OPEN", Profile.HEAVY) is True

    def test_notification_probe(self):
        with patch.object(presets.sys, "platform", "linux"), \
                patch("gameprefs.presets.shutil.which", return_value="/usr/bin/notify-send"):
            values = resolve_presets()
            assert values["USE_SYSTEM_NOTIFICATIONS"][Profile.DEFAULT] is True
            assert values["NOTIFICATION_SOUNDS"][Profile.DEFAULT] is False
            assert values["USE_SYSTEM_NOTIFICATIONS"][Profile.VANILLA] is False
            assert values["NOTIFICATION_SOUNDS"][Profile.ALL] is True
        with patch.object(presets.sys, "platform", "linux"), \
                patch("gameprefs.presets.shutil.which", return_value=None):
            values = resolve_presets()
            assert values["USE_SYSTEM_NOTIFICATIONS"][Profile.LITE] is False
            assert values["NOTIFICATION_SOUNDS"][Profile.LITE] is True


class TestCustomDefaults:
    """Test the fallback used for the custom profile."""

    def defaults(self):
        return {name: values[Profile.DEFAULT] for name, values in resolve_presets().items()}

    def test_falls_back_to_default_preset(self):
        defaults = self.defaults()
        assert SETTINGS_BY_NAME["VIEW_DISTANCE"].custom_default(defaults) == 10000

    def test_first_run_flags_are_true(self):
        defaults = self.defaults()
        for name in ("FIRST_TIME", "UPDATE_CONFIRMATION", "RECORD_AUTOMATICALLY_FIRST_TIME"):
            assert SETTINGS_BY_NAME[name].custom_default(defaults) is True

    def test_command_patch_defaults_follow_legacy_level(self):
        defaults = self.defaults()
        quest = SETTINGS_BY_NAME["COMMAND_PATCH_QUEST"]
        rares = SETTINGS_BY_NAME["COMMAND_PATCH_EDIBLE_RARES"]

        assert quest.custom_default(defaults) is False
        assert rares.custom_default(defaults) is True

        for level, quest_on in ((0, False), (1, False), (2, True), (3, True)):
            assert quest.custom_default(dict(defaults, COMMAND_PATCH_LEGACY=level)) is quest_on

        off = dict(defaults, COMMAND_PATCH_EDIBLE_RARES=False)
        for level, rares_on in ((0, False), (1, True), (2, False), (3, True)):
            assert rares.custom_default(dict(off, COMMAND_PATCH_LEGACY=level)) is rares_on
