"""Command-line entry point for gameprefs."""

import argparse
import sys

from .presets import CATEGORIES, PROFILE_ORDER, Profile, SettingKind, SETTINGS, settings_in
from .properties import prop_bool, prop_int, split_list
from .store import ProfileConfigStore, UnknownSettingError, format_value
from .toggles import SettingToggles
from .utils import DEFAULT_BASE_DIR, setup_logging


def parse_value(store: ProfileConfigStore, name: str, text: str):
    """Convert command-line text to the setting's type. Raises ValueError."""
    setting = store.setting(name)
    if setting.kind is SettingKind.BOOL:
        value = prop_bool({name: text}, name, None)
    elif setting.kind is SettingKind.INT:
        value = prop_int({name: text}, name, None)
    elif setting.kind is SettingKind.LIST:
        value = split_list(text)
    else:
        value = text
    if value is None:
        raise ValueError(f"{name} expects a {setting.kind.value} value, got {text!r}")
    return value


def save_custom(store: ProfileConfigStore) -> bool:
    """Sanitize and write the custom profile, reporting a refused or failed save."""
    store.sanitize(save=False)
    if store.save(Profile.CUSTOM):
        return True
    print(f"error: could not save {store.config_path}", file=sys.stderr)
    return False


def cmd_list(store: ProfileConfigStore, args) -> int:
    profile = Profile.parse(args.profile) if args.profile else store.active_profile
    rows = settings_in(args.category) if args.category else SETTINGS
    for setting in rows:
        print(f"{setting.name} = {format_value(setting, store.get(setting.name, profile))}")
    return 0


def cmd_get(store: ProfileConfigStore, args) -> int:
    setting = store.setting(args.name)
    print(format_value(setting, store.get(args.name, args.profile)))
    return 0


def cmd_set(store: ProfileConfigStore, args) -> int:
    value = parse_value(store, args.name, args.value)
    store.set(args.name, Profile.CUSTOM, value)
    if not save_custom(store):
        return 1
    print(format_value(store.setting(args.name), store.get(args.name, Profile.CUSTOM)))
    return 0


def cmd_toggle(store: ProfileConfigStore, args) -> int:
    toggles = SettingToggles(store, display=print)
    if args.command is None:
        for command in toggles.commands():
            print(command)
        return 0
    if not toggles.run(args.command):
        print(f"Unknown toggle command: {args.command}", file=sys.stderr)
        return 1
    return 0


def cmd_profile(store: ProfileConfigStore, args) -> int:
    if args.name is None:
        for profile in PROFILE_ORDER:
            marker = "*" if profile is store.active_profile else " "
            print(f"{marker} {profile.value}")
        return 0
    store.set_active_profile(args.name)
    return 0 if store.save(Profile.CUSTOM) else 1


def cmd_worlds(store: ProfileConfigStore, args) -> int:
    for number, world in store.worlds.numbered():
        print(f"{number}: {world.name} {world.url}:{world.port} (servertype {world.server_type})")
    return 0


def cmd_restore(store: ProfileConfigStore, args) -> int:
    names = store.restore_defaults(args.category)
    if not save_custom(store):
        return 1
    print(f"Restored {len(names)} setting(s) in {args.category}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    profiles = [p.value for p in PROFILE_ORDER]
    parser = argparse.ArgumentParser(prog="gameprefs", description="Inspect and edit client settings")
    parser.add_argument("--dir", default=DEFAULT_BASE_DIR, help="folder holding config.ini")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="cmd", required=True)

    p = sub.add_parser("list", help="print every setting")
    p.add_argument("--profile", choices=profiles)
    p.add_argument("--category", choices=CATEGORIES)
    p.set_defaults(func=cmd_list)

    p = sub.add_parser("get", help="print one setting")
    p.add_argument("name")
    p.add_argument("--profile", choices=profiles)
    p.set_defaults(func=cmd_get)

    p = sub.add_parser("set", help="change a custom setting and save")
    p.add_argument("name")
    p.add_argument("value")
    p.set_defaults(func=cmd_set)

    p = sub.add_parser("toggle", help="run a toggle command, or list them")
    p.add_argument("command", nargs="?")
    p.set_defaults(func=cmd_toggle)

    p = sub.add_parser("profile", help="show or change the active profile")
    p.add_argument("name", nargs="?", choices=profiles)
    p.set_defaults(func=cmd_profile)

    p = sub.add_parser("worlds", help="list configured worlds")
    p.set_defaults(func=cmd_worlds)

    p = sub.add_parser("restore", help="reset one settings tab to the default preset")
    p.add_argument("category", choices=CATEGORIES)
    p.set_defaults(func=cmd_restore)
    return parser


def main(argv=None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)
    store = ProfileConfigStore(args.dir).init()
    try:
        return args.func(store, args)
    except (UnknownSettingError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
