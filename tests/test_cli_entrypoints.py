import os
import sys
from types import SimpleNamespace

sys.path.append(os.path.dirname(os.path.dirname(__file__)))
import game_prefs
import gameprefs.__main__ as cm
from gameprefs.properties import load_file


def run(tmp_path, *argv):
    return cm.main(["--dir", str(tmp_path)] + list(argv))


def test_entry_script_uses_package_main():
    assert game_prefs.main is cm.main


def test_list_prints_every_setting(tmp_path, capsys):
    assert run(tmp_path, "list") == 0
    out = capsys.readouterr().out
    assert "VIEW_DISTANCE = 10000" in out
    assert "HIDE_ROOFS = true" in out


def test_list_profile_and_category(tmp_path, capsys):
    assert run(tmp_path, "list", "--profile", "vanilla", "--category", "bank") == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "START_REMEMBERED_FILTER_SORT = false"
    assert len(lines) == 5


def test_get(tmp_path, capsys):
    assert run(tmp_path, "get", "VIEW_DISTANCE", "--profile", "all") == 0
    assert capsys.readouterr().out.strip() == "20000"


def test_set_saves_and_clamps(tmp_path, capsys):
    assert run(tmp_path, "set", "VIEW_DISTANCE", "50000") == 0
    assert capsys.readouterr().out.strip() == "20000"
    assert load_file(str(tmp_path / "config.ini"))["view_distance"] == "20000"

    assert run(tmp_path, "set", "HIGHLIGHTED_ITEMS", "Coins,Rune bar") == 0
    assert load_file(str(tmp_path / "config.ini"))["highlighted_items"] == "Coins,Rune bar"


def test_set_rejects_bad_values(tmp_path, capsys):
    assert run(tmp_path, "set", "VIEW_DISTANCE", "far") == 2
    assert run(tmp_path, "set", "NOPE", "1") == 2
    err = capsys.readouterr().err
    assert "VIEW_DISTANCE" in err
    assert "Unknown setting: NOPE" in err


def test_toggle(tmp_path, capsys):
    assert run(tmp_path, "toggle", "toggle_roof_hiding") == 0
    assert "Roofs are now shown" in capsys.readouterr().out
    assert load_file(str(tmp_path / "config.ini"))["hide_roofs"] == "false"
    assert run(tmp_path, "toggle", "toggle_everything") == 1


def test_toggle_lists_commands(tmp_path, capsys):
    assert run(tmp_path, "toggle") == 0
    assert "toggle_xp_bar" in capsys.readouterr().out.split()


def test_profile(tmp_path, capsys):
    assert run(tmp_path, "profile", "heavy") == 0
    assert load_file(str(tmp_path / "config.ini"))["current_profile"] == "heavy"
    capsys.readouterr()
    assert run(tmp_path, "profile") == 0
    assert "* heavy" in capsys.readouterr().out.splitlines()


def test_worlds(tmp_path, capsys):
    assert run(tmp_path, "worlds") == 0
    assert capsys.readouterr().out.strip() == "1: World 1 :43594 (servertype 1)"


def test_restore(tmp_path, capsys):
    run(tmp_path, "set", "TWITCH_CHANNEL", "somebody")
    assert run(tmp_path, "restore", "streaming") == 0
    assert load_file(str(tmp_path / "config.ini"))["twitch_channel"] == ""
    assert "Restored 9 setting(s) in streaming" in capsys.readouterr().out


def test_python_m_gameprefs(monkeypatch, tmp_path):
    called = SimpleNamespace(args=None)

    def fake_list(store, args):
        called.args = args
        return 0
    monkeypatch.setattr(cm, "cmd_list", fake_list)
    assert cm.main(["--dir", str(tmp_path), "list"]) == 0
    assert called.args.cmd == "list"


def test_set_and_restore_fail_when_config_unreadable(tmp_path, capsys):
    (tmp_path / "config.ini").mkdir()
    assert run(tmp_path, "set", "FOV", "12") == 1
    assert run(tmp_path, "restore", "streaming") == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "could not save" in captured.err


def test_set_fails_when_write_fails(tmp_path, capsys, monkeypatch):
    run(tmp_path, "get", "FOV")
    monkeypatch.setattr("gameprefs.properties.save_file", _raise_os_error)
    assert run(tmp_path, "set", "FOV", "12") == 1
    assert load_file(str(tmp_path / "config.ini"))["fov"] == "9"


def _raise_os_error(*args, **kwargs):
    raise OSError("read-only")
