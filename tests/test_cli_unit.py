#!/usr/bin/env python3
"""CLI commands exercised through main() against a temp settings document."""

import json

import pytest

import config
import prefs
from core.desktop.preferences.interface import prefs_app


SETTINGS = {
    "Logging": {"LogLevel": {"Default": "Information"}},
    "Preferences": {
        "sections": [
            {
                "name": "Preferences.HotKeys",
                "order": 1,
                "entries": [
                    {"name": "Preferences.HotKeys.Exit", "value": "Ctrl+Q"},
                    {"name": "Preferences.HotKeys.ShowHotKeys", "value": "F1"},
                ],
            },
            {
                "name": "Preferences.General",
                "order": 0,
                "entries": [
                    {"name": "Preferences.General.Theme", "value": "Dark", "options": ["Light", "Dark", "System"]},
                    {"name": "Preferences.General.Title", "value": "Main"},
                ],
            },
        ]
    },
}


@pytest.fixture
def settings_file(tmp_path, monkeypatch):
    monkeypatch.setattr(config, "USER_CONFIG_PATH", tmp_path / "user.yaml")
    monkeypatch.delenv("PREFS_EDITOR_LANG", raising=False)
    path = tmp_path / "appsettings.json"
    path.write_text(json.dumps(SETTINGS), encoding="utf-8")
    monkeypatch.setenv("PREFS_EDITOR_SETTINGS", str(path))
    return path


def _saved(path):
    return json.loads(path.read_text(encoding="utf-8"))


def test_loader_exposes_interface_module():
    assert prefs.main is prefs_app.main


def test_build_parser_has_commands():
    help_text = prefs_app.build_parser().format_help()
    for command in ("tui", "edit", "show", "get", "set", "hotkeys", "lang"):
        assert command in help_text


def test_no_command_defaults_to_tui():
    args = prefs_app.build_parser().parse_args([])
    assert args.command == "tui"
    assert args.func is prefs_app.cmd_tui


def test_get(settings_file, capsys):
    assert prefs_app.main(["get", "Preferences.General", "preferences.general.theme"]) == 0
    assert capsys.readouterr().out.strip() == "Dark"


def test_get_unknown_entry(settings_file, capsys):
    assert prefs_app.main(["get", "Preferences.General", "Nope"]) == 1
    assert "Unknown entry: Nope" in capsys.readouterr().err


def test_set_saves_only_preferences(settings_file, capsys):
    assert prefs_app.main(["set", "Preferences.General", "Preferences.General.Theme", "Light"]) == 0
    saved = _saved(settings_file)
    assert saved["Logging"] == SETTINGS["Logging"]
    general = saved["Preferences"]["sections"][1]
    assert general["entries"][0]["value"] == "Light"
    assert "Saved Preferences.General.Theme = Light" in capsys.readouterr().out


def test_set_rejects_value_outside_options(settings_file, capsys):
    before = settings_file.read_text(encoding="utf-8")
    assert prefs_app.main(["set", "Preferences.General", "Preferences.General.Theme", "Blue"]) == 1
    assert "choose one of: Light, Dark, System" in capsys.readouterr().err
    assert settings_file.read_text(encoding="utf-8") == before


def test_set_unchanged_does_not_write(settings_file, capsys):
    before = settings_file.read_text(encoding="utf-8")
    assert prefs_app.main(["set", "Preferences.General", "Preferences.General.Title", "Main"]) == 0
    assert "already set" in capsys.readouterr().out
    assert settings_file.read_text(encoding="utf-8") == before


def test_set_free_text(settings_file):
    assert prefs_app.main(["set", "Preferences.General", "Preferences.General.Title", "Other"]) == 0
    assert _saved(settings_file)["Preferences"]["sections"][1]["entries"][1]["value"] == "Other"


def test_show_sorted_tables(settings_file, capsys):
    assert prefs_app.main(["show"]) == 0
    out = capsys.readouterr().out
    # well-known sections render under their display names
    assert out.index("General") < out.index("Hot Keys")
    assert "[any value]" in out


def test_show_unknown_section(settings_file, capsys):
    assert prefs_app.main(["show", "Nope"]) == 1
    assert "Unknown section: Nope" in capsys.readouterr().err


def test_hotkeys_lists_and_reports_duplicates(settings_file, capsys):
    data = json.loads(settings_file.read_text(encoding="utf-8"))
    data["Preferences"]["sections"][0]["entries"].append({"name": "Preferences.HotKeys.Quit", "value": "Ctrl+Q"})
    settings_file.write_text(json.dumps(data), encoding="utf-8")
    assert prefs_app.main(["hotkeys"]) == 0
    out = capsys.readouterr().out
    assert "Keyboard Shortcuts" in out
    assert "F1" in out
    assert "Ctrl+Q is bound to several entries: Preferences.HotKeys.Exit, Preferences.HotKeys.Quit" in out


def test_custom_section_key(settings_file, tmp_path, capsys):
    other = tmp_path / "other.json"
    other.write_text(json.dumps({"UserPrefs": SETTINGS["Preferences"]}), encoding="utf-8")
    assert prefs_app.main(["--config", str(other), "--section", "UserPrefs", "get", "Preferences.HotKeys", "Preferences.HotKeys.Exit"]) == 0
    assert capsys.readouterr().out.strip() == "Ctrl+Q"


def test_missing_document_exits_with_error(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(config, "USER_CONFIG_PATH", tmp_path / "user.yaml")
    assert prefs_app.main(["--config", str(tmp_path / "missing.json"), "show"]) == 1
    assert "I/O failure" in capsys.readouterr().err


def test_malformed_document_exits_with_error(tmp_path, capsys):
    bad = tmp_path / "bad.json"
    bad.write_text("{", encoding="utf-8")
    assert prefs_app.main(["--config", str(bad), "show"]) == 1
    assert "Cannot parse" in capsys.readouterr().err


def test_lang(settings_file, capsys):
    assert prefs_app.main(["lang", "ru"]) == 0
    assert config.get_user_lang() == "ru"
    assert prefs_app.main(["lang", "xx"]) == 1
    assert "Unknown language 'xx'" in capsys.readouterr().err


def test_non_object_section_exits_with_error(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr(config, "USER_CONFIG_PATH", tmp_path / "user.yaml")
    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"Preferences": {"sections": ["oops"]}}), encoding="utf-8")
    assert prefs_app.main(["--config", str(bad), "show"]) == 1
    assert "Cannot parse" in capsys.readouterr().err
