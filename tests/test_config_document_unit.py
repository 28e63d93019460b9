#!/usr/bin/env python3
"""Unit tests for the JSON configuration document adapter."""

import json
import os

import pytest

from core import Entry, IOFailure, ParseFailure, Section, SettingsTree
from infrastructure.config_document import ConfigDocumentUpdater, update_document


def _write(path, data):
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def _tree(theme="Dark"):
    return SettingsTree(
        sections=[Section("Preferences.General", entries=[Entry("Preferences.General.Theme", theme, ["Light", "Dark"])])]
    )


class TestUpdateDocument:
    def test_replaces_only_named_section(self):
        doc = {"Logging": {"Level": "Info"}, "Preferences": {"sections": []}}
        updated = update_document(doc, "Preferences", _tree())
        assert updated["Logging"] == {"Level": "Info"}
        assert updated["Preferences"]["sections"][0]["name"] == "Preferences.General"
        assert doc["Preferences"] == {"sections": []}

    def test_missing_section_is_added(self):
        updated = update_document({"Other": 1}, "Preferences", {"sections": []})
        assert updated == {"Other": 1, "Preferences": {"sections": []}}

    def test_empty_key_merges_into_root(self):
        updated = update_document({"Other": 1, "sections": ["old"]}, "", _tree())
        assert updated["Other"] == 1
        assert updated["sections"][0]["name"] == "Preferences.General"

    def test_empty_key_requires_object(self):
        with pytest.raises(TypeError):
            update_document({}, "", ["not", "an", "object"])


class TestConfigDocumentUpdater:
    def test_load_tree(self, tmp_path):
        path = _write(tmp_path / "appsettings.json", {"Preferences": _tree().to_raw()})
        tree = ConfigDocumentUpdater(path).load_tree("Preferences")
        assert tree.find_entry("Preferences.General", "Preferences.General.Theme").value == "Dark"

    def test_load_tree_missing_property_is_empty(self, tmp_path):
        path = _write(tmp_path / "appsettings.json", {"Other": {}})
        assert ConfigDocumentUpdater(path).load_tree("Preferences").sections == []

    def test_load_missing_file_raises_io_failure(self, tmp_path):
        with pytest.raises(IOFailure) as exc:
            ConfigDocumentUpdater(tmp_path / "missing.json").load()
        assert exc.value.path == tmp_path / "missing.json"

    def test_load_invalid_json_raises_parse_failure(self, tmp_path):
        path = tmp_path / "appsettings.json"
        path.write_text("{ not json", encoding="utf-8")
        with pytest.raises(ParseFailure):
            ConfigDocumentUpdater(path).load()

    def test_load_non_object_raises_parse_failure(self, tmp_path):
        path = _write(tmp_path / "appsettings.json", [1, 2])
        with pytest.raises(ParseFailure):
            ConfigDocumentUpdater(path).load()

    def test_load_tree_bad_shape_raises_parse_failure(self, tmp_path):
        path = _write(tmp_path / "appsettings.json", {"Preferences": {"sections": [{"name": "S", "order": "x"}]}})
        with pytest.raises(ParseFailure):
            ConfigDocumentUpdater(path).load_tree("Preferences")

    @pytest.mark.parametrize(
        "preferences",
        [
            {"sections": ["oops"]},
            {"sections": [{"name": "S", "entries": [42]}]},
            {"sections": [{"name": "S", "entries": [{"name": "E", "value": "a", "options": "abc"}]}]},
        ],
    )
    def test_load_tree_malformed_items_raise_parse_failure(self, tmp_path, preferences):
        path = _write(tmp_path / "appsettings.json", {"Preferences": preferences})
        with pytest.raises(ParseFailure):
            ConfigDocumentUpdater(path).load_tree("Preferences")

    def test_save_preserves_other_keys(self, tmp_path):
        path = _write(tmp_path / "appsettings.json", {"Logging": {"Level": "Info"}, "Preferences": {}})
        updater = ConfigDocumentUpdater(path)
        updater.save("Preferences", _tree("Light"))
        saved = json.loads(path.read_text(encoding="utf-8"))
        assert saved["Logging"] == {"Level": "Info"}
        assert saved["Preferences"]["sections"][0]["entries"][0]["value"] == "Light"
        assert updater.load_tree("Preferences").to_raw() == _tree("Light").to_raw()

    def test_save_writes_indented_json(self, tmp_path):
        path = _write(tmp_path / "appsettings.json", {})
        ConfigDocumentUpdater(path, indent=4).save("Preferences", {"sections": []})
        text = path.read_text(encoding="utf-8")
        assert text.endswith("\n")
        assert '\n    "Preferences"' in text

    def test_save_keeps_non_ascii(self, tmp_path):
        path = _write(tmp_path / "appsettings.json", {})
        ConfigDocumentUpdater(path).save("Preferences", {"title": "Настройки"})
        assert "Настройки" in path.read_text(encoding="utf-8")

    def test_save_missing_file_raises_io_failure(self, tmp_path):
        with pytest.raises(IOFailure):
            ConfigDocumentUpdater(tmp_path / "missing.json").save("Preferences", _tree())

    def test_failed_replace_leaves_document_and_no_temp_file(self, tmp_path, monkeypatch):
        path = _write(tmp_path / "appsettings.json", {"Preferences": {}})
        before = path.read_text(encoding="utf-8")

        def boom(src, dst):
            raise OSError(13, "Permission denied")

        monkeypatch.setattr(os, "replace", boom)
        with pytest.raises(IOFailure) as exc:
            ConfigDocumentUpdater(path).save("Preferences", _tree())
        assert exc.value.reason == "Permission denied"
        assert path.read_text(encoding="utf-8") == before
        assert [p.name for p in tmp_path.iterdir()] == ["appsettings.json"]
